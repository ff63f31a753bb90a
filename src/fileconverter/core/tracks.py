"""CD audio track number extraction.

Windows exposes the tracks of an audio CD as ``X:\\TrackNN.cda`` files at the
root of the optical drive. The number in the filename is the track index used
by the ripper.
"""

import re

from fileconverter.errors import FormatError

# Case sensitive on purpose: the shell always names the files "TrackNN.cda".
CDA_TRACK_PATTERN = re.compile(r"[A-Za-z]:\\Track([0-9]+)\.cda")


def is_cda_track(path: str) -> bool:
    """Check whether *path* names a CD audio track at the root of a drive."""
    return CDA_TRACK_PATTERN.fullmatch(path) is not None


def extract_track_number(path: str) -> int:
    """Extract the track index from a ``X:\\TrackNN.cda`` path.

    Args:
        path: Full path of the track file.

    Returns:
        The track number as a non-negative integer.

    Raises:
        FormatError: If the path does not have the track file shape.
    """
    match = CDA_TRACK_PATTERN.fullmatch(path)
    if match is None:
        raise FormatError(path, "expected <drive>:\\Track<digits>.cda")
    try:
        return int(match.group(1), 10)
    except ValueError as e:
        raise FormatError(path, f"invalid track number {match.group(1)!r}") from e
