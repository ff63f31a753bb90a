"""Absolute path grammar for Windows style paths.

This module validates and decomposes absolute paths of the form::

    X:\\dir\\sub\\file.ext
    \\\\server\\share\\dir\\file.ext

into a drive (root), an ordered list of directory segments and a filename.

Design:
- The grammar is checked by a single left-to-right scan over the string rather
  than a regular expression, so validation is linear in the input length.
- Every directory and filename segment must be non-empty, must not be made only
  of dots and may not contain a reserved character.
- The decomposed parts are the exact substrings of the input; joining them
  gives back the original path.
"""

import logging
import string
from typing import List, Optional, Tuple

from fileconverter.errors import MalformedPathError
from fileconverter.models.core import SEPARATOR, PathParts

logger = logging.getLogger(__name__)

# Characters that can never appear inside a segment. The forward slash is an
# alternate separator on Windows so it is reserved as well.
RESERVED_CHARACTERS = frozenset('\\/:*?"<>|\r\n')

UNC_PREFIX = SEPARATOR * 2
DRIVE_ROOT_LENGTH = 3


def _has_reserved(segment: str) -> bool:
    return any(char in RESERVED_CHARACTERS for char in segment)


def _segment_error(segment: str) -> Optional[str]:
    """Return why *segment* is not a valid path segment, or None if it is."""
    if not segment:
        return "empty segment"
    if not segment.strip("."):
        return f"segment {segment!r} consists only of dots"
    if _has_reserved(segment):
        return f"segment {segment!r} contains a reserved character"
    return None


def _match_root(path: str) -> int:
    """Return the length of the root prefix of *path*, or 0 if it has none."""
    if path.startswith(UNC_PREFIX):
        end = path.find(SEPARATOR, len(UNC_PREFIX))
        if end == -1:
            return 0
        server = path[len(UNC_PREFIX) : end]
        if not server or _has_reserved(server):
            return 0
        return end + 1
    if (
        len(path) >= DRIVE_ROOT_LENGTH
        and path[0] in string.ascii_letters
        and path[1] == ":"
        and path[2] == SEPARATOR
    ):
        return DRIVE_ROOT_LENGTH
    return 0


def _split(path: str) -> Tuple[Optional[PathParts], Optional[str]]:
    """Scan *path* against the grammar.

    Returns:
        ``(parts, None)`` on success or ``(None, reason)`` on failure.
    """
    root_length = _match_root(path)
    if not root_length:
        return None, "missing drive or UNC root"

    segments: List[str] = path[root_length:].split(SEPARATOR)
    for segment in segments:
        reason = _segment_error(segment)
        if reason is not None:
            return None, reason

    parts = PathParts(
        drive=path[:root_length],
        directories=tuple(segments[:-1]),
        filename=segments[-1],
    )
    return parts, None


def is_valid_path(path: str) -> bool:
    """Check whether *path* is a well-formed absolute path.

    Args:
        path: The path string to check.

    Returns:
        True if the path matches the grammar, False otherwise.
    """
    parts, _ = _split(path)
    return parts is not None


def parse_path(path: str) -> Optional[PathParts]:
    """Decompose *path*, returning None when it is not a valid path."""
    parts, _ = _split(path)
    return parts


def decompose_path(path: str) -> PathParts:
    """Decompose a valid absolute path into drive, directories and filename.

    Args:
        path: The path string to decompose.

    Returns:
        The PathParts of the path.

    Raises:
        MalformedPathError: If the path does not match the grammar.

    Example:
        >>> parts = decompose_path("C:\\\\Music\\\\Album\\\\01.flac")
        >>> parts.drive, parts.directories, parts.filename
        ('C:\\\\', ('Music', 'Album'), '01.flac')
    """
    parts, reason = _split(path)
    if parts is None:
        logger.debug("Rejected path %r: %s", path, reason)
        raise MalformedPathError(path, reason)
    return parts


def get_filename(path: str) -> str:
    """Return the part of *path* after the last separator.

    Works on any string; if there is no separator the whole string is
    returned.
    """
    return path.rpartition(SEPARATOR)[2]


def get_drive(path: str) -> Optional[str]:
    """Return the root prefix of *path* (``X:\\`` or ``\\\\server\\``), if any."""
    root_length = _match_root(path)
    return path[:root_length] if root_length else None


def get_drive_letter(path: str) -> Optional[str]:
    """Return the drive letter of an ``X:\\`` rooted path.

    UNC paths and paths without a root carry no drive letter and yield None.
    """
    if _match_root(path) == DRIVE_ROOT_LENGTH and path[1] == ":":
        return path[0]
    return None


def is_drive_letter_valid(path: str) -> bool:
    """Check whether *path* starts with a ``X:\\`` drive root."""
    return get_drive_letter(path) is not None
