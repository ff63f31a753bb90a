"""Optical drive detection for source paths."""

from typing import Iterable

from fileconverter.core.path_grammar import get_drive_letter


def is_optical_drive(path: str, optical_drive_letters: Iterable[str]) -> bool:
    """Check whether *path* lives on one of the given optical drives.

    Args:
        path: Absolute path of the source file.
        optical_drive_letters: Letters of the currently mounted optical drives,
            as reported by the caller's device enumeration.

    Returns:
        True if the path's drive letter is one of *optical_drive_letters*.
        Paths without a drive letter (UNC shares) are never optical.
    """
    drive_letter = get_drive_letter(path)
    if drive_letter is None:
        return False
    return any(letter == drive_letter for letter in optical_drive_letters)
