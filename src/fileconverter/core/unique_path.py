"""Collision free output path allocation.

Given the path a conversion wants to write to, derive a path that does not
name an existing file by appending `` (2)``, `` (3)``, ... before the
extension, the same way Windows Explorer names copies.

The existence check is injected so this module has no filesystem side
effects. The result is only a suggestion: another process may create the same
path between the check and the write. Code that actually creates the output
should open it with an exclusive-create mode (``"x"``) and allocate again on
``FileExistsError``.
"""

from typing import Callable, Tuple

from fileconverter.utils.debug import debug

FIRST_COPY_INDEX = 2


def split_extension(path: str) -> Tuple[str, str]:
    """Split *path* into ``(stem, extension)`` at the last dot of the filename.

    The extension keeps its leading dot. A dot that only appears in a
    directory name does not start an extension.

    Example:
        >>> split_extension("C:\\\\out\\\\song.mp3")
        ('C:\\\\out\\\\song', '.mp3')
    """
    dot = path.rfind(".")
    separator = max(path.rfind("\\"), path.rfind("/"))
    if dot <= separator:
        return path, ""
    return path[:dot], path[dot:]


def allocate_unique_path(desired_path: str, exists: Callable[[str], bool]) -> str:
    """Return *desired_path* or the first free numbered variant of it.

    Args:
        desired_path: The output path the caller would like to use.
        exists: Predicate telling whether a path currently names an entry.

    Returns:
        A path for which *exists* returned False when it was queried.
    """
    if not exists(desired_path):
        return desired_path

    stem, extension = split_extension(desired_path)
    index = FIRST_COPY_INDEX
    while True:
        candidate = f"{stem} ({index}){extension}"
        if not exists(candidate):
            debug(f"Output path {desired_path} taken, using {candidate}")
            return candidate
        index += 1
