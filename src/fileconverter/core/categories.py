"""Extension to media category mapping.

The table below decides which conversion presets are offered for an input
file. Any extension that is not listed falls into MediaCategory.MISC; the
mapping never fails.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping

from fileconverter.models.core import MediaCategory

CATEGORY_EXTENSIONS: Mapping[MediaCategory, FrozenSet[str]] = MappingProxyType(
    {
        MediaCategory.AUDIO: frozenset(
            {"aac", "aiff", "ape", "cda", "flac", "mp3", "m4a", "oga", "ogg", "wav", "wma"}
        ),
        MediaCategory.VIDEO: frozenset(
            {
                "3gp",
                "avi",
                "bik",
                "flv",
                "m4v",
                "mp4",
                "mpeg",
                "mov",
                "mkv",
                "ogv",
                "vob",
                "webm",
                "wmv",
            }
        ),
        MediaCategory.IMAGE: frozenset(
            {"bmp", "exr", "ico", "jpg", "jpeg", "png", "psd", "tga", "tiff", "svg", "xcf"}
        ),
        MediaCategory.ANIMATED_IMAGE: frozenset({"gif"}),
    }
)


def _build_lookup() -> Dict[str, MediaCategory]:
    lookup: Dict[str, MediaCategory] = {}
    for category, extensions in CATEGORY_EXTENSIONS.items():
        for extension in extensions:
            lookup[extension] = category
    return lookup


_EXTENSION_LOOKUP = MappingProxyType(_build_lookup())


def normalize_extension(extension: str) -> str:
    """Normalize an extension for lookup: trimmed, lowercase, no leading dot."""
    extension = extension.strip().lower()
    if extension.startswith("."):
        extension = extension[1:]
    return extension


def category_of(extension: str) -> MediaCategory:
    """Return the media category of a file extension.

    Args:
        extension: Extension with or without the leading dot, in any case
            (``"mp3"``, ``".MP3"``).

    Returns:
        The matching MediaCategory, MISC for unknown extensions.
    """
    return _EXTENSION_LOOKUP.get(normalize_extension(extension), MediaCategory.MISC)


def extensions_for(category: MediaCategory) -> FrozenSet[str]:
    """Return the extensions listed for *category* (empty for MISC)."""
    return CATEGORY_EXTENSIONS.get(category, frozenset())
