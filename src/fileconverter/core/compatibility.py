"""Output format compatibility with input media categories.

Answers whether a conversion preset makes sense for a given input, e.g. an
audio file can be converted to mp3 but not to png.
"""

from types import MappingProxyType
from typing import FrozenSet, List, Mapping

from fileconverter.models.core import MediaCategory, OutputFormat

_AUDIO_SOURCES = frozenset({MediaCategory.AUDIO, MediaCategory.VIDEO})
_VIDEO_SOURCES = frozenset({MediaCategory.VIDEO, MediaCategory.ANIMATED_IMAGE})
_IMAGE_SOURCES = frozenset({MediaCategory.IMAGE})
_GIF_SOURCES = frozenset(
    {MediaCategory.IMAGE, MediaCategory.VIDEO, MediaCategory.ANIMATED_IMAGE}
)

COMPATIBLE_CATEGORIES: Mapping[OutputFormat, FrozenSet[MediaCategory]] = (
    MappingProxyType(
        {
            OutputFormat.AAC: _AUDIO_SOURCES,
            OutputFormat.FLAC: _AUDIO_SOURCES,
            OutputFormat.MP3: _AUDIO_SOURCES,
            OutputFormat.OGG: _AUDIO_SOURCES,
            OutputFormat.WAV: _AUDIO_SOURCES,
            OutputFormat.AVI: _VIDEO_SOURCES,
            OutputFormat.MKV: _VIDEO_SOURCES,
            OutputFormat.MP4: _VIDEO_SOURCES,
            OutputFormat.WEBM: _VIDEO_SOURCES,
            OutputFormat.ICO: _IMAGE_SOURCES,
            OutputFormat.JPG: _IMAGE_SOURCES,
            OutputFormat.PNG: _IMAGE_SOURCES,
            OutputFormat.GIF: _GIF_SOURCES,
        }
    )
)


def is_compatible(output_format: OutputFormat, category: MediaCategory) -> bool:
    """Check whether *output_format* can be produced from a *category* input.

    Args:
        output_format: Requested output format.
        category: Category of the input file.

    Returns:
        True if the pair is listed in the compatibility table. MISC inputs are
        unclassified, so they are accepted for every format.
    """
    if category == MediaCategory.MISC:
        return True
    return category in COMPATIBLE_CATEGORIES.get(output_format, frozenset())


def compatible_formats(category: MediaCategory) -> List[OutputFormat]:
    """List the output formats compatible with *category*, in enum order."""
    return [fmt for fmt in OutputFormat if is_compatible(fmt, category)]
