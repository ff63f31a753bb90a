"""Tests for output format compatibility."""

import pytest

from fileconverter.core.compatibility import (
    COMPATIBLE_CATEGORIES,
    compatible_formats,
    is_compatible,
)
from fileconverter.models.core import MediaCategory, OutputFormat

AUDIO_FORMATS = [
    OutputFormat.AAC,
    OutputFormat.FLAC,
    OutputFormat.MP3,
    OutputFormat.OGG,
    OutputFormat.WAV,
]
VIDEO_FORMATS = [OutputFormat.AVI, OutputFormat.MKV, OutputFormat.MP4, OutputFormat.WEBM]
IMAGE_FORMATS = [OutputFormat.ICO, OutputFormat.JPG, OutputFormat.PNG]

EXPECTED_PAIRS = (
    {
        (fmt, cat)
        for fmt in AUDIO_FORMATS
        for cat in (MediaCategory.AUDIO, MediaCategory.VIDEO)
    }
    | {
        (fmt, cat)
        for fmt in VIDEO_FORMATS
        for cat in (MediaCategory.VIDEO, MediaCategory.ANIMATED_IMAGE)
    }
    | {(fmt, MediaCategory.IMAGE) for fmt in IMAGE_FORMATS}
    | {
        (OutputFormat.GIF, cat)
        for cat in (MediaCategory.IMAGE, MediaCategory.VIDEO, MediaCategory.ANIMATED_IMAGE)
    }
)


@pytest.mark.parametrize("output_format", list(OutputFormat))
@pytest.mark.parametrize(
    "category", [c for c in MediaCategory if c != MediaCategory.MISC]
)
def test_matches_table(output_format: OutputFormat, category: MediaCategory) -> None:
    expected = (output_format, category) in EXPECTED_PAIRS
    assert is_compatible(output_format, category) is expected


@pytest.mark.parametrize("output_format", list(OutputFormat))
def test_misc_is_always_compatible(output_format: OutputFormat) -> None:
    assert is_compatible(output_format, MediaCategory.MISC)


def test_examples() -> None:
    assert is_compatible(OutputFormat.MP4, MediaCategory.VIDEO)
    assert not is_compatible(OutputFormat.MP4, MediaCategory.AUDIO)
    assert is_compatible(OutputFormat.GIF, MediaCategory.MISC)
    assert is_compatible(OutputFormat.MP3, MediaCategory.VIDEO)
    assert not is_compatible(OutputFormat.PNG, MediaCategory.ANIMATED_IMAGE)


def test_format_missing_from_table_is_incompatible(monkeypatch: pytest.MonkeyPatch) -> None:
    from fileconverter.core import compatibility

    trimmed = {k: v for k, v in COMPATIBLE_CATEGORIES.items() if k != OutputFormat.WAV}
    monkeypatch.setattr(compatibility, "COMPATIBLE_CATEGORIES", trimmed)

    assert not is_compatible(OutputFormat.WAV, MediaCategory.AUDIO)
    assert is_compatible(OutputFormat.WAV, MediaCategory.MISC)


def test_compatible_formats() -> None:
    assert compatible_formats(MediaCategory.IMAGE) == [
        OutputFormat.ICO,
        OutputFormat.JPG,
        OutputFormat.PNG,
        OutputFormat.GIF,
    ]
    assert compatible_formats(MediaCategory.AUDIO) == AUDIO_FORMATS
    assert compatible_formats(MediaCategory.MISC) == list(OutputFormat)
