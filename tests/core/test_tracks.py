"""Tests for CD audio track number extraction."""

import pytest

from fileconverter.core.tracks import extract_track_number, is_cda_track
from fileconverter.errors import FormatError


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        (r"D:\Track07.cda", 7),
        (r"E:\Track1.cda", 1),
        (r"e:\Track00.cda", 0),
        (r"F:\Track123.cda", 123),
    ],
)
def test_extract_track_number(path: str, expected: int) -> None:
    assert extract_track_number(path) == expected
    assert is_cda_track(path)


@pytest.mark.parametrize(
    "path",
    [
        r"D:\Song.mp3",
        r"D:\track07.cda",
        r"D:\Track07.CDA",
        r"D:\Track.cda",
        r"D:\TrackAB.cda",
        r"D:\Music\Track07.cda",
        r"\\server\share\Track07.cda",
        "Track07.cda",
        r"D:\Track07.cda.mp3",
        "D:\\Track\u0667.cda",
    ],
)
def test_non_track_paths_raise(path: str) -> None:
    assert not is_cda_track(path)
    with pytest.raises(FormatError) as exc_info:
        extract_track_number(path)
    assert exc_info.value.path == path


def test_format_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        extract_track_number(r"D:\Song.mp3")


def test_oversized_track_number_keeps_cause() -> None:
    path = "D:\\Track" + "1" * 5000 + ".cda"
    with pytest.raises(FormatError) as exc_info:
        extract_track_number(path)
    assert isinstance(exc_info.value.__cause__, ValueError)
    assert exc_info.value.path == path
