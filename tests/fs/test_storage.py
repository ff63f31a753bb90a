"""Tests for fileconverter.fs.storage."""

from pathlib import Path

import pytest

from fileconverter.fs.storage import get_user_data_dir, path_exists


def test_path_exists(tmp_path: Path) -> None:
    existing = tmp_path / "a.txt"
    existing.write_text("x")

    assert path_exists(str(existing))
    assert path_exists(str(tmp_path))
    assert not path_exists(str(tmp_path / "missing.txt"))


def test_user_data_dir_posix(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    result = get_user_data_dir(platform="linux")

    assert result == tmp_path / "data" / "fileconverter"
    assert result.is_dir()


def test_user_data_dir_posix_default(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

    result = get_user_data_dir(platform="linux")

    assert result == tmp_path / ".local" / "share" / "fileconverter"
    assert result.is_dir()


def test_user_data_dir_windows(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "Local"))

    result = get_user_data_dir(platform="win32")

    assert result == tmp_path / "Local" / "FileConverter"
    assert result.is_dir()


def test_user_data_dir_is_idempotent(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    first = get_user_data_dir(platform="linux")
    (first / "settings.xml").write_text("<settings/>")

    assert get_user_data_dir(platform="linux") == first
    assert (first / "settings.xml").exists()
