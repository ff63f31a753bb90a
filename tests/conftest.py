"""Shared fixtures for the fileconverter test suite."""

from pathlib import Path

import pytest

from fileconverter.utils import config as cfg


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config file at a temporary directory and clear env overrides.

    Keeps tests from reading or writing the real user configuration.
    """
    config_dir = tmp_path / "config" / "fileconverter"
    monkeypatch.setattr(cfg, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(cfg, "CONFIG_FILE", config_dir / "config.toml")
    for name in ("FILECONVERTER_DRIVES_OPTICAL", "FILECONVERTER_NO_RICH"):
        monkeypatch.delenv(name, raising=False)
    return config_dir
