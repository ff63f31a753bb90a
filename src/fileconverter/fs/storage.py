"""Filesystem access used around the fileconverter core.

The core helpers never touch the disk; this module provides the concrete
collaborators the CLI injects into them.
- path_exists: existence predicate for allocate_unique_path.
- get_user_data_dir: per-user application storage folder, created on demand.
"""

import os
import sys
from pathlib import Path
from typing import Mapping, Optional

APP_DIR_NAME = "FileConverter"


def path_exists(path: str) -> bool:
    """Check whether *path* names an existing file or directory."""
    return os.path.lexists(path)


def _user_data_root(environ: Mapping[str, str], platform: str) -> Path:
    if platform == "win32":
        local_app_data = environ.get("LOCALAPPDATA")
        if local_app_data:
            return Path(local_app_data)
        return Path.home() / "AppData" / "Local"
    xdg_data_home = environ.get("XDG_DATA_HOME")
    if xdg_data_home:
        return Path(xdg_data_home)
    return Path.home() / ".local" / "share"


def get_user_data_dir(platform: Optional[str] = None) -> Path:
    """Get the application storage directory, creating it if it doesn't exist.

    Args:
        platform: Platform name as in ``sys.platform``; defaults to the
            running platform.

    Returns:
        ``%LOCALAPPDATA%\\FileConverter`` on Windows,
        ``$XDG_DATA_HOME/fileconverter`` (or ``~/.local/share/fileconverter``)
        elsewhere.
    """
    platform = platform or sys.platform
    name = APP_DIR_NAME if platform == "win32" else APP_DIR_NAME.lower()
    data_dir = _user_data_root(os.environ, platform) / name
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir
