"""Filesystem operations for fileconverter."""

from fileconverter.fs.storage import get_user_data_dir, path_exists

__all__ = [
    "get_user_data_dir",
    "path_exists",
]
