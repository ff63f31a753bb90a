"""Utility modules for fileconverter."""

from fileconverter.utils.config import resolve_setting

__all__ = [
    "resolve_setting",
]
