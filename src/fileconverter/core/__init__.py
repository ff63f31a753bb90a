"""Core functionality for fileconverter.

This package exposes the path grammar and media classification helpers used
by the conversion front end.
- is_valid_path / decompose_path: Validate and split absolute paths.
- extract_track_number / is_optical_drive: Helpers for CD sourced inputs.
- allocate_unique_path: Pick a free output path before writing.
- category_of / is_compatible: Classify inputs and gate output formats.

The helpers are independent; callers compose them.
"""

from fileconverter.core.categories import category_of
from fileconverter.core.compatibility import is_compatible
from fileconverter.core.drives import is_optical_drive
from fileconverter.core.path_grammar import decompose_path, is_valid_path
from fileconverter.core.tracks import extract_track_number
from fileconverter.core.unique_path import allocate_unique_path

__all__ = [
    "allocate_unique_path",
    "category_of",
    "decompose_path",
    "extract_track_number",
    "is_compatible",
    "is_optical_drive",
    "is_valid_path",
]
