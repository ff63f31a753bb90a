"""Domain models for the fileconverter application."""

from fileconverter.models.core import (
    MediaCategory,
    OutputFormat,
    PathParts,
    SourceReport,
)

__all__ = [
    "MediaCategory",
    "OutputFormat",
    "PathParts",
    "SourceReport",
]
