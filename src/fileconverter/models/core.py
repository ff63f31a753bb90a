"""Core domain models for fileconverter.

This module defines the value types shared by the path grammar and the media
classification helpers.
- Used throughout fileconverter for representing decomposed paths, media
  categories, output formats and inspection reports.
- All models are immutable values computed on demand from a path or extension
  string; nothing here is persisted.

Design:
- MediaCategory and OutputFormat enums are ``str`` based so they serialize
  cleanly to JSON and can be parsed back from CLI arguments.
- PathParts keeps the exact substrings of the source path so that joining the
  parts reproduces the original string byte for byte.
- SourceReport aggregates the answers for a single input path for CLI output.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

SEPARATOR = "\\"


class MediaCategory(str, Enum):
    """Category of an input file, derived from its extension.

    Misc holds every extension not listed in the category table.
    """

    AUDIO = "Audio"
    VIDEO = "Video"
    IMAGE = "Image"
    ANIMATED_IMAGE = "Animated Image"
    MISC = "Misc"


class OutputFormat(str, Enum):
    """Target encoding of a conversion job."""

    AAC = "aac"
    FLAC = "flac"
    MP3 = "mp3"
    OGG = "ogg"
    WAV = "wav"
    AVI = "avi"
    MKV = "mkv"
    MP4 = "mp4"
    WEBM = "webm"
    ICO = "ico"
    JPG = "jpg"
    PNG = "png"
    GIF = "gif"


class PathParts(BaseModel):
    """An absolute path split into drive, directories and filename.

    Only produced for paths accepted by the path grammar, so ``join()`` always
    reproduces the source string.
    """

    model_config = ConfigDict(frozen=True)

    drive: str
    """Root of the path: a UNC prefix (``\\\\server\\``) or ``X:\\``."""

    directories: Tuple[str, ...] = ()
    """Directory segments between the root and the filename, outermost first."""

    filename: str
    """Final path segment."""

    @property
    def is_unc(self: "PathParts") -> bool:
        """Whether the path is rooted on a network share."""
        return self.drive.startswith(SEPARATOR * 2)

    @property
    def drive_letter(self: "PathParts") -> Optional[str]:
        """The single drive letter, or None unless the root is ``X:\\``."""
        if len(self.drive) == 3 and self.drive[1:] == ":" + SEPARATOR:
            return self.drive[0]
        return None

    @property
    def extension(self: "PathParts") -> str:
        """Filename extension without the leading dot (empty if there is none)."""
        _, dot, ext = self.filename.rpartition(".")
        return ext if dot else ""

    def join(self: "PathParts") -> str:
        """Rebuild the path string from its parts."""
        if not self.directories:
            return self.drive + self.filename
        return self.drive + SEPARATOR.join(self.directories) + SEPARATOR + self.filename


class SourceReport(BaseModel):
    """Everything fileconverter can tell about a single input path.

    Built by the CLI by composing the independent core helpers.
    """

    path: str
    valid: bool
    parts: Optional[PathParts] = None
    category: MediaCategory = MediaCategory.MISC
    output_format: Optional[OutputFormat] = None
    compatible: Optional[bool] = None
    on_optical_drive: bool = False
    track_number: Optional[int] = Field(default=None, ge=0)
    error: Optional[str] = None
    """Why the path was rejected, for invalid paths."""
