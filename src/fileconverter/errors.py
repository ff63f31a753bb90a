"""Exception types raised by the fileconverter core.

Both concrete errors also derive from :class:`ValueError` so callers that only
care about "bad input" can catch the builtin.
"""


class FileConverterError(Exception):
    """Base class for all fileconverter errors."""


class MalformedPathError(FileConverterError, ValueError):
    """Raised when a path does not satisfy the absolute path grammar.

    Decomposition never guesses at a partial result; callers should check
    ``is_valid_path`` first or handle this error.
    """

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        message = f"Malformed path: {path!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class FormatError(FileConverterError, ValueError):
    """Raised when a filename does not have the expected structured shape.

    Used by the CD audio track parser for anything other than
    ``X:\\TrackNN.cda``.
    """

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        message = f"Unexpected filename format: {path!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
