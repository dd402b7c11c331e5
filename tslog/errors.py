"""Exception taxonomy for tslog.

NotFoundError and ValidationError are reported to the user as plain messages
and end the command cleanly.  FormatError and StoreIOError are fatal.
"""

from __future__ import annotations


class TsError(Exception):
    """Base class for every error raised by tslog."""


class NotFoundError(TsError):
    """A named series (or the backing store itself) does not exist."""


class ValidationError(TsError):
    """A command argument was rejected before anything was written."""


class FormatError(TsError):
    """A stored line could not be decoded."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class StoreIOError(TsError):
    """The backing store or storage directory is unreadable or unwritable."""

    def __init__(self, path: str, cause: Exception) -> None:
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.cause = cause
