"""Exceptions raised by minigrep."""
from __future__ import annotations


class MinigrepError(RuntimeError):
    """Base class for errors reported to the user."""


class InsufficientArguments(MinigrepError):
    """Fewer than two positional arguments were supplied."""


class FileReadError(MinigrepError):
    """Reading the target file failed (missing, unreadable or not valid text)."""

    def __init__(self, filename: str, cause: BaseException) -> None:
        # OSError messages already name the file
        if isinstance(cause, OSError) and cause.filename is not None:
            message = str(cause)
        else:
            message = f"{filename}: {cause}"
        super().__init__(message)
        self.filename = filename
        self.cause = cause
