# src/stylepack/errors.py
from typing import Optional


class StylepackError(Exception):
    """Base class for fatal bundling errors. Always names the offending path."""
    action = "process"

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        message = f"could not {self.action} '{path}'"
        if cause is not None:
            reason = getattr(cause, "strerror", None) or str(cause)
            message = f"{message}: {reason}"
        super().__init__(message)


class DirectoryAccessError(StylepackError):
    action = "read directory"


class FileReadError(StylepackError):
    action = "read file"


class FileWriteError(StylepackError):
    action = "write destination"


class IgnoreFileError(StylepackError):
    action = "read ignore file"
