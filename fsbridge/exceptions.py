"""
Custom exceptions for the application.

Every failure carries a ``kind`` string so the boundary layer can report it
to the caller without inspecting exception classes.
"""

from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    kind: str = "Error"

    def __init__(self, message: str, kind: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    kind = "ReadFailed"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class NotFoundError(FileRepositoryError):
    """The path does not name an existing file."""

    kind = "NotFound"


class PermissionDeniedError(FileRepositoryError):
    """The path exists but is not accessible."""

    kind = "PermissionDenied"


class PathIsDirectoryError(FileRepositoryError):
    """The path resolves to a directory where a file was expected."""

    kind = "IsADirectory"


class InvalidEncodingError(FileRepositoryError):
    """The file bytes are not valid UTF-8 text."""

    kind = "InvalidEncoding"


class FileReadError(FileRepositoryError):
    """Any other I/O failure while reading a file."""

    kind = "ReadFailed"


class CommandError(BaseAppError):
    """Exception raised for command dispatch errors."""

    pass


class UnknownCommandError(CommandError):
    """No command is registered under the requested name."""

    kind = "UnknownCommand"


class InvalidArgumentError(CommandError):
    """A command argument is missing or has the wrong type."""

    kind = "InvalidArgument"


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    kind = "Configuration"
