"""
Local file system adapter implementation for file operations.
"""

import errno
import logging
import os

from typing_extensions import override

from fsbridge.exceptions import (
    FileReadError,
    FileRepositoryError,
    InvalidEncodingError,
    NotFoundError,
    PathIsDirectoryError,
    PermissionDeniedError,
)
from fsbridge.ports.files.file_repository_port import FileRepositoryPort


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _translate_os_error(self, path: str, error: OSError) -> FileRepositoryError:
        """
        Map an OSError raised while reading a file onto the error taxonomy.

        Args:
            path: Path that was being read
            error: The original error

        Returns:
            The matching FileRepositoryError subclass instance
        """
        reason = error.strerror or str(error)
        if isinstance(error, IsADirectoryError):
            return PathIsDirectoryError(f"Path is a directory: {path}", path)
        if isinstance(error, PermissionError):
            # Windows reports opening a directory as EACCES
            if os.path.isdir(path):
                return PathIsDirectoryError(f"Path is a directory: {path}", path)
            return PermissionDeniedError(f"Permission denied: {path}", path)
        if isinstance(error, (FileNotFoundError, NotADirectoryError)):
            return NotFoundError(f"File does not exist: {path}", path)
        if error.errno in (errno.ENAMETOOLONG, errno.ELOOP):
            return NotFoundError(f"File does not exist: {path} ({reason})", path)
        return FileReadError(f"Failed to read {path}: {reason}", path)

    @override
    def read_all_text(self, path: str) -> str:
        """
        Read the entire contents of a file as UTF-8 text.

        The file is read in binary mode and decoded afterwards, so line endings
        and a leading byte order mark are returned untouched.

        Args:
            path: Path of the file to read

        Returns:
            The decoded file contents

        Raises:
            FileRepositoryError: One of its subclasses, depending on the failure
        """
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise self._translate_os_error(path, e) from e
        except ValueError as e:
            # Embedded NUL or characters the filesystem encoding cannot represent
            raise NotFoundError(f"File does not exist: {path} ({e})", path) from e

        self._logger.debug(f"Read {len(data)} bytes from {path}")

        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(
                f"File is not valid UTF-8 text: {path} (byte {e.start})", path
            ) from e

    @override
    def file_exists(self, path: str) -> bool:
        """
        Check whether an entry (file or directory) exists at a path.

        Symbolic links are followed: a dangling link does not exist.

        Args:
            path: Path to check

        Returns:
            True if an entry exists, False otherwise (including when the path is malformed)
        """
        try:
            return os.path.exists(path)
        except (OSError, ValueError, TypeError) as e:
            self._logger.debug(f"Existence check failed for {path!r}: {e}")
            return False
