"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def read_all_text(self, path: str) -> str:
        """
        Read the entire contents of a file as UTF-8 text.

        Args:
            path: Absolute path, or a path relative to the process working directory

        Returns:
            The decoded file contents

        Raises:
            NotFoundError: If the path does not name an existing file
            PermissionDeniedError: If the file is not readable
            PathIsDirectoryError: If the path is a directory
            InvalidEncodingError: If the contents are not valid UTF-8
            FileReadError: For any other I/O failure
        """
        pass

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """
        Check whether an entry (file or directory) exists at a path.

        Args:
            path: Absolute path, or a path relative to the process working directory

        Returns:
            True if an entry exists at the time of the check, False otherwise
        """
        pass
