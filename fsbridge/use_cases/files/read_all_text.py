"""
Use case for reading a file's contents as text.
"""

import logging
from typing import Optional

from fsbridge.exceptions import FileReadError, FileRepositoryError
from fsbridge.ports.files.file_repository_port import FileRepositoryPort


class ReadAllTextUseCase:
    """Use case for reading a whole file as UTF-8 text."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> str:
        """
        Read the entire contents of a file.

        Args:
            path: Path of the file to read

        Returns:
            The file contents at the moment of the read

        Raises:
            FileRepositoryError: If the file cannot be read as text
        """
        try:
            self._logger.info(f"Reading text file: {path}")
            content = self._file_repository.read_all_text(path)
            self._logger.info(f"Read {len(content)} characters")
            return content
        except FileRepositoryError as e:
            self._logger.warning(f"Cannot read {path}: {e.kind}")
            raise
        except Exception as e:
            self._logger.error(f"Error reading file: {e}")
            raise FileReadError(f"Failed to read {path}: {str(e)}", path) from e
