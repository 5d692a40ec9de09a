"""
Use case for checking whether a path exists.
"""

import logging
from typing import Optional

from fsbridge.ports.files.file_repository_port import FileRepositoryPort


class FileExistsUseCase:
    """Use case for checking whether a file or directory exists."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> bool:
        """
        Check for an entry at a path.

        The answer is only valid at the time of the check; callers that read
        the path afterwards must tolerate it having changed.

        Args:
            path: Path to check

        Returns:
            True if an entry exists, False otherwise. Never raises.
        """
        try:
            exists = self._file_repository.file_exists(path)
        except Exception as e:
            self._logger.error(f"Error checking existence of {path}: {e}")
            return False
        self._logger.info(f"Path {path} exists: {exists}")
        return exists
