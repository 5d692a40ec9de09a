"""
Dependency injection container for managing application dependencies.
"""

import logging

from fsbridge.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fsbridge.ports.commands.command_port import CommandHandlerPort
from fsbridge.ports.files.file_repository_port import FileRepositoryPort
from fsbridge.use_cases.commands.files_commands import FilesCommandHandler
from fsbridge.use_cases.files.file_exists import FileExistsUseCase
from fsbridge.use_cases.files.read_all_text import ReadAllTextUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def get_read_all_text_use_case(self) -> ReadAllTextUseCase:
        """
        Get read all text use case with injected dependencies.

        Returns:
            Configured ReadAllTextUseCase
        """
        if "read_all_text_use_case" not in self._instances:
            file_repository = self.get_file_repository()
            self._instances["read_all_text_use_case"] = ReadAllTextUseCase(
                file_repository, self._logger
            )
        return self._instances["read_all_text_use_case"]

    def get_file_exists_use_case(self) -> FileExistsUseCase:
        """
        Get file exists use case with injected dependencies.

        Returns:
            Configured FileExistsUseCase
        """
        if "file_exists_use_case" not in self._instances:
            file_repository = self.get_file_repository()
            self._instances["file_exists_use_case"] = FileExistsUseCase(
                file_repository, self._logger
            )
        return self._instances["file_exists_use_case"]

    def get_command_handler(self) -> CommandHandlerPort:
        """
        Registry of the commands exposed to the front-end.
        """
        if "command_handler" not in self._instances:
            self._instances["command_handler"] = FilesCommandHandler(
                self.get_read_all_text_use_case(),
                self.get_file_exists_use_case(),
                self._logger,
            )
        return self._instances["command_handler"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
