"""
Commands "read_all_text" and "file_exists" mapped to the Files use cases.
"""

import logging
from typing import Any, Callable, Optional

from fsbridge.entities.command_result import CommandResult, Exists, Text
from fsbridge.entities.path_argument import PathArgument
from fsbridge.exceptions import UnknownCommandError
from fsbridge.ports.commands.command_port import CommandHandlerPort, CommandSpec
from fsbridge.use_cases.files.file_exists import FileExistsUseCase
from fsbridge.use_cases.files.read_all_text import ReadAllTextUseCase

_PATH_PARAMETERS: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "description": "File path, absolute or relative to the host working directory",
        }
    },
    "required": ["name"],
    "additionalProperties": False,
}


class FilesCommandHandler(CommandHandlerPort):
    """Handler for the filesystem commands exposed to the front-end."""

    def __init__(
        self,
        read_all_text_uc: ReadAllTextUseCase,
        file_exists_uc: FileExistsUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the files command handler.

        Args:
            read_all_text_uc: Use case for reading a file as text
            file_exists_uc: Use case for checking whether a path exists
            logger: Logger instance to use for logging
        """
        self._read_all_text_uc = read_all_text_uc
        self._file_exists_uc = file_exists_uc
        self._logger = logger or logging.getLogger(__name__)
        self._commands: dict[str, Callable[[dict[str, Any]], CommandResult]] = {
            "read_all_text": self._handle_read_all_text,
            "file_exists": self._handle_file_exists,
        }

    def read_all_text(self, name: str) -> str:
        """Return the full contents of the file at ``name`` as text."""
        return self._read_all_text_uc.execute(PathArgument(name).value)

    def file_exists(self, name: str) -> bool:
        """Return whether an entry exists at ``name``."""
        return self._file_exists_uc.execute(PathArgument(name).value)

    def _handle_read_all_text(self, arguments: dict[str, Any]) -> CommandResult:
        path = PathArgument.from_arguments(arguments)
        return Text(self._read_all_text_uc.execute(path.value))

    def _handle_file_exists(self, arguments: dict[str, Any]) -> CommandResult:
        path = PathArgument.from_arguments(arguments)
        return Exists(self._file_exists_uc.execute(path.value))

    def available_commands(self) -> list[CommandSpec]:
        return [
            {
                "name": "read_all_text",
                "description": "Read the entire contents of a file as UTF-8 text.",
                "parameters": _PATH_PARAMETERS,
            },
            {
                "name": "file_exists",
                "description": "Check whether a file or directory exists at a path.",
                "parameters": _PATH_PARAMETERS,
            },
        ]

    def dispatch(self, name: str, arguments: dict[str, object]) -> CommandResult:
        handler = self._commands.get(name)
        if handler is None:
            raise UnknownCommandError(f"Unknown command: {name}")
        self._logger.debug(f"Dispatching command {name}")
        return handler(arguments)
