"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from fsbridge.container import container
from fsbridge.ports.commands.command_port import CommandHandlerPort
from fsbridge.use_cases.files.file_exists import FileExistsUseCase
from fsbridge.use_cases.files.read_all_text import ReadAllTextUseCase


def get_read_all_text_uc() -> ReadAllTextUseCase:
    """
    Get the read all text use case from the container.

    Returns:
        ReadAllTextUseCase: The read all text use case instance
    """
    return container.get_read_all_text_use_case()


def get_file_exists_uc() -> FileExistsUseCase:
    """
    Get the file exists use case from the container.

    Returns:
        FileExistsUseCase: The file exists use case instance
    """
    return container.get_file_exists_use_case()


def get_command_handler() -> CommandHandlerPort:
    """Get the command handler from the container."""
    return container.get_command_handler()
