"""
Port and types for named commands invoked across the front-end boundary.
"""

from abc import ABC, abstractmethod
from typing import TypedDict

from fsbridge.entities.command_result import CommandResult


class CommandSpec(TypedDict):
    """Specification for a command that a front-end can invoke."""

    name: str
    description: str
    parameters: dict[str, object]  # JSON Schema


class CommandHandlerPort(ABC):
    """
    Port interface for handling named commands.

    This port exposes available commands and dispatches invocations to the
    appropriate use cases.
    """

    @abstractmethod
    def available_commands(self) -> list[CommandSpec]:
        """
        Get a list of available commands.

        Returns:
            List of command specifications
        """
        pass

    @abstractmethod
    def dispatch(self, name: str, arguments: dict[str, object]) -> CommandResult:
        """
        Dispatch a command invocation to the appropriate use case.

        Args:
            name: Name of the command to invoke
            arguments: Arguments to pass to the command

        Returns:
            Result of the command invocation

        Raises:
            UnknownCommandError: If the command name is unknown
            InvalidArgumentError: If the arguments do not match the command
        """
        pass
