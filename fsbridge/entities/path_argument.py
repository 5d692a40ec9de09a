"""
PathArgument domain entity.
"""

from typing import Any

from fsbridge.exceptions import InvalidArgumentError


class PathArgument:
    """
    A caller-supplied filesystem path.

    The value is kept exactly as given: it is neither normalized nor
    canonicalized. Relative paths are resolved by the operating system against
    the working directory of the host process at call time.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any):
        """
        Initialize the PathArgument.

        Args:
            value: Raw path value received from the caller

        Raises:
            InvalidArgumentError: If the value is not a string
        """
        if not isinstance(value, str):
            raise InvalidArgumentError(
                f"Path must be a string, got {type(value).__name__}"
            )
        self.value = value

    @classmethod
    def from_arguments(cls, arguments: dict[str, Any], key: str = "name") -> "PathArgument":
        """
        Extract a PathArgument from a command argument mapping.

        Raises:
            InvalidArgumentError: If the key is missing or not a string
        """
        if not isinstance(arguments, dict):
            raise InvalidArgumentError("Command arguments must be an object")
        if key not in arguments:
            raise InvalidArgumentError(f"Missing required argument '{key}'")
        return cls(arguments[key])

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"PathArgument({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathArgument):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)
