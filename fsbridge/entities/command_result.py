"""
Command result entities returned by the command handler.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Text:
    """Full contents of a file decoded as text."""

    value: str
    kind: str = "text"


@dataclass(frozen=True)
class Exists:
    """Whether an entry existed at a path when it was checked."""

    value: bool
    kind: str = "exists"


CommandResult = Union[Text, Exists]


def result_payload(result: CommandResult) -> dict[str, Any]:
    """Flatten a command result into a JSON-friendly mapping."""
    return {"kind": result.kind, "value": result.value}
