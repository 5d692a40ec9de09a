"""
Pydantic models for API requests and responses.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictStr


class ErrorInfo(BaseModel):
    """Schema for a typed command failure."""

    kind: str = Field(..., description="Failure kind, e.g. 'NotFound'")
    message: str = Field(..., description="Human readable error message")


class CommandResponse(BaseModel):
    """Schema for the outcome of a command invocation."""

    ok: bool = Field(..., description="Whether the command succeeded")
    command: str = Field(..., description="Name of the invoked command")
    kind: Optional[str] = Field(None, description="Result kind ('text' or 'exists')")
    value: Optional[Union[StrictBool, StrictStr]] = Field(None, description="Command result")
    error: Optional[ErrorInfo] = Field(None, description="Failure, when ok is false")


class CommandSpecInfo(BaseModel):
    """Schema describing one available command."""

    name: str = Field(..., description="Command name")
    description: str = Field(..., description="What the command does")
    parameters: dict[str, object] = Field(
        ..., description="JSON Schema of the command arguments"
    )


class CommandListResponse(BaseModel):
    """Schema for the list of available commands."""

    commands: List[CommandSpecInfo] = Field(..., description="Available commands")


class FileTextResponse(BaseModel):
    """Schema for a file read as text."""

    name: str = Field(..., description="Path as supplied by the caller")
    content: str = Field(..., description="File contents")


class FileExistsResponse(BaseModel):
    """Schema for an existence check."""

    name: str = Field(..., description="Path as supplied by the caller")
    exists: bool = Field(..., description="Whether an entry exists at the path")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
