"""
FastAPI router definitions for the API endpoints.
"""

from datetime import datetime
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from fsbridge.api.dependencies import (
    get_command_handler,
    get_file_exists_uc,
    get_read_all_text_uc,
)
from fsbridge.api.schemas import (
    CommandListResponse,
    CommandResponse,
    CommandSpecInfo,
    ErrorInfo,
    ErrorResponse,
    FileExistsResponse,
    FileTextResponse,
)
from fsbridge.entities.command_result import result_payload
from fsbridge.exceptions import BaseAppError, InvalidArgumentError

router = APIRouter()

STATUS_BY_KIND: dict[str, int] = {
    "NotFound": 404,
    "PermissionDenied": 403,
    "IsADirectory": 409,
    "InvalidEncoding": 422,
    "InvalidArgument": 400,
    "UnknownCommand": 404,
    "ReadFailed": 500,
}


def status_for(error: BaseAppError) -> int:
    """HTTP status code used to report an application error."""
    return STATUS_BY_KIND.get(error.kind, 500)


def safe_message(error: BaseAppError) -> str:
    """Error message with unencodable characters (lone surrogates) escaped."""
    return str(error).encode("utf-8", "backslashreplace").decode("utf-8")


def command_failure(command: str, error: BaseAppError) -> JSONResponse:
    """Structured failure response for a command invocation."""
    body = CommandResponse(
        ok=False,
        command=command,
        error=ErrorInfo(kind=error.kind, message=safe_message(error)),
    )
    return JSONResponse(status_code=status_for(error), content=jsonable_encoder(body))


async def invoke_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    """Report unparseable /invoke bodies as InvalidArgument failures."""
    command = request.path_params.get("command")
    if not request.url.path.startswith("/invoke/") or command is None:
        return await request_validation_exception_handler(request, exc)
    return command_failure(
        command, InvalidArgumentError("Command arguments must be a JSON object")
    )


@router.get("/", response_class=PlainTextResponse)
def liveness():
    """Report that the service is up, with the current local time."""
    now = datetime.now()
    return f"It is {now.day} {now:%b %Y, %H:%M:%S}"


@router.post("/", response_class=PlainTextResponse)
def liveness_post():
    """Answer POST / so a front-end can verify that CORS allows any method."""
    return "This is POST /"


@router.get("/commands", response_model=CommandListResponse)
def list_commands():
    """
    List the commands a front-end can invoke.

    Returns:
        CommandListResponse: Name, description and parameter schema of each command
    """
    specs = get_command_handler().available_commands()
    return CommandListResponse(commands=[CommandSpecInfo(**s) for s in specs])


@router.post(
    "/invoke/{command}",
    response_model=CommandResponse,
    responses={
        400: {"model": CommandResponse},
        403: {"model": CommandResponse},
        404: {"model": CommandResponse},
        409: {"model": CommandResponse},
        422: {"model": CommandResponse},
        500: {"model": CommandResponse},
    },
)
def invoke_command(
    command: str,
    arguments: Any = Body(None),
):
    """
    Invoke a named command.

    Args:
        command: Name of the command (e.g. "read_all_text")
        arguments: JSON object with the command arguments, e.g. {"name": "a.txt"};
            any other JSON value is rejected by the handler as InvalidArgument

    Returns:
        CommandResponse: The result, or a structured failure with its kind
    """
    try:
        result = get_command_handler().dispatch(
            command, {} if arguments is None else arguments
        )
    except BaseAppError as e:
        return command_failure(command, e)
    return CommandResponse(ok=True, command=command, **result_payload(result))


@router.get(
    "/files/text",
    response_model=FileTextResponse,
    responses={
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def read_all_text(name: str = Query(..., description="Path of the file to read")):
    """
    Read a file as UTF-8 text.

    Raises:
        HTTPException: With a status derived from the failure kind
    """
    try:
        content = get_read_all_text_uc().execute(name)
    except BaseAppError as e:
        raise HTTPException(status_code=status_for(e), detail=safe_message(e))
    return FileTextResponse(name=name, content=content)


@router.get("/files/exists", response_model=FileExistsResponse)
def file_exists(name: str = Query(..., description="Path to check")):
    """Check whether a file or directory exists."""
    return FileExistsResponse(name=name, exists=get_file_exists_uc().execute(name))
