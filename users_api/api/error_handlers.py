# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..domain.exceptions import (
    IdGenerationError,
    UserNotFoundError,
    UsersApiError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _describe_request_error(exception: RequestValidationError) -> str:
    parts = []
    for error in exception.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "invalid request body"


async def request_validation_handler(request: Request, exception: RequestValidationError) -> JSONResponse:
    """Malformed JSON or wrongly typed fields -> 422 {"error": ...}"""
    return JSONResponse(
        status_code=422,
        content={"error": _describe_request_error(exception)},
    )


async def users_api_error_handler(request: Request, exception: UsersApiError) -> JSONResponse:
    """Map domain errors raised by routes to their HTTP responses"""
    if isinstance(exception, ValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=exception.field_errors,
        )
    if isinstance(exception, UserNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": exception.message},
        )
    if isinstance(exception, IdGenerationError):
        logger.error(f"User ID generation failed: {exception.message}")
    else:
        logger.error(f"Unhandled application error: {exception.message}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "unexpected internal server error. try again later"},
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(RequestValidationError, request_validation_handler)
    application.add_exception_handler(UsersApiError, users_api_error_handler)
