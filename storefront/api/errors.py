"""
Exception handlers.

Every error leaves the service as ``{"success": false, "message": ...}``.
Clients only ever see ``user_message`` (or a generic text); the detailed
message goes to the log together with the request method and path.
"""
# Standard library imports
import logging
from typing import Dict, Optional, Type

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ..domain.exceptions import (
    AuthenticationError,
    ConflictError,
    InternalError,
    NotFoundError,
    StorefrontError,
    UpstreamError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: Dict[Type[StorefrontError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    UpstreamError: status.HTTP_502_BAD_GATEWAY,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


def status_for(exception: StorefrontError) -> int:
    for error_type in type(exception).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def format_validation_error(exception: RequestValidationError) -> str:
    """Turn the first pydantic error into a single field-specific sentence."""
    errors = exception.errors()
    if not errors:
        return "Invalid request"

    error = errors[0]
    field = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
    if error.get("type") == "missing":
        return f"{field} is required" if field else "Request body is required"
    if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        # Message raised by one of our own field validators
        return str(error["ctx"]["error"])
    message = error.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


async def storefront_error_handler(request: Request, exception: StorefrontError) -> JSONResponse:
    status_code = status_for(exception)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exception.message}")
        message = exception.user_message if isinstance(exception, UpstreamError) else INTERNAL_ERROR_MESSAGE
    else:
        logger.warning(f"{request.method} {request.url.path} rejected ({status_code}): {exception.message}")
        message = exception.user_message

    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return error_response(status_code, message, headers)


async def validation_error_handler(request: Request, exception: RequestValidationError) -> JSONResponse:
    message = format_validation_error(exception)
    logger.warning(f"{request.method} {request.url.path} invalid input: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exception: StarletteHTTPException) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> {exception.status_code}: {exception.detail}")
    return error_response(exception.status_code, str(exception.detail), getattr(exception, "headers", None))


async def unhandled_exception_handler(request: Request, exception: Exception) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} crashed: {exception}", exc_info=exception)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers that produce the uniform error envelope."""
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
