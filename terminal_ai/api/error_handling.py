"""
API error handling.

Maps the domain exception hierarchy onto JSON error responses of the shape
`{"error": ..., "details"?: ...}` and normalizes 405 responses.

Dependencies: fastapi, starlette, terminal_ai.core.exceptions
System role: Uniform error responses
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from terminal_ai.core.exceptions import (
    CompletionError,
    CompletionTimeoutError,
    ConfigurationError,
    GitHubAuthError,
    TerminalAIException,
    ValidationError,
)
from terminal_ai.models.common import ErrorResponse

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
        "Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}


def error_response(status_code: int, error: str, details: str | None = None, headers=None) -> JSONResponse:
    """Build a JSON error response."""
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning("Invalid request", extra={"path": request.url.path, "error": exc.message})
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are client input errors, reported in the API's error shape."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    logger.warning("Malformed request", extra={"path": request.url.path, "error": details})
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request", details=details)


async def timeout_error_handler(request: Request, exc: CompletionTimeoutError) -> JSONResponse:
    return error_response(status.HTTP_504_GATEWAY_TIMEOUT, "Request timeout")


async def completion_error_handler(request: Request, exc: CompletionError) -> JSONResponse:
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        details=exc.message,
    )


async def message_error_handler(request: Request, exc: TerminalAIException) -> JSONResponse:
    """Configuration and GitHub errors surface their message as the error."""
    logger.error(
        "Request failed",
        extra={"path": request.url.path, "error_type": type(exc).__name__, "error": exc.message},
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors in the API's error shape."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return error_response(exc.status_code, "Method not allowed", headers=exc.headers)
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler to the application."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(CompletionTimeoutError, timeout_error_handler)
    app.add_exception_handler(CompletionError, completion_error_handler)
    app.add_exception_handler(ConfigurationError, message_error_handler)
    app.add_exception_handler(GitHubAuthError, message_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
