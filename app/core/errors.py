"""
app/core/errors.py

Purpose: JSON error envelopes for the plain HTTP routes

- UserPostsError subclasses keep their own status and code
  (StoreUnavailableError from the health routes becomes a 503)
- Unknown paths and wrong methods map to HTTP_ERROR
- Anything else is logged and reported as INTERNAL_ERROR

GraphQL errors never reach these handlers; Strawberry reports them
inside the response body.
"""

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import UserPostsError
from app.core.logging import get_logger
from app.schemas.response import ErrorResponse

logger = get_logger(__name__)

GENERIC_ERROR_MESSAGE = "An internal error occurred. Please try again later."


def error_response(status_code: int, error: str, code: str, details: Optional[Any] = None) -> JSONResponse:
    body = ErrorResponse(error=error, code=code, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_application_error(request: Request, exc: UserPostsError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}: {exc.message}")
    return error_response(exc.status_code, exc.message, exc.code, exc.details)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), "HTTP_ERROR")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)

    # Config comes from the app so tests can build production apps
    if request.app.state.config.is_production:
        message = GENERIC_ERROR_MESSAGE
    else:
        message = str(exc)
    return error_response(500, message, "INTERNAL_ERROR")


def add_exception_handlers(app: FastAPI):
    """
    Registers the JSON error handlers with the FastAPI app.
    """
    app.add_exception_handler(UserPostsError, handle_application_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
