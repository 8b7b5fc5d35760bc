"""API error hierarchy and FastAPI exception handlers.

All API-specific errors extend PostsApiError. The exception handlers catch
these (plus request validation errors, HTTP exceptions and anything unhandled)
and answer with a JSend envelope: 4xx problems become ``fail`` documents,
5xx problems become ``error`` documents.
"""

from __future__ import annotations

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from examples.posts_api.responses import jsend_response
from jsend import error, fail

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class PostsApiError(Exception):
    """Base error for all posts API errors."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class PostNotFoundError(PostsApiError):
    """No post with the requested id."""

    status_code = 404
    message = "not found"


class StorageUnavailableError(PostsApiError):
    """The post store cannot be reached."""

    status_code = 503
    message = "Unable to communicate with database"


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------


def _envelope_for(status_code: int, message: str, details: dict | None = None) -> JSONResponse:
    """Choose fail for client errors and error for server errors."""
    if status_code < 500:
        logger.info("Request failed: %s", message, extra={"jsend_status": "fail"})
        return jsend_response(fail(details or {"message": message}), status_code)
    logger.warning("Request errored: %s", message, extra={"jsend_status": "error"})
    return jsend_response(error(message, code=status_code, data=details or None), status_code)


async def _posts_api_error_handler(_request: Request, exc: PostsApiError) -> JSONResponse:
    """Handle PostsApiError subclasses."""
    return _envelope_for(exc.status_code, exc.message, exc.details or None)


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors as a field -> message fail document."""
    field_errors: dict[str, str] = {}
    for err in exc.errors():
        # Drop the leading "body"/"path"/"query" location segment
        parts = [str(loc) for loc in err["loc"][1:]] or [str(err["loc"][0])]
        field_errors.setdefault(".".join(parts), err["msg"])
    return _envelope_for(422, "Validation error", field_errors)


async def _http_error_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle routing errors and explicit HTTPExceptions."""
    return _envelope_for(exc.status_code, str(exc.detail))


async def _unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions: log traceback, return generic 500."""
    logger.error(
        "Unhandled exception: %s\n%s",
        exc,
        traceback.format_exc(),
        extra={"jsend_status": "error"},
    )
    return jsend_response(error("Internal server error"), 500)


# ---------------------------------------------------------------------------
# Registration helper
# ---------------------------------------------------------------------------


def register_error_handlers(app: FastAPI) -> None:
    """Wire up all exception handlers on the FastAPI application."""
    app.add_exception_handler(PostsApiError, _posts_api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)  # type: ignore[arg-type]
