"""Error Handlers: global exception handlers for the Posts API.

Invariants:
    - PostsApiError → exc.to_response() with exc.http_status
    - RequestValidationError → 400 with field-level details; on the posts API
      only a body that is not parseable JSON can still reach it
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (PostsApiError), validation (Pydantic), catch-all (Exception)
    - Unparseable JSON shares the 400 status of missing fields
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from posts_api.core.errors import PostsApiError

logger = logging.getLogger(__name__)

INVALID_REQUEST = "Invalid request data"
UNEXPECTED_ERROR = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_posts_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_posts_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PostsApiError)
    async def posts_api_error_handler(request: Request, exc: PostsApiError):
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": UNEXPECTED_ERROR},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "errorMessage": INVALID_REQUEST,
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
