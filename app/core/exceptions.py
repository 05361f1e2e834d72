from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Application error with HTTP status, detail and an optional machine-readable code."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        headers: dict[str, str] | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.headers = headers or {}
        self.code = code


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle AppError by returning a JSON response with status, detail and code."""
    content: dict[str, Any] = {"error": exc.message, "status_code": exc.status_code}
    if exc.code is not None:
        content["code"] = exc.code
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=exc.headers,
    )


def create_unhandled_exception_handler(
    *,
    app_env: str,
    debug: bool | None = None,
) -> Callable[[Request, Exception], Awaitable[JSONResponse]]:
    """
    Return an async exception handler for unhandled Exception.

    When app_env is "development" or debug is True, the response includes the
    exception message; otherwise a generic message is returned.
    """
    show_message = debug if debug is not None else (app_env.lower() == "development")

    async def handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception: %s", exc, exc_info=True, extra={"path": request.url.path}
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "message": str(exc) if show_message else "An unexpected error occurred",
            },
        )

    return handler


def setup_exception_handlers(app: FastAPI, *, app_env: str) -> None:
    """
    Set up global exception handlers for the FastAPI app.

    Standard HTTP errors, request-parsing errors, AppError and anything uncaught
    all come back as JSON bodies.
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Return the original status code and error detail (e.g. 404 Not Found)."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.detail,
                "status_code": exc.status_code,
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Return details about a request that FastAPI could not parse."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": "Validation error",
                "details": exc.errors(),
            },
        )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, create_unhandled_exception_handler(app_env=app_env))


__all__ = [
    "AppError",
    "app_error_handler",
    "create_unhandled_exception_handler",
    "setup_exception_handlers",
]
