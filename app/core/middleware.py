from __future__ import annotations

import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.core.logging import get_logger
from app.models.language import resolve_language

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request/response logging with trace IDs and latency tracking.

    Every request gets a trace ID that is logged with the method, path, the
    language resolved from the language cookie, the response status and the
    latency, and is echoed back in the X-Trace-Id header.
    """

    def __init__(self, app: ASGIApp, *, lang_cookie_name: str = "lang") -> None:
        super().__init__(app)
        self.lang_cookie_name = lang_cookie_name

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        trace_id = str(uuid.uuid4())
        request.state.trace_id = trace_id
        start_time = time.perf_counter()

        method = request.method
        path = request.url.path
        language = resolve_language(request.cookies.get(self.lang_cookie_name)).value

        logger.info(
            "Request started",
            extra={
                "trace_id": trace_id,
                "method": method,
                "path": path,
                "lang": language,
                "client_host": request.client.host if request.client else None,
            },
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Request failed",
                extra={
                    "trace_id": trace_id,
                    "method": method,
                    "path": path,
                    "error": str(exc),
                    "latency_ms": _elapsed_ms(start_time),
                },
                exc_info=True,
            )
            raise

        latency_ms = _elapsed_ms(start_time)
        logger.info(
            "Request completed",
            extra={
                "trace_id": trace_id,
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "latency_ms": latency_ms,
            },
        )

        response.headers["X-Trace-Id"] = trace_id
        response.headers["X-Response-Time-Ms"] = str(latency_ms)
        return response


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)


__all__ = ["RequestLoggingMiddleware"]
