from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from app.core.logging import get_logger

logger = get_logger(__name__)


def build_limiter(*, calls_per_minute: int) -> Limiter:
    """Create a SlowAPI limiter keyed on the client address with a per-minute default limit."""
    return Limiter(key_func=get_remote_address, default_limits=[f"{calls_per_minute}/minute"])


def setup_rate_limiting(app: FastAPI, *, settings: Any) -> Limiter | None:
    """
    Configure rate limiting for the FastAPI app using SlowAPI.

    Each app gets its own limiter so limits and counters never leak between
    app instances. Returns None when RATE_LIMIT_ENABLED is off.
    """
    if not getattr(settings, "rate_limit_enabled", False):
        logger.info("Rate limiting is disabled")
        return None

    calls_per_minute = settings.rate_limit_per_minute
    limiter = build_limiter(calls_per_minute=calls_per_minute)

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    logger.info(
        "Rate limiting enabled",
        extra={"requests_per_minute": calls_per_minute},
    )
    return limiter


__all__ = ["build_limiter", "setup_rate_limiting"]
