from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.exceptions import setup_exception_handlers
from app.core.logging import configure_logging
from app.core.middleware import RequestLoggingMiddleware
from app.core.rate_limit import setup_rate_limiting
from app.routers import corporate_router, health_router, language_router

logger = logging.getLogger(__name__)


def create_app(*, settings: Any | None = None) -> FastAPI:
    resolved_settings = get_settings() if settings is None else settings
    configure_logging(
        app_env=resolved_settings.app_env,
        log_level=getattr(resolved_settings, "log_level", None),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Starting app",
            extra={
                "app_name": resolved_settings.app_name,
                "app_env": resolved_settings.app_env,
                "supported_langs": list(resolved_settings.supported_langs),
            },
        )
        yield
        logger.info("Shutting down app")

    app = FastAPI(title=resolved_settings.app_name, lifespan=lifespan)
    app.state.settings = resolved_settings

    app.add_middleware(
        RequestLoggingMiddleware,
        lang_cookie_name=resolved_settings.lang_cookie_name,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(resolved_settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def app_name_header_middleware(request: Request, call_next):
        response = await call_next(request)
        response.headers["x-app-name"] = resolved_settings.app_name
        return response

    setup_exception_handlers(app, app_env=resolved_settings.app_env)
    setup_rate_limiting(app, settings=resolved_settings)

    app.include_router(health_router)
    app.include_router(language_router)
    app.include_router(corporate_router)

    @app.get("/", include_in_schema=False)
    def get_root() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    return app


def run() -> None:
    """Serve the app with uvicorn using HOST, PORT and RELOAD from settings."""
    import uvicorn

    current = get_settings()
    uvicorn.run("app.main:app", host=current.host, port=current.port, reload=current.reload)


app = create_app()


__all__ = ["app", "create_app", "run"]
