from __future__ import annotations

from fastapi import APIRouter, Request
from pydantic import BaseModel

from app.core.logging import get_logger
from app.utils.formatters import language_options

router = APIRouter(tags=["health"])
logger = get_logger(__name__)


class HealthResponse(BaseModel):
    status: str
    languages: list[str]


@router.get("/health", response_model=HealthResponse)
def get_health(request: Request) -> HealthResponse:
    logger.info("Health check requested")
    settings = request.app.state.settings
    return HealthResponse(status="ok", languages=language_options(supported=settings.supported_langs))


__all__ = ["router"]
