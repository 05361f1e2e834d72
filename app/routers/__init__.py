from app.routers.corporate import router as corporate_router
from app.routers.health_routes import router as health_router
from app.routers.language import router as language_router

__all__ = ["corporate_router", "health_router", "language_router"]
