"""
API Package

FastAPI routers for all endpoints.
"""
from planetas.api.pages import router as pages_router
from planetas.api.planets import router as planets_router
from planetas.api.health import router as health_router

__all__ = [
    "pages_router",
    "planets_router",
    "health_router",
]
