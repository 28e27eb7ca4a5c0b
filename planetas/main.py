"""
Gerenciador de Planetas

FastAPI application serving the planet list, the add/edit form and a
small JSON API.
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from planetas.config import settings
from planetas.database import close_db, init_db
from planetas.exceptions import StorageError
from planetas.api import (
    pages_router,
    planets_router,
    health_router,
)
from planetas.api.pages import render_unavailable

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: open the database, creating the schema on first run
    init_db()
    yield
    # Shutdown: dispose the engine
    close_db()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Planet record manager

    - **Planets**: name, distance from the Sun (AU), size (km), optional nickname
    - List screen and add/edit form at `/`
    - JSON API under `/api/planets`
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> Response:
    """Storage failures surface as a generic error, without detail."""
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc)
    if not request.url.path.startswith("/api"):
        return render_unavailable(request)
    return JSONResponse(status_code=500, content={"detail": "Storage unavailable"})


# Register routers
app.include_router(pages_router)
app.include_router(planets_router)
app.include_router(health_router)


@app.get("/health", tags=["health"])
def health_check():
    """Liveness endpoint."""
    return {"status": "healthy"}


def run() -> None:
    """Console entry point: start the server with uvicorn."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "planetas.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
