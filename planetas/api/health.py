"""
Health & Monitoring API Router

Endpoints for database health checks.
"""
import time
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from planetas.config import settings
from planetas.database import Database, get_database
from planetas.exceptions import StorageError
from planetas.services.planet_service import PlanetService

router = APIRouter(prefix="/api/health", tags=["health"])


class DatabaseStats(BaseModel):
    """Database statistics response"""
    status: str
    connected: bool
    response_time_ms: float
    database_path: str
    schema_version: Optional[int] = None
    planets: Optional[int] = None
    error: Optional[str] = None


class FullHealthResponse(BaseModel):
    """Complete health check response"""
    status: str
    timestamp: datetime
    database: DatabaseStats
    api_version: str


@router.get("/db", response_model=FullHealthResponse)
def check_database_health(database: Database = Depends(get_database)) -> FullHealthResponse:
    """
    Database health check.

    Returns:
    - Connection status
    - Response time
    - Schema version and planet count
    """
    start_time = time.time()
    connected = False
    schema_version = None
    planet_count = None
    error = None

    try:
        with database.session() as db:
            db.execute(text("SELECT 1"))
            connected = True
            planet_count = PlanetService(db).count()
        schema_version = database.schema_version()
    except (StorageError, SQLAlchemyError) as e:
        error = str(e)

    response_time = (time.time() - start_time) * 1000  # Convert to ms

    return FullHealthResponse(
        status="healthy" if connected else "unhealthy",
        timestamp=datetime.now(),
        database=DatabaseStats(
            status="connected" if connected else "disconnected",
            connected=connected,
            response_time_ms=round(response_time, 2),
            database_path=str(database.path),
            schema_version=schema_version,
            planets=planet_count,
            error=error,
        ),
        api_version=settings.app_version,
    )
