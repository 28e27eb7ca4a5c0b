"""
Pydantic Schemas

Export all schemas for easy importing.
"""
from planetas.schemas.planet import (
    PlanetBase,
    PlanetCreate,
    PlanetUpdate,
    PlanetResponse,
    PlanetListResponse,
    PlanetCreatedResponse,
    MutationResponse,
)

__all__ = [
    "PlanetBase",
    "PlanetCreate",
    "PlanetUpdate",
    "PlanetResponse",
    "PlanetListResponse",
    "PlanetCreatedResponse",
    "MutationResponse",
]
