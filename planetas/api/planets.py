"""
Planets API Router

JSON endpoints for planet records.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from planetas.database import get_db
from planetas.services.planet_service import PlanetService
from planetas.schemas.planet import (
    PlanetCreate,
    PlanetUpdate,
    PlanetListResponse,
    PlanetCreatedResponse,
    MutationResponse,
)

router = APIRouter(prefix="/api/planets", tags=["planets"])


@router.get("", response_model=PlanetListResponse)
def list_planets(db: Session = Depends(get_db)) -> PlanetListResponse:
    """
    Get all planets, in storage order.
    """
    planets = PlanetService(db).fetch_all()
    return PlanetListResponse(items=planets, total=len(planets))


@router.post("", response_model=PlanetCreatedResponse, status_code=201)
def create_planet(
    planet: PlanetCreate,
    db: Session = Depends(get_db),
) -> PlanetCreatedResponse:
    """
    Create a planet.

    - **distance** and **size** must be greater than zero
    - an empty **nickname** is stored as null
    """
    planet_id = PlanetService(db).insert(planet)
    return PlanetCreatedResponse(id=planet_id)


@router.put("/{planet_id}", response_model=MutationResponse)
def update_planet(
    planet_id: int,
    planet: PlanetCreate,
    db: Session = Depends(get_db),
) -> MutationResponse:
    """
    Overwrite every field of a planet.

    A missing id is not an error: it reports zero rows affected.
    """
    rows = PlanetService(db).update(PlanetUpdate(id=planet_id, **planet.model_dump()))
    return MutationResponse(rows_affected=rows, success=rows > 0)


@router.delete("/{planet_id}", response_model=MutationResponse)
def delete_planet(
    planet_id: int,
    db: Session = Depends(get_db),
) -> MutationResponse:
    """
    Delete a planet by ID.
    """
    rows = PlanetService(db).delete(planet_id)
    return MutationResponse(rows_affected=rows, success=rows > 0)
