"""
Planet Service

Storage operations for planet records.
"""
import logging
from typing import List

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from planetas.exceptions import StorageError
from planetas.models import Planet
from planetas.schemas.planet import PlanetCreate, PlanetResponse, PlanetUpdate

logger = logging.getLogger(__name__)


class PlanetService:
    """
    Service class for Planet storage.

    Every call commits on its own. Writes return only the new id or the
    number of rows affected; callers re-fetch to see the updated list.
    """

    def __init__(self, db: Session):
        self.db = db

    def insert(self, planet: PlanetCreate) -> int:
        """Persist a new planet and return its assigned id"""
        record = Planet(
            name=planet.name,
            distance=planet.distance,
            size=planet.size,
            nickname=planet.nickname,
        )
        try:
            self.db.add(record)
            self.db.flush()
            planet_id = record.id
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._failure("insert", e) from e

        logger.debug("Inserted planet %d (%s)", planet_id, planet.name)
        return planet_id

    def fetch_all(self) -> List[PlanetResponse]:
        """Get every stored planet in natural storage order"""
        try:
            planets = self.db.execute(select(Planet)).scalars().all()
        except SQLAlchemyError as e:
            raise self._failure("fetch", e) from e

        return [PlanetResponse.model_validate(p) for p in planets]

    def update(self, planet: PlanetUpdate) -> int:
        """Overwrite every field of the row with planet.id"""
        stmt = (
            update(Planet)
            .where(Planet.id == planet.id)
            .values(
                name=planet.name,
                distance=planet.distance,
                size=planet.size,
                nickname=planet.nickname,
            )
        )
        try:
            result = self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._failure("update", e) from e

        logger.debug("Updated planet %d: %d row(s)", planet.id, result.rowcount)
        return result.rowcount

    def delete(self, planet_id: int) -> int:
        """Remove the row with planet_id"""
        try:
            result = self.db.execute(delete(Planet).where(Planet.id == planet_id))
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._failure("delete", e) from e

        logger.debug("Deleted planet %d: %d row(s)", planet_id, result.rowcount)
        return result.rowcount

    def count(self) -> int:
        try:
            return self.db.execute(select(func.count(Planet.id))).scalar() or 0
        except SQLAlchemyError as e:
            raise self._failure("count", e) from e

    def _failure(self, operation: str, error: SQLAlchemyError) -> StorageError:
        self.db.rollback()
        logger.exception("Planet %s failed", operation)
        return StorageError(
            f"Planet {operation} failed",
            operation=operation,
            original_error=error,
        )
