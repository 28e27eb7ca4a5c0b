"""
Services Package

Business logic layer for planet records.
"""
from planetas.services.planet_service import PlanetService

__all__ = [
    "PlanetService",
]
