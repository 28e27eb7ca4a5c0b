"""
SQLAlchemy ORM Models

Export all models for easy importing.
"""
from planetas.models.planet import Planet

__all__ = [
    "Planet",
]
