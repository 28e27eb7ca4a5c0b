"""
Planet Schemas

Pydantic models for planet records and endpoints.
"""
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class PlanetBase(BaseModel):
    """Base planet schema"""
    name: str = Field(..., min_length=1, description="Planet name")
    distance: float = Field(..., gt=0, allow_inf_nan=False, description="Distance from the Sun (AU)")
    size: float = Field(..., gt=0, allow_inf_nan=False, description="Size (km)")
    nickname: Optional[str] = Field(None, description="Optional nickname")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        """Names are stored stripped and may not be blank"""
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value

    @field_validator("nickname")
    @classmethod
    def empty_nickname_is_absent(cls, value: Optional[str]) -> Optional[str]:
        """An empty nickname is never stored as an empty string"""
        return value or None


class PlanetCreate(PlanetBase):
    """Planet not yet persisted (no id)"""


class PlanetUpdate(PlanetBase):
    """Full-record overwrite keyed by id"""
    id: int


class PlanetResponse(BaseModel):
    """
    Planet as stored

    No range checks here: the store keeps whatever it was handed.
    """
    id: int
    name: str
    distance: float
    size: float
    nickname: Optional[str] = None

    model_config = {"from_attributes": True}


class PlanetListResponse(BaseModel):
    """List of planets response"""
    items: List[PlanetResponse]
    total: int


class PlanetCreatedResponse(BaseModel):
    """Id assigned by the store on insert"""
    id: int


class MutationResponse(BaseModel):
    """Result of an update or delete"""
    rows_affected: int
    success: bool
