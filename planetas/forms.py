"""
Planet Form

Raw text inputs of the add/edit modal and the validation gate that
turns them into a PlanetCreate.
"""
import math
from dataclasses import dataclass
from typing import Optional

from planetas.exceptions import ValidationError
from planetas.schemas.planet import PlanetCreate, PlanetResponse

INVALID_INPUT_MESSAGE = "Preencha os campos corretamente"


def _parse_positive(raw: str, field: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValidationError(INVALID_INPUT_MESSAGE, field=field) from None

    if not math.isfinite(value) or value <= 0:
        raise ValidationError(INVALID_INPUT_MESSAGE, field=field)
    return value


@dataclass
class PlanetForm:
    """Form state, shared by add (blank) and edit (prefilled)"""
    name: str = ""
    distance: str = ""
    size: str = ""
    nickname: str = ""

    @classmethod
    def from_planet(cls, planet: PlanetResponse) -> "PlanetForm":
        return cls(
            name=planet.name,
            distance=str(planet.distance),
            size=str(planet.size),
            nickname=planet.nickname or "",
        )

    def validate(self) -> PlanetCreate:
        """
        Run the validation gate.

        Raises ValidationError if the name is empty, or distance/size are
        not finite numbers greater than zero. An empty nickname becomes None.
        """
        name = self.name.strip()
        if not name:
            raise ValidationError(INVALID_INPUT_MESSAGE, field="name")

        distance = _parse_positive(self.distance, "distance")
        size = _parse_positive(self.size, "size")
        nickname: Optional[str] = self.nickname or None

        return PlanetCreate(name=name, distance=distance, size=size, nickname=nickname)
