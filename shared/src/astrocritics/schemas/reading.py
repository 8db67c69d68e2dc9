"""Pydantic schemas for computed astrology readings."""

from __future__ import annotations

from datetime import date, time

from ephemeris.bodies import AspectType, Body, Sign
from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class BirthLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class BirthInfo(BaseModel):
    """Birth moment as submitted (local wall-clock time) and where it happened."""

    model_config = ConfigDict(frozen=True)

    birth_date: date
    birth_time: time
    location: BirthLocation


class PlanetPosition(BaseModel):
    """Placement of one body in a chart."""

    model_config = ConfigDict(frozen=True)

    name: Body
    longitude: float
    speed: float
    sign: Sign
    degree: float
    retrograde: bool
    house: int = Field(ge=1, le=12)


class Aspect(BaseModel):
    """An aspect between two bodies."""

    model_config = ConfigDict(frozen=True)

    planet1: Body
    planet2: Body
    aspect: AspectType
    orb: float
    exact_degrees: float

    def involves(self, body: Body) -> bool:
        return body in (self.planet1, self.planet2)

    def other(self, body: Body) -> Body:
        return self.planet2 if self.planet1 == body else self.planet1


class House(BaseModel):
    """A house cusp with its label and sign placement."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1, le=12)
    name: str
    cusp: float
    sign: Sign
    degree: float


class CalculationMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    position_provider: str
    house_system: str
    houses_synthesized: bool = False
    birth_datetime_local: str
    birth_datetime_utc: str
    warnings: list[str] = Field(default_factory=list)


class AstrologyReading(BaseModel):
    """Complete chart computed for one birth moment."""

    model_config = ConfigDict(frozen=True)

    birth_info: BirthInfo
    timezone: str
    utc_offset_hours: float
    planets: list[PlanetPosition]
    aspects: list[Aspect] = Field(default_factory=list)
    houses: list[House] = Field(default_factory=list)
    ascendant: float
    midheaven: float
    house_cusps: list[float] = Field(default_factory=list)
    chart_description: str = ""
    calculation_metadata: CalculationMetadata | None = None

    def placement(self, body: Body) -> PlanetPosition | None:
        for planet in self.planets:
            if planet.name == body:
                return planet
        return None

    def aspects_for(self, body: Body) -> list[Aspect]:
        return [a for a in self.aspects if a.involves(body)]

    @property
    def cache_key(self) -> str:
        """Key clients use to cache this reading: birth moment and place."""
        loc = self.birth_info.location
        return (
            f"{self.birth_info.birth_date.isoformat()}T{self.birth_info.birth_time.isoformat()}"
            f"@{loc.latitude:.4f},{loc.longitude:.4f}"
        )
