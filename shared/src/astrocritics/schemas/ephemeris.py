"""Pydantic schemas for raw ephemeris data supplied by position providers."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RawPosition(BaseModel):
    """Unprocessed position of a body as reported upstream."""

    name: str
    longitude: float
    speed: float | None = None


class RawChart(BaseModel):
    """Raw longitudes, angles and optional house cusps for one moment and place."""

    planets: list[RawPosition]
    ascendant: float
    midheaven: float
    house_cusps: list[float] | None = None
    source: str = "unknown"
    warnings: list[str] = Field(default_factory=list)
