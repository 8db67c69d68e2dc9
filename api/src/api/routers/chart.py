"""Chart calculation and default commentary endpoints."""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime, time

from astrocritics.config import Settings, get_settings
from astrocritics.schemas.chat import ExplanationsRequest, ExplanationsResponse
from astrocritics.schemas.reading import AstrologyReading
from astrocritics.services.collaborators import (
    CoordinateResolver,
    EphemerisError,
    GeocodingError,
    PositionProvider,
)
from ephemeris.explanations import generate_chart_explanations
from ephemeris.houses import HOUSE_SYSTEMS
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from api.dependencies import get_geocoder, get_position_provider
from api.services.chart_service import calculate_reading

logger = logging.getLogger(__name__)

router = APIRouter()


class LocationInput(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)


class ChartRequest(BaseModel):
    """Birth data as entered: local date and time plus a place."""

    model_config = ConfigDict(populate_by_name=True)

    birth_date: date = Field(alias="date")
    birth_time: time = Field(alias="time")
    location: str | LocationInput
    house_system: str | None = None

    def location_input(self) -> LocationInput:
        if isinstance(self.location, LocationInput):
            return self.location
        return LocationInput(name=self.location)


@router.get("")
async def chart_status():
    return {"message": "API route is working"}


@router.post("", response_model=AstrologyReading)
async def create_chart(
    req: ChartRequest,
    geocoder: CoordinateResolver = Depends(get_geocoder),
    provider: PositionProvider = Depends(get_position_provider),
    settings: Settings = Depends(get_settings),
):
    house_system = (req.house_system or settings.house_system).strip().lower()
    if house_system not in HOUSE_SYSTEMS:
        raise HTTPException(status_code=400, detail=f"Invalid house system: {req.house_system}")
    if req.birth_date > date.today():
        raise HTTPException(status_code=400, detail="Birth date cannot be in the future")

    location = req.location_input()
    if not location.name.strip():
        raise HTTPException(status_code=400, detail="Location is required")

    try:
        return await calculate_reading(
            birth_date=req.birth_date,
            birth_time=req.birth_time,
            location_name=location.name,
            latitude=location.latitude,
            longitude=location.longitude,
            house_system=house_system,
            default_timezone=settings.default_timezone,
            geocoder=geocoder,
            provider=provider,
        )
    except GeocodingError as exc:
        logger.warning("Geocoding failed for %r: %s", location.name, exc)
        raise HTTPException(status_code=502, detail=str(exc))
    except EphemerisError as exc:
        logger.error("Position lookup failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc))


@router.post("/explanations", response_model=ExplanationsResponse)
async def chart_explanations(req: ExplanationsRequest):
    return ExplanationsResponse(
        explanations=generate_chart_explanations(req.reading),
        timestamp=datetime.now(UTC),
    )
