"""Birth data to reading: locate, localize, fetch positions, run the engine."""

from __future__ import annotations

import logging
from datetime import UTC, date, time

from astrocritics.schemas.reading import AstrologyReading, BirthInfo, BirthLocation, Coordinates
from astrocritics.services.collaborators import CoordinateResolver, PositionProvider
from ephemeris.natal import build_reading

from api.services.birth_timezone import localize_birth_time, resolve_birth_timezone, utc_offset_hours

logger = logging.getLogger(__name__)


async def resolve_location(
    name: str,
    latitude: float | None,
    longitude: float | None,
    geocoder: CoordinateResolver,
) -> BirthLocation:
    """Use supplied coordinates when both are present, otherwise geocode the name."""
    if latitude is not None and longitude is not None:
        coords = Coordinates(latitude=latitude, longitude=longitude)
    else:
        coords = await geocoder.resolve_coordinates(name)
    return BirthLocation(name=name.strip(), latitude=coords.latitude, longitude=coords.longitude)


async def calculate_reading(
    *,
    birth_date: date,
    birth_time: time,
    location_name: str,
    latitude: float | None,
    longitude: float | None,
    house_system: str,
    default_timezone: str,
    geocoder: CoordinateResolver,
    provider: PositionProvider,
) -> AstrologyReading:
    location = await resolve_location(location_name, latitude, longitude, geocoder)
    timezone_name, used_fallback = resolve_birth_timezone(
        latitude=location.latitude,
        longitude=location.longitude,
        fallback_timezone=default_timezone,
    )

    local_moment = localize_birth_time(birth_date, birth_time, timezone_name)
    moment_utc = local_moment.astimezone(UTC)
    logger.info(
        "Calculating chart for %s at %s (%s, %s)",
        location.name,
        moment_utc.isoformat(),
        timezone_name,
        provider.name,
    )

    raw = await provider.compute_positions(
        moment_utc,
        location.latitude,
        location.longitude,
        house_system=house_system,
    )
    if used_fallback:
        raw = raw.model_copy(
            update={"warnings": [*raw.warnings, f"timezone not found for location, using {timezone_name}"]}
        )

    birth_info = BirthInfo(birth_date=birth_date, birth_time=birth_time, location=location)
    return build_reading(
        raw,
        birth_info,
        timezone=timezone_name,
        utc_offset_hours=utc_offset_hours(local_moment),
        birth_datetime_utc=moment_utc,
        house_system=house_system,
    )
