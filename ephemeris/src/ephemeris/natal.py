"""Natal chart assembly - placements, houses and aspects from raw positions."""

from __future__ import annotations

import logging
import math
from datetime import UTC, datetime

from astrocritics.schemas.ephemeris import RawChart
from astrocritics.schemas.reading import (
    AstrologyReading,
    BirthInfo,
    CalculationMetadata,
    PlanetPosition,
)
from astrocritics.services.collaborators import EphemerisError

from ephemeris.aspects import find_aspects
from ephemeris.bodies import (
    ALL_BODIES,
    ASPECT_SYMBOLS,
    Body,
    longitude_to_sign,
    normalize_longitude,
    ordinal,
)
from ephemeris.houses import (
    HOUSE_COUNT,
    build_house_table,
    cusps_are_well_formed,
    equal_house_cusps,
    find_house,
)

logger = logging.getLogger(__name__)


def _resolve_placements(raw: RawChart, cusps: list[float], warnings: list[str]) -> list[PlanetPosition]:
    by_body: dict[Body, PlanetPosition] = {}
    for entry in raw.planets:
        body = Body.parse(entry.name)
        if body is None:
            warnings.append(f"ignored unknown body '{entry.name}'")
            continue
        if body in by_body:
            warnings.append(f"ignored duplicate position for {body.value}")
            continue
        if not math.isfinite(entry.longitude):
            warnings.append(f"{body.value} unavailable: non-finite longitude")
            continue
        # Upstreams that omit speed report direct motion
        speed = entry.speed if entry.speed is not None and math.isfinite(entry.speed) else 1.0
        longitude = normalize_longitude(entry.longitude)
        sign, degree = longitude_to_sign(longitude)
        by_body[body] = PlanetPosition(
            name=body,
            longitude=longitude,
            speed=speed,
            sign=sign,
            degree=degree,
            retrograde=speed < 0,
            house=find_house(longitude, cusps),
        )

    missing = [body.value for body in ALL_BODIES if body not in by_body]
    if missing:
        warnings.append(f"missing bodies: {', '.join(missing)}")
    return [by_body[body] for body in ALL_BODIES if body in by_body]


def build_reading(
    raw: RawChart,
    birth_info: BirthInfo,
    *,
    timezone: str,
    utc_offset_hours: float,
    birth_datetime_utc: datetime,
    house_system: str = "placidus",
) -> AstrologyReading:
    """Build a complete reading from raw ephemeris output.

    Placements are returned in chart order (Sun through North Node) whatever
    order the provider used. Without provider cusps, equal houses from the
    Ascendant are synthesized.
    """
    if not (math.isfinite(raw.ascendant) and math.isfinite(raw.midheaven)):
        raise EphemerisError(
            f"Malformed positions payload: non-finite angles (asc={raw.ascendant}, mc={raw.midheaven})"
        )
    ascendant = normalize_longitude(raw.ascendant)
    midheaven = normalize_longitude(raw.midheaven)
    warnings = list(raw.warnings)

    provider_cusps = raw.house_cusps
    if provider_cusps is not None and (
        len(provider_cusps) != HOUSE_COUNT or not all(math.isfinite(c) for c in provider_cusps)
    ):
        warnings.append(f"ignored {len(provider_cusps)} unusable house cusps; using equal houses")
        provider_cusps = None

    houses_synthesized = provider_cusps is None
    if houses_synthesized:
        cusps = equal_house_cusps(ascendant)
        house_system = "equal"
    else:
        cusps = [normalize_longitude(c) for c in provider_cusps]
        if not cusps_are_well_formed(cusps):
            warnings.append("house cusps look malformed; unmatched bodies default to the 1st house")

    planets = _resolve_placements(raw, cusps, warnings)
    aspects = find_aspects(planets)

    birth_local = datetime.combine(birth_info.birth_date, birth_info.birth_time)
    metadata = CalculationMetadata(
        position_provider=raw.source,
        house_system=house_system,
        houses_synthesized=houses_synthesized,
        birth_datetime_local=birth_local.isoformat(),
        birth_datetime_utc=birth_datetime_utc.astimezone(UTC).isoformat(),
        warnings=warnings,
    )

    reading = AstrologyReading(
        birth_info=birth_info,
        timezone=timezone,
        utc_offset_hours=utc_offset_hours,
        planets=planets,
        aspects=aspects,
        houses=build_house_table(cusps),
        ascendant=ascendant,
        midheaven=midheaven,
        house_cusps=cusps,
        calculation_metadata=metadata,
    )
    for warning in warnings:
        logger.warning("Chart for %s: %s", reading.cache_key, warning)
    return reading.model_copy(update={"chart_description": describe_chart(reading)})


def _format_longitude(longitude: float) -> str:
    sign, degree = longitude_to_sign(longitude)
    return f"{degree:.2f}° {sign.value}"


def describe_chart(reading: AstrologyReading) -> str:
    """Plain-text rendering of a reading, used as context for persona prompts."""
    info = reading.birth_info
    lines = [
        "[BIRTH DATA]",
        f"Date: {info.birth_date.isoformat()} {info.birth_time.strftime('%H:%M')} ({reading.timezone})",
        f"Location: {info.location.name} ({info.location.latitude:.4f}, {info.location.longitude:.4f})",
        "",
        "[ANGLES]",
        f"Ascendant: {_format_longitude(reading.ascendant)}",
        f"Midheaven: {_format_longitude(reading.midheaven)}",
        "",
        "[PLANETS]",
    ]
    for planet in reading.planets:
        retro = " Rx" if planet.retrograde else ""
        lines.append(
            f"{planet.name.value}: {planet.degree:.2f}° {planet.sign.value}{retro}, "
            f"{ordinal(planet.house)} house"
        )

    lines.extend(["", "[HOUSES]"])
    for house in reading.houses:
        lines.append(f"{ordinal(house.number)} house cusp: {house.degree:.2f}° {house.sign.value}")

    lines.extend(["", "[ASPECTS]"])
    if reading.aspects:
        for aspect in reading.aspects:
            lines.append(
                f"{aspect.planet1.value} {ASPECT_SYMBOLS[aspect.aspect]} {aspect.planet2.value} "
                f"{aspect.aspect.value.lower()} (orb {aspect.orb:.2f}°)"
            )
    else:
        lines.append("None within orb")
    return "\n".join(lines)
