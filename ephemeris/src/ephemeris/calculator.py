"""Swiss Ephemeris position provider."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime

import swisseph as swe
from astrocritics.schemas.ephemeris import RawChart, RawPosition
from astrocritics.services.collaborators import EphemerisError

from ephemeris.bodies import ALL_BODIES, BODY_IDS, Body
from ephemeris.houses import HOUSE_SYSTEMS

logger = logging.getLogger(__name__)


def _datetime_to_jd(dt: datetime) -> float:
    """Convert datetime to Julian Day number (UT)."""
    utc = dt.astimezone(UTC)
    return swe.julday(
        utc.year,
        utc.month,
        utc.day,
        utc.hour + utc.minute / 60.0 + utc.second / 3600.0,
    )


def _calculate_position(body: Body, jd: float) -> tuple[float, float, str] | None:
    """Longitude, speed and source for a body; Moshier when Swiss files are missing."""
    body_id = BODY_IDS[body]
    try:
        result, _ = swe.calc_ut(jd, body_id, swe.FLG_SWIEPH | swe.FLG_SPEED)
        return result[0], result[3], "swisseph"
    except Exception:
        try:
            result, _ = swe.calc_ut(jd, body_id, swe.FLG_MOSEPH | swe.FLG_SPEED)
            return result[0], result[3], "moshier"
        except Exception as exc:
            logger.warning("swisseph failed for %s: %s", body.value, exc)
            return None


class SwissEphemerisProvider:
    """Computes raw positions and house cusps locally with pyswisseph."""

    name = "swisseph"

    def __init__(self, ephe_path: str | None = None, house_system: str = "placidus") -> None:
        path = (ephe_path if ephe_path is not None else os.getenv("SWISSEPH_EPHE_PATH", "")).strip()
        swe.set_ephe_path(path or None)
        self.house_system = house_system if house_system in HOUSE_SYSTEMS else "placidus"

    async def compute_positions(
        self,
        moment_utc: datetime,
        latitude: float,
        longitude: float,
        house_system: str | None = None,
    ) -> RawChart:
        jd = _datetime_to_jd(moment_utc)
        system = house_system or self.house_system
        hsys = HOUSE_SYSTEMS.get(system, HOUSE_SYSTEMS["placidus"])
        warnings: list[str] = []

        planets: list[RawPosition] = []
        sources: set[str] = set()
        for body in ALL_BODIES:
            computed = _calculate_position(body, jd)
            if computed is None:
                warnings.append(f"{body.value} unavailable from ephemeris")
                continue
            lon, speed, source = computed
            sources.add(source)
            planets.append(RawPosition(name=body.value, longitude=lon, speed=speed))

        if not planets:
            raise EphemerisError(f"no positions available for julian day {jd:.6f}")

        try:
            cusp_result, angle_result = swe.houses_ex(jd, latitude, longitude, hsys)
        except Exception as exc:
            # Polar latitudes defeat Placidus; the chart falls back to equal houses
            logger.warning("house calculation failed for %s: %s", system, exc)
            warnings.append(f"house calculation failed, using equal houses: {exc}")
            ascendant, midheaven = self._angles_fallback(jd, latitude, longitude)
            cusps = None
        else:
            cusps = [float(c) for c in cusp_result[:12]]
            ascendant = float(angle_result[0])
            midheaven = float(angle_result[1])

        logger.info("Computed %d positions at jd=%.6f sources=%s", len(planets), jd, sorted(sources))
        return RawChart(
            planets=planets,
            ascendant=ascendant,
            midheaven=midheaven,
            house_cusps=cusps,
            source="moshier" if sources == {"moshier"} else self.name,
            warnings=warnings,
        )

    @staticmethod
    def _angles_fallback(jd: float, latitude: float, longitude: float) -> tuple[float, float]:
        try:
            _, angle_result = swe.houses_ex(jd, latitude, longitude, HOUSE_SYSTEMS["equal"])
        except Exception as exc:
            raise EphemerisError(f"cannot compute chart angles: {exc}") from exc
        return float(angle_result[0]), float(angle_result[1])
