"""Birth-time timezone resolution from coordinates."""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timezonefinder import TimezoneFinder

logger = logging.getLogger(__name__)

_finder: TimezoneFinder | None = None


def _get_finder() -> TimezoneFinder:
    global _finder
    if _finder is None:
        _finder = TimezoneFinder(in_memory=True)
    return _finder


def infer_birth_timezone(*, latitude: float, longitude: float) -> str | None:
    """Infer IANA timezone for the given coordinates."""
    finder = _get_finder()
    timezone_name = finder.timezone_at(lng=longitude, lat=latitude)
    if not timezone_name:
        timezone_name = finder.certain_timezone_at(lng=longitude, lat=latitude)
    if not timezone_name:
        return None

    normalized = str(timezone_name).strip()
    if not normalized:
        return None

    try:
        ZoneInfo(normalized)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("timezonefinder returned unknown zone %r", normalized)
        return None
    return normalized


def resolve_birth_timezone(
    *,
    latitude: float,
    longitude: float,
    fallback_timezone: str,
) -> tuple[str, bool]:
    """Resolve timezone from coordinates and indicate if the fallback was used."""
    inferred = infer_birth_timezone(latitude=latitude, longitude=longitude)
    if inferred:
        return inferred, False
    fallback = fallback_timezone.strip() or "UTC"
    logger.warning(
        "No timezone found for (%.4f, %.4f); falling back to %s", latitude, longitude, fallback
    )
    return fallback, True


def localize_birth_time(birth_date: date, birth_time: time, timezone_name: str) -> datetime:
    """Attach the birth zone to a wall-clock birth time."""
    return datetime.combine(birth_date, birth_time).replace(tzinfo=ZoneInfo(timezone_name))


def utc_offset_hours(moment: datetime) -> float:
    offset = moment.utcoffset()
    return offset.total_seconds() / 3600.0 if offset is not None else 0.0
