"""Aspect detection and orb calculations."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from astrocritics.schemas.reading import Aspect, PlanetPosition

from ephemeris.bodies import ASPECT_PRIORITY, AspectType, Body, round_degrees

logger = logging.getLogger(__name__)


def angular_distance(lon1: float, lon2: float) -> float:
    """Calculate the shortest angular distance between two longitudes."""
    diff = abs(lon1 - lon2)
    if diff > 180.0:
        diff = 360.0 - diff
    return diff


def detect_aspect(lon1: float, lon2: float) -> tuple[AspectType, float] | None:
    """Return the first aspect type within orb for a pair, with its exact orb.

    Symmetric in its arguments. NaN longitudes never match.
    """
    dist = angular_distance(lon1, lon2)
    for aspect_type in ASPECT_PRIORITY:
        orb = abs(dist - aspect_type.angle)
        if orb <= aspect_type.orb:
            return aspect_type, orb
    return None


def find_aspects(placements: Iterable[tuple[Body, float] | PlanetPosition]) -> list[Aspect]:
    """Find aspects between every pair of placements.

    Args:
        placements: ``(body, longitude)`` pairs, or objects with ``name`` and
            ``longitude`` attributes, in chart order.

    Returns:
        Aspects sorted by orb, tightest first. Ties keep pair order.
    """
    bodies = [_as_pair(p) for p in placements]
    aspects_found: list[Aspect] = []

    for i, (body1, lon1) in enumerate(bodies):
        for body2, lon2 in bodies[i + 1 :]:
            match = detect_aspect(lon1, lon2)
            if match is None:
                continue
            aspect_type, orb = match
            aspects_found.append(
                Aspect(
                    planet1=body1,
                    planet2=body2,
                    aspect=aspect_type,
                    orb=round_degrees(orb),
                    exact_degrees=aspect_type.angle,
                )
            )

    # list.sort is stable
    aspects_found.sort(key=lambda a: a.orb)
    logger.debug("Found %d aspects across %d bodies", len(aspects_found), len(bodies))
    return aspects_found


def _as_pair(placement: tuple[Body, float] | PlanetPosition) -> tuple[Body, float]:
    if isinstance(placement, tuple):
        body, longitude = placement
        return body, float(longitude)
    return placement.name, float(placement.longitude)
