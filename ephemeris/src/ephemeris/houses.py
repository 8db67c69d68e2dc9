"""House cusps, house placement and the house table."""

from __future__ import annotations

import math
from collections.abc import Sequence

from astrocritics.schemas.reading import House

from ephemeris.bodies import HOUSE_COUNT, house_label, longitude_to_sign

# pyswisseph house system codes
HOUSE_SYSTEMS: dict[str, bytes] = {
    "placidus": b"P",
    "whole_sign": b"W",
    "koch": b"K",
    "equal": b"E",
    "porphyry": b"O",
}


def find_house(longitude: float, cusps: Sequence[float]) -> int:
    """Determine which house a body falls in given house cusps.

    Falls back to house 1 when no interval matches (malformed cusps,
    wrong cusp count, non-finite longitude).
    """
    if len(cusps) != HOUSE_COUNT:
        return 1
    for i in range(HOUSE_COUNT):
        cusp_start = cusps[i]
        cusp_end = cusps[(i + 1) % HOUSE_COUNT]
        if cusp_end > cusp_start:
            if cusp_start <= longitude < cusp_end:
                return i + 1
        else:
            # Wraps around 0 degrees
            if longitude >= cusp_start or longitude < cusp_end:
                return i + 1
    return 1


def equal_house_cusps(ascendant: float) -> list[float]:
    """Equal 30 degree houses starting at the Ascendant."""
    return [(ascendant + i * 30.0) % 360.0 for i in range(HOUSE_COUNT)]


def cusps_are_well_formed(cusps: Sequence[float]) -> bool:
    """Check there are 12 finite cusps in [0, 360) wrapping at most once."""
    if len(cusps) != HOUSE_COUNT:
        return False
    if not all(math.isfinite(c) and 0.0 <= c < 360.0 for c in cusps):
        return False
    wraps = sum(1 for i in range(HOUSE_COUNT) if cusps[(i + 1) % HOUSE_COUNT] <= cusps[i])
    return wraps == 1


def build_house_table(cusps: Sequence[float]) -> list[House]:
    """Label each cusp and resolve its sign and degree."""
    houses = []
    for index, cusp in enumerate(cusps[:HOUSE_COUNT]):
        sign, degree = longitude_to_sign(cusp)
        houses.append(
            House(
                number=index + 1,
                name=house_label(index + 1),
                cusp=cusp,
                sign=sign,
                degree=degree,
            )
        )
    return houses
