"""Body, sign, aspect and house definitions."""

from __future__ import annotations

import math
import re
from enum import Enum


class Body(str, Enum):
    """Celestial bodies carried in every chart, in chart order."""

    SUN = "Sun"
    MOON = "Moon"
    MERCURY = "Mercury"
    VENUS = "Venus"
    MARS = "Mars"
    JUPITER = "Jupiter"
    SATURN = "Saturn"
    URANUS = "Uranus"
    NEPTUNE = "Neptune"
    PLUTO = "Pluto"
    NORTH_NODE = "North Node"

    @property
    def key(self) -> str:
        """Lower snake-case identifier (``north_node``)."""
        return self.name.lower()

    @classmethod
    def parse(cls, value: object) -> Body | None:
        """Resolve an upstream body name leniently; ``None`` when unknown."""
        if isinstance(value, Body):
            return value
        raw = str(value or "").strip()
        if not raw:
            return None
        # "northNode" -> "north_node", "North Node" -> "north_node"
        token = re.sub(r"(?<=[a-z])(?=[A-Z])", "_", raw)
        token = re.sub(r"[\s\-]+", "_", token).lower()
        return _BODY_ALIASES.get(token)


_BODY_ALIASES: dict[str, Body] = {body.key: body for body in Body}
_BODY_ALIASES.update(
    {
        "node": Body.NORTH_NODE,
        "true_node": Body.NORTH_NODE,
        "mean_node": Body.NORTH_NODE,
        "north_lunar_node": Body.NORTH_NODE,
        "rahu": Body.NORTH_NODE,
    }
)

ALL_BODIES: tuple[Body, ...] = tuple(Body)

# Swiss Ephemeris body IDs
BODY_IDS: dict[Body, int] = {
    Body.SUN: 0,  # SE_SUN
    Body.MOON: 1,  # SE_MOON
    Body.MERCURY: 2,  # SE_MERCURY
    Body.VENUS: 3,  # SE_VENUS
    Body.MARS: 4,  # SE_MARS
    Body.JUPITER: 5,  # SE_JUPITER
    Body.SATURN: 6,  # SE_SATURN
    Body.URANUS: 7,  # SE_URANUS
    Body.NEPTUNE: 8,  # SE_NEPTUNE
    Body.PLUTO: 9,  # SE_PLUTO
    Body.NORTH_NODE: 11,  # SE_TRUE_NODE
}


class Sign(str, Enum):
    """Zodiac signs in order from 0 degrees Aries."""

    ARIES = "Aries"
    TAURUS = "Taurus"
    GEMINI = "Gemini"
    CANCER = "Cancer"
    LEO = "Leo"
    VIRGO = "Virgo"
    LIBRA = "Libra"
    SCORPIO = "Scorpio"
    SAGITTARIUS = "Sagittarius"
    CAPRICORN = "Capricorn"
    AQUARIUS = "Aquarius"
    PISCES = "Pisces"


SIGNS: tuple[Sign, ...] = tuple(Sign)


class Element(str, Enum):
    FIRE = "Fire"
    EARTH = "Earth"
    AIR = "Air"
    WATER = "Water"


SIGN_ELEMENTS: dict[Sign, Element] = {
    sign: (Element.FIRE, Element.EARTH, Element.AIR, Element.WATER)[index % 4]
    for index, sign in enumerate(SIGNS)
}


class AspectType(str, Enum):
    CONJUNCTION = "Conjunction"
    OPPOSITION = "Opposition"
    TRINE = "Trine"
    SQUARE = "Square"
    SEXTILE = "Sextile"
    QUINCUNX = "Quincunx"

    @property
    def angle(self) -> float:
        return ASPECT_ANGLES[self]

    @property
    def orb(self) -> float:
        return ASPECT_ORBS[self]


# Aspect definitions: type -> exact angle
ASPECT_ANGLES: dict[AspectType, float] = {
    AspectType.CONJUNCTION: 0.0,
    AspectType.OPPOSITION: 180.0,
    AspectType.TRINE: 120.0,
    AspectType.SQUARE: 90.0,
    AspectType.SEXTILE: 60.0,
    AspectType.QUINCUNX: 150.0,
}

# Maximum allowed orb per aspect type (in degrees)
ASPECT_ORBS: dict[AspectType, float] = {
    AspectType.CONJUNCTION: 8.0,
    AspectType.OPPOSITION: 8.0,
    AspectType.TRINE: 8.0,
    AspectType.SQUARE: 8.0,
    AspectType.SEXTILE: 6.0,
    AspectType.QUINCUNX: 3.0,
}

# First match wins when scanning a pair
ASPECT_PRIORITY: tuple[AspectType, ...] = (
    AspectType.CONJUNCTION,
    AspectType.OPPOSITION,
    AspectType.TRINE,
    AspectType.SQUARE,
    AspectType.SEXTILE,
    AspectType.QUINCUNX,
)

BENEFICIAL_ASPECTS = frozenset({AspectType.TRINE, AspectType.SEXTILE})
CHALLENGING_ASPECTS = frozenset({AspectType.SQUARE, AspectType.OPPOSITION})

ASPECT_SYMBOLS: dict[AspectType, str] = {
    AspectType.CONJUNCTION: "☌",
    AspectType.OPPOSITION: "☍",
    AspectType.TRINE: "△",
    AspectType.SQUARE: "□",
    AspectType.SEXTILE: "⚹",
    AspectType.QUINCUNX: "⚻",
}

HOUSE_COUNT = 12

HOUSE_THEMES: tuple[str, ...] = (
    "Self",
    "Resources",
    "Communication",
    "Home",
    "Creativity",
    "Service",
    "Partnership",
    "Transformation",
    "Philosophy",
    "Career",
    "Community",
    "Spirituality",
)


def ordinal(number: int) -> str:
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def house_label(number: int) -> str:
    """Fixed label for a 1-based house number, e.g. ``1st House (Self)``."""
    return f"{ordinal(number)} House ({HOUSE_THEMES[number - 1]})"


def round_degrees(value: float, places: int = 2) -> float:
    """Round half away from zero."""
    factor = 10**places
    return math.copysign(math.floor(abs(value) * factor + 0.5) / factor, value)


def normalize_longitude(longitude: float) -> float:
    """Wrap a finite longitude into [0, 360)."""
    longitude = longitude % 360.0
    # Tiny negatives wrap to exactly 360.0
    return 0.0 if longitude >= 360.0 else longitude


def longitude_to_sign(longitude: float) -> tuple[Sign, float]:
    """Convert ecliptic longitude to sign and degree within sign.

    A longitude on an exact multiple of 30 belongs to the sign starting there.
    A degree that rounds up to 30.00 is carried into the next sign, so the
    degree is always in [0, 30). Non-finite input resolves to 0 Aries rather
    than raising.
    """
    if not math.isfinite(longitude):
        return Sign.ARIES, 0.0
    longitude = normalize_longitude(longitude)
    sign_index = int(longitude // 30.0)
    degree = round_degrees(longitude - sign_index * 30.0)
    if degree >= 30.0:
        sign_index = (sign_index + 1) % 12
        degree = 0.0
    return SIGNS[sign_index], degree
