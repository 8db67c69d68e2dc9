"""Default, table-driven commentary for a computed reading."""

from __future__ import annotations

from collections import Counter

from astrocritics.schemas.chat import Explanation
from astrocritics.schemas.reading import Aspect, AstrologyReading

from ephemeris.bodies import (
    ASPECT_SYMBOLS,
    BENEFICIAL_ASPECTS,
    CHALLENGING_ASPECTS,
    HOUSE_THEMES,
    AspectType,
    Body,
    longitude_to_sign,
    ordinal,
)
from ephemeris.meanings import aspect_interpretation, planet_in_house, sign_description

TIGHT_ORB = 2.0
MAX_LISTED_ASPECTS = 5

PATTERN_DESCRIPTIONS: dict[str, str] = {
    "flowing": "you have natural talents and easy energy flow, but may need to push yourself to achieve your full potential",
    "dynamic": "you have inner tensions that drive achievement and growth, requiring conscious work to integrate different parts of yourself",
    "balanced": "you have a good mix of natural talents and growth challenges, creating a balanced but complex personality",
}


def generate_chart_explanations(reading: AstrologyReading) -> list[Explanation]:
    """Three commentary sections: placements, houses and aspects."""
    return [
        Explanation(
            id="planetary-positions",
            title="Your Planetary Blueprint",
            content=planetary_positions_explanation(reading),
        ),
        Explanation(
            id="house-system",
            title="Your Life Areas & Houses",
            content=house_system_explanation(reading),
        ),
        Explanation(
            id="major-aspects",
            title="Your Planetary Relationships",
            content=aspects_explanation(reading),
        ),
    ]


def _placement_line(reading: AstrologyReading, body: Body, *, mark_retrograde: bool = True) -> str:
    planet = reading.placement(body)
    if planet is None:
        return f"{body.value} - position unavailable."
    retro = " (Rx)" if mark_retrograde and planet.retrograde else ""
    line = f"{body.value} {planet.sign.value} {planet.degree:.1f}°{retro} - {sign_description(body, planet.sign)}"
    if body is Body.MERCURY and planet.retrograde:
        line += " Retrograde brings deep, reflective thinking."
    return line


def planetary_positions_explanation(reading: AstrologyReading) -> str:
    ascendant_sign, _ = longitude_to_sign(reading.ascendant)
    outer = []
    for body in (Body.URANUS, Body.NEPTUNE, Body.PLUTO):
        planet = reading.placement(body)
        outer.append(f"{body.value} {planet.sign.value if planet else 'unknown'}")

    sections = [
        "**Core Identity**",
        _placement_line(reading, Body.SUN, mark_retrograde=False),
        _placement_line(reading, Body.MOON, mark_retrograde=False),
        f"Ascendant {ascendant_sign.value} - How you appear to others and approach new situations.",
        "**Communication & Relationships**",
        _placement_line(reading, Body.MERCURY),
        _placement_line(reading, Body.VENUS),
        _placement_line(reading, Body.MARS, mark_retrograde=False),
        "**Growth & Structure**",
        _placement_line(reading, Body.JUPITER, mark_retrograde=False),
        _placement_line(reading, Body.SATURN, mark_retrograde=False),
        "**Outer Planets**",
        f"{', '.join(outer)} - Generational influences shaping innovation, spirituality, "
        "and transformation in your life.",
    ]
    return "\n\n".join(sections)


def emphasized_houses(reading: AstrologyReading) -> list[tuple[int, int]]:
    """Houses holding two or more bodies, as ``(house, count)`` in house order."""
    counts = Counter(planet.house for planet in reading.planets)
    return sorted((house, count) for house, count in counts.items() if count >= 2)


def house_patterns(reading: AstrologyReading) -> str:
    emphasized = emphasized_houses(reading)
    if not emphasized:
        return (
            "Your planets are evenly distributed across your houses, suggesting a well-rounded "
            "life experience with attention to many different areas."
        )
    listed = ", ".join(
        f"{ordinal(house)} ({HOUSE_THEMES[house - 1]}) house ({count} planets)" for house, count in emphasized
    )
    return (
        f"Your chart shows emphasis in the {listed}, suggesting these life areas will be "
        "particularly important themes in your life journey."
    )


def house_system_explanation(reading: AstrologyReading) -> str:
    ascendant_sign, _ = longitude_to_sign(reading.ascendant)
    midheaven_sign, _ = longitude_to_sign(reading.midheaven)
    cusps = "\n".join(
        f"{house.number}H {HOUSE_THEMES[house.number - 1]}: {house.sign.value} {house.degree:.1f}°"
        for house in reading.houses
    )
    placements = "\n".join(
        f"{planet.name.value} in {planet.house}H: {planet_in_house(planet.name, planet.house)}"
        for planet in reading.planets
    )
    return (
        "**House System Layout**\n\n"
        f"1st House (Self): {ascendant_sign.value} - Your identity and approach to life\n"
        f"10th House (Career): {midheaven_sign.value} - Your public role and reputation\n\n"
        f"**All House Cusps**\n{cusps}\n\n"
        f"**Planetary House Placements**\n{placements}\n\n"
        f"**Pattern Analysis**\n{house_patterns(reading)}\n\n"
        "Houses show where your planetary energies manifest in daily life. The signs on each "
        "house cusp determine your approach to that life area."
    )


def overall_aspect_pattern(aspects: list[Aspect]) -> str:
    beneficial = sum(1 for a in aspects if a.aspect in BENEFICIAL_ASPECTS)
    challenging = sum(1 for a in aspects if a.aspect in CHALLENGING_ASPECTS)
    if beneficial > challenging * 1.5:
        return "flowing"
    if challenging > beneficial * 1.5:
        return "dynamic"
    return "balanced"


def _aspect_line(aspect: Aspect, *, with_orb: bool = False) -> str:
    orb = f" ({aspect.orb:.1f}°)" if with_orb else ""
    return (
        f"{aspect.planet1.value} {ASPECT_SYMBOLS[aspect.aspect]} {aspect.planet2.value}{orb} - "
        f"{aspect_interpretation(aspect.aspect, aspect.planet1, aspect.planet2)}"
    )


def aspects_explanation(reading: AstrologyReading) -> str:
    aspects = reading.aspects
    if not aspects:
        return "Few major aspects. Planetary energies operate independently."

    # Aspects arrive sorted by orb, so each slice lists the tightest first
    tight = [a for a in aspects if a.orb < TIGHT_ORB]
    beneficial = [a for a in aspects if a.aspect in BENEFICIAL_ASPECTS][:MAX_LISTED_ASPECTS]
    challenging = [a for a in aspects if a.aspect in CHALLENGING_ASPECTS][:MAX_LISTED_ASPECTS]
    conjunctions = [a for a in aspects if a.aspect is AspectType.CONJUNCTION]
    pattern = overall_aspect_pattern(aspects)

    def _block(title: str, items: list[Aspect], empty: str, *, with_orb: bool = False) -> str:
        body = "\n".join(_aspect_line(a, with_orb=with_orb) for a in items) if items else empty
        return f"**{title}**\n{body}"

    return "\n\n".join(
        [
            _block(
                "Tight Aspects (Under 2°)",
                tight,
                "None. Planetary energies operate with independence.",
                with_orb=True,
            ),
            _block(
                "Beneficial Aspects (Natural Talents)",
                beneficial,
                "Few flowing aspects. Integration requires conscious effort.",
            ),
            _block(
                "Dynamic Aspects (Growth Challenges)",
                challenging,
                "Few challenging aspects. More harmonious but less driven.",
            ),
            _block(
                "Conjunctions (Blended Energies)",
                conjunctions,
                "No major conjunctions. Planetary energies remain distinct.",
            ),
            f"**Overall Pattern: {pattern.upper()}**\n{PATTERN_DESCRIPTIONS[pattern]}",
        ]
    )
