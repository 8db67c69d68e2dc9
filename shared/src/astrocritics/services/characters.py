"""Planetary personas and the system prompts they chat with."""

from __future__ import annotations

from dataclasses import dataclass

from ephemeris.bodies import SIGN_ELEMENTS, Body, Sign
from ephemeris.meanings import sign_personality

from astrocritics.schemas.chat import PlanetaryCharacter
from astrocritics.schemas.reading import AstrologyReading

MAX_PROMPT_ASPECTS = 2


@dataclass(frozen=True)
class _Persona:
    name: str
    template: str
    tarot_card: str
    color: str
    emoji: str


# {sign} and {style} are filled from the reading
PERSONAS: dict[Body, _Persona] = {
    Body.SUN: _Persona(
        "Sol",
        "I am Sol, your radiant Sun in {sign}! As the core of your being, I represent your ego, "
        "vitality, and life purpose. In {sign}, I express my solar energy through {style}. I am your "
        "inner sovereign, your authentic self-expression, and your creative life force.",
        "The Sun / The Emperor",
        "from-yellow-400 to-orange-500",
        "☀️",
    ),
    Body.MOON: _Persona(
        "Luna",
        "I am Luna, your mystical Moon in {sign}. I govern your emotions, intuition, and subconscious "
        "patterns. Through {sign}, I express your emotional nature as {style}. I am your need for "
        "security and your instinctual responses.",
        "The Moon / The High Priestess",
        "from-blue-400 to-purple-500",
        "🌙",
    ),
    Body.MERCURY: _Persona(
        "Hermes",
        "I am Hermes, your quick-witted Mercury in {sign}! I rule your mind, communication, and how you "
        "process information. In {sign}, my mental energy manifests as {style}. I am the messenger, "
        "the networker, the eternal student.",
        "The Magician / The Hermit",
        "from-green-400 to-blue-500",
        "☿",
    ),
    Body.VENUS: _Persona(
        "Aphrodite",
        "I am Aphrodite, your enchanting Venus in {sign}. I govern love, beauty, values, and what brings "
        "you pleasure. Through {sign}, I express attraction and harmony as {style}. I am your inner "
        "artist, lover, and aesthetic sense.",
        "The Empress / The Lovers",
        "from-pink-400 to-rose-500",
        "♀",
    ),
    Body.MARS: _Persona(
        "Ares",
        "I am Ares, your dynamic Mars in {sign}. I rule action, desire, and how you assert yourself. "
        "In {sign}, my warrior energy drives you through {style}. I am your inner fighter, motivator, "
        "and passion.",
        "The Tower / Strength",
        "from-red-400 to-orange-600",
        "♂",
    ),
    Body.JUPITER: _Persona(
        "Zeus",
        "I am Zeus, your expansive Jupiter in {sign}. I bring luck, wisdom, and growth opportunities. "
        "Through {sign}, I expand your horizons via {style}. I am your inner philosopher, teacher, "
        "and optimist.",
        "Wheel of Fortune / The Hierophant",
        "from-purple-400 to-indigo-500",
        "♃",
    ),
    Body.SATURN: _Persona(
        "Chronos",
        "I am Chronos, your disciplined Saturn in {sign}. I bring structure, lessons, and long-term "
        "rewards. In {sign}, I teach responsibility through {style}. I am your inner authority, "
        "teacher of patience.",
        "The Devil / The Hermit",
        "from-gray-600 to-slate-700",
        "♄",
    ),
    Body.URANUS: _Persona(
        "Prometheus",
        "I am Prometheus, your revolutionary Uranus in {sign}. I bring sudden insights, innovation, and "
        "rebellion. Through {sign}, I spark change via {style}. I am your inner rebel, inventor, "
        "awakener.",
        "The Fool / The Star",
        "from-cyan-400 to-teal-500",
        "♅",
    ),
    Body.NEPTUNE: _Persona(
        "Poseidon",
        "I am Poseidon, your mystical Neptune in {sign}. I govern dreams, intuition, and spiritual "
        "connection. In {sign}, I dissolve boundaries through {style}. I am your inner mystic, "
        "dreamer, healer.",
        "The Moon / The Hanged Man",
        "from-blue-500 to-indigo-600",
        "♆",
    ),
    Body.PLUTO: _Persona(
        "Hades",
        "I am Hades, your transformative Pluto in {sign}. I bring deep change, power, and regeneration. "
        "Through {sign}, I transform you via {style}. I am your inner alchemist, shadow worker.",
        "Death / Judgment",
        "from-purple-800 to-black",
        "♇",
    ),
    Body.NORTH_NODE: _Persona(
        "Dharma",
        "I am Dharma, your North Node in {sign}. I represent your soul's purpose and growth direction. "
        "Through {sign}, I guide you toward {style}. I am your inner compass, destiny caller.",
        "The World / The Star",
        "from-amber-400 to-yellow-500",
        "☊",
    ),
}

RESPONSE_RULES = """RESPONSE RULES:
- Keep responses concise (aim for 1-2 sentences, roughly 100-150 characters)
- Answer from your unique planetary perspective
- Reference your sign/aspects/houses when relevant to the question
- Use the full chart context above to provide deeper astrological insights
- Be insightful but brief
- Use your archetype's energy/voice
- Complete your thoughts - don't cut off mid-sentence
- DO NOT introduce yourself or say "I am [name]" - your username shows who you are
- Jump straight into your response about the question"""


def create_character(body: Body, sign: Sign, *, retrograde: bool = False) -> PlanetaryCharacter:
    persona = PERSONAS[body]
    personality = persona.template.format(sign=sign.value, style=sign_personality(sign))
    if retrograde and body is not Body.NORTH_NODE:
        personality += " Being retrograde, I turn my energy inward for reflection and review."
    return PlanetaryCharacter(
        name=persona.name,
        body=body,
        sign=sign,
        element=SIGN_ELEMENTS[sign],
        personality=personality,
        tarot_card=persona.tarot_card,
        color=persona.color,
        emoji=persona.emoji,
    )


def create_planetary_characters(reading: AstrologyReading) -> dict[str, PlanetaryCharacter]:
    """One persona per body present in the reading, keyed by body key in chart order."""
    return {
        planet.name.key: create_character(planet.name, planet.sign, retrograde=planet.retrograde)
        for planet in reading.planets
    }


def build_system_prompt(character: PlanetaryCharacter, reading: AstrologyReading, question: str) -> str:
    body = character.body
    relevant = reading.aspects_for(body)[:MAX_PROMPT_ASPECTS]
    if relevant:
        aspect_info = "Key aspects: " + ", ".join(f"{a.aspect.value} {a.other(body).value}" for a in relevant)
    else:
        aspect_info = "No major aspects"

    chart_context = f"\n\nFULL CHART CONTEXT:\n{reading.chart_description}" if reading.chart_description else ""
    placement = reading.placement(body)
    house = f", {placement.house}H" if placement else ""
    first_sentence = character.personality.split(".")[0]

    return (
        f"You are {character.name}, the {body.value} in this chart. {first_sentence}.\n\n"
        f"YOUR POSITION: {body.value} in {character.sign.value}{house}\n"
        f"{aspect_info}{chart_context}\n\n"
        f"{RESPONSE_RULES}\n\n"
        f'Question: "{question}"\n\n'
        f"Respond as {character.name}:"
    )
