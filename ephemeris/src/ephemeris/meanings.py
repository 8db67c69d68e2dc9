"""Interpretation tables keyed by body, sign, house and aspect type.

Hand-written entries cover the personal and social planets. Every other
combination is composed from the per-body, per-sign and per-house keyword
tables below, so a lookup never falls through to a generic string.
"""

from __future__ import annotations

from ephemeris.bodies import AspectType, Body, Sign

# Keyword phrase per sign, used for personas and composed text
SIGN_STYLES: dict[Sign, str] = {
    Sign.ARIES: "bold leadership and pioneering spirit",
    Sign.TAURUS: "steady determination and appreciation for beauty",
    Sign.GEMINI: "versatile communication and curious exploration",
    Sign.CANCER: "nurturing protection and emotional depth",
    Sign.LEO: "creative self-expression and generous warmth",
    Sign.VIRGO: "practical service and attention to detail",
    Sign.LIBRA: "harmonious balance and diplomatic grace",
    Sign.SCORPIO: "intense transformation and psychic insight",
    Sign.SAGITTARIUS: "adventurous wisdom and philosophical expansion",
    Sign.CAPRICORN: "ambitious structure and responsible achievement",
    Sign.AQUARIUS: "innovative rebellion and humanitarian vision",
    Sign.PISCES: "compassionate dreams and mystical connection",
}

BODY_PRINCIPLES: dict[Body, str] = {
    Body.SUN: "identity and vitality",
    Body.MOON: "emotional security",
    Body.MERCURY: "thinking and communication",
    Body.VENUS: "love and values",
    Body.MARS: "drive and action",
    Body.JUPITER: "growth and faith",
    Body.SATURN: "discipline and structure",
    Body.URANUS: "innovation and sudden change",
    Body.NEPTUNE: "imagination and spiritual longing",
    Body.PLUTO: "transformation and hidden power",
    Body.NORTH_NODE: "your direction of growth",
}

HOUSE_DOMAINS: dict[int, str] = {
    1: "identity and first impressions",
    2: "money, possessions and self-worth",
    3: "communication, siblings and local life",
    4: "home, family and roots",
    5: "creativity, romance and children",
    6: "daily work, health and routines",
    7: "partnerships and close relationships",
    8: "shared resources, intimacy and deep change",
    9: "higher learning, travel and belief",
    10: "career, reputation and public life",
    11: "friendships, groups and future hopes",
    12: "solitude, the unconscious and spiritual life",
}

SIGN_DESCRIPTIONS: dict[Body, dict[Sign, str]] = {
    Body.SUN: {
        Sign.ARIES: "Leadership, courage, pioneering.",
        Sign.TAURUS: "Stability, beauty, practical building.",
        Sign.GEMINI: "Communication, learning, connecting ideas.",
        Sign.CANCER: "Nurturing, protection, emotional wisdom.",
        Sign.LEO: "Creative self-expression, performance.",
        Sign.VIRGO: "Service, healing, perfecting craft.",
        Sign.LIBRA: "Harmony, balance, diplomatic beauty.",
        Sign.SCORPIO: "Transformation, depth, life mysteries.",
        Sign.SAGITTARIUS: "Teaching, exploration, expanding horizons.",
        Sign.CAPRICORN: "Structure, achievement, mastery.",
        Sign.AQUARIUS: "Innovation, liberation, humanitarian service.",
        Sign.PISCES: "Spiritual bridging, healing, inspiration.",
    },
    Body.MOON: {
        Sign.ARIES: "Security through action and leadership.",
        Sign.TAURUS: "Security through stability and comfort.",
        Sign.GEMINI: "Security through mental stimulation.",
        Sign.CANCER: "Security through nurturing connection.",
        Sign.LEO: "Security through creative appreciation.",
        Sign.VIRGO: "Security through order and service.",
        Sign.LIBRA: "Security through balanced relationships.",
        Sign.SCORPIO: "Security through emotional depth.",
        Sign.SAGITTARIUS: "Security through adventure and wisdom.",
        Sign.CAPRICORN: "Security through structure and achievement.",
        Sign.AQUARIUS: "Security through friendship and ideals.",
        Sign.PISCES: "Security through spiritual compassion.",
    },
    Body.MERCURY: {
        Sign.ARIES: "Quick, direct thinking and communication.",
        Sign.TAURUS: "Practical, steady thinking and communication.",
        Sign.GEMINI: "Versatile, brilliant communication.",
        Sign.CANCER: "Emotional, intuitive communication.",
        Sign.LEO: "Creative, dramatic communication.",
        Sign.VIRGO: "Analytical, precise communication.",
        Sign.LIBRA: "Diplomatic, harmonious communication.",
        Sign.SCORPIO: "Deep, intense communication.",
        Sign.SAGITTARIUS: "Philosophical, expansive communication.",
        Sign.CAPRICORN: "Strategic, authoritative communication.",
        Sign.AQUARIUS: "Innovative, unique communication.",
        Sign.PISCES: "Intuitive, poetic communication.",
    },
    Body.VENUS: {
        Sign.ARIES: "Bold love, attracted to excitement.",
        Sign.TAURUS: "Steady love, attracted to beauty.",
        Sign.GEMINI: "Varied love, attracted to intelligence.",
        Sign.CANCER: "Deep love, attracted to caring.",
        Sign.LEO: "Dramatic love, attracted to creativity.",
        Sign.VIRGO: "Practical love, attracted to competence.",
        Sign.LIBRA: "Harmonious love, attracted to balance.",
        Sign.SCORPIO: "Intense love, attracted to depth.",
        Sign.SAGITTARIUS: "Adventurous love, attracted to freedom.",
        Sign.CAPRICORN: "Traditional love, attracted to stability.",
        Sign.AQUARIUS: "Unique love, attracted to ideals.",
        Sign.PISCES: "Compassionate love, attracted to spirituality.",
    },
    Body.MARS: {
        Sign.ARIES: "Direct, courageous action.",
        Sign.TAURUS: "Patient, determined action.",
        Sign.GEMINI: "Versatile, adaptable action.",
        Sign.CANCER: "Intuitive, protective action.",
        Sign.LEO: "Confident, creative action.",
        Sign.VIRGO: "Precise, skillful action.",
        Sign.LIBRA: "Diplomatic, cooperative action.",
        Sign.SCORPIO: "Intense, transformative action.",
        Sign.SAGITTARIUS: "Enthusiastic, philosophical action.",
        Sign.CAPRICORN: "Strategic, ambitious action.",
        Sign.AQUARIUS: "Innovative, rebellious action.",
        Sign.PISCES: "Intuitive, compassionate action.",
    },
    Body.JUPITER: {
        Sign.ARIES: "Growth through leadership and adventure.",
        Sign.TAURUS: "Growth through resources and beauty.",
        Sign.GEMINI: "Growth through learning and teaching.",
        Sign.CANCER: "Growth through family and nurturing.",
        Sign.LEO: "Growth through creative expression.",
        Sign.VIRGO: "Growth through service and skills.",
        Sign.LIBRA: "Growth through relationships and art.",
        Sign.SCORPIO: "Growth through transformation and research.",
        Sign.SAGITTARIUS: "Growth through philosophy and travel.",
        Sign.CAPRICORN: "Growth through achievement and structure.",
        Sign.AQUARIUS: "Growth through innovation and causes.",
        Sign.PISCES: "Growth through spirituality and art.",
    },
    Body.SATURN: {
        Sign.ARIES: "Discipline through patience and strategy.",
        Sign.TAURUS: "Discipline through lasting foundations.",
        Sign.GEMINI: "Discipline through structured learning.",
        Sign.CANCER: "Discipline through emotional maturity.",
        Sign.LEO: "Discipline through authentic expression.",
        Sign.VIRGO: "Discipline through skill perfection.",
        Sign.LIBRA: "Discipline through balanced judgment.",
        Sign.SCORPIO: "Discipline through emotional control.",
        Sign.SAGITTARIUS: "Discipline through focused wisdom.",
        Sign.CAPRICORN: "Discipline through ambitious achievement.",
        Sign.AQUARIUS: "Discipline through structured innovation.",
        Sign.PISCES: "Discipline through spiritual practice.",
    },
}

PLANET_IN_HOUSE: dict[Body, dict[int, str]] = {
    Body.SUN: {
        1: "Strong sense of self, natural leadership, identity-focused life path.",
        2: "Values and self-worth central to identity, focus on resources and stability.",
        3: "Communication and learning are key to self-expression, sibling relationships important.",
        4: "Home and family central to identity, strong connection to roots and private life.",
        5: "Creative self-expression vital, children and romance prominent life themes.",
        6: "Daily work and health routines central to identity, service-oriented approach.",
        7: "Partnerships crucial to self-discovery, identity developed through relationships.",
        8: "Transformation and shared resources key, drawn to psychology and deep mysteries.",
        9: "Higher learning and travel essential, philosophical and teaching nature.",
        10: "Career and public recognition central, natural authority and reputation focus.",
        11: "Friendships and group activities vital, humanitarian goals and social causes.",
        12: "Spiritual development key, hidden talents, may work behind the scenes.",
    },
    Body.MOON: {
        1: "Emotions strongly influence identity, intuitive and nurturing public presence.",
        2: "Emotional security tied to material stability, comfort needs prominent.",
        3: "Emotional communication, protective of siblings, mood affects thinking.",
        4: "Strong family bonds, emotional foundation at home, protective instincts.",
        5: "Emotional creativity, nurturing toward children, dramatic emotional expression.",
        6: "Emotions affect daily routines, caring approach to work and health.",
        7: "Emotional partnerships, seeking nurturing relationships, protective of partners.",
        8: "Deep emotional transformations, psychic sensitivity, shared emotional resources.",
        9: "Emotional connection to beliefs, intuitive learning, protective of ideals.",
        10: "Public image tied to nurturing qualities, emotional approach to career.",
        11: "Emotional friendships, protective of groups, maternal role in organizations.",
        12: "Hidden emotional depths, spiritual sensitivity, subconscious emotional patterns.",
    },
    Body.MERCURY: {
        1: "Communication central to identity, quick-thinking, mentally active presence.",
        2: "Practical thinking about resources, communication affects earning ability.",
        3: "Natural communicator, strong sibling bonds, local community connections.",
        4: "Family communication, thinking influenced by roots, intellectual home environment.",
        5: "Creative communication, teaching children, playful intellectual expression.",
        6: "Analytical approach to work, health communication, detailed daily thinking.",
        7: "Partnership communication focus, thinking influenced by relationships.",
        8: "Deep research abilities, transformative communication, psychological insights.",
        9: "Higher learning focus, foreign connections, philosophical communication.",
        10: "Professional communication, public speaking, reputation through intellect.",
        11: "Group communication, friendship through shared ideas, social networking.",
        12: "Intuitive thinking, hidden knowledge, subconscious communication patterns.",
    },
    Body.VENUS: {
        1: "Charm and beauty central to identity, attractive personality, artistic nature.",
        2: "Values luxury and comfort, artistic talents may generate income.",
        3: "Harmonious communication, beauty in local environment, artistic siblings.",
        4: "Beautiful home important, family harmony valued, artistic domestic life.",
        5: "Romance and creativity emphasized, love of entertainment and children.",
        6: "Harmony in work environment, service through beauty, health through pleasure.",
        7: "Partnership and marriage emphasized, harmony-seeking in relationships.",
        8: "Intense attractions, shared aesthetic values, transformation through relationships.",
        9: "Love of foreign cultures, philosophical approach to love, artistic beliefs.",
        10: "Career in arts or beauty, public appreciation, harmonious reputation.",
        11: "Friendship through shared aesthetics, social harmony, group creative projects.",
        12: "Hidden artistic talents, spiritual love, compassionate service.",
    },
    Body.MARS: {
        1: "Assertive identity, energetic presence, direct action, leadership qualities.",
        2: "Energetic pursuit of resources, assertive about values, competitive earning.",
        3: "Forceful communication, sibling rivalry, energetic local activities.",
        4: "Protective of family, energetic home life, potential domestic conflicts.",
        5: "Competitive creativity, passionate romance, energetic with children.",
        6: "Energetic work approach, health through activity, potential workplace conflicts.",
        7: "Assertive in partnerships, may attract conflict, needs independent partner.",
        8: "Intense transformations, strong desires, assertive about shared resources.",
        9: "Passionate beliefs, energetic about higher learning, may fight for ideals.",
        10: "Ambitious career drive, competitive reputation, leadership in public life.",
        11: "Energetic friendships, group leadership, fighting for social causes.",
        12: "Hidden anger patterns, spiritual warrior, behind-the-scenes action.",
    },
    Body.JUPITER: {
        1: "Optimistic identity, expansive presence, natural teaching ability, lucky.",
        2: "Generous with resources, optimistic about money, expansive value system.",
        3: "Expansive communication, philosophical siblings, broad local connections.",
        4: "Large family influence, optimistic home life, expansive domestic situation.",
        5: "Creative abundance, generous with children, expansive romantic approach.",
        6: "Optimistic work approach, health through expansion, generous service.",
        7: "Expansive partnerships, optimistic about relationships, may attract teachers.",
        8: "Transformational growth, optimistic about change, expansive shared resources.",
        9: "Natural higher learning, foreign travel likely, expansive belief system.",
        10: "Career growth potential, optimistic reputation, teaching or counseling career.",
        11: "Expansive friendships, optimistic group involvement, humanitarian leadership.",
        12: "Spiritual growth, hidden wisdom, compassionate service, intuitive expansion.",
    },
    Body.SATURN: {
        1: "Serious identity, mature presence, late bloomer, disciplined self-development.",
        2: "Cautious with resources, delayed financial success, conservative values.",
        3: "Structured communication, serious siblings, disciplined learning approach.",
        4: "Serious family responsibilities, structured home, potential family restrictions.",
        5: "Disciplined creativity, serious about children, structured approach to romance.",
        6: "Structured work routine, health disciplines, serious service orientation.",
        7: "Serious partnerships, committed relationships, mature partner attraction.",
        8: "Deep transformational work, serious about shared resources, psychological discipline.",
        9: "Structured beliefs, serious higher learning, disciplined philosophical approach.",
        10: "Ambitious career focus, serious reputation building, authority development.",
        11: "Serious friendships, structured group involvement, disciplined social goals.",
        12: "Spiritual discipline, hidden restrictions, serious inner work required.",
    },
}

GENERAL_ASPECT_MEANINGS: dict[AspectType, str] = {
    AspectType.CONJUNCTION: "These energies blend and amplify each other.",
    AspectType.OPPOSITION: "These energies seek balance through conscious integration.",
    AspectType.TRINE: "Natural talent and easy flow between these areas.",
    AspectType.SQUARE: "Dynamic tension that drives growth and achievement.",
    AspectType.SEXTILE: "Opportunities for cooperation and skill development.",
    AspectType.QUINCUNX: "Requires adjustment and conscious effort to integrate.",
}

ASPECT_NATURES: dict[AspectType, str] = {
    AspectType.CONJUNCTION: "unified",
    AspectType.OPPOSITION: "polarizing",
    AspectType.TRINE: "harmonious",
    AspectType.SQUARE: "dynamic",
    AspectType.SEXTILE: "supportive",
    AspectType.QUINCUNX: "adjusting",
}

# Keyed by the pair in chart order
ASPECT_INTERPRETATIONS: dict[tuple[Body, Body], dict[AspectType, str]] = {
    (Body.SUN, Body.MOON): {
        AspectType.CONJUNCTION: "Unified conscious and unconscious selves. Emotions and identity work as one, creating inner harmony but potential blind spots.",
        AspectType.OPPOSITION: "Tension between conscious goals and emotional needs. Must learn to balance public image with private feelings.",
        AspectType.TRINE: "Natural ease between ego and emotions. Confident expression of feelings, leadership through emotional intelligence.",
        AspectType.SQUARE: "Internal conflict between what you want and what you need. Growth through integrating willpower with emotional wisdom.",
        AspectType.SEXTILE: "Opportunities to align identity with emotional truth. Creative self-expression through emotional awareness.",
    },
    (Body.SUN, Body.MERCURY): {
        AspectType.CONJUNCTION: "Mind and identity closely linked. Strong self-expression through communication, but may struggle with objectivity.",
        AspectType.OPPOSITION: "Tension between ego and rational thought. Must balance self-expression with listening to others.",
        AspectType.TRINE: "Natural ease between identity and communication. Confident speaking and writing abilities.",
        AspectType.SQUARE: "Mental restlessness drives growth. May struggle with pride in ideas but develops strong communication skills.",
        AspectType.SEXTILE: "Opportunities for intellectual self-expression. Good at explaining personal vision to others.",
    },
    (Body.SUN, Body.VENUS): {
        AspectType.CONJUNCTION: "Charm and creativity central to identity. Natural artistic ability, but may prioritize being liked over authenticity.",
        AspectType.OPPOSITION: "Tension between self-expression and harmony. Must balance personal needs with relationship dynamics.",
        AspectType.TRINE: "Natural artistic and social gifts. Easy expression of beauty and charm in life.",
        AspectType.SQUARE: "Creative tension drives artistic growth. May struggle with vanity but develops refined aesthetic sense.",
        AspectType.SEXTILE: "Opportunities for creative self-expression. Social skills enhance personal goals.",
    },
    (Body.SUN, Body.MARS): {
        AspectType.CONJUNCTION: "Powerful drive and assertion. High energy and leadership, but may be impatient or aggressive.",
        AspectType.OPPOSITION: "Tension between ego and action. Must learn when to assert versus when to yield.",
        AspectType.TRINE: "Natural courage and leadership ability. Confident action aligned with personal goals.",
        AspectType.SQUARE: "Dynamic tension fuels achievement. May struggle with anger but develops strong willpower.",
        AspectType.SEXTILE: "Opportunities for confident action. Good at initiating projects that reflect personal vision.",
    },
    (Body.MOON, Body.MERCURY): {
        AspectType.CONJUNCTION: "Emotions and thoughts closely linked. Intuitive communication, but may be subjective in thinking.",
        AspectType.OPPOSITION: "Tension between feelings and logic. Must balance emotional responses with rational analysis.",
        AspectType.TRINE: "Natural emotional intelligence. Easy expression of feelings through communication.",
        AspectType.SQUARE: "Emotional restlessness drives mental growth. May overthink feelings but develops psychological insight.",
        AspectType.SEXTILE: "Opportunities for emotional communication. Good at expressing feelings clearly.",
    },
    (Body.MOON, Body.VENUS): {
        AspectType.CONJUNCTION: "Emotional harmony and artistic sensitivity. Natural grace, but may avoid conflict.",
        AspectType.OPPOSITION: "Tension between emotional needs and social harmony. Must balance caring with boundaries.",
        AspectType.TRINE: "Natural emotional charm and artistic ability. Easy expression of love and beauty.",
        AspectType.SQUARE: "Emotional desires create growth through relationship challenges. Learns to balance giving and receiving.",
        AspectType.SEXTILE: "Opportunities for emotional creativity. Social skills support emotional needs.",
    },
    (Body.MERCURY, Body.VENUS): {
        AspectType.CONJUNCTION: "Beautiful communication and artistic thinking. Natural charm in speech, diplomatic abilities.",
        AspectType.OPPOSITION: "Tension between logic and aesthetics. Must balance practical thinking with social harmony.",
        AspectType.TRINE: "Natural verbal and artistic talents. Easy expression of ideas in beautiful ways.",
        AspectType.SQUARE: "Creative tension in communication. May struggle with being too agreeable but develops refined expression.",
        AspectType.SEXTILE: "Opportunities for artistic communication. Social connections support intellectual goals.",
    },
    (Body.JUPITER, Body.SATURN): {
        AspectType.CONJUNCTION: "Balance between expansion and limitation. Realistic optimism, builds lasting growth.",
        AspectType.OPPOSITION: "Tension between growth and restriction. Must balance opportunity with responsibility.",
        AspectType.TRINE: "Natural wisdom and practical growth. Patient expansion with solid foundations.",
        AspectType.SQUARE: "Growth through overcoming limitations. May struggle with timing but develops sustainable success.",
        AspectType.SEXTILE: "Opportunities for structured growth. Good at building realistic long-term plans.",
    },
    (Body.URANUS, Body.PLUTO): {
        AspectType.CONJUNCTION: "Revolutionary transformation abilities. Generational influence toward radical change.",
        AspectType.OPPOSITION: "Tension between innovation and deep transformation. Must balance progress with profound change.",
        AspectType.TRINE: "Natural ability to transform through innovation. Easy integration of change and progress.",
        AspectType.SQUARE: "Dynamic tension drives societal change. Part of generational challenges and breakthroughs.",
        AspectType.SEXTILE: "Opportunities for evolutionary change. Good at combining innovation with transformation.",
    },
}


def sign_personality(sign: Sign) -> str:
    return SIGN_STYLES[sign]


def sign_description(body: Body, sign: Sign) -> str:
    """Short description of a body placed in a sign."""
    table = SIGN_DESCRIPTIONS.get(body)
    if table is not None:
        return table[sign]
    return f"{BODY_PRINCIPLES[body].capitalize()} expressed through {SIGN_STYLES[sign]}."


def planet_in_house(body: Body, house: int) -> str:
    """Short description of a body placed in a 1-based house."""
    table = PLANET_IN_HOUSE.get(body)
    if table is not None:
        return table[house]
    return f"{BODY_PRINCIPLES[body].capitalize()} focused on {HOUSE_DOMAINS[house]}."


def aspect_interpretation(aspect_type: AspectType, body1: Body, body2: Body) -> str:
    """Interpretation for an aspect; the pair may be given in either order."""
    for key in ((body1, body2), (body2, body1)):
        text = ASPECT_INTERPRETATIONS.get(key, {}).get(aspect_type)
        if text:
            return text
    nature = ASPECT_NATURES[aspect_type]
    return (
        f"{nature.capitalize()} energy between {body1.value.lower()} and {body2.value.lower()}. "
        f"{GENERAL_ASPECT_MEANINGS[aspect_type]}"
    )
