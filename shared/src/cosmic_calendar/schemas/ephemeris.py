"""Pydantic schemas and enumerations for ephemeris data."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, computed_field


class LifeDomain(StrEnum):
    """Life area used to partition scoring."""

    RELATIONSHIPS = "Relationships"
    CAREER = "Career"
    HEALTH = "Health"

    @property
    def description(self) -> str:
        return _DOMAIN_DESCRIPTIONS[self]


class Planet(StrEnum):
    """The ten bodies tracked by the engine, in enumeration order."""

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

    @property
    def symbol(self) -> str:
        return _PLANET_SYMBOLS[self]

    @property
    def can_be_retrograde(self) -> bool:
        return self not in (Planet.SUN, Planet.MOON)

    @property
    def domains(self) -> tuple[LifeDomain, ...]:
        return PLANET_DOMAINS[self]

    @property
    def retrograde_impact(self) -> str:
        return _RETROGRADE_IMPACT.get(self, "")


class Element(StrEnum):
    FIRE = "Fire"
    EARTH = "Earth"
    AIR = "Air"
    WATER = "Water"

    @property
    def description(self) -> str:
        return _ELEMENT_DESCRIPTIONS[self]


class Modality(StrEnum):
    CARDINAL = "Cardinal"
    FIXED = "Fixed"
    MUTABLE = "Mutable"

    @property
    def description(self) -> str:
        return _MODALITY_DESCRIPTIONS[self]


class ZodiacSign(StrEnum):
    """Twelve 30-degree signs starting at Aries (0 degrees)."""

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

    @property
    def symbol(self) -> str:
        return _SIGN_SYMBOLS[self]

    @property
    def element(self) -> Element:
        return SIGN_ELEMENTS[self]

    @property
    def modality(self) -> Modality:
        return SIGN_MODALITIES[self]

    @property
    def ruler(self) -> Planet:
        return SIGN_RULERS[self]

    @classmethod
    def from_degree(cls, degree: float) -> ZodiacSign:
        """Map an ecliptic longitude (any finite value) to its sign."""
        index = int((degree % 360.0) // 30.0) % 12
        return _SIGN_ORDER[index]


class AspectType(StrEnum):
    """Major aspects, in the priority order used for detection."""

    CONJUNCTION = "Conjunction"
    SEXTILE = "Sextile"
    SQUARE = "Square"
    TRINE = "Trine"
    OPPOSITION = "Opposition"

    @property
    def angle(self) -> float:
        return ASPECT_ANGLES[self]

    @property
    def orb(self) -> float:
        return ASPECT_ORBS[self]

    @property
    def score_modifier(self) -> float:
        return ASPECT_SCORE_MODIFIERS[self]

    @property
    def symbol(self) -> str:
        return _ASPECT_SYMBOLS[self]

    @property
    def is_harmonious(self) -> bool:
        return self in HARMONIOUS_ASPECTS


class MoonPhase(StrEnum):
    NEW_MOON = "New Moon"
    WAXING_CRESCENT = "Waxing Crescent"
    FIRST_QUARTER = "First Quarter"
    WAXING_GIBBOUS = "Waxing Gibbous"
    FULL_MOON = "Full Moon"
    WANING_GIBBOUS = "Waning Gibbous"
    LAST_QUARTER = "Last Quarter"
    WANING_CRESCENT = "Waning Crescent"

    @property
    def symbol(self) -> str:
        return _PHASE_SYMBOLS[self]

    @property
    def score_modifier(self) -> float:
        return MOON_PHASE_SCORE_MODIFIERS[self]

    @property
    def description(self) -> str:
        return _PHASE_DESCRIPTIONS[self]

    @property
    def activities(self) -> list[str]:
        return list(_PHASE_ACTIVITIES[self])


# Planet tables

PLANET_DOMAINS: dict[Planet, tuple[LifeDomain, ...]] = {
    Planet.SUN: (LifeDomain.CAREER, LifeDomain.HEALTH),
    Planet.MOON: (LifeDomain.RELATIONSHIPS, LifeDomain.HEALTH),
    Planet.MERCURY: (LifeDomain.CAREER, LifeDomain.RELATIONSHIPS),
    Planet.VENUS: (LifeDomain.RELATIONSHIPS,),
    Planet.MARS: (LifeDomain.CAREER, LifeDomain.HEALTH),
    Planet.JUPITER: (LifeDomain.CAREER, LifeDomain.RELATIONSHIPS),
    Planet.SATURN: (LifeDomain.CAREER,),
    Planet.URANUS: (LifeDomain.CAREER, LifeDomain.RELATIONSHIPS),
    Planet.NEPTUNE: (LifeDomain.RELATIONSHIPS, LifeDomain.HEALTH),
    Planet.PLUTO: (LifeDomain.RELATIONSHIPS, LifeDomain.HEALTH),
}

_PLANET_SYMBOLS: dict[Planet, str] = {
    Planet.SUN: "☉",
    Planet.MOON: "☽",
    Planet.MERCURY: "☿",
    Planet.VENUS: "♀",
    Planet.MARS: "♂",
    Planet.JUPITER: "♃",
    Planet.SATURN: "♄",
    Planet.URANUS: "♅",
    Planet.NEPTUNE: "♆",
    Planet.PLUTO: "♇",
}

_RETROGRADE_IMPACT: dict[Planet, str] = {
    Planet.MERCURY: (
        "Communication delays, technology issues, travel disruptions. "
        "Review and revise rather than start new projects."
    ),
    Planet.VENUS: (
        "Relationship reassessment, financial caution. "
        "Not ideal for major purchases or new relationships."
    ),
    Planet.MARS: "Lower energy, frustration with progress. Focus on completing rather than starting.",
    Planet.JUPITER: "Internal growth and reflection. Good for spiritual development.",
    Planet.SATURN: "Review responsibilities and structures. Lessons from the past resurface.",
    Planet.URANUS: "Internal revolution. Reassess need for freedom and change.",
    Planet.NEPTUNE: "Dreams and illusions clarify. Spiritual insights emerge.",
    Planet.PLUTO: "Deep psychological transformation. Hidden truths emerge.",
}

_DOMAIN_DESCRIPTIONS: dict[LifeDomain, str] = {
    LifeDomain.RELATIONSHIPS: "Love, friendships, and connections",
    LifeDomain.CAREER: "Work, finances, and ambitions",
    LifeDomain.HEALTH: "Wellness, energy, and self-care",
}

# Sign tables

_SIGN_ORDER: list[ZodiacSign] = list(ZodiacSign)

_SIGN_SYMBOLS: dict[ZodiacSign, str] = {
    ZodiacSign.ARIES: "♈",
    ZodiacSign.TAURUS: "♉",
    ZodiacSign.GEMINI: "♊",
    ZodiacSign.CANCER: "♋",
    ZodiacSign.LEO: "♌",
    ZodiacSign.VIRGO: "♍",
    ZodiacSign.LIBRA: "♎",
    ZodiacSign.SCORPIO: "♏",
    ZodiacSign.SAGITTARIUS: "♐",
    ZodiacSign.CAPRICORN: "♑",
    ZodiacSign.AQUARIUS: "♒",
    ZodiacSign.PISCES: "♓",
}

SIGN_ELEMENTS: dict[ZodiacSign, Element] = {
    ZodiacSign.ARIES: Element.FIRE,
    ZodiacSign.TAURUS: Element.EARTH,
    ZodiacSign.GEMINI: Element.AIR,
    ZodiacSign.CANCER: Element.WATER,
    ZodiacSign.LEO: Element.FIRE,
    ZodiacSign.VIRGO: Element.EARTH,
    ZodiacSign.LIBRA: Element.AIR,
    ZodiacSign.SCORPIO: Element.WATER,
    ZodiacSign.SAGITTARIUS: Element.FIRE,
    ZodiacSign.CAPRICORN: Element.EARTH,
    ZodiacSign.AQUARIUS: Element.AIR,
    ZodiacSign.PISCES: Element.WATER,
}

SIGN_MODALITIES: dict[ZodiacSign, Modality] = {
    ZodiacSign.ARIES: Modality.CARDINAL,
    ZodiacSign.TAURUS: Modality.FIXED,
    ZodiacSign.GEMINI: Modality.MUTABLE,
    ZodiacSign.CANCER: Modality.CARDINAL,
    ZodiacSign.LEO: Modality.FIXED,
    ZodiacSign.VIRGO: Modality.MUTABLE,
    ZodiacSign.LIBRA: Modality.CARDINAL,
    ZodiacSign.SCORPIO: Modality.FIXED,
    ZodiacSign.SAGITTARIUS: Modality.MUTABLE,
    ZodiacSign.CAPRICORN: Modality.CARDINAL,
    ZodiacSign.AQUARIUS: Modality.FIXED,
    ZodiacSign.PISCES: Modality.MUTABLE,
}

SIGN_RULERS: dict[ZodiacSign, Planet] = {
    ZodiacSign.ARIES: Planet.MARS,
    ZodiacSign.TAURUS: Planet.VENUS,
    ZodiacSign.GEMINI: Planet.MERCURY,
    ZodiacSign.CANCER: Planet.MOON,
    ZodiacSign.LEO: Planet.SUN,
    ZodiacSign.VIRGO: Planet.MERCURY,
    ZodiacSign.LIBRA: Planet.VENUS,
    ZodiacSign.SCORPIO: Planet.PLUTO,
    ZodiacSign.SAGITTARIUS: Planet.JUPITER,
    ZodiacSign.CAPRICORN: Planet.SATURN,
    ZodiacSign.AQUARIUS: Planet.URANUS,
    ZodiacSign.PISCES: Planet.NEPTUNE,
}

_ELEMENT_DESCRIPTIONS: dict[Element, str] = {
    Element.FIRE: "Passionate, energetic, and action-oriented",
    Element.EARTH: "Practical, grounded, and reliable",
    Element.AIR: "Intellectual, communicative, and social",
    Element.WATER: "Emotional, intuitive, and nurturing",
}

_MODALITY_DESCRIPTIONS: dict[Modality, str] = {
    Modality.CARDINAL: "Initiators and leaders",
    Modality.FIXED: "Stabilizers and maintainers",
    Modality.MUTABLE: "Adapters and communicators",
}

# Aspect tables

ASPECT_ANGLES: dict[AspectType, float] = {
    AspectType.CONJUNCTION: 0.0,
    AspectType.SEXTILE: 60.0,
    AspectType.SQUARE: 90.0,
    AspectType.TRINE: 120.0,
    AspectType.OPPOSITION: 180.0,
}

ASPECT_ORBS: dict[AspectType, float] = {
    AspectType.CONJUNCTION: 8.0,
    AspectType.SEXTILE: 6.0,
    AspectType.SQUARE: 7.0,
    AspectType.TRINE: 8.0,
    AspectType.OPPOSITION: 8.0,
}

ASPECT_SCORE_MODIFIERS: dict[AspectType, float] = {
    AspectType.TRINE: 1.5,
    AspectType.SEXTILE: 1.0,
    AspectType.CONJUNCTION: 0.5,
    AspectType.SQUARE: -1.0,
    AspectType.OPPOSITION: -1.5,
}

HARMONIOUS_ASPECTS = frozenset({AspectType.CONJUNCTION, AspectType.SEXTILE, AspectType.TRINE})

_ASPECT_SYMBOLS: dict[AspectType, str] = {
    AspectType.CONJUNCTION: "☌",
    AspectType.SEXTILE: "⚹",
    AspectType.SQUARE: "□",
    AspectType.TRINE: "△",
    AspectType.OPPOSITION: "☍",
}

# Moon phase tables

MOON_PHASE_SCORE_MODIFIERS: dict[MoonPhase, float] = {
    MoonPhase.FULL_MOON: 1.0,
    MoonPhase.NEW_MOON: 0.5,
    MoonPhase.WAXING_GIBBOUS: 0.25,
    MoonPhase.WAXING_CRESCENT: 0.25,
    MoonPhase.FIRST_QUARTER: 0.0,
    MoonPhase.LAST_QUARTER: 0.0,
    MoonPhase.WANING_GIBBOUS: -0.5,
    MoonPhase.WANING_CRESCENT: -0.5,
}

_PHASE_SYMBOLS: dict[MoonPhase, str] = {
    MoonPhase.NEW_MOON: "🌑",
    MoonPhase.WAXING_CRESCENT: "🌒",
    MoonPhase.FIRST_QUARTER: "🌓",
    MoonPhase.WAXING_GIBBOUS: "🌔",
    MoonPhase.FULL_MOON: "🌕",
    MoonPhase.WANING_GIBBOUS: "🌖",
    MoonPhase.LAST_QUARTER: "🌗",
    MoonPhase.WANING_CRESCENT: "🌘",
}

_PHASE_DESCRIPTIONS: dict[MoonPhase, str] = {
    MoonPhase.NEW_MOON: "Time for new beginnings and setting intentions. Plant seeds for future growth.",
    MoonPhase.WAXING_CRESCENT: "Building momentum. Take initial steps toward your goals.",
    MoonPhase.FIRST_QUARTER: "Decision time. Overcome obstacles and commit to your path.",
    MoonPhase.WAXING_GIBBOUS: "Refine and adjust. Make final preparations before culmination.",
    MoonPhase.FULL_MOON: "Peak energy and illumination. Celebrate achievements and gain clarity.",
    MoonPhase.WANING_GIBBOUS: "Share wisdom and gratitude. Distribute what you've gained.",
    MoonPhase.LAST_QUARTER: "Release and let go. Clear what no longer serves you.",
    MoonPhase.WANING_CRESCENT: "Rest and reflect. Prepare for the next cycle.",
}

_PHASE_ACTIVITIES: dict[MoonPhase, tuple[str, ...]] = {
    MoonPhase.NEW_MOON: ("Set intentions", "Start new projects", "Meditation", "Journaling"),
    MoonPhase.WAXING_CRESCENT: ("Take action", "Build momentum", "Network", "Learn new skills"),
    MoonPhase.FIRST_QUARTER: ("Make decisions", "Face challenges", "Adjust plans", "Stay focused"),
    MoonPhase.WAXING_GIBBOUS: ("Refine details", "Prepare presentations", "Final edits", "Self-improvement"),
    MoonPhase.FULL_MOON: ("Celebrate wins", "Social gatherings", "Creative expression", "Manifestation rituals"),
    MoonPhase.WANING_GIBBOUS: ("Share knowledge", "Express gratitude", "Mentor others", "Give back"),
    MoonPhase.LAST_QUARTER: ("Declutter", "End unhealthy patterns", "Forgiveness work", "Clean spaces"),
    MoonPhase.WANING_CRESCENT: ("Rest deeply", "Dream work", "Spiritual practices", "Gentle movement"),
}


class PlanetaryPosition(BaseModel):
    """Position of a body at one instant."""

    planet: Planet
    longitude: float
    latitude: float = 0.0
    distance: float = 1.0
    speed_longitude: float
    is_retrograde: bool = False

    @computed_field
    @property
    def sign(self) -> ZodiacSign:
        return ZodiacSign.from_degree(self.longitude)

    @property
    def degree_in_sign(self) -> float:
        return self.longitude % 30.0

    @property
    def formatted_position(self) -> str:
        degree = self.degree_in_sign
        degrees = int(degree)
        minutes = int((degree - degrees) * 60)
        marker = " R" if self.is_retrograde else ""
        return f"{self.sign.symbol} {degrees}°{minutes}'{marker}"


class PlanetaryAspect(BaseModel):
    """An observed aspect between two bodies."""

    planet1: Planet
    planet2: Planet
    aspect: AspectType
    orb: float
    is_applying: bool

    @property
    def description(self) -> str:
        return f"{self.planet1.value} {self.aspect.symbol} {self.planet2.value}"
