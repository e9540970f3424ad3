"""Pydantic value schemas for the cosmic calendar engine."""

from cosmic_calendar.schemas.ephemeris import (
    AspectType,
    Element,
    LifeDomain,
    Modality,
    MoonPhase,
    Planet,
    PlanetaryAspect,
    PlanetaryPosition,
    ZodiacSign,
)
from cosmic_calendar.schemas.natal import BirthChart, BirthProfile, ChartMetadata, NatalCoordinates
from cosmic_calendar.schemas.cosmic_day import CosmicDay, Recommendation, ScoreCategory
from cosmic_calendar.schemas.events import CosmicEvent, EventType, Impact

__all__ = [
    "AspectType",
    "BirthChart",
    "BirthProfile",
    "ChartMetadata",
    "CosmicDay",
    "CosmicEvent",
    "Element",
    "EventType",
    "Impact",
    "LifeDomain",
    "Modality",
    "MoonPhase",
    "NatalCoordinates",
    "Planet",
    "PlanetaryAspect",
    "PlanetaryPosition",
    "Recommendation",
    "ScoreCategory",
    "ZodiacSign",
]
