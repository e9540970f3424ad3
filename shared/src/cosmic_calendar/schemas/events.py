"""Pydantic schemas for notable cosmic events (retrograde stations, lunations)."""

from __future__ import annotations

from datetime import date
from enum import StrEnum

from pydantic import BaseModel

from cosmic_calendar.schemas.ephemeris import MoonPhase, Planet


class EventType(StrEnum):
    RETROGRADE = "Retrograde"
    DIRECT_STATION = "Direct Station"
    NEW_MOON = "New Moon"
    FULL_MOON = "Full Moon"


class Impact(StrEnum):
    VERY_POSITIVE = "Very Positive"
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    CHALLENGING = "Challenging"
    VERY_CHALLENGING = "Very Challenging"

    @property
    def score_modifier(self) -> float:
        return _IMPACT_MODIFIERS[self]


_IMPACT_MODIFIERS: dict[Impact, float] = {
    Impact.VERY_POSITIVE: 1.5,
    Impact.POSITIVE: 0.75,
    Impact.NEUTRAL: 0.0,
    Impact.CHALLENGING: -0.75,
    Impact.VERY_CHALLENGING: -1.5,
}


class CosmicEvent(BaseModel):
    """A dated event a notification collaborator may alert on."""

    type: EventType
    planet: Planet | None = None
    moon_phase: MoonPhase | None = None
    start_date: date
    end_date: date | None = None
    title: str
    description: str
    impact: Impact

    def is_active(self, on: date) -> bool:
        if self.end_date is not None:
            return self.start_date <= on <= self.end_date
        return on == self.start_date

    def days_until_start(self, today: date) -> int | None:
        if self.start_date <= today:
            return None
        return (self.start_date - today).days

    def days_remaining(self, today: date) -> int | None:
        if self.end_date is None or today > self.end_date:
            return None
        return (self.end_date - today).days
