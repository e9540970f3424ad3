"""Pydantic schemas for daily cosmic scores and recommendations."""

from __future__ import annotations

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, Field, computed_field

from cosmic_calendar.schemas.ephemeris import (
    LifeDomain,
    MoonPhase,
    Planet,
    PlanetaryAspect,
    PlanetaryPosition,
)


class ScoreCategory(StrEnum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    NEUTRAL = "Neutral"
    CHALLENGING = "Challenging"
    DIFFICULT = "Difficult"

    @classmethod
    def from_score(cls, score: float) -> ScoreCategory:
        """Bucket a score; ranges are half-open except the top one."""
        if 8.5 <= score <= 10.0:
            return cls.EXCELLENT
        if 7.0 <= score < 8.5:
            return cls.GOOD
        if 5.0 <= score < 7.0:
            return cls.NEUTRAL
        if 3.0 <= score < 5.0:
            return cls.CHALLENGING
        return cls.DIFFICULT

    @property
    def description(self) -> str:
        return _CATEGORY_DESCRIPTIONS[self]


_CATEGORY_DESCRIPTIONS: dict[ScoreCategory, str] = {
    ScoreCategory.EXCELLENT: "The cosmos are strongly aligned in your favor",
    ScoreCategory.GOOD: "Favorable energies support your endeavors",
    ScoreCategory.NEUTRAL: "A balanced day with mixed influences",
    ScoreCategory.CHALLENGING: "Navigate with extra awareness today",
    ScoreCategory.DIFFICULT: "Practice patience and self-care",
}


class Recommendation(BaseModel):
    domain: LifeDomain
    title: str
    description: str
    is_positive: bool
    priority: int = 0


class CosmicDay(BaseModel):
    """Full scoring result for one calendar date."""

    date_context: date
    julian_day: float
    overall_score: float = Field(ge=1.0, le=10.0)
    relationship_score: float = Field(ge=1.0, le=10.0)
    career_score: float = Field(ge=1.0, le=10.0)
    health_score: float = Field(ge=1.0, le=10.0)
    moon_phase: MoonPhase
    planetary_positions: list[PlanetaryPosition]
    active_retrogrades: list[Planet] = Field(default_factory=list)
    significant_aspects: list[PlanetaryAspect] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
    retrograde_data_available: bool = True

    @computed_field
    @property
    def score_category(self) -> ScoreCategory:
        return ScoreCategory.from_score(self.overall_score)

    def domain_score(self, domain: LifeDomain) -> float:
        if domain is LifeDomain.RELATIONSHIPS:
            return self.relationship_score
        if domain is LifeDomain.CAREER:
            return self.career_score
        return self.health_score
