"""Cosmic score calculation for a single day."""

from __future__ import annotations

import logging
from datetime import date, tzinfo

from cosmic_calendar.config import get_settings
from cosmic_calendar.schemas.cosmic_day import CosmicDay
from cosmic_calendar.schemas.ephemeris import (
    LifeDomain,
    MoonPhase,
    Planet,
    PlanetaryAspect,
    PlanetaryPosition,
)
from cosmic_calendar.schemas.natal import BirthChart
from ephemeris.aspects import find_aspects
from ephemeris.calculator import active_retrogrades_from, calculate_positions, moon_phase_from
from ephemeris.julian import resolve_timezone, start_of_day_jd
from ephemeris.retrograde import has_retrograde_data

from forecast.recommendations import generate_recommendations

logger = logging.getLogger(__name__)

BASE_SCORE = 5.0
MIN_SCORE = 1.0
MAX_SCORE = 10.0

# Overall score
RETROGRADE_PENALTIES: dict[Planet, float] = {
    Planet.MERCURY: 1.5,
    Planet.VENUS: 1.0,
    Planet.MARS: 0.5,
    Planet.JUPITER: 0.25,
    Planet.SATURN: 0.25,
}
DEFAULT_RETROGRADE_PENALTY = 0.1
APPLYING_FACTOR = 1.2
SEPARATING_FACTOR = 0.8
OVERALL_ASPECT_WEIGHT = 0.3

# Domain scores
DOMAIN_RETROGRADE_PENALTIES: dict[tuple[Planet, LifeDomain], float] = {
    (Planet.MERCURY, LifeDomain.CAREER): 1.5,
    (Planet.VENUS, LifeDomain.RELATIONSHIPS): 1.5,
    (Planet.MARS, LifeDomain.HEALTH): 1.0,
}
DEFAULT_DOMAIN_RETROGRADE_PENALTY = 0.5
DOMAIN_ASPECT_WEIGHT = 0.5

DOMAIN_MOON_ADJUSTMENTS: dict[LifeDomain, dict[MoonPhase, float]] = {
    LifeDomain.RELATIONSHIPS: {
        MoonPhase.FULL_MOON: 1.0,
        MoonPhase.NEW_MOON: 0.5,
        MoonPhase.WANING_CRESCENT: -0.25,
        MoonPhase.WANING_GIBBOUS: -0.25,
    },
    LifeDomain.CAREER: {
        MoonPhase.WAXING_GIBBOUS: 0.5,
        MoonPhase.FIRST_QUARTER: 0.5,
        MoonPhase.FULL_MOON: 0.75,
        MoonPhase.WANING_CRESCENT: -0.5,
    },
    LifeDomain.HEALTH: {
        MoonPhase.NEW_MOON: 0.5,
        MoonPhase.WANING_CRESCENT: 0.25,
        MoonPhase.FULL_MOON: -0.25,
    },
}


def clamp_score(score: float) -> float:
    return min(max(score, MIN_SCORE), MAX_SCORE)


def overall_score(
    moon_phase: MoonPhase,
    retrogrades: list[Planet],
    aspects: list[PlanetaryAspect],
) -> float:
    """Overall day score in [1, 10]."""
    score = BASE_SCORE
    score += moon_phase.score_modifier

    for planet in retrogrades:
        score -= RETROGRADE_PENALTIES.get(planet, DEFAULT_RETROGRADE_PENALTY)

    for aspect in aspects:
        modifier = aspect.aspect.score_modifier * (
            APPLYING_FACTOR if aspect.is_applying else SEPARATING_FACTOR
        )
        score += modifier * OVERALL_ASPECT_WEIGHT

    return clamp_score(score)


def domain_planets(domain: LifeDomain) -> list[Planet]:
    """Planets whose affinities include ``domain``, in enumeration order."""
    return [planet for planet in Planet if domain in planet.domains]


def domain_score(
    domain: LifeDomain,
    moon_phase: MoonPhase,
    retrogrades: list[Planet],
    aspects: list[PlanetaryAspect],
) -> float:
    """Score for one life domain in [1, 10]."""
    score = BASE_SCORE
    relevant = domain_planets(domain)

    for planet in relevant:
        if planet in retrogrades:
            score -= DOMAIN_RETROGRADE_PENALTIES.get(
                (planet, domain), DEFAULT_DOMAIN_RETROGRADE_PENALTY
            )

    for aspect in aspects:
        if aspect.planet1 in relevant or aspect.planet2 in relevant:
            score += aspect.aspect.score_modifier * DOMAIN_ASPECT_WEIGHT

    adjustment = DOMAIN_MOON_ADJUSTMENTS[domain].get(moon_phase)
    if adjustment is not None:
        score += adjustment

    return clamp_score(score)


def _calendar_timezone(tz: tzinfo | None) -> tzinfo:
    if tz is not None:
        return tz
    resolved, _, _ = resolve_timezone(get_settings().timezone)
    return resolved


def score_positions(
    target_date: date,
    jd: float,
    positions: list[PlanetaryPosition],
    birth_chart: BirthChart | None = None,
) -> CosmicDay:
    """Build a CosmicDay from positions already computed for ``jd``."""
    phase = moon_phase_from(positions)
    retrogrades = active_retrogrades_from(positions)

    aspects: list[PlanetaryAspect] = []
    if birth_chart is not None:
        aspects = find_aspects(positions, birth_chart.planetary_positions)

    relationship = domain_score(LifeDomain.RELATIONSHIPS, phase, retrogrades, aspects)
    career = domain_score(LifeDomain.CAREER, phase, retrogrades, aspects)
    health = domain_score(LifeDomain.HEALTH, phase, retrogrades, aspects)

    recommendations = generate_recommendations(
        moon_phase=phase,
        retrogrades=retrogrades,
        aspects=aspects,
        relationship_score=relationship,
        career_score=career,
        health_score=health,
    )

    return CosmicDay(
        date_context=target_date,
        julian_day=jd,
        overall_score=overall_score(phase, retrogrades, aspects),
        relationship_score=relationship,
        career_score=career,
        health_score=health,
        moon_phase=phase,
        planetary_positions=positions,
        active_retrogrades=retrogrades,
        significant_aspects=aspects,
        recommendations=recommendations,
        retrograde_data_available=has_retrograde_data(jd),
    )


def calculate_cosmic_day(
    target_date: date,
    birth_chart: BirthChart | None = None,
    tz: tzinfo | None = None,
) -> CosmicDay:
    """Score a calendar date, optionally against a birth chart.

    The date is evaluated at its local start of day in ``tz`` (default: the
    configured calendar timezone).
    """
    jd = start_of_day_jd(target_date, _calendar_timezone(tz))
    return score_positions(target_date, jd, calculate_positions(jd), birth_chart)
