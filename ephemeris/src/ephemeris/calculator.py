"""Planetary positions, retrogrades and moon phase for an instant."""

from __future__ import annotations

import logging
from datetime import datetime

from cosmic_calendar.schemas.ephemeris import MoonPhase, Planet, PlanetaryPosition

from ephemeris.bodies import ALL_BODIES, BASE_LONGITUDES, DAILY_MOTION, normalize_degrees
from ephemeris.julian import J2000, datetime_to_jd
from ephemeris.lunar import calculate_moon_phase
from ephemeris.retrograde import has_retrograde_data, is_retrograde

logger = logging.getLogger(__name__)


def calculate_position(planet: Planet, jd: float) -> PlanetaryPosition:
    """Mean-motion position of a single body at a Julian Day."""
    motion = DAILY_MOTION[planet]
    longitude = normalize_degrees(BASE_LONGITUDES[planet] + motion * (jd - J2000))
    retrograde = is_retrograde(planet, jd)

    return PlanetaryPosition(
        planet=planet,
        longitude=longitude,
        latitude=0.0,
        distance=1.0,
        speed_longitude=-motion if retrograde else motion,
        is_retrograde=retrograde,
    )


def calculate_positions(jd: float) -> list[PlanetaryPosition]:
    """Positions of all ten bodies, in enumeration order."""
    if not has_retrograde_data(jd):
        logger.debug("JD %.1f is outside the retrograde table; no retrogrades reported", jd)
    return [calculate_position(body, jd) for body in ALL_BODIES]


def positions_at(dt: datetime) -> list[PlanetaryPosition]:
    return calculate_positions(datetime_to_jd(dt))


def active_retrogrades_from(positions: list[PlanetaryPosition]) -> list[Planet]:
    return [p.planet for p in positions if p.is_retrograde and p.planet.can_be_retrograde]


def active_retrogrades(jd: float) -> list[Planet]:
    """Planets currently retrograde, in enumeration order."""
    return active_retrogrades_from(calculate_positions(jd))


def moon_phase_from(positions: list[PlanetaryPosition]) -> MoonPhase:
    by_planet = {p.planet: p for p in positions}
    sun = by_planet.get(Planet.SUN)
    moon = by_planet.get(Planet.MOON)
    if sun is None or moon is None:
        return MoonPhase.NEW_MOON
    return calculate_moon_phase(sun.longitude, moon.longitude)


def moon_phase(jd: float) -> MoonPhase:
    """Named lunar phase at a Julian Day."""
    return calculate_moon_phase(
        calculate_position(Planet.SUN, jd).longitude,
        calculate_position(Planet.MOON, jd).longitude,
    )
