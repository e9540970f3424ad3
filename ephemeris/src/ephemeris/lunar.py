"""Lunar phase calculations."""

from __future__ import annotations

import logging
import math

from cosmic_calendar.schemas.ephemeris import MoonPhase

from ephemeris.bodies import normalize_degrees

logger = logging.getLogger(__name__)

# (low, high, waxing, phase); waxing=None matches either direction.
# Checked in order, first match wins; the high bound is exclusive except 1.0.
PHASE_RULES: list[tuple[float, float, bool | None, MoonPhase]] = [
    (0.00, 0.03, None, MoonPhase.NEW_MOON),
    (0.03, 0.25, True, MoonPhase.WAXING_CRESCENT),
    (0.25, 0.50, True, MoonPhase.FIRST_QUARTER),
    (0.50, 0.75, True, MoonPhase.WAXING_GIBBOUS),
    (0.75, 0.97, True, MoonPhase.FULL_MOON),
    (0.97, 1.00, None, MoonPhase.FULL_MOON),
    (0.75, 0.97, False, MoonPhase.WANING_GIBBOUS),
    (0.50, 0.75, False, MoonPhase.LAST_QUARTER),
    (0.25, 0.50, False, MoonPhase.WANING_CRESCENT),
    (0.03, 0.25, False, MoonPhase.WANING_CRESCENT),
]


def elongation(sun_longitude: float, moon_longitude: float) -> float:
    """Moon's angular distance east of the Sun, in [0, 360)."""
    return normalize_degrees(moon_longitude - sun_longitude)


def illumination_fraction(elongation_deg: float) -> float:
    """Illuminated fraction of the lunar disc for an elongation."""
    return (1.0 - math.cos(elongation_deg * math.pi / 180.0)) / 2.0


def phase_from_illumination(illumination: float, is_waxing: bool) -> MoonPhase:
    """Classify illumination and direction into one of eight phases."""
    for low, high, waxing, phase in PHASE_RULES:
        if waxing is not None and waxing != is_waxing:
            continue
        in_range = low <= illumination <= high if high == 1.0 else low <= illumination < high
        if in_range:
            return phase
    return MoonPhase.NEW_MOON


def calculate_moon_phase(sun_longitude: float, moon_longitude: float) -> MoonPhase:
    """Calculate the named phase from Sun and Moon longitudes."""
    angle = elongation(sun_longitude, moon_longitude)
    return phase_from_illumination(illumination_fraction(angle), angle < 180.0)
