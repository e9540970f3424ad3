"""Static retrograde windows.

Retrograde motion is not derived from orbital mechanics here: each planet
carries a closed list of Julian Day windows, inclusive at both ends. Outside
the span the table covers no planet is flagged retrograde; callers can ask
``has_retrograde_data`` to tell "direct" apart from "unknown".
"""

from __future__ import annotations

import logging

from cosmic_calendar.schemas.ephemeris import Planet

logger = logging.getLogger(__name__)

RETROGRADE_WINDOWS: dict[Planet, tuple[tuple[float, float], ...]] = {
    Planet.MERCURY: (
        (2460330.0, 2460352.0),
        (2460430.0, 2460453.0),
        (2460530.0, 2460553.0),
        (2460633.0, 2460656.0),
    ),
    Planet.VENUS: ((2460500.0, 2460542.0),),
    Planet.MARS: ((2460620.0, 2460695.0),),
    Planet.JUPITER: (
        (2460200.0, 2460320.0),
        (2460565.0, 2460685.0),
    ),
    Planet.SATURN: (
        (2460150.0, 2460290.0),
        (2460515.0, 2460655.0),
    ),
    Planet.URANUS: (
        (2460180.0, 2460330.0),
        (2460545.0, 2460695.0),
    ),
    Planet.NEPTUNE: (
        (2460130.0, 2460290.0),
        (2460495.0, 2460655.0),
    ),
    Planet.PLUTO: (
        (2460090.0, 2460270.0),
        (2460455.0, 2460635.0),
    ),
}


def retrograde_coverage() -> tuple[float, float]:
    """First and last Julian Day spanned by the table."""
    starts = [start for windows in RETROGRADE_WINDOWS.values() for start, _ in windows]
    ends = [end for windows in RETROGRADE_WINDOWS.values() for _, end in windows]
    return min(starts), max(ends)


_COVERAGE = retrograde_coverage()


def has_retrograde_data(jd: float) -> bool:
    return _COVERAGE[0] <= jd <= _COVERAGE[1]


def is_retrograde(planet: Planet, jd: float) -> bool:
    """Whether ``planet`` is inside one of its retrograde windows at ``jd``."""
    if not planet.can_be_retrograde:
        return False
    for start, end in RETROGRADE_WINDOWS.get(planet, ()):
        if start <= jd <= end:
            return True
    return False
