"""Aspect detection and orb calculations."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cosmic_calendar.schemas.ephemeris import AspectType, PlanetaryAspect, PlanetaryPosition

logger = logging.getLogger(__name__)

# Priority order for detection; the first aspect within orb wins.
ASPECT_ORDER: list[AspectType] = list(AspectType)


def angular_distance(lon1: float, lon2: float) -> float:
    """Calculate the shortest angular distance between two longitudes."""
    diff = abs(lon1 - lon2) % 360.0
    if diff > 180.0:
        diff = 360.0 - diff
    return diff


def find_aspect(pos1: PlanetaryPosition, pos2: PlanetaryPosition) -> PlanetaryAspect | None:
    """Return the first aspect type whose orb contains the pair's separation.

    ``is_applying`` is a plain comparison of longitudinal speeds: the first
    body is taken to be closing when it moves faster than the second.
    """
    angle = angular_distance(pos1.longitude, pos2.longitude)

    for aspect_type in ASPECT_ORDER:
        orb = abs(angle - aspect_type.angle)
        if orb <= aspect_type.orb:
            return PlanetaryAspect(
                planet1=pos1.planet,
                planet2=pos2.planet,
                aspect=aspect_type,
                orb=orb,
                is_applying=pos1.speed_longitude > pos2.speed_longitude,
            )
    return None


def find_aspects(
    positions1: Iterable[PlanetaryPosition],
    positions2: Iterable[PlanetaryPosition],
) -> list[PlanetaryAspect]:
    """Find aspects between two position sets (e.g. transits vs. a birth chart).

    Pairs of the same planet are skipped. Results follow the first set in the
    outer loop and the second set in the inner loop.
    """
    inner = list(positions2)
    aspects_found: list[PlanetaryAspect] = []
    for pos1 in positions1:
        for pos2 in inner:
            if pos1.planet == pos2.planet:
                continue
            aspect = find_aspect(pos1, pos2)
            if aspect is not None:
                aspects_found.append(aspect)
    return aspects_found
