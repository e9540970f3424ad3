"""Mean-motion tables and angle helpers."""

from __future__ import annotations

from cosmic_calendar.schemas.ephemeris import Planet, ZodiacSign

# Bodies in calculation order
ALL_BODIES: list[Planet] = list(Planet)

# Mean ecliptic longitude at J2000.0 (degrees)
BASE_LONGITUDES: dict[Planet, float] = {
    Planet.SUN: 280.46,
    Planet.MOON: 218.32,
    Planet.MERCURY: 252.25,
    Planet.VENUS: 181.98,
    Planet.MARS: 355.45,
    Planet.JUPITER: 34.40,
    Planet.SATURN: 50.08,
    Planet.URANUS: 314.20,
    Planet.NEPTUNE: 304.22,
    Planet.PLUTO: 238.96,
}

# Mean daily motion (degrees/day)
DAILY_MOTION: dict[Planet, float] = {
    Planet.SUN: 0.9856,
    Planet.MOON: 13.1764,
    Planet.MERCURY: 1.3833,
    Planet.VENUS: 1.2002,
    Planet.MARS: 0.5240,
    Planet.JUPITER: 0.0831,
    Planet.SATURN: 0.0335,
    Planet.URANUS: 0.0117,
    Planet.NEPTUNE: 0.0060,
    Planet.PLUTO: 0.0040,
}

SIGNS: list[ZodiacSign] = list(ZodiacSign)


def normalize_degrees(angle: float) -> float:
    """Wrap an angle into [0, 360)."""
    wrapped = angle % 360.0
    # Tiny negative inputs round up to exactly 360.0
    if wrapped >= 360.0:
        return 0.0
    return wrapped


def sign_from_degree(longitude: float) -> ZodiacSign:
    return ZodiacSign.from_degree(longitude)


def longitude_to_sign(longitude: float) -> tuple[ZodiacSign, float]:
    """Convert ecliptic longitude to sign and degree within sign."""
    longitude = normalize_degrees(longitude)
    sign = ZodiacSign.from_degree(longitude)
    degree = longitude - (SIGNS.index(sign) * 30.0)
    return sign, degree
