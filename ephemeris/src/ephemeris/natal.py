"""Birth chart calculator - natal positions, sun/moon signs and rising sign."""

from __future__ import annotations

import logging
import math
from datetime import UTC, datetime, time

from cosmic_calendar.schemas.ephemeris import Planet, ZodiacSign
from cosmic_calendar.schemas.natal import BirthChart, BirthProfile, ChartMetadata, NatalCoordinates

from ephemeris.bodies import normalize_degrees
from ephemeris.calculator import calculate_positions
from ephemeris.julian import J2000, civil_date, datetime_to_jd, resolve_timezone

logger = logging.getLogger(__name__)

OBLIQUITY_DEG = 23.4393
UNKNOWN_BIRTH_TIME = time(0, 0)  # Start of the birth day if unknown


def local_sidereal_time(jd: float, longitude: float) -> float:
    """Local sidereal time in degrees for an east-positive geographic longitude."""
    d = jd - J2000
    t = d / 36525.0
    gmst = normalize_degrees(280.46061837 + 360.98564736629 * d + 0.000387933 * t * t)
    return normalize_degrees(gmst + longitude)


def ascendant_longitude(jd: float, latitude: float, longitude: float) -> float:
    """Ecliptic longitude rising on the eastern horizon, in [0, 360)."""
    lst = math.radians(local_sidereal_time(jd, longitude))
    obliquity = math.radians(OBLIQUITY_DEG)
    lat = math.radians(latitude)

    y = math.cos(lst)
    x = -math.sin(lst) * math.cos(obliquity) - math.tan(lat) * math.sin(obliquity)
    return normalize_degrees(math.degrees(math.atan2(y, x)))


def calculate_ascendant(jd: float, latitude: float, longitude: float) -> ZodiacSign:
    return ZodiacSign.from_degree(ascendant_longitude(jd, latitude, longitude))


def _utc_isoformat(jd: float) -> str:
    # Built from the Julian Day; a UTC datetime may fall outside years 1..9999
    c = civil_date(jd)
    return f"{c.year:04d}-{c.month:02d}-{c.day:02d}T{c.hour:02d}:{c.minute:02d}:{c.second:02d}+00:00"


def birth_instant(profile: BirthProfile) -> tuple[datetime, str, list[str]]:
    """Combine birth date, time and timezone into one aware local datetime.

    Returns ``(birth_dt_local, timezone_used, warnings)``.
    """
    warnings: list[str] = []
    tz, timezone_used, warning = resolve_timezone(profile.birth_timezone)
    if warning:
        warnings.append(warning)

    bt = UNKNOWN_BIRTH_TIME if profile.birth_time is None else profile.birth_time
    return datetime.combine(profile.birth_date, bt, tzinfo=tz), timezone_used, warnings


def calculate_birth_chart(profile: BirthProfile) -> BirthChart:
    """Calculate a birth chart from a profile.

    The rising sign needs a known birth time and is left empty otherwise.
    """
    birth_dt_local, timezone_used, warnings = birth_instant(profile)
    jd = datetime_to_jd(birth_dt_local)

    positions = calculate_positions(jd)
    by_planet = {p.planet: p for p in positions}

    rising_sign = None
    if profile.has_birth_time:
        rising_sign = calculate_ascendant(jd, profile.birth_latitude, profile.birth_longitude)
    else:
        warnings.append("birth time unknown, rising sign omitted")

    metadata = ChartMetadata(
        birth_datetime_local=birth_dt_local.isoformat(),
        birth_datetime_utc=_utc_isoformat(jd),
        timezone=timezone_used,
        time_known=profile.has_birth_time,
        birth_coordinates=NatalCoordinates(
            latitude=round(float(profile.birth_latitude), 6),
            longitude=round(float(profile.birth_longitude), 6),
        ),
        julian_day=round(float(jd), 8),
        warnings=warnings,
    )

    logger.debug("Birth chart for %s at JD %.5f (%s)", profile.name or "profile", jd, timezone_used)

    return BirthChart(
        sun_sign=by_planet[Planet.SUN].sign,
        moon_sign=by_planet[Planet.MOON].sign,
        rising_sign=rising_sign,
        planetary_positions=positions,
        calculated_at=datetime.now(UTC),
        calculation_metadata=metadata,
    )
