"""Civil date/time to Julian Day conversion, and back."""

from __future__ import annotations

import logging
import math
from datetime import MAXYEAR, MINYEAR, UTC, date, datetime, time, timedelta, tzinfo
from typing import NamedTuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

J2000 = 2451545.0
GREGORIAN_START_JD = 2299161
SECONDS_PER_DAY = 86400


class CivilDateTime(NamedTuple):
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int


def julian_day(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
    tz: tzinfo | None = None,
) -> float:
    """Convert a Gregorian civil date/time to a Julian Day.

    Fields are taken as UTC unless ``tz`` is given, in which case the zone's
    UTC offset for that wall time is subtracted from the result.
    """
    if tz is not None and tz is not UTC:
        local_jd = julian_day(year, month, day, hour, minute, second)
        return local_jd - _utc_offset_days(tz, year, month, day, hour, minute)

    decimal_day = day + (hour + minute / 60.0 + second / 3600.0) / 24.0
    y = float(year)
    m = float(month)
    if m <= 2:
        y -= 1
        m += 12
    a_term = math.floor(y / 100.0)
    b_term = 2 - a_term + math.floor(a_term / 4.0)
    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + decimal_day + b_term - 1524.5


def _utc_offset_days(tz: tzinfo, year: int, month: int, day: int, hour: int, minute: int) -> float:
    """UTC offset of a local wall time, in days.

    Wall times ``datetime`` cannot represent (years outside 1..9999, day 31
    of a short month, hour 24) take the offset of the nearest one it can.
    """
    try:
        wall = datetime(year, month, day, hour, minute, tzinfo=tz)
    except (ValueError, OverflowError):
        wall = datetime(
            min(max(year, MINYEAR), MAXYEAR),
            min(max(month, 1), 12),
            min(max(day, 1), 28),
            min(max(hour, 0), 23),
            min(max(minute, 0), 59),
            tzinfo=tz,
        )
    offset = wall.utcoffset()
    if offset is None:
        return 0.0
    return offset.total_seconds() / SECONDS_PER_DAY


def civil_date(jd: float) -> CivilDateTime:
    """Convert a Julian Day back to UTC civil fields (Meeus, ch. 7).

    The day fraction is rounded to whole seconds before it is split, so a
    time that went in on the hour comes back on the hour.
    """
    shifted = jd + 0.5
    z = math.floor(shifted)
    seconds = round((shifted - z) * SECONDS_PER_DAY)
    if seconds >= SECONDS_PER_DAY:
        z += 1
        seconds -= SECONDS_PER_DAY

    a = z
    if z >= GREGORIAN_START_JD:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    hour, remainder = divmod(seconds, 3600)
    minute, second = divmod(remainder, 60)
    return CivilDateTime(int(year), int(month), int(day), int(hour), int(minute), int(second))


def datetime_to_jd(dt: datetime) -> float:
    """Convert a datetime to a Julian Day. Naive datetimes are taken as UTC.

    The offset is applied to the Julian Day rather than to the datetime, so
    local times near ``datetime.min``/``datetime.max`` convert without
    overflowing.
    """
    local_jd = julian_day(
        dt.year,
        dt.month,
        dt.day,
        dt.hour,
        dt.minute,
        dt.second + dt.microsecond / 1_000_000,
    )
    offset = dt.utcoffset()
    if offset is None:
        return local_jd
    return local_jd - offset.total_seconds() / SECONDS_PER_DAY


def jd_to_datetime(jd: float) -> datetime:
    """Convert a Julian Day to an aware UTC datetime.

    Raises ValueError for instants outside the years ``datetime`` supports.
    """
    civil = civil_date(jd)
    return datetime(civil.year, civil.month, civil.day, tzinfo=UTC) + timedelta(
        hours=civil.hour, minutes=civil.minute, seconds=civil.second
    )


def resolve_timezone(name: str | None) -> tuple[tzinfo, str, str | None]:
    """Resolve an IANA identifier, falling back to UTC.

    Returns ``(tzinfo, name_used, warning)``; ``warning`` is set only when a
    non-empty identifier could not be loaded.
    """
    normalized = str(name or "").strip()
    if not normalized or normalized.upper() == "UTC":
        return UTC, "UTC", None
    try:
        return ZoneInfo(normalized), normalized, None
    except (ZoneInfoNotFoundError, ValueError, OSError):
        warning = f"invalid timezone '{normalized}', fallback to UTC"
        logger.warning("Timezone %r could not be loaded; using UTC", normalized)
        return UTC, "UTC", warning


def local_datetime(target: date, at: time | None, tz: tzinfo) -> datetime:
    """Combine a civil date and optional time (midnight) in a timezone."""
    return datetime.combine(target, at or time(0, 0), tzinfo=tz)


def start_of_day_jd(target: date, tz: tzinfo = UTC) -> float:
    """Julian Day of local midnight starting ``target`` in ``tz``."""
    return datetime_to_jd(local_datetime(target, None, tz))
