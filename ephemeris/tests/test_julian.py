"""Tests for Julian Day conversion."""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import pytest
from ephemeris.julian import (
    J2000,
    civil_date,
    datetime_to_jd,
    jd_to_datetime,
    julian_day,
    resolve_timezone,
    start_of_day_jd,
)


def test_j2000_epoch():
    assert julian_day(2000, 1, 1, 12, 0, 0) == pytest.approx(J2000, abs=0.01)


def test_known_date():
    assert julian_day(2024, 3, 20, 12, 0, 0) == pytest.approx(2460390.0, abs=1e-9)


def test_january_and_february_use_previous_year():
    jan31 = julian_day(2024, 1, 31)
    feb1 = julian_day(2024, 2, 1)
    mar1 = julian_day(2024, 3, 1)
    assert feb1 - jan31 == pytest.approx(1.0)
    assert mar1 - feb1 == pytest.approx(29.0)


def test_timezone_is_normalized_to_utc():
    assert julian_day(2000, 1, 1, 7, 0, 0, tz=ZoneInfo("America/New_York")) == pytest.approx(J2000)
    paris = datetime(2000, 1, 1, 13, 0, tzinfo=ZoneInfo("Europe/Paris"))
    assert datetime_to_jd(paris) == pytest.approx(J2000)


def test_naive_datetime_is_utc():
    assert datetime_to_jd(datetime(2000, 1, 1, 12, 0)) == pytest.approx(J2000)


def test_round_trip_spread():
    """Civil -> JD -> civil keeps year, month, day and hour for 1900-2100."""
    cases = []
    for year in range(1900, 2101, 7):
        for month in (1, 2, 3, 6, 9, 12):
            for hour in (0, 5, 12, 13, 23):
                cases.append((year, month, 15, hour, 30, 45))
    cases += [
        (2024, 2, 29, 18, 0, 0),
        (2000, 2, 29, 0, 0, 0),
        (1904, 2, 29, 23, 59, 59),
        (2100, 12, 31, 23, 0, 0),
        (1900, 1, 1, 0, 0, 0),
    ]

    for year, month, day, hour, minute, second in cases:
        civil = civil_date(julian_day(year, month, day, hour, minute, second))
        assert (civil.year, civil.month, civil.day, civil.hour) == (year, month, day, hour)
        assert civil.minute == minute
        assert abs(civil.second - second) <= 1


def test_civil_date_j2000():
    assert tuple(civil_date(J2000)) == (2000, 1, 1, 12, 0, 0)


def test_gregorian_reform_boundary():
    civil = civil_date(2299160.5)
    assert (civil.year, civil.month, civil.day) == (1582, 10, 15)


def test_civil_date_is_total():
    for jd in (-1000.3, 0.0, 1e9, 2299160.0):
        civil = civil_date(jd)
        assert 1 <= civil.month <= 12
        assert 0 <= civil.hour <= 23


def test_monotonic():
    previous = julian_day(1900, 1, 1)
    for year in range(1900, 2101, 3):
        for month in range(1, 13):
            for day in (1, 28):
                current = julian_day(year, month, day, 6)
                assert current > previous
                previous = current


def test_jd_to_datetime():
    assert jd_to_datetime(J2000) == datetime(2000, 1, 1, 12, 0, tzinfo=UTC)


def test_start_of_day():
    assert start_of_day_jd(date(2000, 1, 1)) == pytest.approx(2451544.5)
    # Local midnight in New York is 05:00 UTC in winter
    ny = start_of_day_jd(date(2000, 1, 1), ZoneInfo("America/New_York"))
    assert ny == pytest.approx(2451544.5 + 5 / 24)


def test_resolve_timezone():
    tz, name, warning = resolve_timezone("America/New_York")
    assert name == "America/New_York"
    assert warning is None
    assert tz == ZoneInfo("America/New_York")


def test_resolve_timezone_falls_back_to_utc():
    tz, name, warning = resolve_timezone("Not/AZone")
    assert tz is UTC
    assert name == "UTC"
    assert warning and "fallback to UTC" in warning

    tz, name, warning = resolve_timezone(None)
    assert tz is UTC
    assert warning is None


def test_datetime_range_edges_do_not_overflow():
    """Local times whose UTC instant leaves datetime's range still convert."""
    tokyo = ZoneInfo("Asia/Tokyo")
    earliest = datetime(1, 1, 1, tzinfo=tokyo)
    expected = julian_day(1, 1, 1) - earliest.utcoffset().total_seconds() / 86400
    assert datetime_to_jd(earliest) == pytest.approx(expected)
    assert datetime_to_jd(earliest) < julian_day(1, 1, 1)

    latest = datetime(9999, 12, 31, 23, 59, tzinfo=ZoneInfo("America/Los_Angeles"))
    assert datetime_to_jd(latest) > julian_day(9999, 12, 31, 23, 59)

    assert start_of_day_jd(date.min, tokyo) < start_of_day_jd(date.min)
    assert start_of_day_jd(date.max, ZoneInfo("America/Los_Angeles")) > start_of_day_jd(date.max)


def test_julian_day_with_timezone_is_total():
    ny = ZoneInfo("America/New_York")
    # A leap second rolls into the next minute
    assert julian_day(2000, 1, 1, 6, 59, 60, tz=ny) == pytest.approx(J2000)
    # Years outside datetime's range use the nearest representable offset
    far_future = julian_day(10000, 1, 1, 0, 0, 0, tz=ny)
    assert far_future == pytest.approx(julian_day(10000, 1, 1) + 5 / 24, abs=0.01)
    assert julian_day(0, 6, 15, 12, tz=ny) > julian_day(0, 6, 15, 12)
