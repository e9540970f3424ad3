"""Tests for lunar phase calculations."""

import pytest
from cosmic_calendar.schemas.ephemeris import MoonPhase
from ephemeris.lunar import (
    calculate_moon_phase,
    elongation,
    illumination_fraction,
    phase_from_illumination,
)


def test_elongation():
    assert elongation(350.0, 10.0) == pytest.approx(20.0)
    assert elongation(10.0, 350.0) == pytest.approx(340.0)
    assert elongation(100.0, 100.0) == 0.0


def test_illumination_fraction():
    assert illumination_fraction(0.0) == pytest.approx(0.0)
    assert illumination_fraction(180.0) == pytest.approx(1.0)
    assert illumination_fraction(90.0) == pytest.approx(0.5)


@pytest.mark.parametrize(
    ("illumination", "waxing", "expected"),
    [
        (0.0, True, MoonPhase.NEW_MOON),
        (0.02, False, MoonPhase.NEW_MOON),
        (0.03, True, MoonPhase.WAXING_CRESCENT),
        (0.15, True, MoonPhase.WAXING_CRESCENT),
        (0.4, True, MoonPhase.FIRST_QUARTER),
        (0.6, True, MoonPhase.WAXING_GIBBOUS),
        (0.8, True, MoonPhase.FULL_MOON),
        (0.98, True, MoonPhase.FULL_MOON),
        (1.0, True, MoonPhase.FULL_MOON),
        (0.98, False, MoonPhase.FULL_MOON),
        (0.97, False, MoonPhase.FULL_MOON),
        (0.8, False, MoonPhase.WANING_GIBBOUS),
        (0.6, False, MoonPhase.LAST_QUARTER),
        (0.4, False, MoonPhase.WANING_CRESCENT),
        (0.15, False, MoonPhase.WANING_CRESCENT),
    ],
)
def test_phase_from_illumination(illumination, waxing, expected):
    assert phase_from_illumination(illumination, waxing) == expected


def test_phase_from_illumination_out_of_range_defaults_to_new():
    assert phase_from_illumination(1.5, True) == MoonPhase.NEW_MOON
    assert phase_from_illumination(-0.1, False) == MoonPhase.NEW_MOON


def test_calculate_moon_phase_from_longitudes():
    """Moon ahead of the Sun is waxing, behind it is waning."""
    assert calculate_moon_phase(100.0, 100.0) == MoonPhase.NEW_MOON
    assert calculate_moon_phase(100.0, 280.0) == MoonPhase.FULL_MOON
    assert calculate_moon_phase(10.0, 55.0) == MoonPhase.WAXING_CRESCENT
    assert calculate_moon_phase(10.0, 110.0) == MoonPhase.WAXING_GIBBOUS
    assert calculate_moon_phase(10.0, 145.0) == MoonPhase.FULL_MOON
    assert calculate_moon_phase(10.0, 235.0) == MoonPhase.WANING_GIBBOUS
    assert calculate_moon_phase(10.0, 325.0) == MoonPhase.WANING_CRESCENT


def test_phase_metadata():
    assert MoonPhase.FULL_MOON.score_modifier == 1.0
    assert MoonPhase.NEW_MOON.score_modifier == 0.5
    assert MoonPhase.WANING_CRESCENT.score_modifier == -0.5
    assert MoonPhase.FIRST_QUARTER.score_modifier == 0.0
    for phase in MoonPhase:
        assert phase.symbol
        assert phase.description
        assert phase.activities
