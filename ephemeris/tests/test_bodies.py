"""Tests for sign mapping and angle helpers."""

import pytest
from cosmic_calendar.schemas.ephemeris import (
    Element,
    Modality,
    Planet,
    PlanetaryPosition,
    ZodiacSign,
)
from ephemeris.bodies import longitude_to_sign, normalize_degrees, sign_from_degree


def test_sign_boundaries():
    signs = list(ZodiacSign)
    for index, degree in enumerate(range(0, 360, 30)):
        assert sign_from_degree(float(degree)) == signs[index]
        assert sign_from_degree(degree + 29.999) == signs[index]


def test_sign_from_any_finite_longitude():
    assert ZodiacSign.from_degree(360.0) == ZodiacSign.ARIES
    assert ZodiacSign.from_degree(-30.0) == ZodiacSign.PISCES
    assert ZodiacSign.from_degree(359.999) == ZodiacSign.PISCES
    assert ZodiacSign.from_degree(725.0) == ZodiacSign.ARIES
    assert ZodiacSign.from_degree(-1e-20) == ZodiacSign.ARIES


def test_normalize_degrees():
    assert normalize_degrees(370.0) == pytest.approx(10.0)
    assert normalize_degrees(-10.0) == pytest.approx(350.0)
    assert normalize_degrees(-1e-20) == 0.0
    for angle in (-1e6, -360.0, 0.0, 359.9999, 1e6):
        assert 0.0 <= normalize_degrees(angle) < 360.0


def test_longitude_to_sign():
    sign, degree = longitude_to_sign(45.5)
    assert sign == ZodiacSign.TAURUS
    assert degree == pytest.approx(15.5)


def test_sign_tables():
    assert ZodiacSign.LEO.element == Element.FIRE
    assert ZodiacSign.CAPRICORN.element == Element.EARTH
    assert ZodiacSign.AQUARIUS.element == Element.AIR
    assert ZodiacSign.PISCES.element == Element.WATER
    assert ZodiacSign.LIBRA.modality == Modality.CARDINAL
    assert ZodiacSign.SCORPIO.modality == Modality.FIXED
    assert ZodiacSign.GEMINI.modality == Modality.MUTABLE
    assert ZodiacSign.SCORPIO.ruler == Planet.PLUTO
    assert ZodiacSign.PISCES.ruler == Planet.NEPTUNE
    assert ZodiacSign.AQUARIUS.ruler == Planet.URANUS


def test_planet_capabilities():
    assert not Planet.SUN.can_be_retrograde
    assert not Planet.MOON.can_be_retrograde
    assert all(p.can_be_retrograde for p in Planet if p not in (Planet.SUN, Planet.MOON))


def test_position_sign_and_formatting():
    position = PlanetaryPosition(
        planet=Planet.MARS,
        longitude=95.5,
        speed_longitude=-0.524,
        is_retrograde=True,
    )
    assert position.sign == ZodiacSign.CANCER
    assert position.degree_in_sign == pytest.approx(5.5)
    assert position.formatted_position.startswith(ZodiacSign.CANCER.symbol)
    assert "5°30'" in position.formatted_position
    assert position.formatted_position.endswith(" R")
    assert position.model_dump()["sign"] == "Cancer"
