"""Tests for aspect detection."""

from cosmic_calendar.schemas.ephemeris import AspectType, Planet, PlanetaryPosition
from ephemeris.aspects import ASPECT_ORDER, angular_distance, find_aspect, find_aspects
from ephemeris.bodies import DAILY_MOTION


def _pos(planet: Planet, longitude: float, speed: float | None = None) -> PlanetaryPosition:
    return PlanetaryPosition(
        planet=planet,
        longitude=longitude,
        speed_longitude=DAILY_MOTION[planet] if speed is None else speed,
    )


def test_angular_distance():
    """Test angular distance calculation."""
    assert angular_distance(0, 90) == 90.0
    assert angular_distance(90, 0) == 90.0
    assert angular_distance(0, 180) == 180.0
    assert angular_distance(350, 10) == 20.0
    assert angular_distance(10, 350) == 20.0
    assert abs(angular_distance(0, 0) - 0.0) < 0.001


def test_angular_distance_wraparound():
    """Test angular distance handles wraparound correctly."""
    assert abs(angular_distance(355, 5) - 10.0) < 0.001
    assert abs(angular_distance(1, 359) - 2.0) < 0.001


def test_detection_order():
    assert ASPECT_ORDER == [
        AspectType.CONJUNCTION,
        AspectType.SEXTILE,
        AspectType.SQUARE,
        AspectType.TRINE,
        AspectType.OPPOSITION,
    ]


def test_find_aspect_each_type():
    sun = _pos(Planet.SUN, 100.0)
    expected = {
        100.0: AspectType.CONJUNCTION,
        160.0: AspectType.SEXTILE,
        190.0: AspectType.SQUARE,
        220.0: AspectType.TRINE,
        280.0: AspectType.OPPOSITION,
    }
    for longitude, aspect_type in expected.items():
        aspect = find_aspect(sun, _pos(Planet.MOON, longitude))
        assert aspect is not None
        assert aspect.aspect == aspect_type
        assert aspect.orb == 0.0
        assert aspect.planet1 == Planet.SUN
        assert aspect.planet2 == Planet.MOON


def test_find_aspect_none_between_orbs():
    assert find_aspect(_pos(Planet.SUN, 100.0), _pos(Planet.MOON, 145.0)) is None
    # 67 degrees: one past the sextile orb, far from the square
    assert find_aspect(_pos(Planet.SUN, 100.0), _pos(Planet.MOON, 167.0)) is None


def test_orb_edge_is_inclusive():
    aspect = find_aspect(_pos(Planet.SUN, 100.0), _pos(Planet.MOON, 166.0))
    assert aspect is not None
    assert aspect.aspect == AspectType.SEXTILE
    assert aspect.orb == 6.0


def test_find_aspect_across_zero():
    aspect = find_aspect(_pos(Planet.VENUS, 350.0), _pos(Planet.MARS, 55.0))
    assert aspect is not None
    assert aspect.aspect == AspectType.SEXTILE
    assert abs(aspect.orb - 5.0) < 1e-9


def test_is_applying_compares_speeds():
    mars = _pos(Planet.MARS, 10.0)
    jupiter = _pos(Planet.JUPITER, 12.0)
    assert find_aspect(mars, jupiter).is_applying is True
    assert find_aspect(jupiter, mars).is_applying is False


def test_find_aspects_between_sets():
    transits = [_pos(Planet.SUN, 0.0), _pos(Planet.MOON, 90.0)]
    natal = [_pos(Planet.SUN, 0.0), _pos(Planet.MOON, 90.0), _pos(Planet.MARS, 180.0)]

    aspects = find_aspects(transits, natal)

    assert [(a.planet1, a.planet2, a.aspect) for a in aspects] == [
        (Planet.SUN, Planet.MOON, AspectType.SQUARE),
        (Planet.SUN, Planet.MARS, AspectType.OPPOSITION),
        (Planet.MOON, Planet.SUN, AspectType.SQUARE),
        (Planet.MOON, Planet.MARS, AspectType.SQUARE),
    ]


def test_find_aspects_skips_same_planet():
    aspects = find_aspects([_pos(Planet.SUN, 10.0)], [_pos(Planet.SUN, 10.0)])
    assert aspects == []


def test_aspect_description():
    aspect = find_aspect(_pos(Planet.SUN, 0.0), _pos(Planet.MOON, 120.0))
    assert aspect.description == f"Sun {AspectType.TRINE.symbol} Moon"
    assert aspect.aspect.is_harmonious
