"""Integration test configuration."""

from datetime import date, time

import pytest
from cosmic_calendar.config import reset_settings_cache
from cosmic_calendar.schemas.natal import BirthProfile


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def sample_profile():
    """Birth profile with a known time and location."""
    return BirthProfile(
        name="Ada",
        birth_date=date(1988, 11, 3),
        birth_time=time(6, 45),
        birth_location_name="London",
        birth_latitude=51.5074,
        birth_longitude=-0.1278,
        birth_timezone="Europe/London",
    )


@pytest.fixture
def sample_profile_no_time():
    return BirthProfile(
        name="Grace",
        birth_date=date(1975, 7, 20),
        birth_location_name="Sydney",
        birth_latitude=-33.8688,
        birth_longitude=151.2093,
        birth_timezone="Australia/Sydney",
    )
