"""API test configuration."""

from datetime import UTC

import pytest
from api.dependencies import get_app_settings, get_calendar_timezone
from api.main import create_app
from cosmic_calendar.config import Settings
from httpx import ASGITransport, AsyncClient


def _utc():
    return UTC


@pytest.fixture
def settings():
    return Settings(EVENT_SCAN_MAX_DAYS=120, MONTH_CONCURRENCY=4)


@pytest.fixture
def app(settings):
    a = create_app()
    a.dependency_overrides[get_calendar_timezone] = _utc
    a.dependency_overrides[get_app_settings] = lambda: settings
    return a


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def birth_profile():
    return {
        "name": "Test",
        "birth_date": "1990-05-15",
        "birth_time": "14:30:00",
        "birth_location_name": "New York",
        "birth_latitude": 40.7128,
        "birth_longitude": -74.006,
        "birth_timezone": "America/New_York",
    }
