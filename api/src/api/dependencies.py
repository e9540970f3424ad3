"""FastAPI dependency injection."""

from __future__ import annotations

from datetime import tzinfo

from cosmic_calendar.config import Settings, get_settings
from ephemeris.julian import resolve_timezone
from fastapi import Depends


def get_app_settings() -> Settings:
    return get_settings()


def get_calendar_timezone(settings: Settings = Depends(get_app_settings)) -> tzinfo:
    """Timezone whose local midnight starts each scored day."""
    tz, _, _ = resolve_timezone(settings.timezone)
    return tz
