"""Public API endpoints."""

from __future__ import annotations

import asyncio
from datetime import date, datetime, tzinfo

from cosmic_calendar.config import Settings
from cosmic_calendar.schemas.cosmic_day import CosmicDay
from cosmic_calendar.schemas.events import CosmicEvent
from cosmic_calendar.schemas.natal import BirthChart, BirthProfile
from ephemeris.events import find_events
from ephemeris.natal import calculate_birth_chart
from fastapi import APIRouter, Depends, HTTPException, Path, Query
from forecast.monthly import scores_for_month_async
from forecast.scoring import calculate_cosmic_day

from api.dependencies import get_app_settings, get_calendar_timezone

router = APIRouter()


async def _month_payload(
    year: int,
    month: int,
    chart: BirthChart | None,
    tz: tzinfo,
    settings: Settings,
) -> dict[str, CosmicDay]:
    days = await scores_for_month_async(
        year, month, chart, tz, concurrency=settings.month_concurrency
    )
    return {day.isoformat(): cosmic_day for day, cosmic_day in sorted(days.items())}


@router.get("/days/today", response_model=CosmicDay)
async def get_today(tz: tzinfo = Depends(get_calendar_timezone)):
    return await asyncio.to_thread(calculate_cosmic_day, datetime.now(tz).date(), None, tz)


@router.get("/days/{target}", response_model=CosmicDay)
async def get_day(target: date, tz: tzinfo = Depends(get_calendar_timezone)):
    return await asyncio.to_thread(calculate_cosmic_day, target, None, tz)


@router.post("/days/{target}", response_model=CosmicDay)
async def get_personal_day(
    target: date,
    profile: BirthProfile,
    tz: tzinfo = Depends(get_calendar_timezone),
):
    chart = await asyncio.to_thread(calculate_birth_chart, profile)
    return await asyncio.to_thread(calculate_cosmic_day, target, chart, tz)


@router.get("/months/{year}/{month}", response_model=dict[str, CosmicDay])
async def get_month(
    year: int = Path(ge=1, le=9999),
    month: int = Path(ge=1, le=12),
    tz: tzinfo = Depends(get_calendar_timezone),
    settings: Settings = Depends(get_app_settings),
):
    return await _month_payload(year, month, None, tz, settings)


@router.post("/months/{year}/{month}", response_model=dict[str, CosmicDay])
async def get_personal_month(
    profile: BirthProfile,
    year: int = Path(ge=1, le=9999),
    month: int = Path(ge=1, le=12),
    tz: tzinfo = Depends(get_calendar_timezone),
    settings: Settings = Depends(get_app_settings),
):
    chart = await asyncio.to_thread(calculate_birth_chart, profile)
    return await _month_payload(year, month, chart, tz, settings)


@router.post("/birth-chart", response_model=BirthChart)
async def post_birth_chart(profile: BirthProfile):
    return await asyncio.to_thread(calculate_birth_chart, profile)


@router.get("/events", response_model=list[CosmicEvent])
async def get_events(
    start: date = Query(...),
    end: date = Query(...),
    tz: tzinfo = Depends(get_calendar_timezone),
    settings: Settings = Depends(get_app_settings),
):
    if end < start:
        raise HTTPException(status_code=400, detail="end must not be before start")
    span = (end - start).days + 1
    if span > settings.event_scan_max_days:
        raise HTTPException(
            status_code=400,
            detail=f"range of {span} days exceeds limit of {settings.event_scan_max_days}",
        )
    return await asyncio.to_thread(find_events, start, end, tz)
