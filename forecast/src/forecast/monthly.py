"""Month-wide scoring, sequential and fanned out over worker threads."""

from __future__ import annotations

import asyncio
import calendar
import logging
import time
from datetime import date, tzinfo

from cosmic_calendar.config import get_settings
from cosmic_calendar.schemas.cosmic_day import CosmicDay
from cosmic_calendar.schemas.natal import BirthChart
from ephemeris.julian import resolve_timezone

from forecast.scoring import calculate_cosmic_day

logger = logging.getLogger(__name__)


def days_in_month(year: int, month: int) -> list[date]:
    """Every calendar day of the month. Raises ValueError for a bad month."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    _, count = calendar.monthrange(year, month)
    return [date(year, month, day) for day in range(1, count + 1)]


def _resolve(tz: tzinfo | None) -> tzinfo:
    if tz is not None:
        return tz
    resolved, _, _ = resolve_timezone(get_settings().timezone)
    return resolved


def scores_for_month(
    year: int,
    month: int,
    birth_chart: BirthChart | None = None,
    tz: tzinfo | None = None,
) -> dict[date, CosmicDay]:
    """Score every day of a month independently."""
    zone = _resolve(tz)
    return {day: calculate_cosmic_day(day, birth_chart, zone) for day in days_in_month(year, month)}


async def scores_for_month_async(
    year: int,
    month: int,
    birth_chart: BirthChart | None = None,
    tz: tzinfo | None = None,
    concurrency: int | None = None,
) -> dict[date, CosmicDay]:
    """Score a month with per-day work fanned out to worker threads."""
    days = days_in_month(year, month)
    zone = _resolve(tz)
    limit = concurrency or get_settings().month_concurrency
    semaphore = asyncio.Semaphore(max(limit, 1))

    async def _score_one(day: date) -> CosmicDay:
        async with semaphore:
            return await asyncio.to_thread(calculate_cosmic_day, day, birth_chart, zone)

    start = time.monotonic()
    results = await asyncio.gather(*[_score_one(day) for day in days])
    logger.info(
        "Scored %04d-%02d: %d days in %.3fs with concurrency=%d",
        year,
        month,
        len(results),
        time.monotonic() - start,
        limit,
    )
    return dict(zip(days, results))
