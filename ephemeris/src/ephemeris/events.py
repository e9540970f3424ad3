"""Retrograde stations and new/full moon detection over a date range."""

from __future__ import annotations

import logging
from datetime import UTC, date, timedelta, tzinfo

from cosmic_calendar.schemas.ephemeris import MoonPhase, Planet
from cosmic_calendar.schemas.events import CosmicEvent, EventType, Impact

from ephemeris.calculator import active_retrogrades_from, calculate_positions, moon_phase_from
from ephemeris.julian import start_of_day_jd

logger = logging.getLogger(__name__)

RETROGRADE_IMPACT: dict[Planet, Impact] = {
    Planet.MERCURY: Impact.CHALLENGING,
    Planet.VENUS: Impact.CHALLENGING,
    Planet.MARS: Impact.CHALLENGING,
}

LUNATIONS: dict[MoonPhase, tuple[EventType, Impact, str]] = {
    MoonPhase.NEW_MOON: (
        EventType.NEW_MOON,
        Impact.POSITIVE,
        "Set your intentions for the lunar cycle ahead.",
    ),
    MoonPhase.FULL_MOON: (
        EventType.FULL_MOON,
        Impact.VERY_POSITIVE,
        "Heightened emotions and intuition. Perfect for manifestation rituals.",
    ),
}

_TYPE_ORDER = {event_type: index for index, event_type in enumerate(EventType)}
_PLANET_ORDER = {planet: index for index, planet in enumerate(Planet)}


def _state_at(jd: float) -> tuple[set[Planet], MoonPhase]:
    positions = calculate_positions(jd)
    return set(active_retrogrades_from(positions)), moon_phase_from(positions)


def find_events(start: date, end: date, tz: tzinfo = UTC) -> list[CosmicEvent]:
    """Scan ``[start, end]`` day by day for retrograde and lunation transitions.

    Each day is sampled at local midnight. A transition is reported on the
    first day the new state is observed; state on the day before ``start``
    is the baseline, so retrogrades already under way are not reported as
    beginning.
    """
    if end < start:
        raise ValueError(f"end date {end} is before start date {start}")

    events: list[CosmicEvent] = []
    open_retrogrades: dict[Planet, int] = {}
    # Baseline one day before local midnight of start; date.min has no previous date
    previous_retro, previous_phase = _state_at(start_of_day_jd(start, tz) - 1.0)

    for offset in range((end - start).days + 1):
        day = start + timedelta(days=offset)
        retro, phase = _state_at(start_of_day_jd(day, tz))

        for planet in Planet:
            if planet in retro and planet not in previous_retro:
                open_retrogrades[planet] = len(events)
                events.append(
                    CosmicEvent(
                        type=EventType.RETROGRADE,
                        planet=planet,
                        start_date=day,
                        title=f"{planet.value} Retrograde Begins",
                        description=planet.retrograde_impact,
                        impact=RETROGRADE_IMPACT.get(planet, Impact.NEUTRAL),
                    )
                )
            elif planet in previous_retro and planet not in retro:
                index = open_retrogrades.pop(planet, None)
                if index is not None:
                    events[index] = events[index].model_copy(
                        update={"end_date": day - timedelta(days=1)}
                    )
                events.append(
                    CosmicEvent(
                        type=EventType.DIRECT_STATION,
                        planet=planet,
                        start_date=day,
                        title=f"{planet.value} Goes Direct",
                        description="The retrograde period ends. Forward motion resumes!",
                        impact=Impact.POSITIVE,
                    )
                )

        if phase in LUNATIONS and phase != previous_phase:
            event_type, impact, description = LUNATIONS[phase]
            events.append(
                CosmicEvent(
                    type=event_type,
                    moon_phase=phase,
                    start_date=day,
                    title=phase.value,
                    description=description,
                    impact=impact,
                )
            )

        previous_retro, previous_phase = retro, phase

    events.sort(
        key=lambda e: (
            e.start_date,
            _TYPE_ORDER[e.type],
            _PLANET_ORDER[e.planet] if e.planet is not None else -1,
        )
    )
    logger.info("Found %d cosmic events between %s and %s", len(events), start, end)
    return events
