"""Pydantic schemas for birth profile and birth chart data."""

from __future__ import annotations

from datetime import date, datetime, time

from pydantic import BaseModel, Field, computed_field

from cosmic_calendar.schemas.ephemeris import Element, Modality, PlanetaryPosition, ZodiacSign


class BirthProfile(BaseModel):
    """Birth data supplied by onboarding; read-only for the engine."""

    name: str = ""
    birth_date: date
    birth_time: time | None = None
    birth_location_name: str = ""
    birth_latitude: float = Field(default=0.0, ge=-90.0, le=90.0)
    birth_longitude: float = Field(default=0.0, ge=-180.0, le=180.0)
    birth_timezone: str = "UTC"

    @property
    def has_birth_time(self) -> bool:
        return self.birth_time is not None


class NatalCoordinates(BaseModel):
    latitude: float
    longitude: float


class ChartMetadata(BaseModel):
    birth_datetime_local: str
    birth_datetime_utc: str
    timezone: str
    time_known: bool = False
    birth_coordinates: NatalCoordinates
    julian_day: float
    warnings: list[str] = Field(default_factory=list)


class BirthChart(BaseModel):
    """Natal chart derived from a birth profile."""

    sun_sign: ZodiacSign
    moon_sign: ZodiacSign
    rising_sign: ZodiacSign | None = None
    planetary_positions: list[PlanetaryPosition]
    calculated_at: datetime
    calculation_metadata: ChartMetadata | None = None

    @computed_field
    @property
    def dominant_element(self) -> Element:
        counts = {element: 0 for element in Element}
        for position in self.planetary_positions:
            counts[position.sign.element] += 1
        return _majority(counts, Element.FIRE)

    @computed_field
    @property
    def dominant_modality(self) -> Modality:
        counts = {modality: 0 for modality in Modality}
        for position in self.planetary_positions:
            counts[position.sign.modality] += 1
        return _majority(counts, Modality.CARDINAL)


def _majority(counts: dict, default):
    # Strict comparison keeps the earliest member on ties.
    best = default
    best_count = 0
    for member, count in counts.items():
        if count > best_count:
            best, best_count = member, count
    return best
