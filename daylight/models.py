"""Value types shared by the public API."""

from __future__ import annotations

from datetime import date, datetime, timedelta, tzinfo
from enum import Enum
from typing import Literal, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .astro import TWILIGHT_ANGLES
from .errors import InvalidCalendarComponents

__all__ = ["SolarEvent", "Location", "CalendarDay", "SunTimes"]


class SolarEvent(str, Enum):
    """Enumeration of supported solar events."""

    sunrise = "sunrise"
    sunset = "sunset"
    solar_noon = "solar_noon"
    civil_dawn = "civil_dawn"
    civil_dusk = "civil_dusk"
    nautical_dawn = "nautical_dawn"
    nautical_dusk = "nautical_dusk"
    astronomical_dawn = "astronomical_dawn"
    astronomical_dusk = "astronomical_dusk"

    @property
    def elevation(self) -> Optional[float]:
        """Solar elevation threshold in degrees, ``None`` for solar noon."""

        twilight = _EVENT_TWILIGHT.get(self)
        if twilight is None:
            return None
        return TWILIGHT_ANGLES[twilight]

    @property
    def is_rising(self) -> bool:
        return self in _RISING_EVENTS


_EVENT_TWILIGHT = {
    SolarEvent.sunrise: "official",
    SolarEvent.sunset: "official",
    SolarEvent.civil_dawn: "civil",
    SolarEvent.civil_dusk: "civil",
    SolarEvent.nautical_dawn: "nautical",
    SolarEvent.nautical_dusk: "nautical",
    SolarEvent.astronomical_dawn: "astronomical",
    SolarEvent.astronomical_dusk: "astronomical",
}

_RISING_EVENTS = frozenset(
    {
        SolarEvent.sunrise,
        SolarEvent.civil_dawn,
        SolarEvent.nautical_dawn,
        SolarEvent.astronomical_dawn,
    }
)


class Location(BaseModel):
    """Observer position together with the time zone results are expressed in."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    tz: tzinfo = Field(..., description="Time zone, a tzinfo or IANA name")
    latitude: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    longitude: float = Field(..., ge=-180.0, le=180.0, description="Longitude in degrees")

    @field_validator("tz", mode="before")
    @classmethod
    def resolve_tz(cls, value: object) -> object:
        if isinstance(value, str):
            try:
                return ZoneInfo(value)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ValueError(f"Unknown time zone: {value}") from exc
        return value

    @property
    def coordinate(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


class CalendarDay(BaseModel):
    """A civil date with no time of day attached."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1, le=9999)
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)

    @model_validator(mode="after")
    def validate_date(self) -> "CalendarDay":
        date(self.year, self.month, self.day)
        return self

    @classmethod
    def from_date(cls, value: date) -> "CalendarDay":
        return cls(year=value.year, month=value.month, day=value.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def _shift(self, days: int) -> "CalendarDay":
        try:
            return CalendarDay.from_date(self.to_date() + timedelta(days=days))
        except OverflowError as exc:
            raise InvalidCalendarComponents(
                f"{self.to_date().isoformat()} shifted by {days} days is out of range"
            ) from exc

    def next_day(self) -> "CalendarDay":
        return self._shift(1)

    def previous_day(self) -> "CalendarDay":
        return self._shift(-1)

    def midnight(self, tz: tzinfo) -> datetime:
        """Local midnight starting this day in *tz*."""

        return datetime(self.year, self.month, self.day, tzinfo=tz)

    def time_of(self, event: SolarEvent | str, location: Location) -> datetime:
        """Instant of *event* on this day at *location*.

        See :func:`daylight.api.time_of`.
        """

        from .api import time_of

        return time_of(event, self, location)


class SunTimes(BaseModel):
    """Every solar event of one day; events that do not occur are ``None``."""

    model_config = ConfigDict(frozen=True)

    day: CalendarDay
    latitude: float
    longitude: float
    status: Literal["ok", "polar_day", "polar_night"] = Field(
        ..., description="Classification of the day from its sunrise"
    )
    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None
    solar_noon: Optional[datetime] = None
    civil_dawn: Optional[datetime] = None
    civil_dusk: Optional[datetime] = None
    nautical_dawn: Optional[datetime] = None
    nautical_dusk: Optional[datetime] = None
    astronomical_dawn: Optional[datetime] = None
    astronomical_dusk: Optional[datetime] = None

    def get(self, event: SolarEvent | str) -> Optional[datetime]:
        return getattr(self, SolarEvent(event).value)
