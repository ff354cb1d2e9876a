"""Sunrise, sunset, solar noon and twilight times from the NOAA solar equations."""

from .api import day_length, sun_times, time_of, time_of_next
from .ephemeris import declination_of_sun, equation_of_time
from .errors import InvalidCalendarComponents, NeverRises, NeverSets, SolarEventError
from .julian import (
    from_julian_date,
    julian_centuries,
    julian_date,
    julian_date_from_centuries,
)
from .models import CalendarDay, Location, SolarEvent, SunTimes

__all__ = [
    "time_of",
    "time_of_next",
    "day_length",
    "sun_times",
    "julian_date",
    "from_julian_date",
    "julian_centuries",
    "julian_date_from_centuries",
    "declination_of_sun",
    "equation_of_time",
    "SolarEvent",
    "Location",
    "CalendarDay",
    "SunTimes",
    "SolarEventError",
    "NeverRises",
    "NeverSets",
    "InvalidCalendarComponents",
]
