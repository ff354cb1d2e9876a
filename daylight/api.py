"""Public entry points for solar event times."""

from __future__ import annotations

import json
import logging
from datetime import UTC, date, datetime, timedelta

from .astro import event_utc_minutes
from .errors import InvalidCalendarComponents, NeverRises, NeverSets
from .julian import MINUTES_PER_DAY, from_julian_date, julian_date, julian_day_number
from .models import CalendarDay, Location, SolarEvent, SunTimes

__all__ = ["time_of", "time_of_next", "day_length", "sun_times"]

LOGGER = logging.getLogger(__name__)

When = datetime | CalendarDay | date


def _resolve_day(when: When, location: Location) -> CalendarDay:
    """Return the local calendar day of *when* in the location's time zone."""

    if isinstance(when, CalendarDay):
        return when
    if isinstance(when, datetime):
        if when.tzinfo is None or when.utcoffset() is None:
            raise InvalidCalendarComponents(
                f"instant must be timezone-aware (got naive datetime {when.isoformat()})"
            )
        try:
            local = when.astimezone(location.tz)
        except (OverflowError, ValueError) as exc:
            raise InvalidCalendarComponents(
                f"Cannot resolve {when.isoformat()} in time zone {location.tz!r}: {exc}"
            ) from exc
        return CalendarDay.from_date(local.date())
    if isinstance(when, date):
        return CalendarDay.from_date(when)
    raise TypeError(f"Expected datetime, date or CalendarDay, got {type(when).__name__}")


def _crossing(day: CalendarDay, location: Location, elevation: float, rising: bool) -> datetime:
    jd_midnight = julian_date(day.midnight(location.tz), location.tz)
    minutes = event_utc_minutes(
        jd_midnight,
        location.latitude,
        location.longitude,
        elevation,
        rising,
    )
    utc_midnight = julian_day_number(day.year, day.month, day.day) - 0.5
    return from_julian_date(utc_midnight + minutes / MINUTES_PER_DAY, location.tz)


def _time_of_day(event: SolarEvent, day: CalendarDay, location: Location) -> datetime:
    try:
        if event is SolarEvent.solar_noon:
            sunrise = _crossing(day, location, SolarEvent.sunrise.elevation, True).astimezone(UTC)
            sunset = _crossing(day, location, SolarEvent.sunset.elevation, False).astimezone(UTC)
            result = (sunrise + (sunset - sunrise) / 2).astimezone(location.tz)
        else:
            result = _crossing(day, location, event.elevation, event.is_rising)
    except (NeverRises, NeverSets) as exc:
        LOGGER.debug(
            json.dumps(
                {
                    "event": "solar_event",
                    "kind": event.value,
                    "date": day.to_date().isoformat(),
                    "lat": location.latitude,
                    "lon": location.longitude,
                    "status": type(exc).__name__,
                }
            )
        )
        raise

    LOGGER.debug(
        json.dumps(
            {
                "event": "solar_event",
                "kind": event.value,
                "date": day.to_date().isoformat(),
                "lat": location.latitude,
                "lon": location.longitude,
                "status": "ok",
                "time": result.isoformat(),
            }
        )
    )
    return result


def time_of(event: SolarEvent | str, when: When, location: Location) -> datetime:
    """Compute the instant of *event* on the local day of *when*.

    Parameters
    ----------
    event:
        Solar event, or its string value.
    when:
        Timezone-aware instant, :class:`CalendarDay` or :class:`datetime.date`.
        Instants are mapped to their calendar day in ``location.tz``.
    location:
        Observer location.

    Returns
    -------
    datetime
        Event instant expressed in ``location.tz``, truncated to whole
        seconds (solar noon may carry half a second).

    Raises
    ------
    NeverRises, NeverSets
        If the sun does not reach the event's elevation that day.
    InvalidCalendarComponents
        If *when* cannot be resolved to a calendar day.
    """

    event = SolarEvent(event)
    return _time_of_day(event, _resolve_day(when, location), location)


def time_of_next(event: SolarEvent | str, instant: datetime, location: Location) -> datetime:
    """Return the first occurrence of *event* strictly after *instant*.

    Days are advanced on the local calendar of ``location.tz`` so the search
    stays aligned with local midnight across DST transitions.
    """

    event = SolarEvent(event)
    if not isinstance(instant, datetime):
        raise TypeError(f"Expected datetime, got {type(instant).__name__}")
    day = _resolve_day(instant, location)
    occurrence = _time_of_day(event, day, location)
    while instant.astimezone(UTC) >= occurrence.astimezone(UTC):
        day = day.next_day()
        occurrence = _time_of_day(event, day, location)
    return occurrence


def day_length(when: When, location: Location) -> timedelta:
    """Time between sunrise and sunset on the local day of *when*."""

    day = _resolve_day(when, location)
    sunrise = _time_of_day(SolarEvent.sunrise, day, location)
    sunset = _time_of_day(SolarEvent.sunset, day, location)
    return sunset.astimezone(UTC) - sunrise.astimezone(UTC)


def sun_times(when: When, location: Location) -> SunTimes:
    """Compute every solar event for the local day of *when*.

    Events the sun does not reach that day are reported as ``None``;
    ``status`` is ``"polar_night"`` or ``"polar_day"`` when sunrise itself
    does not occur.
    """

    day = _resolve_day(when, location)
    times = {}
    status = "ok"
    for event in SolarEvent:
        try:
            times[event.value] = _time_of_day(event, day, location)
        except NeverRises:
            times[event.value] = None
            if event is SolarEvent.sunrise:
                status = "polar_night"
        except NeverSets:
            times[event.value] = None
            if event is SolarEvent.sunrise:
                status = "polar_day"

    return SunTimes(
        day=day,
        latitude=location.latitude,
        longitude=location.longitude,
        status=status,
        **times,
    )
