from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from daylight import CalendarDay, Location, SolarEvent


def test_location_resolves_zone_name():
    location = Location(tz="Europe/Stockholm", latitude=59.33, longitude=18.067)
    assert location.tz == ZoneInfo("Europe/Stockholm")
    assert location.coordinate == (59.33, 18.067)


def test_location_accepts_fixed_offset():
    tz = timezone(timedelta(hours=-5))
    assert Location(tz=tz, latitude=0.0, longitude=0.0).tz is tz


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tz": UTC, "latitude": 95.0, "longitude": 0.0},
        {"tz": UTC, "latitude": 0.0, "longitude": -181.0},
        {"tz": "Mars/Olympus_Mons", "latitude": 0.0, "longitude": 0.0},
        {"tz": 5, "latitude": 0.0, "longitude": 0.0},
    ],
)
def test_location_validation_error(kwargs):
    with pytest.raises(ValidationError):
        Location(**kwargs)


def test_location_is_immutable():
    location = Location(tz=UTC, latitude=10.0, longitude=10.0)
    with pytest.raises(ValidationError):
        location.latitude = 20.0  # type: ignore[misc]


def test_calendar_day_validation_error():
    with pytest.raises(ValidationError):
        CalendarDay(year=2015, month=2, day=29)
    with pytest.raises(ValidationError):
        CalendarDay(year=2015, month=13, day=1)


def test_calendar_day_arithmetic():
    day = CalendarDay(year=2015, month=12, day=31)
    assert day.next_day() == CalendarDay(year=2016, month=1, day=1)
    assert CalendarDay(year=2016, month=3, day=1).previous_day() == CalendarDay(
        year=2016, month=2, day=29
    )
    assert CalendarDay.from_date(date(2014, 11, 1)).to_date() == date(2014, 11, 1)


def test_calendar_day_midnight_is_local():
    tz = ZoneInfo("America/New_York")
    midnight = CalendarDay(year=2014, month=11, day=2).midnight(tz)
    assert midnight == datetime(2014, 11, 2, tzinfo=tz)
    assert midnight.utcoffset() == timedelta(hours=-4)
    # 25 hours elapse before the next local midnight.
    following = CalendarDay(year=2014, month=11, day=3).midnight(tz)
    assert following.astimezone(UTC) - midnight.astimezone(UTC) == timedelta(hours=25)


def test_event_elevations():
    assert SolarEvent.sunrise.elevation == 0.0
    assert SolarEvent.sunset.elevation == 0.0
    assert SolarEvent.civil_dusk.elevation == -6.0
    assert SolarEvent.nautical_dawn.elevation == -12.0
    assert SolarEvent.astronomical_dusk.elevation == -18.0
    assert SolarEvent.solar_noon.elevation is None


def test_event_direction():
    rising = {event for event in SolarEvent if event.is_rising}
    assert rising == {
        SolarEvent.sunrise,
        SolarEvent.civil_dawn,
        SolarEvent.nautical_dawn,
        SolarEvent.astronomical_dawn,
    }
    assert SolarEvent("civil_dusk") is SolarEvent.civil_dusk
