from __future__ import annotations

import math
from datetime import datetime

import pytest

from daylight import (
    CalendarDay,
    Location,
    NeverRises,
    NeverSets,
    declination_of_sun,
    equation_of_time,
    julian_centuries,
    julian_date,
)
from daylight.astro import (
    hour_angle_argument,
    hour_angle_of_sunrise,
    hour_angle_of_sunset,
    refractive_correction,
    solar_noon_utc,
)
from daylight.ephemeris import (
    apparent_longitude_sun,
    geometric_mean_longitude_sun,
    obliquity_correction,
)


def _centuries_at_midnight(day: CalendarDay, location: Location) -> float:
    return julian_centuries(julian_date(day.midnight(location.tz), location.tz))


def test_sydney_reference_values(sydney: Location):
    t = _centuries_at_midnight(CalendarDay(year=2014, month=11, day=1), sydney)
    assert declination_of_sun(t) == pytest.approx(-14.18, abs=0.005)
    assert equation_of_time(t) == pytest.approx(16.42, abs=0.005)


def test_stockholm_reference_values(stockholm: Location):
    t = _centuries_at_midnight(CalendarDay(year=2015, month=7, day=1), stockholm)
    assert declination_of_sun(t) == pytest.approx(23.14, abs=0.005)
    assert equation_of_time(t) == pytest.approx(-3.70, abs=0.005)


@pytest.mark.parametrize("t", [-2.0, -0.15, 0.0, 0.149, 1.3])
def test_mean_longitude_is_normalized(t: float):
    assert 0.0 <= geometric_mean_longitude_sun(t) <= 360.0


def test_j2000_values():
    assert obliquity_correction(0.0) == pytest.approx(23.4378, abs=1e-3)
    assert apparent_longitude_sun(0.0) == pytest.approx(280.37, abs=0.01)
    assert declination_of_sun(0.0) == pytest.approx(-23.03, abs=0.01)


def test_refractive_correction():
    assert refractive_correction(0.0) == 0.833
    assert refractive_correction(-6.0) == 6.0
    assert refractive_correction(-18.0) == 18.0


@pytest.mark.parametrize(
    "latitude, declination, elevation",
    [
        (40.642, -14.5, 0.0),
        (-33.86, 23.1, 0.0),
        (59.33, 10.0, -12.0),
        (0.0, 0.0, -18.0),
        (-70.0, -10.0, -6.0),
    ],
)
def test_sunset_hour_angle_is_negated_sunrise(latitude: float, declination: float, elevation: float):
    rise = hour_angle_of_sunrise(latitude, declination, elevation)
    assert hour_angle_of_sunset(latitude, declination, elevation) == -rise
    assert 0.0 < rise < math.pi


def test_polar_night_hour_angle():
    assert hour_angle_argument(75.0, -23.44, 0.0) > 1.0
    with pytest.raises(NeverRises):
        hour_angle_of_sunrise(75.0, -23.44, 0.0)
    with pytest.raises(NeverRises):
        hour_angle_of_sunset(75.0, -23.44, 0.0)


def test_polar_day_hour_angle():
    assert hour_angle_argument(75.0, 23.44, 0.0) < -1.0
    with pytest.raises(NeverSets):
        hour_angle_of_sunrise(75.0, 23.44, 0.0)


def test_solar_noon_at_greenwich_follows_equation_of_time():
    t = julian_centuries(julian_date(datetime.fromisoformat("2015-11-03T00:00:00+00:00")))
    # Early November: the sundial is about 16 minutes ahead.
    assert solar_noon_utc(t, 0.0) == pytest.approx(720.0 - 16.4, abs=0.5)
