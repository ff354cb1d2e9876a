"""Hour-angle solver and event-time engine for solar events."""

from __future__ import annotations

import json
import logging
import math
from typing import Callable, Dict

from .ephemeris import declination_of_sun, equation_of_time
from .errors import NeverRises, NeverSets
from .julian import (
    MINUTES_PER_DAY,
    julian_centuries,
    julian_date_from_centuries,
)

__all__ = [
    "TWILIGHT_ANGLES",
    "REFRACTION_AT_HORIZON",
    "refractive_correction",
    "hour_angle_argument",
    "hour_angle_of_sunrise",
    "hour_angle_of_sunset",
    "solar_noon_utc",
    "event_utc_minutes",
]

LOGGER = logging.getLogger(__name__)

TWILIGHT_ANGLES: Dict[str, float] = {
    "official": 0.0,
    "civil": -6.0,
    "nautical": -12.0,
    "astronomical": -18.0,
}

REFRACTION_AT_HORIZON = 0.833  # Degrees, applied only at a 0.0 elevation.

HourAngleFunction = Callable[[float, float, float], float]


def refractive_correction(elevation: float) -> float:
    """Return the zenith offset used for *elevation*.

    Refraction is only modelled at the true horizon; for twilight thresholds
    the correction simply cancels the requested elevation.
    """

    if elevation == 0.0:
        return REFRACTION_AT_HORIZON
    return -elevation


def hour_angle_argument(latitude: float, declination: float, elevation: float) -> float:
    """Cosine of the hour angle at which the sun crosses *elevation*."""

    lat_rad = math.radians(latitude)
    dec_rad = math.radians(declination)
    correction = refractive_correction(elevation)
    return math.cos(math.radians(90.0 + correction)) / (
        math.cos(lat_rad) * math.cos(dec_rad)
    ) - math.tan(lat_rad) * math.tan(dec_rad)


def hour_angle_of_sunrise(latitude: float, declination: float, elevation: float) -> float:
    """Hour angle of the rising crossing of *elevation*, in radians.

    Raises
    ------
    NeverRises
        If the sun stays below *elevation* for the whole day.
    NeverSets
        If the sun stays above *elevation* for the whole day.
    """

    argument = hour_angle_argument(latitude, declination, elevation)
    if not -1.0 <= argument <= 1.0:
        LOGGER.debug(
            json.dumps(
                {
                    "event": "hour_angle_undefined",
                    "latitude": latitude,
                    "declination": declination,
                    "elevation": elevation,
                    "argument": argument,
                }
            )
        )
        if argument > 1.0:
            raise NeverRises(
                f"Sun never reaches {elevation} deg at latitude {latitude} "
                f"(declination {declination:.3f} deg)"
            )
        raise NeverSets(
            f"Sun never drops below {elevation} deg at latitude {latitude} "
            f"(declination {declination:.3f} deg)"
        )
    return math.acos(argument)


def hour_angle_of_sunset(latitude: float, declination: float, elevation: float) -> float:
    return -hour_angle_of_sunrise(latitude, declination, elevation)


def solar_noon_utc(centuries: float, west_longitude: float) -> float:
    """UTC time of solar noon in minutes from 00:00 Z.

    *west_longitude* is in degrees, positive west of Greenwich.
    """

    jdate = julian_date_from_centuries(centuries) + west_longitude / 360.0
    eq_time = equation_of_time(julian_centuries(jdate))
    noon_utc = 720.0 + west_longitude * 4.0 - eq_time

    refined = julian_date_from_centuries(centuries) - 0.5 + noon_utc / MINUTES_PER_DAY
    return 720.0 + west_longitude * 4.0 - equation_of_time(julian_centuries(refined))


def event_utc_minutes(
    jd: float,
    latitude: float,
    longitude: float,
    elevation: float,
    rising: bool,
) -> float:
    """Compute when the sun crosses *elevation* on the day starting at *jd*.

    Parameters
    ----------
    jd:
        Julian Date of the local midnight that starts the day.
    latitude, longitude:
        Geographic coordinates in degrees (east-positive longitude).
    elevation:
        Solar elevation threshold in degrees.
    rising:
        ``True`` for the morning crossing, ``False`` for the evening one.

    Returns
    -------
    float
        Minutes from 00:00 UTC of the calendar day. The value may fall
        outside ``[0, 1440)`` for locations far from Greenwich.

    Raises
    ------
    NeverRises, NeverSets
        If the sun does not cross *elevation* that day.
    """

    west_longitude = -longitude
    hour_angle: HourAngleFunction = hour_angle_of_sunrise if rising else hour_angle_of_sunset

    def time_utc(centuries: float) -> float:
        eq_time = equation_of_time(centuries)
        declination = declination_of_sun(centuries)
        delta = west_longitude - math.degrees(hour_angle(latitude, declination, elevation))
        return 720.0 + delta * 4.0 - eq_time

    noon_minutes = solar_noon_utc(julian_centuries(jd), west_longitude)

    first_pass = time_utc(julian_centuries(jd + noon_minutes / MINUTES_PER_DAY))
    return time_utc(julian_centuries(jd + first_pass / MINUTES_PER_DAY))
