"""Low-precision solar ephemeris (NOAA solar calculator formulation).

Every function takes Julian centuries since J2000.0 and returns degrees
unless stated otherwise.
"""

from __future__ import annotations

import math

__all__ = [
    "sin_deg",
    "cos_deg",
    "tan_deg",
    "geometric_mean_longitude_sun",
    "mean_obliquity_of_ecliptic",
    "obliquity_correction",
    "eccentricity_earth_orbit",
    "geometric_mean_anomaly_sun",
    "equation_of_center_sun",
    "true_longitude_sun",
    "apparent_longitude_sun",
    "declination_of_sun",
    "equation_of_time",
]


def sin_deg(x: float) -> float:
    return math.sin(math.radians(x))


def cos_deg(x: float) -> float:
    return math.cos(math.radians(x))


def tan_deg(x: float) -> float:
    return math.tan(math.radians(x))


def _omega(centuries: float) -> float:
    """Longitude of the ascending node of the lunar orbit."""

    return 125.04 - 1934.136 * centuries


def geometric_mean_longitude_sun(centuries: float) -> float:
    """Geometric mean longitude of the sun, normalized to ``[0, 360]``."""

    lon = 280.46646 + centuries * (36000.76983 + 0.0003032 * centuries)
    while lon > 360.0:
        lon -= 360.0
    while lon < 0.0:
        lon += 360.0
    return lon


def mean_obliquity_of_ecliptic(centuries: float) -> float:
    seconds = 21.448 - centuries * (46.8150 + centuries * (0.00059 - centuries * 0.001813))
    return 23.0 + (26.0 + seconds / 60.0) / 60.0


def obliquity_correction(centuries: float) -> float:
    """Mean obliquity corrected for nutation."""

    return mean_obliquity_of_ecliptic(centuries) + 0.00256 * cos_deg(_omega(centuries))


def eccentricity_earth_orbit(centuries: float) -> float:
    """Eccentricity of Earth's orbit (unitless)."""

    return 0.016708634 - centuries * (0.000042037 + 0.0000001267 * centuries)


def geometric_mean_anomaly_sun(centuries: float) -> float:
    return 357.52911 + centuries * (35999.05029 - 0.0001537 * centuries)


def equation_of_center_sun(centuries: float) -> float:
    m = geometric_mean_anomaly_sun(centuries)
    return (
        sin_deg(m) * (1.914602 - centuries * (0.004817 + 0.000014 * centuries))
        + sin_deg(2.0 * m) * (0.019993 - 0.000101 * centuries)
        + sin_deg(3.0 * m) * 0.000289
    )


def true_longitude_sun(centuries: float) -> float:
    return geometric_mean_longitude_sun(centuries) + equation_of_center_sun(centuries)


def apparent_longitude_sun(centuries: float) -> float:
    """True longitude corrected for nutation and aberration."""

    return true_longitude_sun(centuries) - 0.00569 - 0.00478 * sin_deg(_omega(centuries))


def declination_of_sun(centuries: float) -> float:
    """Apparent declination of the sun in degrees."""

    sint = sin_deg(obliquity_correction(centuries)) * sin_deg(apparent_longitude_sun(centuries))
    return math.degrees(math.asin(sint))


def equation_of_time(centuries: float) -> float:
    """Difference between true and mean solar time.

    Parameters
    ----------
    centuries:
        Julian centuries since J2000.0.

    Returns
    -------
    float
        Equation of time in minutes of time. Positive values mean the
        sundial runs ahead of the clock.
    """

    epsilon = obliquity_correction(centuries)
    l0 = geometric_mean_longitude_sun(centuries)
    e = eccentricity_earth_orbit(centuries)
    m = geometric_mean_anomaly_sun(centuries)

    y = tan_deg(epsilon / 2.0)
    y *= y

    sin2l0 = sin_deg(2.0 * l0)
    sinm = sin_deg(m)
    cos2l0 = cos_deg(2.0 * l0)
    sin4l0 = sin_deg(4.0 * l0)
    sin2m = sin_deg(2.0 * m)

    etime = (
        y * sin2l0
        - 2.0 * e * sinm
        + 4.0 * e * y * sinm * cos2l0
        - 0.5 * y * y * sin4l0
        - 1.25 * e * e * sin2m
    )
    # Radians of hour angle to minutes of time: 4 minutes per degree.
    return math.degrees(etime * 4.0)
