"""Julian Date conversions and the J2000 time scale."""

from __future__ import annotations

import math
from datetime import UTC, datetime, timedelta, tzinfo
from typing import Tuple

import erfa

from .errors import InvalidCalendarComponents

__all__ = [
    "J2000",
    "DAYS_PER_CENTURY",
    "SECONDS_PER_DAY",
    "MINUTES_PER_DAY",
    "julian_day_number",
    "julian_date",
    "from_julian_date",
    "julian_centuries",
    "julian_date_from_centuries",
]

J2000 = erfa.DJ00  # 2000-01-01T12:00 TT as a Julian Date.
DAYS_PER_CENTURY = erfa.DJC
SECONDS_PER_DAY = erfa.DAYSEC
MINUTES_PER_DAY = 1440.0


def _tdiv(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""

    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def julian_day_number(year: int, month: int, day: int) -> int:
    """Return the Julian Day Number of a proleptic Gregorian date.

    The JDN is the integer day count at noon, so 00:00 of the same date is
    ``julian_day_number(...) - 0.5``.
    """

    a = _tdiv(month - 14, 12)
    return (
        _tdiv(1461 * (year + 4800 + a), 4)
        + _tdiv(367 * (month - 2 - 12 * a), 12)
        - _tdiv(3 * _tdiv(year + 4900 + a, 100), 4)
        + day
        - 32075
    )


def _local_components(instant: datetime, tz: tzinfo) -> Tuple[datetime, timedelta]:
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise InvalidCalendarComponents(
            f"instant must be timezone-aware (got naive datetime {instant.isoformat()})"
        )
    try:
        local = instant.astimezone(tz)
    except (OverflowError, ValueError) as exc:
        raise InvalidCalendarComponents(
            f"Cannot resolve {instant.isoformat()} in time zone {tz!r}: {exc}"
        ) from exc
    offset = local.utcoffset()
    if offset is None:
        raise InvalidCalendarComponents(f"Time zone {tz!r} has no UTC offset")
    return local, offset


def julian_date(instant: datetime, tz: tzinfo = UTC) -> float:
    """Convert a timezone-aware instant into a Julian Date on the UTC scale.

    Parameters
    ----------
    instant:
        Timezone-aware datetime.
    tz:
        Time zone in which the calendar components are extracted. The result
        does not depend on it; it only selects the civil day the integer
        part is computed from.

    Returns
    -------
    float
        Fractional Julian Date.

    Raises
    ------
    InvalidCalendarComponents
        If *instant* is naive or cannot be represented in *tz*.
    """

    local, offset = _local_components(instant, tz)
    jday = julian_day_number(local.year, local.month, local.day)
    milliseconds = local.microsecond / 1000.0

    jdatetime = (
        float(jday)
        + (local.hour - 12.0) / 24.0
        + local.minute / MINUTES_PER_DAY
        + local.second / SECONDS_PER_DAY
        + milliseconds / (SECONDS_PER_DAY * 1000.0)
    )
    return jdatetime - offset.total_seconds() / SECONDS_PER_DAY


def from_julian_date(jd: float, tz: tzinfo = UTC) -> datetime:
    """Convert a UTC Julian Date back into an aware datetime in *tz*.

    The result is truncated to whole seconds.
    """

    if not math.isfinite(jd):
        raise InvalidCalendarComponents(f"Julian Date must be finite (got {jd})")
    try:
        year, month, day, fraction = erfa.jd2cal(jd, 0.0)
    except erfa.ErfaError as exc:
        raise InvalidCalendarComponents(f"Julian Date {jd} is out of range: {exc}") from exc

    # Millisecond rounding absorbs representation error before truncation.
    seconds = math.floor(round(float(fraction) * SECONDS_PER_DAY, 3))
    try:
        midnight = datetime(int(year), int(month), int(day), tzinfo=UTC)
        return (midnight + timedelta(seconds=seconds)).astimezone(tz)
    except (OverflowError, ValueError) as exc:
        raise InvalidCalendarComponents(
            f"Julian Date {jd} has no civil representation: {exc}"
        ) from exc


def julian_centuries(jd: float) -> float:
    """Julian centuries elapsed since J2000.0."""

    return (jd - J2000) / DAYS_PER_CENTURY


def julian_date_from_centuries(centuries: float) -> float:
    return centuries * DAYS_PER_CENTURY + J2000
