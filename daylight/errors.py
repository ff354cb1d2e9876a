"""Exception hierarchy for solar event computations."""

from __future__ import annotations

__all__ = [
    "SolarEventError",
    "NeverRises",
    "NeverSets",
    "InvalidCalendarComponents",
]


class SolarEventError(RuntimeError):
    """Base class for failures raised while computing a solar event."""


class NeverRises(SolarEventError):
    """Raised when the sun stays below the requested elevation all day."""


class NeverSets(SolarEventError):
    """Raised when the sun stays above the requested elevation all day."""


class InvalidCalendarComponents(SolarEventError):
    """Raised when an instant cannot be resolved to calendar components."""
