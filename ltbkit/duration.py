"""Conversions between nanosecond durations and other units of time."""

from __future__ import annotations

from datetime import timedelta
from fractions import Fraction
from typing import Union

__all__ = [
    "Duration",
    "to_hours",
    "to_minutes",
    "to_seconds",
    "to_millis",
    "to_micros",
    "to_nanos",
    "duration_hours",
    "duration_minutes",
    "duration_seconds",
    "duration_millis",
    "duration_micros",
    "duration_nanos",
]

Duration = int
"""A span of time counted in whole nanoseconds, as a monotonic clock measures it."""

_NANOS = 1
_MICROS = 1_000
_MILLIS = 1_000_000
_SECONDS = 1_000_000_000
_MINUTES = 60 * _SECONDS
_HOURS = 60 * _MINUTES

Number = Union[int, float, Fraction]


def _as_nanos(duration: Union[Duration, timedelta]) -> int:
    if isinstance(duration, timedelta):
        return (duration // timedelta(microseconds=1)) * _MICROS
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise TypeError(
            f"duration must be an int of nanoseconds or a timedelta, "
            f"not {type(duration).__name__}"
        )
    return duration


def _to_unit(duration: Union[Duration, timedelta], period: int) -> float:
    return _as_nanos(duration) / period


def _from_unit(value: Number, period: int) -> Duration:
    if isinstance(value, bool):
        raise TypeError("duration value must be a number, not bool")
    if isinstance(value, int):
        return value * period
    if isinstance(value, (float, Fraction)):
        # Truncates toward zero, like a cast to an integral duration.
        return int(Fraction(value) * period)
    raise TypeError(f"duration value must be a number, not {type(value).__name__}")


def to_hours(duration: Union[Duration, timedelta]) -> float:
    """Return the duration as a (possibly fractional) number of hours."""
    return _to_unit(duration, _HOURS)


def to_minutes(duration: Union[Duration, timedelta]) -> float:
    """Return the duration as a (possibly fractional) number of minutes."""
    return _to_unit(duration, _MINUTES)


def to_seconds(duration: Union[Duration, timedelta]) -> float:
    """Return the duration as a (possibly fractional) number of seconds."""
    return _to_unit(duration, _SECONDS)


def to_millis(duration: Union[Duration, timedelta]) -> float:
    """Return the duration as a (possibly fractional) number of milliseconds."""
    return _to_unit(duration, _MILLIS)


def to_micros(duration: Union[Duration, timedelta]) -> float:
    """Return the duration as a (possibly fractional) number of microseconds."""
    return _to_unit(duration, _MICROS)


def to_nanos(duration: Union[Duration, timedelta]) -> float:
    """Return the duration as a number of nanoseconds."""
    return _to_unit(duration, _NANOS)


def duration_hours(value: Number) -> Duration:
    """Build a duration from a number of hours."""
    return _from_unit(value, _HOURS)


def duration_minutes(value: Number) -> Duration:
    """Build a duration from a number of minutes."""
    return _from_unit(value, _MINUTES)


def duration_seconds(value: Number) -> Duration:
    """Build a duration from a number of seconds."""
    return _from_unit(value, _SECONDS)


def duration_millis(value: Number) -> Duration:
    """Build a duration from a number of milliseconds."""
    return _from_unit(value, _MILLIS)


def duration_micros(value: Number) -> Duration:
    """Build a duration from a number of microseconds."""
    return _from_unit(value, _MICROS)


def duration_nanos(value: Number) -> Duration:
    """Build a duration from a number of nanoseconds."""
    return _from_unit(value, _NANOS)