"""Argument checks shared by the calculator functions."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from phases.errors import InvalidInput


def validate_instant(instant: object, label: str = "date") -> None:
    """Reject anything that is not a well-formed ``datetime``.

    Plain ``date`` objects are rejected as well: every calculation needs a
    time of day.
    """
    if not isinstance(instant, datetime):
        raise InvalidInput(label)


def is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def require_finite(value: object, label: str) -> float:
    """Return ``value`` as a float, or raise if it is not a finite number."""
    if not is_number(value) or not math.isfinite(value):
        raise InvalidInput(label, f"{label} must be a valid number")
    return float(value)


def require_phase(phase: object) -> float:
    """Phase arguments must lie in [0, 1]; out-of-range values are never clamped."""
    if not is_number(phase) or not math.isfinite(phase) or phase < 0 or phase > 1:
        raise InvalidInput("phase", "Phase must be between 0 and 1")
    return float(phase)


def same_awareness(a: datetime, b: datetime) -> bool:
    """True when both datetimes are naive or both are aware."""
    return (a.utcoffset() is None) == (b.utcoffset() is None)


def shift_instant(instant: datetime, delta: timedelta, label: str) -> datetime:
    """``instant + delta``, raising ``InvalidInput`` past the datetime range."""
    try:
        return instant + delta
    except OverflowError as exc:
        raise InvalidInput(label, f"{label} is too close to the supported date range limit") from exc
