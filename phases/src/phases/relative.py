"""Day counts and relative-time labels."""

from __future__ import annotations

from datetime import datetime

from phases.validation import require_finite, validate_instant


def days_between(from_instant: datetime, to_instant: datetime) -> int:
    """Whole calendar days from ``from_instant`` to ``to_instant``.

    Time of day is discarded; negative when ``to_instant`` is earlier.
    """
    validate_instant(from_instant, "from_instant")
    validate_instant(to_instant, "to_instant")
    return (to_instant.date() - from_instant.date()).days


def format_relative_time(days: int | float) -> str:
    value = require_finite(days, "days")
    if value == 0:
        return "Today"
    if value == 1:
        return "Tomorrow"
    if value == -1:
        return "Yesterday"
    count = int(value) if value.is_integer() else value
    if value > 0:
        return f"In {count} days"
    return f"{abs(count)} days ago"
