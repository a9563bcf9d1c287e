"""Julian Day conversion."""

from __future__ import annotations

import math
from datetime import datetime

from phases.errors import InvalidInput
from phases.validation import require_finite, validate_instant

# Earliest year the Gregorian Julian Day formula below is valid for
MIN_YEAR = -4712


def julian_day(
    year: float,
    month: float,
    day: float,
    hour: float = 0,
    minute: float = 0,
    second: float = 0,
) -> float:
    """Calculate the Julian Day Number for a Gregorian calendar date.

    Jan/Feb count as months 13/14 of the previous year so the century
    correction lines up with the March-based year.

    Raises:
        InvalidInput: if any component is non-finite, month is outside
            1..12, day outside 1..31, or year before -4712.
    """
    y = require_finite(year, "year")
    m = require_finite(month, "month")
    d = require_finite(day, "day")
    h = require_finite(hour, "hour")
    mi = require_finite(minute, "minute")
    s = require_finite(second, "second")

    if y < MIN_YEAR:
        raise InvalidInput("year", "Invalid date parameters")
    if m < 1 or m > 12:
        raise InvalidInput("month", "Invalid date parameters")
    if d < 1 or d > 31:
        raise InvalidInput("day", "Invalid date parameters")

    if m <= 2:
        y -= 1
        m += 12

    a_term = math.floor(y / 100)
    b_term = 2 - a_term + math.floor(a_term / 4)
    day_fraction = (h + mi / 60 + s / 3600) / 24
    return (
        math.floor(365.25 * (y + 4716))
        + math.floor(30.6001 * (m + 1))
        + d
        + day_fraction
        + b_term
        - 1524.5
    )


def datetime_to_jd(instant: datetime, label: str = "date") -> float:
    """Julian Day from an instant's wall-clock components (no UTC normalization)."""
    validate_instant(instant, label)
    return julian_day(
        instant.year,
        instant.month,
        instant.day,
        instant.hour,
        instant.minute,
        instant.second,
    )
