"""Calendar-month timeline of phase events."""

from __future__ import annotations

import calendar
import logging
from datetime import datetime

from moonglass.schemas.phases import TimelineDay, TimelineMarker, TimelineMonth
from phases import InvalidInput, find_phase_events, phase_name, validate_instant

logger = logging.getLogger(__name__)

MONTH_NAMES = list(calendar.month_name)
MONTH_ABBRS = list(calendar.month_abbr)


def _check_month(year: int, month: int) -> None:
    if isinstance(year, bool) or not isinstance(year, int) or not 2 <= year <= 9998:
        raise InvalidInput("year", "year must be an integer between 2 and 9998")
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidInput("month", "month must be an integer between 1 and 12")


def days_in_month(year: int, month: int) -> int:
    _check_month(year, month)
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    """Midnight of the first and of the last day of a month."""
    last = days_in_month(year, month)
    return datetime(year, month, 1), datetime(year, month, last)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    _check_month(year, month)
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def day_position(day: int, month_days: int) -> float:
    """Horizontal position of a day on the track, as a percentage."""
    if month_days == 1:
        return 50.0
    position = (day - 1) / (month_days - 1) * 100
    return max(0.0, min(100.0, position))


def is_major_day(day: int, month_days: int) -> bool:
    return day % 7 == 1 or day == 15 or day == month_days


def is_same_day(a: datetime, b: datetime) -> bool:
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def short_date(instant: datetime) -> str:
    """``Jan 6`` style label."""
    return f"{MONTH_ABBRS[instant.month]} {instant.day}"


def build_timeline(year: int, month: int, current: datetime | None = None) -> TimelineMonth:
    """Day markers, phase markers, and cursor for one month.

    Args:
        year: Calendar year.
        month: Calendar month (1-12).
        current: Selected instant; marks the matching phase marker and
            places the cursor when it falls inside the month.
    """
    if current is not None:
        validate_instant(current, "current")
    month_start, month_end = month_bounds(year, month)
    month_days = month_end.day

    days = [
        TimelineDay(day=day, position=day_position(day, month_days), major=is_major_day(day, month_days))
        for day in range(1, month_days + 1)
    ]

    markers: list[TimelineMarker] = []
    for event in find_phase_events(month_start, month_end):
        name = phase_name(event.phase)
        markers.append(
            TimelineMarker(
                at=event.at,
                kind=event.kind,
                phase=event.phase,
                name=name,
                label=f"{name} - {short_date(event.at)}",
                position=day_position(event.at.day, month_days),
                current=current is not None and is_same_day(event.at, current),
            )
        )

    cursor = None
    if current is not None and (current.year, current.month) == (year, month):
        cursor = day_position(current.day, month_days)

    logger.debug("Timeline %04d-%02d: %d markers", year, month, len(markers))
    return TimelineMonth(
        year=year,
        month=month,
        title=f"{MONTH_NAMES[month]} {year}",
        days=days,
        markers=markers,
        cursor=cursor,
    )
