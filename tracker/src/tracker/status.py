"""Status panel text: phase name, illumination, and next new/full moon countdowns."""

from __future__ import annotations

import calendar
from datetime import datetime

from moonglass.schemas.phases import PhaseStatus, TimelineMonth
from phases import (
    days_between,
    format_relative_time,
    illumination,
    moon_phase,
    next_full_moon,
    next_new_moon,
    phase_name,
    validate_instant,
)

from tracker.timeline import short_date


def build_status(instant: datetime) -> PhaseStatus:
    validate_instant(instant)
    phase = moon_phase(instant)
    lit = illumination(phase)
    new_moon = next_new_moon(instant)
    full_moon = next_full_moon(instant)
    days_to_new = days_between(instant, new_moon)
    days_to_full = days_between(instant, full_moon)
    return PhaseStatus(
        at=instant,
        phase=phase,
        name=phase_name(phase),
        illumination=lit,
        next_new_moon=new_moon,
        next_full_moon=full_moon,
        illumination_pct=round(lit),
        days_to_new_moon=days_to_new,
        days_to_full_moon=days_to_full,
        new_moon_relative=format_relative_time(days_to_new),
        full_moon_relative=format_relative_time(days_to_full),
    )


def long_date(instant: datetime) -> str:
    """``Thursday, January 6, 2000`` style label."""
    weekday = calendar.day_name[instant.weekday()]
    return f"{weekday}, {calendar.month_name[instant.month]} {instant.day}, {instant.year}"


def render_status(status: PhaseStatus) -> str:
    lines = [
        long_date(status.at),
        f"{status.name} ({status.illumination_pct}% illuminated)",
        f"Next New Moon: {short_date(status.next_new_moon)} ({status.new_moon_relative})",
        f"Next Full Moon: {short_date(status.next_full_moon)} ({status.full_moon_relative})",
    ]
    return "\n".join(lines)


def render_timeline(month: TimelineMonth) -> str:
    lines = [month.title]
    for marker in month.markers:
        flag = " *" if marker.current else ""
        lines.append(f"  {marker.label} [{marker.kind}]{flag}")
    if not month.markers:
        lines.append("  (no phase events)")
    return "\n".join(lines)
