"""Public API endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from fastapi import APIRouter, Query
from moonglass.config import get_settings, local_now
from moonglass.schemas.phases import PhaseEvent, PhaseStatus, TimelineMonth
from phases import InvalidInput, find_phase_events, next_full_moon, next_new_moon
from tracker.status import build_status
from tracker.timeline import build_timeline

router = APIRouter()


def _month_span(start: datetime, end: datetime) -> int:
    return (end.year - start.year) * 12 + (end.month - start.month)


@router.get("/phase", response_model=PhaseStatus)
async def phase_status(at: datetime | None = Query(default=None)):
    return build_status(at or local_now())


@router.get("/next/{kind}")
async def next_phase(kind: Literal["new", "full"], at: datetime | None = Query(default=None)):
    start = at or local_now()
    found = next_new_moon(start) if kind == "new" else next_full_moon(start)
    return {"kind": kind, "at": found.isoformat()}


@router.get("/events", response_model=list[PhaseEvent])
async def phase_events(start: datetime = Query(...), end: datetime = Query(...)):
    limit = get_settings().timeline_span_months_max
    if _month_span(start, end) > limit:
        raise InvalidInput("end", f"Range may span at most {limit} months")
    return find_phase_events(start, end)


@router.get("/timeline/{year}/{month}", response_model=TimelineMonth)
async def timeline(year: int, month: int, current: datetime | None = Query(default=None)):
    return build_timeline(year, month, current=current)
