"""Day-by-day phase event detection over a date range."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from moonglass.schemas.phases import PhaseEvent

from phases.errors import InvalidInput
from phases.lunar import moon_phase
from phases.validation import same_awareness, shift_instant, validate_instant

logger = logging.getLogger(__name__)

EVENT_TOLERANCE = 0.05
# Extra days scanned on each side so edge days have neighbours to compare with
EDGE_PADDING_DAYS = 2

# Checked in order; the first matching target wins
EVENT_TARGETS: list[tuple[float, str]] = [
    (0.5, "full-moon"),
    (0.25, "quarter"),
    (0.75, "quarter"),
]


def _classify(phase: float, prev_phase: float, next_phase: float) -> str | None:
    if phase < EVENT_TOLERANCE and (prev_phase > 1 - EVENT_TOLERANCE or next_phase > EVENT_TOLERANCE):
        return "new-moon"
    for target, kind in EVENT_TARGETS:
        if abs(phase - target) < EVENT_TOLERANCE and (
            abs(prev_phase - target) > EVENT_TOLERANCE
            or abs(next_phase - target) > EVENT_TOLERANCE
        ):
            return kind
    return None


def find_phase_events(start: datetime, end: datetime) -> list[PhaseEvent]:
    """Find all major phase events in a date range.

    Samples one instant per calendar day at ``start``'s time of day and
    compares it with the previous and next day. Neighbouring days can both
    qualify for the same phase; both are returned.

    Returns:
        Chronological list of events within [start, end]; empty when
        ``end`` precedes ``start``.
    """
    validate_instant(start, "start")
    validate_instant(end, "end")
    if not same_awareness(start, end):
        raise InvalidInput("end", "start and end must both be naive or both be timezone-aware")

    events: list[PhaseEvent] = []
    one_day = timedelta(days=1)
    # Neighbour lookups reach one day past the padding on each side
    reach = timedelta(days=EDGE_PADDING_DAYS + 1)
    shift_instant(start, -reach, "start")
    shift_instant(end, reach, "end")
    cursor = start - timedelta(days=EDGE_PADDING_DAYS)
    limit = end + timedelta(days=EDGE_PADDING_DAYS)
    while cursor <= limit:
        phase = moon_phase(cursor)
        kind = _classify(phase, moon_phase(cursor - one_day), moon_phase(cursor + one_day))
        if kind and start <= cursor <= end:
            events.append(PhaseEvent(at=cursor, kind=kind, phase=phase))
        cursor += one_day

    logger.debug("Found %d phase events between %s and %s", len(events), start.isoformat(), end.isoformat())
    return events
