"""Tests for phase event detection."""

from datetime import datetime, timedelta, timezone

import pytest
from moonglass.schemas.phases import PhaseEvent
from phases.errors import InvalidInput
from phases.events import find_phase_events


def _summary(events):
    return [(e.at.day, e.kind) for e in events]


def test_january_2000_events():
    """Adjacent-day hits are kept as separate events."""
    events = find_phase_events(datetime(2000, 1, 1), datetime(2000, 1, 31))
    assert _summary(events) == [
        (6, "new-moon"),
        (7, "new-moon"),
        (12, "quarter"),
        (14, "quarter"),
        (20, "full-moon"),
        (22, "full-moon"),
        (27, "quarter"),
        (29, "quarter"),
    ]


def test_events_are_chronological_and_in_range():
    start = datetime(2026, 1, 1)
    end = datetime(2026, 12, 31)
    events = find_phase_events(start, end)
    assert events
    assert all(start <= e.at <= end for e in events)
    assert [e.at for e in events] == sorted(e.at for e in events)
    assert {e.kind for e in events} == {"new-moon", "full-moon", "quarter"}


def test_edge_day_uses_padding_for_neighbours():
    day = datetime(2000, 1, 7)
    events = find_phase_events(day, day)
    assert len(events) == 1
    assert events[0].kind == "new-moon"
    assert events[0].at == day


def test_event_records_phase_and_is_immutable():
    events = find_phase_events(datetime(2000, 1, 6), datetime(2000, 1, 6))
    event = events[0]
    assert isinstance(event, PhaseEvent)
    assert event.phase == pytest.approx(0.0, abs=1e-12)
    with pytest.raises(Exception):
        event.kind = "full-moon"


def test_time_of_day_of_start_is_kept():
    events = find_phase_events(datetime(2000, 1, 1, 18, 30), datetime(2000, 1, 31))
    assert events
    assert all((e.at.hour, e.at.minute) == (18, 30) for e in events)


def test_reversed_range_is_empty():
    assert find_phase_events(datetime(2000, 2, 1), datetime(2000, 1, 1)) == []


def test_aware_range():
    tz = timezone(timedelta(hours=-5))
    events = find_phase_events(datetime(2000, 1, 1, tzinfo=tz), datetime(2000, 1, 31, tzinfo=tz))
    assert _summary(events)[0] == (6, "new-moon")


def test_rejects_mixed_awareness():
    with pytest.raises(InvalidInput):
        find_phase_events(datetime(2000, 1, 1), datetime(2000, 1, 31, tzinfo=timezone.utc))


def test_rejects_invalid_dates():
    with pytest.raises(InvalidInput) as exc_info:
        find_phase_events(datetime(2000, 1, 1), None)
    assert exc_info.value.label == "end"
    with pytest.raises(InvalidInput) as exc_info:
        find_phase_events("2000-01-01", datetime(2000, 1, 31))
    assert exc_info.value.label == "start"


def test_range_at_datetime_limits_raises_invalid_input():
    with pytest.raises(InvalidInput) as exc_info:
        find_phase_events(datetime(1, 1, 1), datetime(1, 1, 10))
    assert exc_info.value.label == "start"
    with pytest.raises(InvalidInput) as exc_info:
        find_phase_events(datetime(9999, 12, 20), datetime.max)
    assert exc_info.value.label == "end"


def test_range_just_inside_datetime_limits():
    events = find_phase_events(datetime(1, 1, 4), datetime(1, 2, 28))
    assert all(datetime(1, 1, 4) <= e.at <= datetime(1, 2, 28) for e in events)
