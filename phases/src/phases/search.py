"""Next new/full moon search.

Two stages: a coarse 2-hour scan across a bit more than one synodic month,
then a 30-minute scan of +/-12 hours around the best coarse hit.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from phases.errors import PhaseNotFound
from phases.lunar import moon_phase, phase_distance
from phases.validation import shift_instant, validate_instant

logger = logging.getLogger(__name__)

NEW_MOON = 0.0
FULL_MOON = 0.5

# Coarse window is one (rounded) synodic month plus a day
SEARCH_SYNODIC_DAYS = 29.53
COARSE_STEP_HOURS = 2
COARSE_HIT = 0.02
COARSE_ACCEPT = 0.1

REFINE_HALF_WINDOW_MINUTES = 720
REFINE_STEP_MINUTES = 30


def next_new_moon(from_instant: datetime) -> datetime:
    """Find the next new moon strictly after ``from_instant``."""
    validate_instant(from_instant, "from_instant")
    return _find_next_phase(from_instant, NEW_MOON, "new moon")


def next_full_moon(from_instant: datetime) -> datetime:
    """Find the next full moon strictly after ``from_instant``."""
    validate_instant(from_instant, "from_instant")
    return _find_next_phase(from_instant, FULL_MOON, "full moon")


def _find_next_phase(from_instant: datetime, target: float, label: str) -> datetime:
    # Coarse window plus the refinement half-window on either side
    shift_instant(from_instant, -timedelta(minutes=REFINE_HALF_WINDOW_MINUTES), "from_instant")
    shift_instant(from_instant, timedelta(days=SEARCH_SYNODIC_DAYS + 2), "from_instant")
    start = from_instant + timedelta(hours=1)
    max_hours = (SEARCH_SYNODIC_DAYS + 1) * 24

    best_at = start
    best_diff = 1.0
    hours = 0
    while hours < max_hours:
        candidate = start + timedelta(hours=hours)
        diff = phase_distance(moon_phase(candidate), target)
        if diff < best_diff:
            best_diff = diff
            best_at = candidate
        if best_diff < COARSE_HIT:
            logger.debug("Coarse %s hit at %s (diff=%.5f)", label, best_at.isoformat(), best_diff)
            return _refine(best_at, target, from_instant)
        hours += COARSE_STEP_HOURS

    if best_diff < COARSE_ACCEPT:
        logger.warning(
            "Accepting loose coarse %s hit at %s (diff=%.5f)",
            label,
            best_at.isoformat(),
            best_diff,
        )
        return _refine(best_at, target, from_instant)

    raise PhaseNotFound(label)


def _refine(approximate: datetime, target: float, after: datetime) -> datetime:
    """Scan +/-12h around ``approximate`` in 30-minute steps.

    Candidates at or before ``after`` are skipped.
    """
    best_at = approximate
    best_diff = phase_distance(moon_phase(approximate), target)
    for minutes in range(
        -REFINE_HALF_WINDOW_MINUTES,
        REFINE_HALF_WINDOW_MINUTES + 1,
        REFINE_STEP_MINUTES,
    ):
        candidate = approximate + timedelta(minutes=minutes)
        if candidate <= after:
            continue
        diff = phase_distance(moon_phase(candidate), target)
        if diff < best_diff:
            best_diff = diff
            best_at = candidate
    return best_at
