"""Current-date state with change notifications."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from datetime import datetime, timedelta

from moonglass.config import local_now
from moonglass.schemas.phases import PhaseInfo
from phases import (
    InvalidInput,
    illumination,
    moon_phase,
    next_full_moon,
    next_new_moon,
    phase_name,
    validate_instant,
)
from phases.validation import require_finite

logger = logging.getLogger(__name__)

DateChangeCallback = Callable[[datetime], None]


class DateTracker:
    """Holds the selected instant and notifies a listener when it moves."""

    def __init__(
        self,
        initial: datetime | None = None,
        on_change: DateChangeCallback | None = None,
    ) -> None:
        if initial is None:
            initial = local_now()
        validate_instant(initial, "initial")
        if on_change is not None and not callable(on_change):
            raise InvalidInput("on_change", "on_change must be a function")
        self._current = initial
        self._on_change = on_change

    @property
    def current(self) -> datetime:
        return self._current

    def set_date(self, instant: datetime) -> None:
        validate_instant(instant)
        self._current = instant
        logger.debug("Date set to %s", instant.isoformat())
        if self._on_change is not None:
            self._on_change(self._current)

    def add_days(self, days: int | float) -> None:
        """Move by whole calendar days, keeping the time of day.

        Fractional counts truncate the resulting day of month toward zero,
        so ``add_days(1.5)`` moves one day.
        """
        value = require_finite(days, "days")
        whole = math.trunc(self._current.day + value) - self._current.day
        try:
            moved = self._current + timedelta(days=whole)
        except OverflowError as exc:
            raise InvalidInput("days", "days moves past the supported date range") from exc
        self.set_date(moved)

    def go_to_next_new_moon(self) -> None:
        self.set_date(next_new_moon(self._current))

    def go_to_next_full_moon(self) -> None:
        self.set_date(next_full_moon(self._current))

    def go_to_today(self) -> None:
        self.set_date(local_now())

    def phase_info(self) -> PhaseInfo:
        """Phase snapshot for the current instant."""
        phase = moon_phase(self._current)
        return PhaseInfo(
            at=self._current,
            phase=phase,
            name=phase_name(phase),
            illumination=illumination(phase),
            next_new_moon=next_new_moon(self._current),
            next_full_moon=next_full_moon(self._current),
        )
