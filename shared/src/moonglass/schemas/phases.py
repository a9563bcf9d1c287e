"""Pydantic schemas for lunar phase data."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PhaseKind = Literal["new-moon", "full-moon", "quarter"]


class PhaseEvent(BaseModel):
    """A day judged to carry a named phase."""

    model_config = ConfigDict(frozen=True)

    at: datetime
    kind: PhaseKind
    phase: float = Field(ge=0.0, lt=1.0)


class PhaseInfo(BaseModel):
    """Phase snapshot for one instant."""

    at: datetime
    phase: float = Field(ge=0.0, lt=1.0)
    name: str
    illumination: float = Field(ge=0.0, le=100.0)
    next_new_moon: datetime
    next_full_moon: datetime


class PhaseStatus(PhaseInfo):
    """Phase snapshot plus the human-readable countdowns shown in the status panel."""

    illumination_pct: int
    days_to_new_moon: int
    days_to_full_moon: int
    new_moon_relative: str
    full_moon_relative: str


class TimelineDay(BaseModel):
    day: int
    position: float
    major: bool = False


class TimelineMarker(BaseModel):
    at: datetime
    kind: PhaseKind
    phase: float
    name: str
    label: str
    position: float
    current: bool = False


class TimelineMonth(BaseModel):
    """One calendar month of the phase timeline."""

    year: int
    month: int
    title: str
    days: list[TimelineDay] = Field(default_factory=list)
    markers: list[TimelineMarker] = Field(default_factory=list)
    cursor: float | None = None
