"""Lunar phase calculator.

Pure functions over ``datetime`` wall-clock instants and phase fractions.
"""

from phases.errors import InvalidInput, PhaseError, PhaseNotFound
from phases.events import find_phase_events
from phases.julian import julian_day
from phases.lunar import NEW_MOON_EPOCH_JD, SYNODIC_MONTH, illumination, moon_phase, phase_name
from phases.relative import days_between, format_relative_time
from phases.search import next_full_moon, next_new_moon
from phases.validation import validate_instant

__all__ = [
    "InvalidInput",
    "PhaseError",
    "PhaseNotFound",
    "NEW_MOON_EPOCH_JD",
    "SYNODIC_MONTH",
    "days_between",
    "find_phase_events",
    "format_relative_time",
    "illumination",
    "julian_day",
    "moon_phase",
    "next_full_moon",
    "next_new_moon",
    "phase_name",
    "validate_instant",
]
