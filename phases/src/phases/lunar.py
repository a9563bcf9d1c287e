"""Lunar phase fraction, naming, and illumination."""

from __future__ import annotations

import math
from datetime import datetime

from phases.julian import datetime_to_jd
from phases.validation import require_phase

# Reference new moon: 2000-01-06 00:00
NEW_MOON_EPOCH_JD = 2451549.5
SYNODIC_MONTH = 29.53058868

# Named lunar phases with their synodic fraction ranges
PHASE_NAMES = [
    (0.000, 0.0625, "New Moon"),
    (0.0625, 0.1875, "Waxing Crescent"),
    (0.1875, 0.3125, "First Quarter"),
    (0.3125, 0.4375, "Waxing Gibbous"),
    (0.4375, 0.5625, "Full Moon"),
    (0.5625, 0.6875, "Waning Gibbous"),
    (0.6875, 0.8125, "Last Quarter"),
    (0.8125, 0.9375, "Waning Crescent"),
    (0.9375, 1.000, "New Moon"),
]


def moon_phase(instant: datetime) -> float:
    """Calculate the moon phase fraction for an instant.

    Returns:
        Synodic progress in [0, 1): 0.0 = new moon, 0.5 = full moon.
    """
    jd = datetime_to_jd(instant)
    # Truncated remainder keeps the sign of the dividend; wrap negatives below
    phase = math.fmod(jd - NEW_MOON_EPOCH_JD, SYNODIC_MONTH) / SYNODIC_MONTH
    if phase < 0:
        phase += 1
        if phase >= 1.0:
            # -tiny + 1 rounds up to exactly 1.0
            phase = 0.0
    return phase


def phase_name(phase: float) -> str:
    """Name the phase band a fraction falls into."""
    value = require_phase(phase)
    for _low, high, name in PHASE_NAMES[:-1]:
        if value < high:
            return name
    return PHASE_NAMES[-1][2]


def illumination(phase: float) -> float:
    """Illumination percentage, |cos(2*pi*phase)| * 100.

    This peaks at both new and full moon; callers rely on the exact curve.
    """
    value = require_phase(phase)
    return abs(math.cos(value * 2 * math.pi)) * 100


def phase_distance(phase: float, target: float) -> float:
    """Shortest distance between two phase fractions on the cycle."""
    diff = abs(phase - target)
    if diff > 0.5:
        diff = 1 - diff
    return diff
