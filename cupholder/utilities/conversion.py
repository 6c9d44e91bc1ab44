"""
Unit conversion between centimeters and inches, plus boundary-stable rounding.

All functions are pure: no side effects, no state.

Values that cross a unit boundary pick up floating error (76.2 cm is
30.000000000000004 inches). Rounding helpers snap to _SNAP_PLACES decimals
before flooring, ceiling or comparing so that error never moves a value
across an integer boundary.
"""

from __future__ import annotations

import math

CM_PER_INCH: float = 2.54

_SNAP_PLACES: int = 9


def inches_to_cm(inches: float) -> float:
    """Convert inches to centimeters."""
    return inches * CM_PER_INCH


def cm_to_inches(cm: float) -> float:
    """Convert centimeters to inches."""
    return cm / CM_PER_INCH


def snap(value: float) -> float:
    """Round away the floating noise left by a unit conversion."""
    return round(value, _SNAP_PLACES)


def stable_floor(value: float) -> int:
    """Floor *value* after snapping away conversion noise."""
    return math.floor(snap(value))


def stable_ceil(value: float) -> int:
    """Ceil *value* after snapping away conversion noise."""
    return math.ceil(snap(value))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with exact halves going toward +infinity.

    Python's round() uses banker's rounding (72.5 / 5 = 14.5 → 14); sizing
    charts round halves up (→ 15).
    """
    return stable_floor(value + 0.5)
