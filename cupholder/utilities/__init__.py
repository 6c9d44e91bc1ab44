"""
Shared utilities for the cupholder sizing engine.

Provides the unit-aware Measurement type and the cm/inch conversion and
rounding helpers used identically by every band and cup strategy.
"""

from .conversion import (
    CM_PER_INCH,
    cm_to_inches,
    inches_to_cm,
    round_half_up,
    snap,
    stable_ceil,
    stable_floor,
)
from .types import EQUALITY_TOLERANCE_CM, Measurement, Unit, cm, inch

__all__ = [
    # types
    "Measurement",
    "Unit",
    "cm",
    "inch",
    "EQUALITY_TOLERANCE_CM",
    # conversion
    "CM_PER_INCH",
    "inches_to_cm",
    "cm_to_inches",
    # rounding
    "stable_floor",
    "stable_ceil",
    "round_half_up",
    "snap",
]
