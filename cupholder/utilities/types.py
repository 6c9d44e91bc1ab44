"""
Core type definitions for the shared utilities layer.

Measurement is a frozen dataclass carrying a value and its unit. Arithmetic
between different units projects the right operand into the left operand's
unit, so results never silently mix units.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .conversion import cm_to_inches, inches_to_cm

EQUALITY_TOLERANCE_CM: float = 0.001


class Unit(str, Enum):
    """Length unit a Measurement is expressed in."""

    CM = "cm"
    INCH = "inch"


@dataclass(frozen=True)
class Measurement:
    """
    A length with an explicit unit.

    Values are not range-checked: negative and extreme values are valid
    arithmetic operands (cup differences are routinely negative in inch
    regions). Only the unit type is checked.

    Dataclass ``==`` compares value and unit exactly; use equals() for the
    unit-agnostic, tolerance-based comparison.
    """

    value: float
    unit: Unit

    def __post_init__(self) -> None:
        if not isinstance(self.unit, Unit):
            raise TypeError(f"unit must be a Unit, got {type(self.unit).__name__}")

    # ── Projections ────────────────────────────────────────────────────────────

    def to_cm(self) -> float:
        return inches_to_cm(self.value) if self.unit is Unit.INCH else self.value

    def to_inch(self) -> float:
        return cm_to_inches(self.value) if self.unit is Unit.CM else self.value

    def to_unit(self, unit: Unit) -> float:
        """Return the numeric value of this length expressed in *unit*."""
        return self.to_inch() if unit is Unit.INCH else self.to_cm()

    def in_unit(self, unit: Unit) -> Measurement:
        """Return the same length as a Measurement in *unit*."""
        if unit is self.unit:
            return self
        return Measurement(self.to_unit(unit), unit)

    # ── Arithmetic (result keeps the left operand's unit) ─────────────────────

    def add(self, other: Measurement) -> Measurement:
        return Measurement(self.value + other.to_unit(self.unit), self.unit)

    def subtract(self, other: Measurement) -> Measurement:
        return Measurement(self.value - other.to_unit(self.unit), self.unit)

    def multiply(self, factor: float) -> Measurement:
        return Measurement(self.value * factor, self.unit)

    def divide(self, divisor: float) -> Measurement:
        return Measurement(self.value / divisor, self.unit)

    # ── Comparison (via the cm projection) ────────────────────────────────────

    def less_than(self, other: Measurement) -> bool:
        return self.to_cm() < other.to_cm()

    def equals(self, other: Measurement) -> bool:
        """True when both lengths agree within EQUALITY_TOLERANCE_CM."""
        return abs(self.to_cm() - other.to_cm()) < EQUALITY_TOLERANCE_CM

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide
    __lt__ = less_than

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit.value}"


def cm(value: float) -> Measurement:
    """Build a Measurement in centimeters."""
    return Measurement(float(value), Unit.CM)


def inch(value: float) -> Measurement:
    """Build a Measurement in inches."""
    return Measurement(float(value), Unit.INCH)
