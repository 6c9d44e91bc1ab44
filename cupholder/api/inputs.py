"""
Input defaults and helpers for callers collecting measurements from a UI.

These bounds describe what a picker should offer; the engine itself accepts
any value.
"""

from __future__ import annotations

from typing import Union

from cupholder.utilities.types import Measurement, Unit, cm

from .convert import BodyMeasurements, BraSize

UNDERBUST_MIN_CM: float = 30
UNDERBUST_MAX_CM: float = 200
BUST_RANGE_OFFSET_CM: float = 200  # widest bust-minus-underbust a picker allows
UNDERBUST_DEFAULT_CM: float = 80
BUST_DEFAULT_CM: float = 95

DEFAULT_SIZE = BraSize(band=34, cup="C")


def measurement_from_input(value: float, unit: Union[Unit, str]) -> Measurement:
    """
    Build a Measurement from a raw picker value and a unit selection.

    *unit* may be a Unit or its string value ("cm", "inch").

    Raises:
        ValueError: If *unit* is a string that names no Unit.
    """
    return Measurement(float(value), Unit(unit))


def default_measurements(unit: Unit = Unit.CM) -> BodyMeasurements:
    """Default underbust and bust, expressed in *unit*."""
    return BodyMeasurements(
        underbust=cm(UNDERBUST_DEFAULT_CM).in_unit(unit),
        bust=cm(BUST_DEFAULT_CM).in_unit(unit),
    )


def bust_bounds(underbust: Measurement) -> tuple[Measurement, Measurement]:
    """Bust picker bounds for *underbust*, in the underbust's unit."""
    return underbust, underbust.add(cm(BUST_RANGE_OFFSET_CM))
