"""
Band strategies: per-region conversion between band numbers and underbust.

Each factory returns a BandStrategy holding a converter pair and the band
step used to build symmetric underbust ranges. Regions pick a factory in
regions.yaml; nothing here inspects a region tag.

Rules:
    metric        band = nearest multiple of step_cm to the underbust (cm)
    modern_inch   band = underbust (in) rounded UP to the next even number
    classic_inch  band = round(underbust in) + 4 if even, + 5 if odd
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from cupholder.utilities.conversion import round_half_up, stable_ceil
from cupholder.utilities.types import Measurement, cm, inch

_INCH_BAND_STEP = 2


@dataclass(frozen=True)
class BandStrategy:
    """
    Converter pair for one band numbering scheme.

    Attributes:
        band_step: Distance between adjacent bands; the width of a band's
            underbust range.
        band_start: Smallest band shown in pickers, or None if unbounded.
        band_to_measurement: Representative underbust for a band number.
        measurement_to_band: Band number for a measured underbust.
    """

    band_step: Measurement
    band_start: Optional[int]
    band_to_measurement: Callable[[int], Measurement]
    measurement_to_band: Callable[[Measurement], int]


def metric_band_strategy(step_cm: int, band_start: Optional[int] = None) -> BandStrategy:
    """Band number is the underbust in cm, rounded to the nearest step."""
    if step_cm <= 0:
        raise ValueError(f"step_cm must be positive, got {step_cm}")

    def measurement_to_band(underbust: Measurement) -> int:
        return round_half_up(underbust.to_cm() / step_cm) * step_cm

    return BandStrategy(
        band_step=cm(step_cm),
        band_start=band_start,
        band_to_measurement=cm,
        measurement_to_band=measurement_to_band,
    )


def modern_inch_band_strategy(band_start: Optional[int] = None) -> BandStrategy:
    """Band number is the underbust in inches, rounded up to an even number."""

    def measurement_to_band(underbust: Measurement) -> int:
        return stable_ceil(underbust.to_inch() / _INCH_BAND_STEP) * _INCH_BAND_STEP

    return BandStrategy(
        band_step=inch(_INCH_BAND_STEP),
        band_start=band_start,
        band_to_measurement=inch,
        measurement_to_band=measurement_to_band,
    )


def classic_inch_band_strategy(band_start: Optional[int] = None) -> BandStrategy:
    """Traditional "plus four" rule: the band is always larger than the underbust."""

    def measurement_to_band(underbust: Measurement) -> int:
        underbust_inch = round_half_up(underbust.to_inch())
        return underbust_inch + (4 if underbust_inch % 2 == 0 else 5)

    return BandStrategy(
        band_step=inch(_INCH_BAND_STEP),
        band_start=band_start,
        band_to_measurement=inch,
        measurement_to_band=measurement_to_band,
    )
