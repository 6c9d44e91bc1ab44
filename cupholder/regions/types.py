"""
Core type definitions for the region layer.

Enums are the canonical vocabulary; RegionConfig is the registry entry type
built from regions.yaml and frozen after startup, never written to at
runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cupholder.strategies.band import BandStrategy
from cupholder.strategies.cup import LinearCupStrategy
from cupholder.utilities.types import Measurement

# ── Enums ──────────────────────────────────────────────────────────────────────


class Region(str, Enum):
    """Supported sizing systems."""

    CN = "CN"
    US = "US"
    US_CLASSIC = "US_CLASSIC"
    JP = "JP"
    UK = "UK"


class BandStrategyKind(str, Enum):
    METRIC = "metric"
    MODERN_INCH = "modern_inch"
    CLASSIC_INCH = "classic_inch"


# ── Registry entry type (frozen, loaded from YAML) ────────────────────────────


@dataclass(frozen=True)
class RegionConfig:
    """
    Everything needed to size one region.

    Attributes:
        region: The region this entry describes.
        band: Band numbering scheme.
        cup: Cup difference scheme.
        cup_names: Ordered cup names; index 0 is the smallest cup.
        use_band_for_difference: If True, the cup difference is taken against
            the band's measurement, so everyone with the same band and bust
            gets the same cup. If False, it is taken against the raw underbust.
        cup_generation_start: First difference sampled when listing cup
            options, or None to start at the first-cup threshold.
        brand: Reference brand whose chart the region follows, for display.
    """

    region: Region
    band: BandStrategy
    cup: LinearCupStrategy
    cup_names: tuple[str, ...]
    use_band_for_difference: bool
    cup_generation_start: Optional[Measurement] = None
    brand: Optional[str] = None

    @property
    def band_step(self) -> Measurement:
        return self.band.band_step

    @property
    def band_start(self) -> Optional[int]:
        return self.band.band_start

    @property
    def cup_step(self) -> Measurement:
        return self.cup.cup_step

    @property
    def first_cup_threshold(self) -> Measurement:
        return self.cup.first_cup_threshold

    def generation_start(self) -> Measurement:
        """Difference from which cup options are enumerated."""
        if self.cup_generation_start is not None:
            return self.cup_generation_start
        return self.first_cup_threshold
