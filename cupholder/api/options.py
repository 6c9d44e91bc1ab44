"""
Picker option generation.

Both lists are produced by running the region's own strategies rather than
reading the configured tables, so they contain exactly the values a
conversion can return.
"""

from __future__ import annotations

from typing import Optional

from cupholder.regions.registry import get_region_config
from cupholder.regions.types import Region
from cupholder.utilities.types import Measurement, cm

DEFAULT_BAND_MIN_UNDERBUST = cm(30)
DEFAULT_BAND_MAX_UNDERBUST = cm(200)
DEFAULT_MAX_CUPS = 100

_BAND_SCAN_STEP = cm(0.5)


def get_cup_options(region: Region, max_cups: int = DEFAULT_MAX_CUPS) -> list[str]:
    """
    Cup names in ascending order, deduplicated.

    Samples *max_cups* differences one cup step apart from the region's
    generation start. Large values of *max_cups* reach the synthesized
    "1A", "1B", ... names past the end of the region's list.
    """
    config = get_region_config(region)
    start = config.generation_start()
    cups: list[str] = []
    seen: set[str] = set()
    for i in range(max_cups):
        difference = start.add(config.cup_step.multiply(i))
        cup = config.cup.measurement_to_cup_name(difference, config.cup_names)
        if cup not in seen:
            cups.append(cup)
            seen.add(cup)
    return cups


def get_band_options(
    region: Region,
    min_underbust: Optional[Measurement] = None,
    max_underbust: Optional[Measurement] = None,
) -> list[int]:
    """
    Band numbers whose measurement lies within [min_underbust, max_underbust].

    Scans the underbust interval in 0.5 cm steps and keeps each band whose
    own measurement falls back inside the interval. A scan is used because
    band rules round in different directions and some add an offset.
    """
    config = get_region_config(region)
    low = min_underbust if min_underbust is not None else DEFAULT_BAND_MIN_UNDERBUST
    high = max_underbust if max_underbust is not None else DEFAULT_BAND_MAX_UNDERBUST
    low_cm, high_cm = low.to_cm(), high.to_cm()

    bands: set[int] = set()
    i = 0
    underbust = low
    while underbust.to_cm() <= high_cm:
        band = config.band.measurement_to_band(underbust)
        band_cm = config.band.band_to_measurement(band).to_cm()
        if low_cm <= band_cm <= high_cm:
            bands.add(band)
        i += 1
        underbust = low.add(_BAND_SCAN_STEP.multiply(i))
    return sorted(bands)
