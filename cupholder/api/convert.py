"""
Public size conversion API.

calculate_bra_size() turns an underbust and bust measurement into a band and
cup for a region; the range functions run the other way, from a size back
to the measurements it represents.

None of these functions raise for unusual data. Unknown cup names are sized
as the region's smallest cup, and a cup whose difference decodes negative
gets a fixed 10 cm bust range above the band instead of an inverted one.
Passing something that is not a Region raises KeyError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cupholder.regions.registry import get_region_config
from cupholder.regions.types import Region
from cupholder.utilities.types import Measurement, cm

_FALLBACK_BUST_SPAN = cm(10)
_FALLBACK_BUST_MEDIAN = cm(5)


@dataclass(frozen=True)
class BraSize:
    band: int
    cup: str

    def __str__(self) -> str:
        return f"{self.band}{self.cup}"


@dataclass(frozen=True)
class SizeRange:
    """Measurement interval represented by a band or cup.

    min ≤ median ≤ max in cm, except for the negative-difference bust
    fallback, which is anchored at the band measurement.
    """

    min: Measurement
    max: Measurement
    median: Measurement

    def contains(self, value: Measurement) -> bool:
        return self.min.to_cm() <= value.to_cm() <= self.max.to_cm()


@dataclass(frozen=True)
class BodyMeasurements:
    underbust: Measurement
    bust: Measurement


def underbust_to_band(underbust: Measurement, region: Region) -> int:
    """Band number the region assigns to *underbust*."""
    return get_region_config(region).band.measurement_to_band(underbust)


def calculate_cup(difference: Measurement, region: Region) -> str:
    """Cup name for a bust-minus-reference *difference*."""
    config = get_region_config(region)
    return config.cup.measurement_to_cup_name(difference, config.cup_names)


def calculate_bra_size(underbust: Measurement, bust: Measurement, region: Region) -> BraSize:
    """
    Size a bra from body measurements.

    The cup difference is taken against the band's own measurement or the raw
    underbust, depending on the region's use_band_for_difference setting.
    """
    config = get_region_config(region)
    band = config.band.measurement_to_band(underbust)
    reference = config.band.band_to_measurement(band) if config.use_band_for_difference else underbust
    cup = config.cup.measurement_to_cup_name(bust.subtract(reference), config.cup_names)
    return BraSize(band=band, cup=cup)


def band_to_underbust_range(band: int, region: Region) -> SizeRange:
    """Underbust range covered by *band*: its measurement ± half a band step."""
    config = get_region_config(region)
    median = config.band.band_to_measurement(band)
    half_step = config.band_step.divide(2)
    return SizeRange(min=median.subtract(half_step), max=median.add(half_step), median=median)


def cup_to_bust_range(band: int, cup: str, region: Region) -> SizeRange:
    """Bust range for *cup* on *band*: band measurement plus the cup difference ± half a cup step."""
    config = get_region_config(region)
    cup_difference = config.cup.cup_name_to_measurement(cup, config.cup_names)
    base = config.band.band_to_measurement(band)

    if cup_difference.to_cm() < 0:
        return SizeRange(
            min=base,
            max=base.add(_FALLBACK_BUST_SPAN),
            median=base.add(_FALLBACK_BUST_MEDIAN),
        )

    half_step = config.cup_step.divide(2)
    median = base.add(cup_difference)
    return SizeRange(min=median.subtract(half_step), max=median.add(half_step), median=median)


def bra_size_to_measurements(band: int, cup: str, region: Region) -> BodyMeasurements:
    """
    Representative body measurements for a size.

    Underbust and bust are resolved independently, each as the median of
    its range; the pair is not guaranteed to come from one real body.
    """
    return BodyMeasurements(
        underbust=band_to_underbust_range(band, region).median,
        bust=cup_to_bust_range(band, cup, region).median,
    )


def get_region_brand(region: Region) -> Optional[str]:
    """Reference brand whose size chart the region follows, if any."""
    return get_region_config(region).brand
