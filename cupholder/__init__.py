"""
cupholder: converts underbust and bust measurements into regional bra sizes
and back.

Typical use::

    from cupholder import Region, calculate_bra_size, cm

    calculate_bra_size(cm(80), cm(95), Region.CN)  # BraSize(band=80, cup="C")
"""

from cupholder.api import (
    BodyMeasurements,
    BraSize,
    SizeRange,
    band_to_underbust_range,
    bra_size_to_measurements,
    calculate_bra_size,
    cup_to_bust_range,
    get_band_options,
    get_cup_options,
    get_region_brand,
)
from cupholder.regions import Region
from cupholder.utilities import Measurement, Unit, cm, inch

__all__ = [
    "BodyMeasurements",
    "BraSize",
    "Measurement",
    "Region",
    "SizeRange",
    "Unit",
    "band_to_underbust_range",
    "bra_size_to_measurements",
    "calculate_bra_size",
    "cm",
    "cup_to_bust_range",
    "get_band_options",
    "get_cup_options",
    "get_region_brand",
    "inch",
]
