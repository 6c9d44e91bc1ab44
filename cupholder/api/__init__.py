from .convert import (
    BodyMeasurements,
    BraSize,
    SizeRange,
    band_to_underbust_range,
    bra_size_to_measurements,
    calculate_bra_size,
    calculate_cup,
    cup_to_bust_range,
    get_region_brand,
    underbust_to_band,
)
from .inputs import default_measurements, measurement_from_input
from .options import get_band_options, get_cup_options

__all__ = [
    # result types
    "BraSize",
    "SizeRange",
    "BodyMeasurements",
    # forward
    "calculate_bra_size",
    "underbust_to_band",
    "calculate_cup",
    # backward
    "band_to_underbust_range",
    "cup_to_bust_range",
    "bra_size_to_measurements",
    # options
    "get_cup_options",
    "get_band_options",
    # inputs
    "measurement_from_input",
    "default_measurements",
    "get_region_brand",
]
