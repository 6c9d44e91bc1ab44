from .band import (
    BandStrategy,
    classic_inch_band_strategy,
    metric_band_strategy,
    modern_inch_band_strategy,
)
from .cup import LinearCupStrategy
from .cup_names import decode_cup_name, encode_cup_name

__all__ = [
    # band
    "BandStrategy",
    "metric_band_strategy",
    "modern_inch_band_strategy",
    "classic_inch_band_strategy",
    # cup
    "LinearCupStrategy",
    # cup names
    "encode_cup_name",
    "decode_cup_name",
]
