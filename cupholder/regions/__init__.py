from .registry import RegionRegistry, get_region_config, get_registry
from .types import BandStrategyKind, Region, RegionConfig

__all__ = [
    # Enums
    "Region",
    "BandStrategyKind",
    # Registry entry type
    "RegionConfig",
    # Registry
    "RegionRegistry",
    "get_registry",
    "get_region_config",
]
