"""
Region registry: loads the sizing tables from YAML at startup, validates
them, and exposes a read-only query API.

The registry is a module-level singleton; call get_registry() to obtain it.
All tables are loaded and validated once at import time. Nothing writes to
the registry after startup.

──────────────────────────────────────────────────────────────────────────────
Adding a region
──────────────────────────────────────────────────────────────────────────────
1. Add a member to regions.types.Region.
2. Add one entry to data/regions.yaml, reusing a cup_names list or adding one.

Per-region behaviour is chosen by data alone (band.kind, cup parameters,
use_band_for_difference). No code outside this module looks at a region tag.
──────────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional, cast

import yaml

from cupholder.strategies.band import (
    BandStrategy,
    classic_inch_band_strategy,
    metric_band_strategy,
    modern_inch_band_strategy,
)
from cupholder.strategies.cup import LinearCupStrategy
from cupholder.utilities.types import Measurement, Unit

from .types import BandStrategyKind, Region, RegionConfig

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
_REGIONS_FILE = "regions.yaml"

_INCH_BAND_FACTORIES: dict[BandStrategyKind, Callable[[Optional[int]], BandStrategy]] = {
    BandStrategyKind.MODERN_INCH: modern_inch_band_strategy,
    BandStrategyKind.CLASSIC_INCH: classic_inch_band_strategy,
}


class RegionRegistry:
    """
    Read-only registry of per-region sizing configuration.

    ``configs`` is wrapped in MappingProxyType after loading and its values
    are frozen dataclasses, so the registry is immutable for its lifetime.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir
        self.configs: MappingProxyType[Region, RegionConfig]
        self.cup_name_lists: MappingProxyType[str, tuple[str, ...]]

        errors: list[str] = []
        self._load_regions(errors)
        self._check_completeness(errors)
        if errors:
            raise ValueError(
                "Region registry validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )
        logger.debug("Loaded %d region configs from %s", len(self.configs), self._data_dir)

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                return cast(dict[str, Any], yaml.safe_load(f) or {})
        except FileNotFoundError:
            raise FileNotFoundError(f"Region data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse region data file {path}: {exc}") from exc

    def _load_regions(self, errors: list[str]) -> None:
        data = self._load_yaml(_REGIONS_FILE)
        name_lists = {
            key: tuple(str(name) for name in names)
            for key, names in (data.get("cup_names") or {}).items()
        }
        self._check_name_lists(name_lists, errors)
        self.cup_name_lists = MappingProxyType(name_lists)

        result: dict[Region, RegionConfig] = {}
        for position, entry in enumerate(data.get("entries") or []):
            label = entry.get("id", f"#{position}")
            try:
                config = self._build_config(entry, name_lists)
            except (KeyError, TypeError, ValueError) as exc:
                errors.append(f"region entry {label}: {exc}")
                continue
            if config.region in result:
                errors.append(f"region entry {label}: duplicate entry for {config.region.value}")
                continue
            result[config.region] = config
        self.configs = MappingProxyType(result)

    def _build_config(
        self, entry: dict[str, Any], name_lists: dict[str, tuple[str, ...]]
    ) -> RegionConfig:
        region = Region(entry["id"])
        cup_spec = entry["cup"]
        names_key = cup_spec["names"]
        if names_key not in name_lists:
            raise ValueError(f"cup names {names_key!r} is not defined in cup_names")
        names = name_lists[names_key]

        unit = Unit(cup_spec["unit"])
        cup = LinearCupStrategy(
            first_cup_threshold=Measurement(float(cup_spec["first_threshold"]), unit),
            cup_step=Measurement(float(cup_spec["step"]), unit),
            below_first_cup_name=str(cup_spec["below_first_name"]),
            below_first_cup_value=Measurement(float(cup_spec["below_first_value"]), unit),
        )
        if names and cup.below_first_cup_name != names[0]:
            raise ValueError(
                f"below_first_name {cup.below_first_cup_name!r} must be the smallest "
                f"cup in {names_key!r} ({names[0]!r})"
            )

        generation_start = cup_spec.get("generation_start")
        return RegionConfig(
            region=region,
            band=self._build_band(entry["band"]),
            cup=cup,
            cup_names=names,
            use_band_for_difference=bool(entry["use_band_for_difference"]),
            cup_generation_start=(
                Measurement(float(generation_start), unit) if generation_start is not None else None
            ),
            brand=entry.get("brand"),
        )

    @staticmethod
    def _build_band(spec: dict[str, Any]) -> BandStrategy:
        kind = BandStrategyKind(spec["kind"])
        band_start = spec.get("band_start")
        if kind is BandStrategyKind.METRIC:
            if "step_cm" not in spec:
                raise ValueError("metric band strategy requires step_cm")
            return metric_band_strategy(int(spec["step_cm"]), band_start)
        return _INCH_BAND_FACTORIES[kind](band_start)

    # ── Validation ─────────────────────────────────────────────────────────────

    @staticmethod
    def _check_name_lists(name_lists: dict[str, tuple[str, ...]], errors: list[str]) -> None:
        """Every cup name list must be non-empty and free of duplicates."""
        for key, names in name_lists.items():
            if not names:
                errors.append(f"cup_names {key!r}: list is empty")
            elif len(set(names)) != len(names):
                errors.append(f"cup_names {key!r}: list contains duplicate names")

    def _check_completeness(self, errors: list[str]) -> None:
        """Every Region enum member must have exactly one entry."""
        for region in Region:
            if region not in self.configs:
                errors.append(f"region {region.value!r}: no entry in {_REGIONS_FILE}")

    # ── Query API ──────────────────────────────────────────────────────────────

    def get_config(self, region: Region) -> RegionConfig:
        """Return the configuration for *region*.

        Raises KeyError if the region has no entry. Validation guarantees
        every Region enum value has one after construction, so this only
        fires for values that are not Regions at all.
        """
        try:
            return self.configs[region]
        except KeyError:
            raise KeyError(f"No region config for {region!r}") from None

    def list_regions(self) -> list[Region]:
        """Return the configured regions in declaration order."""
        return [region for region in Region if region in self.configs]


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Initialized eagerly at import time so there is no lazy-init race condition
# in concurrent contexts. The registry is read-only after construction, so
# sharing it across threads is safe.

_registry: RegionRegistry = RegionRegistry()


def get_registry() -> RegionRegistry:
    """Return the module-level registry singleton."""
    return _registry


def get_region_config(region: Region) -> RegionConfig:
    """Shorthand for ``get_registry().get_config(region)``."""
    return _registry.get_config(region)
