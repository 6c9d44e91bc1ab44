"""
YAML-backed persistence for user settings.

The stored file holds a flat mapping of setting name to value. Keys missing
from the file take their default; unknown keys are ignored. A file that
cannot be parsed, or holds an invalid value, is treated as absent and the
defaults are returned.
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any

import yaml

from cupholder.regions.types import Region
from cupholder.utilities.types import Unit

from .types import DEFAULT_SETTINGS, Language, Settings, Theme

logger = logging.getLogger(__name__)

_FIELDS = tuple(f.name for f in dataclasses.fields(Settings))


class SettingsStore:
    """Load, update and persist Settings at *path*.

    Not thread-safe: concurrent writers to the same path race.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Settings:
        try:
            with open(self._path) as f:
                raw = yaml.safe_load(f)
        except FileNotFoundError:
            return DEFAULT_SETTINGS
        except yaml.YAMLError as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", self._path, exc)
            return DEFAULT_SETTINGS

        if raw is None:
            return DEFAULT_SETTINGS
        if not isinstance(raw, dict):
            logger.warning("Ignoring settings file %s: expected a mapping", self._path)
            return DEFAULT_SETTINGS

        stored: dict[str, Any] = {key: raw[key] for key in _FIELDS if key in raw}
        try:
            return dataclasses.replace(DEFAULT_SETTINGS, **stored)
        except ValueError as exc:
            logger.warning("Ignoring invalid settings file %s: %s", self._path, exc)
            return DEFAULT_SETTINGS

    def save(self, settings: Settings) -> None:
        """Write *settings* to disk, creating parent directories. Raises OSError on failure."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w") as f:
            yaml.safe_dump(settings.to_dict(), f, sort_keys=False)
        logger.info("Saved settings to %s", self._path)

    def update(self, **changes: Any) -> Settings:
        """
        Apply *changes* on top of the stored settings, persist, and return the result.

        Raises:
            TypeError: If a change names a field Settings does not have.
            ValueError: If a change holds a value outside its enum.
        """
        unknown = set(changes) - set(_FIELDS)
        if unknown:
            raise TypeError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
        settings = dataclasses.replace(self.load(), **changes)
        self.save(settings)
        return settings

    def set_language(self, language: Language) -> Settings:
        return self.update(language=language)

    def set_region(self, region: Region) -> Settings:
        return self.update(region=region)

    def set_theme(self, theme: Theme) -> Settings:
        return self.update(theme=theme)

    def set_unit(self, unit: Unit) -> Settings:
        return self.update(unit=unit)

    def reset(self) -> Settings:
        self.save(DEFAULT_SETTINGS)
        return DEFAULT_SETTINGS
