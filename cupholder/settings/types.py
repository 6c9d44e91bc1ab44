"""
User preference types.

Settings are resolved by the caller and passed to the sizing engine as plain
parameters (region, unit); the engine never reads them itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cupholder.regions.types import Region
from cupholder.utilities.types import Unit


class Language(str, Enum):
    ZH = "zh"
    EN = "en"


class Theme(str, Enum):
    SPONGEBOB = "spongebob"
    BARBIE = "barbie"
    TOON = "toon"
    CYBERPUNK = "cyberpunk"
    ALIEN = "alien"


@dataclass(frozen=True)
class Settings:
    language: Language
    region: Region
    theme: Theme
    unit: Unit

    def __post_init__(self) -> None:
        # Coerce string values (as read from disk) into their enums.
        object.__setattr__(self, "language", Language(self.language))
        object.__setattr__(self, "region", Region(self.region))
        object.__setattr__(self, "theme", Theme(self.theme))
        object.__setattr__(self, "unit", Unit(self.unit))

    def to_dict(self) -> dict[str, str]:
        return {
            "language": self.language.value,
            "region": self.region.value,
            "theme": self.theme.value,
            "unit": self.unit.value,
        }


DEFAULT_SETTINGS = Settings(
    language=Language.ZH,
    region=Region.CN,
    theme=Theme.SPONGEBOB,
    unit=Unit.CM,
)
