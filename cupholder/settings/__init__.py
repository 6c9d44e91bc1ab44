from .store import SettingsStore
from .types import DEFAULT_SETTINGS, Language, Settings, Theme

__all__ = [
    "DEFAULT_SETTINGS",
    "Language",
    "Settings",
    "SettingsStore",
    "Theme",
]
