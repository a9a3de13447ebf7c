"""Config – 12-factor settings for the search engine."""

from mp_search.config.settings import EnvSettingsLoader, SearchSettings, Settings, SettingsLoader
from mp_search.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SearchSettings",
    "Settings",
    "SettingsLoader",
]
