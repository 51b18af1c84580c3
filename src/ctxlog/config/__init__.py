"""Config – 12-factor settings, loaders, and key-value config sources."""

from ctxlog.config.settings import EnvSettingsLoader, LoggingSettings, Settings, SettingsLoader
from ctxlog.config.source import (
    ChainConfigSource,
    ConfigSource,
    DictConfigSource,
    EnvConfigSource,
)
from ctxlog.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ChainConfigSource",
    "ConfigError",
    "ConfigSource",
    "DictConfigSource",
    "EnvConfigSource",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
