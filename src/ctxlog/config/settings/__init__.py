"""Config settings – 12-factor env-based configuration."""
from ctxlog.config.settings.base import LoggingSettings, Settings
from ctxlog.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "LoggingSettings", "Settings", "SettingsLoader"]
