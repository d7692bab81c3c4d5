"""Config – 12-factor settings and loaders."""

from insight_logs.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from insight_logs.config.loaders import EnvSettingsLoader, SettingsFactory, SettingsLoader
from insight_logs.config.settings import DEFAULT_LOG_TTL, InsightSettings

__all__ = [
    "DEFAULT_LOG_TTL",
    "ConfigError",
    "EnvSettingsLoader",
    "InsightSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingsFactory",
    "SettingsLoader",
]
