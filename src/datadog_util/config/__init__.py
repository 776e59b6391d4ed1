"""Config – settings loading and validation errors."""
from datadog_util.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from datadog_util.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
