"""Config settings – 12-factor env-based configuration."""
from datadog_util.config.settings.base import Settings
from datadog_util.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
