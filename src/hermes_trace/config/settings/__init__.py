"""Config settings – 12-factor env-based configuration."""
from hermes_trace.config.settings.base import Settings
from hermes_trace.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
