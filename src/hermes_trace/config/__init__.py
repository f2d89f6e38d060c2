"""Config – 12-factor settings loaders and validation errors."""

from hermes_trace.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from hermes_trace.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
