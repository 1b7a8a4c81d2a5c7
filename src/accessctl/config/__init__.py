"""Config – 12-factor settings and loaders."""

from accessctl.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from accessctl.config.validation import (
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
