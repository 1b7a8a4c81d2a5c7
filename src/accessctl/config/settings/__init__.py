"""Config settings – 12-factor env-based configuration."""
from accessctl.config.settings.base import Settings
from accessctl.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
