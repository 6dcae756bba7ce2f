"""Config settings – env-based configuration."""
from flowcsv.config.settings.base import Settings
from flowcsv.config.settings.factory import SettingsFactory
from flowcsv.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
