"""Config settings – 12-factor env-based configuration."""
from jlo.config.settings.base import Settings
from jlo.config.settings.factory import SettingsFactory
from jlo.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
    env_key,
)
from jlo.config.settings.logger import LoggerSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "LoggerSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "env_key",
]
