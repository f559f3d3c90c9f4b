"""Config – settings, loaders and applying them to the process defaults."""
from __future__ import annotations

from jlo.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    LoggerSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from jlo.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from jlo.logging.default import default_logger, set_default_level


def configure(settings: LoggerSettings | None = None) -> LoggerSettings:
    """Apply *settings* (or ``JLO_*`` environment variables) process-wide.

    Sets the default threshold for new Loggers and for the default Logger,
    and renames the default Logger's keys. Returns the settings applied.
    """
    if settings is None:
        settings = EnvSettingsLoader().load(LoggerSettings)
    set_default_level(settings.log_level)
    logger = default_logger()
    logger.field_key_level = settings.field_key_level
    logger.field_key_msg = settings.field_key_msg
    logger.field_key_time = settings.field_key_time
    return settings


__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggerSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "configure",
]
