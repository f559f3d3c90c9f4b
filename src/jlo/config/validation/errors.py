"""Config validation errors."""
from __future__ import annotations

from jlo.kernel.errors import JloError


class ConfigError(JloError):
    """Settings could not be loaded or applied."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No source supplied a setting that has no default."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Setting {setting_name!r} is required but was not supplied",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting was supplied with a value jlo cannot use."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting {setting_name!r} = {value!r} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
