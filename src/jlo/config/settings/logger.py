"""Config settings – LoggerSettings."""
from __future__ import annotations

import dataclasses
from itertools import combinations
from typing import ClassVar

from jlo.config.settings.base import Settings
from jlo.config.validation import InvalidSettingValueError
from jlo.logging.errors import LevelParseError
from jlo.logging.levels import LogLevel, parse_level
from jlo.logging.record import FIELD_KEY_LEVEL, FIELD_KEY_MSG, FIELD_KEY_TIME

_KEY_FIELDS = ("field_key_level", "field_key_msg", "field_key_time")


@dataclasses.dataclass
class LoggerSettings(Settings):
    """Threshold and wire key names, read from ``JLO_*`` variables."""

    _prefix: ClassVar[str] = "JLO"

    level: str = "info"
    field_key_level: str = FIELD_KEY_LEVEL
    field_key_msg: str = FIELD_KEY_MSG
    field_key_time: str = FIELD_KEY_TIME

    def _validate(self) -> None:
        try:
            parse_level(self.level)
        except LevelParseError as exc:
            raise InvalidSettingValueError("level", self.level, "not a known log level") from exc

        for name in _KEY_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise InvalidSettingValueError(name, value, "must be a non-empty string")

        for first, second in combinations(_KEY_FIELDS, 2):
            if getattr(self, first) == getattr(self, second):
                raise InvalidSettingValueError(
                    second, getattr(self, second), f"collides with {first}"
                )

    @property
    def log_level(self) -> LogLevel:
        return parse_level(self.level)


__all__ = ["LoggerSettings"]
