"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass read from ``<PREFIX>_<FIELD>`` variables.

    Instances validate themselves on construction, so a bad ``JLO_LEVEL``
    fails when settings are loaded rather than on the first log call.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Hook for subclasses; raise ``InvalidSettingValueError`` on bad input."""

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        """Field name -> default value; ``dataclasses.MISSING`` marks required fields."""
        result: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            if field.default is not dataclasses.MISSING:
                result[field.name] = field.default
            elif field.default_factory is not dataclasses.MISSING:
                result[field.name] = field.default_factory()
            else:
                result[field.name] = dataclasses.MISSING
        return result


__all__ = ["Settings"]
