"""Logging – LevelParseError."""
from __future__ import annotations

from typing import Any

from jlo.kernel.errors import ValidationError


class LevelParseError(ValidationError):
    """A severity name matched none of the recognised spellings.

    ``level`` carries the ``LogLevel.UNKNOWN`` sentinel so callers can fall
    back to it explicitly.
    """

    default_code = "level_parse_error"

    def __init__(self, text: str, level: Any, **kwargs: Any) -> None:
        super().__init__(f"Unknown log level {text!r}", value=text, **kwargs)
        self.level = level


__all__ = ["LevelParseError"]
