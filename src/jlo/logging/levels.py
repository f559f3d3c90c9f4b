"""Logging – LogLevel and level parsing."""
from __future__ import annotations

import enum

from jlo.logging.errors import LevelParseError


class LogLevel(enum.IntEnum):
    """Ordered severities; comparison is a plain integer comparison."""

    UNKNOWN = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5

    def __str__(self) -> str:
        return level_name(self)


_NAMES: dict[int, str] = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARNING: "warning",
    LogLevel.ERROR: "error",
}

_ALIASES: dict[str, LogLevel] = {
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "warn": LogLevel.WARNING,
    "warning": LogLevel.WARNING,
    "error": LogLevel.ERROR,
    "fatal": LogLevel.FATAL,
}

DEFAULT_LOG_LEVEL = LogLevel.INFO


def level_name(value: int) -> str:
    """Return the wire name for *value*.

    There is no name for ``UNKNOWN``: it and every out-of-range value render
    as ``"fatal"``.
    """
    return _NAMES.get(int(value), "fatal")


def parse_level(text: str) -> LogLevel:
    """Parse a case-insensitive severity name.

    Raises:
        LevelParseError: *text* is not one of ``debug``, ``info``, ``warn``,
            ``warning``, ``error`` or ``fatal``. The error's ``level`` is
            ``LogLevel.UNKNOWN``.
    """
    level = _ALIASES.get(str(text).strip().lower())
    if level is None:
        raise LevelParseError(text, LogLevel.UNKNOWN)
    return level


def coerce_level(level: LogLevel | int | str) -> LogLevel:
    """Accept a ``LogLevel``, its integer value or a parseable name."""
    if isinstance(level, str):
        return parse_level(level)
    try:
        return LogLevel(level)
    except ValueError as exc:
        raise LevelParseError(str(level), LogLevel.UNKNOWN, cause=exc) from exc


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LogLevel",
    "coerce_level",
    "level_name",
    "parse_level",
]
