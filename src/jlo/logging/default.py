"""Logging – the process default Logger.

Created on first use, writes to ``sys.stdout`` (resolved at write time) and
lives for the rest of the process.
"""
from __future__ import annotations

import threading
from typing import Any

from jlo.logging import state
from jlo.logging.levels import LogLevel
from jlo.logging.logger import Logger
from jlo.logging.sinks import StdoutSink

_lock = threading.Lock()
_default_logger: Logger | None = None


def default_logger() -> Logger:
    global _default_logger
    with _lock:
        if _default_logger is None:
            _default_logger = Logger(StdoutSink())
        return _default_logger


def get_logger(**fields: Any) -> Logger:
    """Return the default Logger, cloned with *fields* when any are given."""
    logger = default_logger()
    if fields:
        logger = logger.with_fields(fields)
    return logger


def set_default_level(level: LogLevel | int | str) -> LogLevel:
    """Set the process default threshold and apply it to the default Logger.

    Returns the previous process default.
    """
    previous = state.set_default_level(level)
    default_logger().set_log_level(level)
    return previous


__all__ = ["default_logger", "get_logger", "set_default_level"]
