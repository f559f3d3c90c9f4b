"""Logging – process-wide defaults.

Holds the threshold given to every newly constructed Logger and the time
source used by Loggers that were not given one explicitly. Both live for
the whole process and are guarded by one read-write lock.

Tests should prefer injecting ``now=`` into a Logger; when the shared time
source has to change, :func:`override_time_source` restores it on exit.
"""
from __future__ import annotations

import contextlib
from typing import Iterator

from jlo.kernel.concurrency import ReadWriteLock
from jlo.kernel.time import TimeSource, system_time_ns
from jlo.logging.levels import DEFAULT_LOG_LEVEL, LogLevel, coerce_level

_lock = ReadWriteLock()
_default_level: LogLevel = DEFAULT_LOG_LEVEL
_time_source: TimeSource = system_time_ns


def default_level() -> LogLevel:
    with _lock.read():
        return _default_level


def set_default_level(level: LogLevel | int | str) -> LogLevel:
    """Change the threshold new Loggers start with; returns the previous one.

    Existing Loggers keep their own threshold.
    """
    global _default_level
    parsed = coerce_level(level)
    with _lock.write():
        previous, _default_level = _default_level, parsed
    return previous


def time_source() -> TimeSource:
    with _lock.read():
        return _time_source


def set_time_source(source: TimeSource) -> TimeSource:
    """Replace the process time source; returns the previous one."""
    global _time_source
    if not callable(source):
        raise TypeError(f"time source must be callable, got {type(source).__name__}")
    with _lock.write():
        previous, _time_source = _time_source, source
    return previous


def reset_time_source() -> None:
    set_time_source(system_time_ns)


@contextlib.contextmanager
def override_time_source(source: TimeSource) -> Iterator[TimeSource]:
    """Swap the process time source for the duration of the block."""
    previous = set_time_source(source)
    try:
        yield source
    finally:
        set_time_source(previous)


__all__ = [
    "default_level",
    "override_time_source",
    "reset_time_source",
    "set_default_level",
    "set_time_source",
    "time_source",
]
