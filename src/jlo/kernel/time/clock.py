"""Kernel time – Clock protocol, implementations and RFC 3339 rendering."""
from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta
from typing import Callable, Protocol

#: A point in time: an aware/naive ``datetime`` (naive means UTC) or integer
#: nanoseconds since the Unix epoch.
Instant = datetime | int

#: Zero-argument callable returning the current instant.
TimeSource = Callable[[], Instant]

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def now(self) -> Instant: ...


class SystemClock:
    """Production clock backed by the wall clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def now_ns(self) -> int:
        return time.time_ns()


class FrozenClock:
    """Clock that moves only when :meth:`advance` is called.

    The clock is itself a time source: pass it (or its ``now``) as a
    Logger's ``now=`` and every record carries the same ``@timestamp``.
    """

    def __init__(self, fixed: datetime) -> None:
        self._instant = fixed

    def __call__(self) -> datetime:
        return self._instant

    def now(self) -> datetime:
        return self._instant

    def advance(self, **delta: int | float) -> datetime:
        """Step forward by ``timedelta(**delta)``; returns the new instant."""
        self._instant += timedelta(**delta)
        return self._instant


def system_time_ns() -> int:
    """Default time source: wall-clock nanoseconds since the epoch."""
    return time.time_ns()


def format_rfc3339_nano(instant: Instant) -> str:
    """Render *instant* as RFC 3339 in UTC with up to nanosecond precision.

    Trailing zeros of the fractional part are trimmed and the fraction is
    omitted entirely when zero, e.g. ``2018-08-02T21:48:56.856339554Z`` or
    ``0001-01-01T00:00:00Z``.
    """
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            moment = instant
        else:
            moment = instant.astimezone(UTC).replace(tzinfo=None)
        fraction = f"{moment.microsecond:06d}".rstrip("0")
    else:
        seconds, nanos = divmod(int(instant), 1_000_000_000)
        moment = (_EPOCH + timedelta(seconds=seconds)).replace(tzinfo=None)
        fraction = f"{nanos:09d}".rstrip("0")

    # strftime pads years below 1000 inconsistently across platforms
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if fraction:
        text += "." + fraction
    return text + "Z"


__all__ = [
    "Clock",
    "FrozenClock",
    "Instant",
    "SystemClock",
    "TimeSource",
    "format_rfc3339_nano",
    "system_time_ns",
]
