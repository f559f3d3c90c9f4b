"""Kernel time – Clock port, implementations and timestamp rendering."""
from jlo.kernel.time.clock import (
    Clock,
    FrozenClock,
    Instant,
    SystemClock,
    TimeSource,
    format_rfc3339_nano,
    system_time_ns,
)

__all__ = [
    "Clock",
    "FrozenClock",
    "Instant",
    "SystemClock",
    "TimeSource",
    "format_rfc3339_nano",
    "system_time_ns",
]
