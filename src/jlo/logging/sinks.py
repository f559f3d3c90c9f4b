"""Logging – output sinks and the synchronised writer.

A sink is anything with a ``write`` method: binary streams receive
``bytes``, text streams (``io.TextIOBase``) receive ``str``.
"""
from __future__ import annotations

import io
import sys
import threading
from typing import Any, Protocol

from jlo.kernel.errors import SinkWriteError
from jlo.logging import diagnostics


class Sink(Protocol):
    """Destination byte (or text) stream for completed records."""

    def write(self, data: Any, /) -> Any: ...


class SynchronizedSink:
    """Serialises writes to *sink* behind one lock.

    Each entry is a complete, already-encoded record and is written with a
    single ``write`` call while the lock is held, so concurrent records never
    interleave. Failures are reported as diagnostics and dropped.
    """

    def __init__(self, sink: Sink) -> None:
        self._sink = sink
        self._text = isinstance(sink, io.TextIOBase)
        self._lock = threading.Lock()

    @property
    def sink(self) -> Sink:
        return self._sink

    def write(self, entry: bytes) -> None:
        payload: bytes | str = entry.decode("utf-8") if self._text else entry
        failure: SinkWriteError | None = None
        with self._lock:
            try:
                self._sink.write(payload)
            except Exception as exc:  # noqa: BLE001 – logging never fails the caller
                failure = SinkWriteError(self._sink, cause=exc)
        # reported outside the lock: the diagnostic may be routed back here
        if failure is not None:
            diagnostics.report("jlo.sink_write_failed", **failure.to_dict())

    def __repr__(self) -> str:
        return f"SynchronizedSink({self._sink!r})"


class StdoutSink:
    """Writes to whatever ``sys.stdout`` is at write time, then flushes."""

    def write(self, data: bytes | str) -> None:
        stream = sys.stdout
        stream.write(data.decode("utf-8") if isinstance(data, bytes) else data)
        stream.flush()

    def __repr__(self) -> str:
        return "StdoutSink()"


class NullSink:
    """Discards everything."""

    def write(self, data: bytes | str) -> int:
        return len(data)


__all__ = ["NullSink", "Sink", "StdoutSink", "SynchronizedSink"]
