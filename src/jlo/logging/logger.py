"""Logging – Logger.

A Logger writes one JSON object per accepted call to its sink::

    log = Logger(sys.stdout)
    log.info("listening on %s:%d", host, port)
    # {"@level":"info","@message":"listening on 0.0.0.0:8080","@timestamp":"..."}

Contextual fields are attached by cloning, never by mutation::

    request_log = log.with_field("request_id", "e44c2a9")
    request_log.warning("slow upstream")   # carries request_id
    log.warning("slow upstream")           # does not

A clone shares its parent's sink (and write lock) and time source but starts
from the process default threshold, not the parent's.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

from jlo.kernel.concurrency import ReadWriteLock
from jlo.kernel.errors import SerializationError
from jlo.kernel.time import TimeSource
from jlo.logging import diagnostics, state
from jlo.logging.formatting import sprintf
from jlo.logging.levels import LogLevel, coerce_level
from jlo.logging.record import (
    FIELD_KEY_LEVEL,
    FIELD_KEY_MSG,
    FIELD_KEY_TIME,
    build_record,
    encode_record,
)
from jlo.logging.sinks import Sink, SynchronizedSink

if TYPE_CHECKING:
    from jlo.config.settings import LoggerSettings

_NO_FIELDS: Mapping[str, Any] = MappingProxyType({})


class Logger:
    """JSON line logger with a severity threshold and immutable fields.

    Parameters
    ----------
    sink:
        Destination stream. Wrapped in a :class:`SynchronizedSink` unless it
        already is one.
    level:
        Initial threshold; defaults to :func:`jlo.logging.state.default_level`.
    now:
        Zero-argument time source. When omitted the process time source is
        looked up on every call.

    The ``field_key_*`` attributes name the level, message and timestamp keys
    and may be reassigned at any time.
    """

    def __init__(
        self,
        sink: Sink,
        *,
        level: LogLevel | int | str | None = None,
        now: TimeSource | None = None,
    ) -> None:
        self.field_key_level = FIELD_KEY_LEVEL
        self.field_key_msg = FIELD_KEY_MSG
        self.field_key_time = FIELD_KEY_TIME
        self._lock = ReadWriteLock()
        self._level = state.default_level() if level is None else coerce_level(level)
        self._fields = _NO_FIELDS
        self._now = now
        self._out = sink if isinstance(sink, SynchronizedSink) else SynchronizedSink(sink)

    @classmethod
    def from_settings(
        cls,
        sink: Sink,
        settings: LoggerSettings,
        *,
        now: TimeSource | None = None,
    ) -> Logger:
        """Build a Logger whose threshold and key names come from *settings*."""
        logger = cls(sink, level=settings.log_level, now=now)
        logger.field_key_level = settings.field_key_level
        logger.field_key_msg = settings.field_key_msg
        logger.field_key_time = settings.field_key_time
        return logger

    # ------------------------------------------------------------------
    # Threshold
    # ------------------------------------------------------------------

    @property
    def level(self) -> LogLevel:
        with self._lock.read():
            return self._level

    def set_log_level(self, level: LogLevel | int | str) -> None:
        parsed = coerce_level(level)
        with self._lock.write():
            self._level = parsed

    def is_enabled_for(self, level: LogLevel | int) -> bool:
        """Whether a call at *level* would be written. ``FATAL`` always is."""
        if level >= LogLevel.FATAL:
            return True
        with self._lock.read():
            return level >= self._level

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def fields(self) -> Mapping[str, Any]:
        """Read-only view of the contextual fields."""
        with self._lock.read():
            return self._fields

    def with_field(self, key: str, value: Any) -> Logger:
        """Return a clone carrying *key* = *value*; this Logger is unchanged."""
        return self.with_fields({key: value})

    def with_fields(self, fields: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Logger:
        """Return a clone carrying every given pair; this Logger is unchanged."""
        extra = dict(fields or {}, **kwargs)
        for key in extra:
            if not isinstance(key, str):
                raise TypeError(f"field keys must be str, got {type(key).__name__}")

        with self._lock.read():
            merged = dict(self._fields)
        merged.update(extra)

        clone = Logger(self._out, now=self._now)
        clone.field_key_level = self.field_key_level
        clone.field_key_msg = self.field_key_msg
        clone.field_key_time = self.field_key_time
        clone._fields = MappingProxyType(merged)
        return clone

    # ------------------------------------------------------------------
    # Severity methods
    # ------------------------------------------------------------------

    def debug(self, template: str, *args: Any) -> None:
        self._log(LogLevel.DEBUG, template, args)

    def info(self, template: str, *args: Any) -> None:
        self._log(LogLevel.INFO, template, args)

    def warning(self, template: str, *args: Any) -> None:
        self._log(LogLevel.WARNING, template, args)

    # common alias
    warn = warning

    def error(self, template: str, *args: Any) -> None:
        self._log(LogLevel.ERROR, template, args)

    def fatal(self, template: str, *args: Any) -> None:
        """Always written regardless of threshold. Does not exit."""
        self._log(LogLevel.FATAL, template, args)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _log(self, level: LogLevel, template: str, args: tuple[Any, ...]) -> None:
        if not self.is_enabled_for(level):
            return

        message = sprintf(template, *args) if args else str(template)
        now = self._now if self._now is not None else state.time_source()
        record = build_record(
            self._fields,
            level=level,
            message=message,
            instant=now(),
            key_level=self.field_key_level,
            key_msg=self.field_key_msg,
            key_time=self.field_key_time,
        )
        try:
            entry = encode_record(record)
        except SerializationError as exc:
            diagnostics.report("jlo.record_dropped", level=str(level), **exc.to_dict())
            return
        self._out.write(entry)

    def __repr__(self) -> str:
        return f"Logger(sink={self._out.sink!r}, level={self.level!s}, fields={len(self._fields)})"


__all__ = ["Logger"]
