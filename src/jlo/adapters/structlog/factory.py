"""Structlog adapter – route structlog events into a jlo Logger.

Usage::

    from jlo import Logger
    from jlo.adapters.structlog import configure_structlog

    configure_structlog(Logger(sys.stderr))
    structlog.get_logger().info("user_login", user="alice")
    # {"@level":"info","@message":"user_login","@timestamp":"...","user":"alice"}

The event name becomes the message (used verbatim) and every other key of
the final event dict becomes a contextual field. Threshold checks are the
wrapped Logger's.
"""
from __future__ import annotations

from typing import Any, Sequence

import structlog

from jlo.logging.default import default_logger
from jlo.logging.levels import LogLevel
from jlo.logging.logger import Logger

_SEVERITY_METHODS: dict[LogLevel, str] = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARNING: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
}


class JloStructlogLogger:
    """structlog wrapped logger backed by a jlo :class:`Logger`.

    The last structlog processor must return the event dict; structlog then
    passes it here as keyword arguments.
    """

    def __init__(self, logger: Logger) -> None:
        self._logger = logger

    @property
    def logger(self) -> Logger:
        return self._logger

    def _emit(self, level: LogLevel, event_dict: dict[str, Any]) -> None:
        if not self._logger.is_enabled_for(level):
            return
        message = str(event_dict.pop("event", ""))
        target = self._logger
        if event_dict:
            target = target.with_fields(event_dict)
            target.set_log_level(self._logger.level)
        getattr(target, _SEVERITY_METHODS[level])(message)

    def debug(self, **event_dict: Any) -> None:
        self._emit(LogLevel.DEBUG, event_dict)

    def info(self, **event_dict: Any) -> None:
        self._emit(LogLevel.INFO, event_dict)

    def warning(self, **event_dict: Any) -> None:
        self._emit(LogLevel.WARNING, event_dict)

    def error(self, **event_dict: Any) -> None:
        self._emit(LogLevel.ERROR, event_dict)

    def critical(self, **event_dict: Any) -> None:
        self._emit(LogLevel.FATAL, event_dict)

    # structlog method-name aliases
    msg = info
    warn = warning
    err = error
    exception = error
    fatal = critical


class JloLoggerFactory:
    """structlog ``logger_factory`` handing out :class:`JloStructlogLogger`.

    Without an explicit *logger* the process default Logger is used.
    """

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger

    def __call__(self, *args: Any) -> JloStructlogLogger:  # noqa: ARG002
        return JloStructlogLogger(self._logger or default_logger())


def configure_structlog(
    logger: Logger | None = None,
    *,
    processors: Sequence[Any] | None = None,
    cache_logger_on_first_use: bool = True,
) -> None:
    """Configure structlog to render through *logger*.

    *processors* run after context merging and exception rendering; the last
    one must leave the event dict a dict.
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    structlog.configure(
        processors=shared_processors + list(processors or []),
        logger_factory=JloLoggerFactory(logger),
        wrapper_class=structlog.make_filtering_bound_logger(0),
        cache_logger_on_first_use=cache_logger_on_first_use,
    )


__all__ = ["JloLoggerFactory", "JloStructlogLogger", "configure_structlog"]
