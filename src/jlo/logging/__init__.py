"""Logging – JSON line Logger, levels, sinks and process defaults."""
from jlo.logging.default import default_logger, get_logger, set_default_level
from jlo.logging.errors import LevelParseError
from jlo.logging.formatting import sprintf
from jlo.logging.levels import DEFAULT_LOG_LEVEL, LogLevel, level_name, parse_level
from jlo.logging.logger import Logger
from jlo.logging.record import (
    FIELD_KEY_LEVEL,
    FIELD_KEY_MSG,
    FIELD_KEY_TIME,
    build_record,
    encode_record,
)
from jlo.logging.sinks import NullSink, Sink, StdoutSink, SynchronizedSink
from jlo.logging.state import (
    default_level,
    override_time_source,
    reset_time_source,
    set_time_source,
    time_source,
)

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "FIELD_KEY_LEVEL",
    "FIELD_KEY_MSG",
    "FIELD_KEY_TIME",
    "LevelParseError",
    "LogLevel",
    "Logger",
    "NullSink",
    "Sink",
    "StdoutSink",
    "SynchronizedSink",
    "build_record",
    "default_level",
    "default_logger",
    "encode_record",
    "get_logger",
    "level_name",
    "override_time_source",
    "parse_level",
    "reset_time_source",
    "set_default_level",
    "set_time_source",
    "sprintf",
    "time_source",
]
