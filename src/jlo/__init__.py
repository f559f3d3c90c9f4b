"""
jlo – light-weight JSON line logging.

Import path convention::

    from jlo import Logger, LogLevel, parse_level
    from jlo.config import LoggerSettings, configure
    from jlo.adapters.structlog import configure_structlog
    from jlo.testing import MemorySink, FakeClock
"""

from jlo.config import LoggerSettings, configure
from jlo.logging import (
    FIELD_KEY_LEVEL,
    FIELD_KEY_MSG,
    FIELD_KEY_TIME,
    LevelParseError,
    Logger,
    LogLevel,
    NullSink,
    StdoutSink,
    default_level,
    default_logger,
    get_logger,
    level_name,
    override_time_source,
    parse_level,
    reset_time_source,
    set_default_level,
    set_time_source,
)

__version__ = "0.1.0"
__all__ = [
    "FIELD_KEY_LEVEL",
    "FIELD_KEY_MSG",
    "FIELD_KEY_TIME",
    "LevelParseError",
    "LogLevel",
    "Logger",
    "LoggerSettings",
    "NullSink",
    "StdoutSink",
    "__version__",
    "configure",
    "default_level",
    "default_logger",
    "get_logger",
    "level_name",
    "override_time_source",
    "parse_level",
    "reset_time_source",
    "set_default_level",
    "set_time_source",
]
