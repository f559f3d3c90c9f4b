"""Structlog adapter – jlo as the output stage of a structlog pipeline."""
from jlo.adapters.structlog.factory import (
    JloLoggerFactory,
    JloStructlogLogger,
    configure_structlog,
)

__all__ = ["JloLoggerFactory", "JloStructlogLogger", "configure_structlog"]
