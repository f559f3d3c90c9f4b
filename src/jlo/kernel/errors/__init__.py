"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    JloError
    ├── ValidationError          (validation.py)
    │   └── LevelParseError      (jlo.logging.errors)
    ├── ConfigError              (jlo.config.validation)
    └── InfrastructureError      (infrastructure.py)
        ├── SerializationError
        └── SinkWriteError
"""

from jlo.kernel.errors.base import JloError
from jlo.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
    SinkWriteError,
)
from jlo.kernel.errors.validation import ValidationError

__all__ = [
    "InfrastructureError",
    "JloError",
    "SerializationError",
    "SinkWriteError",
    "ValidationError",
]
