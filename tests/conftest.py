"""Shared fixtures for the jlo test-suite."""

from jlo.testing.fixtures import (  # noqa: F401
    frozen_time_source,
    isolated_default_level,
    memory_sink,
)
