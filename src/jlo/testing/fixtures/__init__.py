"""Testing fixtures – pytest fixtures for the fake doubles.

Import them into a ``conftest.py``::

    from jlo.testing.fixtures import frozen_time_source, memory_sink  # noqa: F401
"""
from jlo.testing.fixtures.clock import frozen_time_source
from jlo.testing.fixtures.sink import isolated_default_level, memory_sink

__all__ = ["frozen_time_source", "isolated_default_level", "memory_sink"]
