"""Testing fakes – in-memory doubles for clocks and sinks."""
from jlo.kernel.time import FrozenClock
from jlo.testing.fakes.clock import FakeClock
from jlo.testing.fakes.sink import FailingSink, MemorySink

__all__ = ["FailingSink", "FakeClock", "FrozenClock", "MemorySink"]
