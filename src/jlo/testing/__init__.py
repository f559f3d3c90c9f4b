"""Testing – fakes and pytest fixtures for code that logs through jlo."""
from jlo.testing.fakes import FailingSink, FakeClock, FrozenClock, MemorySink

__all__ = ["FailingSink", "FakeClock", "FrozenClock", "MemorySink"]
