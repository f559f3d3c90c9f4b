"""Kernel concurrency – shared/exclusive locking."""
from jlo.kernel.concurrency.rwlock import ReadWriteLock

__all__ = ["ReadWriteLock"]
