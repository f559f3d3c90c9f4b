"""Logging – internal diagnostics for records the library had to drop.

Reports go through structlog under the ``jlo`` logger name. A thread-local
guard stops a report from recursing when structlog is itself routed into a
jlo Logger whose sink is the one failing.
"""
from __future__ import annotations

import threading
from typing import Any

import structlog

_guard = threading.local()


def report(event: str, **fields: Any) -> None:
    """Emit a warning-level diagnostic; never raises."""
    if getattr(_guard, "active", False):
        return
    _guard.active = True
    try:
        structlog.get_logger("jlo").warning(event, **fields)
    except Exception:  # noqa: BLE001 – diagnostics must not break the caller
        pass
    finally:
        _guard.active = False


__all__ = ["report"]
