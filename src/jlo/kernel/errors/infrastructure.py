"""Infrastructure errors: record encoding and sink I/O failures."""

from __future__ import annotations

from typing import Any

from jlo.kernel.errors.base import JloError


class InfrastructureError(JloError):
    """I/O or encoding failure that is not caused by caller input."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """A log record could not be encoded as JSON and was dropped.

    *field* names the first contextual field whose value alone fails to
    encode, when one can be singled out; it is also copied into ``detail``
    so the drop diagnostic shows it.
    """

    default_code = "serialization_error"

    def __init__(self, message: str, *, field: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.field = field
        if field is not None:
            self.detail.setdefault("field", field)


class SinkWriteError(InfrastructureError):
    """The output sink rejected a write."""

    default_code = "sink_write_error"

    def __init__(self, sink: object, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Could not write to sink {sink!r}", **kwargs)
        self.sink = sink


__all__ = ["InfrastructureError", "SerializationError", "SinkWriteError"]
