"""Validation errors — caller-supplied input that cannot be accepted."""

from __future__ import annotations

from typing import Any

from jlo.kernel.errors.base import JloError


class ValidationError(JloError):
    """Input does not meet validation rules.

    ``value`` is the rejected input, kept for diagnostics.
    """

    default_code = "validation_error"

    def __init__(self, message: str, *, value: Any = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["value"] = self.value
        return base


__all__ = ["ValidationError"]
