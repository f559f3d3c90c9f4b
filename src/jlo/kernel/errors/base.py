"""Root error class for the jlo error hierarchy.

A Logger never lets its own failures reach the caller. It reports them
instead, spreading the error's ``to_dict()`` into the diagnostic event::

    jlo.record_dropped  code=serialization_error  detail={"field": "ratio"}
"""

from __future__ import annotations

import json
from typing import Any


class JloError(Exception):
    """Root of every error jlo raises or reports.

    Errors are structured so a diagnostic can carry them as plain fields:
    ``code`` is a stable slug, ``detail`` holds extra JSON-friendly context
    and ``cause`` the underlying exception, if any (also set as
    ``__cause__``).
    """

    default_code: str = "jlo_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form used for diagnostics."""
        data: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            data["cause"] = repr(self.cause)
        return data

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"), default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["JloError"]
