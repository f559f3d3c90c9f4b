"""Logging – record assembly and JSON encoding."""
from __future__ import annotations

import json
from typing import Any, Mapping

from jlo.kernel.errors import SerializationError
from jlo.kernel.time import Instant, format_rfc3339_nano
from jlo.logging.levels import level_name

FIELD_KEY_LEVEL = "@level"
FIELD_KEY_MSG = "@message"
FIELD_KEY_TIME = "@timestamp"


def build_record(
    fields: Mapping[str, Any],
    *,
    level: int,
    message: str,
    instant: Instant,
    key_level: str = FIELD_KEY_LEVEL,
    key_msg: str = FIELD_KEY_MSG,
    key_time: str = FIELD_KEY_TIME,
) -> dict[str, Any]:
    """Merge contextual *fields* with the three reserved entries.

    Reserved keys are written last, so they win over a contextual field of
    the same name.
    """
    record: dict[str, Any] = dict(fields)
    record[key_time] = format_rfc3339_nano(instant)
    record[key_level] = level_name(level)
    record[key_msg] = message
    return record


_ENCODE_OPTIONS: dict[str, Any] = {
    "sort_keys": True,
    "separators": (",", ":"),
    "ensure_ascii": False,
    "allow_nan": False,
    "default": str,
}


def encode_record(record: Mapping[str, Any]) -> bytes:
    """Encode *record* as one UTF-8 JSON line terminated by ``\\n``.

    Keys are sorted. Values the encoder does not know are rendered with
    ``str()``.

    Raises:
        SerializationError: the record holds a non-finite float, a circular
            reference, a non-string key, a value nested too deeply, or a value
            whose ``__str__`` fails.
    """
    try:
        text = json.dumps(record, **_ENCODE_OPTIONS)
    except Exception as exc:  # noqa: BLE001 – any encoder failure drops the record
        raise SerializationError(
            f"Log record is not JSON-serialisable: {exc}",
            field=_failing_field(record),
            cause=exc,
        ) from exc
    return (text + "\n").encode("utf-8")


def _failing_field(record: Mapping[str, Any]) -> str | None:
    for key, value in record.items():
        if not isinstance(key, str):
            return repr(key)
        try:
            json.dumps(value, **_ENCODE_OPTIONS)
        except Exception:  # noqa: BLE001
            return key
    return None


__all__ = [
    "FIELD_KEY_LEVEL",
    "FIELD_KEY_MSG",
    "FIELD_KEY_TIME",
    "build_record",
    "encode_record",
]
