"""Logging – printf-style message interpolation.

:func:`sprintf` understands the usual ``%`` directives (flags, width and
precision included) plus a few extra verbs:

* ``%t``: booleans as ``true`` / ``false``
* ``%v``: any value in its natural text form (booleans lower-cased)
* ``%q``: a double-quoted, escaped string
* ``%T``: the argument's type name
* ``%b``: integers in binary

Formatting never raises. Problems are rendered inline instead::

    sprintf("%d")            -> "%!d(MISSING)"
    sprintf("%d", "x")       -> "%!d(str=x)"
    sprintf("a", 1)          -> "a%!(EXTRA int=1)"
    sprintf("100%")          -> "100%!(NOVERB)"

An argument whose conversion itself raises is rendered as
``%!s(PANIC=RuntimeError: ...)``.
"""
from __future__ import annotations

import json
import re
from typing import Any

_DIRECTIVE = re.compile(
    r"%(?P<flags>[-+# 0]*)(?P<width>\d+)?(?:\.(?P<precision>\d*))?(?P<verb>.)?",
    re.DOTALL,
)

# verbs handed straight to the ``%`` operator
_NATIVE_VERBS = frozenset("diouxXeEfFgGcrsa")


def sprintf(template: str, *args: Any) -> str:
    """Interpolate *args* into *template* positionally."""
    out: list[str] = []
    pos = 0
    next_arg = 0
    for match in _DIRECTIVE.finditer(template):
        out.append(template[pos:match.start()])
        pos = match.end()
        verb = match.group("verb")
        if verb == "%":
            out.append("%")
            continue
        if verb is None:
            out.append("%!(NOVERB)")
            continue
        if next_arg >= len(args):
            out.append(f"%!{verb}(MISSING)")
            continue
        out.append(_render(match, verb, args[next_arg]))
        next_arg += 1
    out.append(template[pos:])

    if next_arg < len(args):
        extra = ", ".join(_describe_extra(arg) for arg in args[next_arg:])
        out.append(f"%!(EXTRA {extra})")
    return "".join(out)


def _render(match: re.Match[str], verb: str, arg: Any) -> str:
    try:
        return _convert(match, verb, arg)
    except Exception as exc:  # noqa: BLE001 – a broken argument must not fail the call
        return _panic(verb, exc)


def _convert(match: re.Match[str], verb: str, arg: Any) -> str:
    spec = "%" + match.group("flags") + (match.group("width") or "")
    if match.group("precision") is not None:
        spec += "." + match.group("precision")

    if verb == "t":
        if not isinstance(arg, bool):
            return _bad_verb(verb, arg)
        return (spec + "s") % ("true" if arg else "false")
    if verb == "v":
        return (spec + "s") % (_text(arg),)
    if verb == "q":
        return (spec + "s") % (json.dumps(_text(arg), ensure_ascii=False),)
    if verb == "T":
        return (spec + "s") % (type(arg).__name__,)
    if verb == "b":
        if isinstance(arg, bool) or not isinstance(arg, int):
            return _bad_verb(verb, arg)
        return (spec + "s") % (format(arg, "b"),)
    if verb in _NATIVE_VERBS:
        try:
            return (spec + verb) % (arg,)
        except (TypeError, ValueError, OverflowError):
            return _bad_verb(verb, arg)
    return _bad_verb(verb, arg)


def _text(arg: Any) -> str:
    if isinstance(arg, bool):
        return "true" if arg else "false"
    return str(arg)


def _describe(arg: Any) -> str:
    return f"{type(arg).__name__}={_text(arg)}"


def _bad_verb(verb: str, arg: Any) -> str:
    return f"%!{verb}({_describe(arg)})"


def _describe_extra(arg: Any) -> str:
    try:
        return _describe(arg)
    except Exception as exc:  # noqa: BLE001
        return f"{type(arg).__name__}=" + _panic("v", exc)


def _panic(verb: str, exc: Exception) -> str:
    try:
        reason = f"{type(exc).__name__}: {exc}"
    except Exception:  # noqa: BLE001
        reason = type(exc).__name__
    return f"%!{verb}(PANIC={reason})"


__all__ = ["sprintf"]
