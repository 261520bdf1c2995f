"""String <-> value conversion for option results.

Numeric conversions follow C strtol/strtod: the longest valid numeric prefix is
used, input without one converts to zero and out-of-range input saturates
(integers to the 64-bit long range, floats to +/-inf). Pass strict=True to get
a ConversionError instead whenever the whole string is not a valid, in-range
value.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from typing import Any

from optparser.errors import ConversionError

_WS = " \t\n\v\f\r"

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)
# Longest digit run that can be in the long range; longer ones saturate without int().
_LONG_DIGITS = len(str(LONG_MAX))

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:"
    r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
    r"|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?"
    r"|nan(?:\([0-9a-zA-Z_]*\))?"
    r")",
    re.IGNORECASE,
)


def _fail(text: str, target: type, reason: str = "") -> ConversionError:
    msg = f"cannot convert '{text}' to {target.__name__}"
    if reason:
        msg += f": {reason}"
    return ConversionError(msg)


def _prefix(pattern: re.Pattern[str], text: str, target: type, strict: bool) -> str | None:
    """Numeric prefix of text after leading whitespace, or None if there is none."""
    body = text.lstrip(_WS)
    m = pattern.match(body)
    if strict and (m is None or body[m.end() :].strip(_WS)):
        raise _fail(text, target)
    return m.group(0) if m else None


def _to_int(text: str, strict: bool) -> int:
    num = _prefix(_INT_RE, text, int, strict)
    if not num:
        return 0
    negative = num[0] == "-"
    digits = num.lstrip("+-").lstrip("0") or "0"
    value = int(digits) if len(digits) <= _LONG_DIGITS else LONG_MAX + 2
    if negative:
        value = -value
    if LONG_MIN <= value <= LONG_MAX:
        return value
    if strict:
        raise _fail(text, int, "out of range")
    return LONG_MIN if negative else LONG_MAX


def _to_float(text: str, strict: bool) -> float:
    num = _prefix(_FLOAT_RE, text, float, strict)
    if not num:
        return 0.0
    sign = -1.0 if num[0] == "-" else 1.0
    body = num.lstrip("+-")
    lowered = body.lower()
    if lowered.startswith("inf"):
        return sign * math.inf
    if lowered.startswith("nan"):
        return math.nan
    if lowered.startswith("0x"):
        try:
            return sign * float.fromhex(body)
        except OverflowError:
            if strict:
                raise _fail(text, float, "out of range") from None
            return sign * math.inf
    value = sign * float(body)
    if strict and math.isinf(value):
        raise _fail(text, float, "out of range")
    return value


def _to_bool(text: str, strict: bool) -> bool:
    word = text.strip(_WS).lower()
    if word in ("true", "false"):
        return word == "true"
    if strict and word not in ("0", "1"):
        raise _fail(text, bool)
    return _to_int(text, strict=False) != 0


def _to_str(text: str, strict: bool) -> str:
    return text


_BUILTIN: dict[type, Callable[[str, bool], Any]] = {
    str: _to_str,
    int: _to_int,
    float: _to_float,
    bool: _to_bool,
}


def check_converter(target: type) -> None:
    """Raise ValueError if target has a built-in conversion that a user converter would shadow."""
    if target in _BUILTIN:
        msg = f"built-in conversion for {target.__name__} cannot be replaced"
        raise ValueError(msg)


def _zero(target: type) -> Any:
    try:
        return target()
    except (TypeError, ValueError):
        return None


def str_to(
    text: str,
    target: type = str,
    strict: bool = False,
    converters: Mapping[type, Callable[[str], Any]] | None = None,
) -> Any:
    """Convert text to target.

    str, int, float and bool have built-in conversions. Other types use the
    converter for target in converters, or else target(text). Without strict,
    malformed input yields the type's zero value (target(), or None when
    target cannot be built without arguments).
    """
    builtin = _BUILTIN.get(target)
    if builtin is not None:
        return builtin(text, strict)
    func = (converters or {}).get(target, target)
    try:
        return func(text)
    except (TypeError, ValueError, OverflowError) as e:
        if strict:
            raise _fail(text, target, str(e)) from e
        return _zero(target)


def str_from(value: Any) -> str:
    """Render value as an option string; None is '', booleans are '1'/'0'."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)
