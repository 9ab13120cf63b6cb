"""Lenient value coercion for untrusted upstream payloads."""

from __future__ import annotations

import math
import re
import sys
from typing import Any

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
# Decimal literals only; "0x10" and "0b1" are non-numeric here (0), not 16 / 1.
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


def _finite_int(number: int) -> int:
    # Integers beyond the float range count as infinite.
    return number if abs(number) <= sys.float_info.max else 0


def coerce_number(value: Any) -> int | float:
    """Coerce value to a finite number, returning 0 when that is not possible.

    Booleans count as 1/0, numeric strings are parsed after trimming
    whitespace. NaN, infinities, integers too large for a float and anything
    unparseable become 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return _finite_int(value)
    if isinstance(value, float):
        return value if math.isfinite(value) else 0
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_RE.match(text):
            try:
                return _finite_int(int(text))
            except ValueError:
                # Over the interpreter's int string-conversion digit limit.
                pass
        if _DECIMAL_RE.match(text):
            number = float(text)
            return number if math.isfinite(number) else 0
    return 0


def coerce_str(value: Any, default: str = "") -> str:
    """Return the display string for value; None becomes default.

    Strings are returned untouched. Integral floats drop the trailing ``.0``
    so a JSON ``2026.0`` renders the same as ``2026``. Values that cannot be
    rendered (integers over the digit limit) also fall back to default.
    """
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    try:
        return str(value)
    except ValueError:
        return default
