"""Strict and loose equality for scalar items.

Strict equality requires the same type and the same value: ``"0" != 0``,
``True != 1`` and ``1 != 1.0``.

Loose equality coerces between booleans, numbers and strings:

- If either side is a bool, both sides are compared by truthiness.  The
  strings ``""`` and ``"0"`` are falsy, like the number 0.
- Two numbers compare numerically.
- A number and a numeric string compare numerically (``1 == " 1.0"``).
- Two numeric strings compare numerically (``"10" == "1e1"``).
- Otherwise both sides are compared as text, so ``0 != "a"``.  Non-finite
  floats read as ``INF``, ``-INF`` and ``NAN``, so ``inf != "inf"``.

numpy scalars and 0-d arrays are unwrapped to Python scalars first; bytes are
decoded as UTF-8 (surrogate-escaped, so no byte is lost) for loose comparison.
"""

from __future__ import annotations

import decimal
import math
import numbers
import re
from typing import Any

import numpy as np

__all__ = ["loose_equal", "parse_numeric", "strict_equal", "truthy"]

# Leading/trailing whitespace, optional sign, digits with optional fraction,
# optional exponent.  Hex, underscores, "nan" and "inf" are not numeric.
_NUMERIC_STRING = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*\Z")
_FALSY_STRINGS = frozenset({"", "0"})


def _unwrap(value: Any) -> Any:
    if isinstance(value, (np.generic, np.ndarray)):
        return value.item()
    return value


def _loose_operand(value: Any) -> Any:
    value = _unwrap(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="surrogateescape")
    return value


def _is_nan(value: Any) -> bool:
    if isinstance(value, decimal.Decimal):
        # Comparing a signaling NaN raises InvalidOperation
        return value.is_nan()
    # NaN is the only number that is unequal to itself
    return isinstance(value, numbers.Number) and value != value


def _values_equal(expected: Any, actual: Any, nan_equal: bool) -> bool:
    expected_nan, actual_nan = _is_nan(expected), _is_nan(actual)
    if expected_nan or actual_nan:
        return nan_equal and expected_nan and actual_nan
    return bool(expected == actual)


def _as_text(value: Any) -> str:
    # Non-finite floats are spelled INF, -INF and NAN
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NAN"
        return "INF" if value > 0 else "-INF"
    return str(value)


def parse_numeric(text: str) -> int | float | None:
    """Return the number spelled by *text*, or None if it is not numeric."""
    if not _NUMERIC_STRING.match(text):
        return None
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        return float(stripped)


def truthy(value: Any) -> bool:
    """Truthiness used by loose comparison: ``"0"`` is falsy."""
    if isinstance(value, str):
        return value not in _FALSY_STRINGS
    return bool(value)


def _as_number(value: Any) -> Any:
    if isinstance(value, numbers.Number):
        return value
    if isinstance(value, str):
        return parse_numeric(value)
    return None


def strict_equal(expected: Any, actual: Any, nan_equal: bool = True) -> bool:
    """Return True when both scalars have the identical type and value."""
    if type(expected) is not type(actual):
        return False
    expected, actual = _unwrap(expected), _unwrap(actual)
    if type(expected) is not type(actual):
        return False
    return _values_equal(expected, actual, nan_equal)


def loose_equal(expected: Any, actual: Any, nan_equal: bool = True) -> bool:
    """Return True when both scalars are equal after loose coercion."""
    expected, actual = _loose_operand(expected), _loose_operand(actual)

    if isinstance(expected, bool) or isinstance(actual, bool):
        return truthy(expected) == truthy(actual)

    expected_number, actual_number = _as_number(expected), _as_number(actual)
    if expected_number is not None and actual_number is not None:
        return _values_equal(expected_number, actual_number, nan_equal)

    return _as_text(expected) == _as_text(actual)
