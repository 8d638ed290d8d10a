"""Type-aware equality used by the assertion engine."""

from __future__ import annotations

import math
import numbers
from typing import Any

FLOAT_TOLERANCE = 0.0001


def _is_float(value: Any) -> bool:
    # Real but not Rational: float, numpy floating types; never int or bool
    return isinstance(value, numbers.Real) and not isinstance(value, numbers.Rational)


def _floats_equal(left: Any, right: Any) -> bool:
    left, right = float(left), float(right)
    # Only positive infinity is special-cased; -inf falls through and fails.
    if math.isinf(left) and left > 0 and math.isinf(right) and right > 0:
        return True
    return abs(left - right) <= FLOAT_TOLERANCE


def is_equal(left: Any, right: Any) -> bool:
    """Compare two operands.

    Two floating-point values are equal when both are positive infinity or
    when they differ by at most ``FLOAT_TOLERANCE``. Anything else uses ``==``.
    """
    if _is_float(left) and _is_float(right):
        return _floats_equal(left, right)
    return bool(left == right)


__all__ = ["FLOAT_TOLERANCE", "is_equal"]
