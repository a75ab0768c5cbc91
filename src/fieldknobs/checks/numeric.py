"""Numeric predicates used by the number validator.

Booleans are not numbers here even though ``bool`` subclasses ``int``.
Decimal-place counting works on the shortest decimal form of the value,
so ``0.1`` has one decimal place even though its binary float does not.
"""

import math
from decimal import Decimal, InvalidOperation
from numbers import Real
from typing import Any, Optional


def is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def is_number_required(value: Optional[Real], is_required: bool) -> bool:
    """True if a value is present, or if none is required."""
    if not is_required:
        return True
    return value is not None


def is_min_value(value: Real, min_value: Real) -> bool:
    return value >= min_value


def is_max_value(value: Real, max_value: Real) -> bool:
    return value <= max_value


def _is_integral(value: Real) -> bool:
    if isinstance(value, int):
        return True
    try:
        return float(value).is_integer()
    except (OverflowError, ValueError):
        return False


def is_integer(value: Real, must_be_integer: bool = True) -> bool:
    """Check integrality against the desired polarity.

    Args:
        value: Number to check; integral floats such as ``3.0`` count
        must_be_integer: True to require an integer, False to reject one

    Returns:
        True if the value has the requested integrality
    """
    return _is_integral(value) if must_be_integer else not _is_integral(value)


def allow_negative(value: Real, allowed: bool = True) -> bool:
    """False only when negatives are disallowed and ``value`` is negative."""
    return True if allowed else value >= 0


def allow_zero(value: Real, allowed: bool = True) -> bool:
    """False only when zero is disallowed and ``value`` is zero."""
    return True if allowed else value != 0


def allow_positive(value: Real, allowed: bool = True) -> bool:
    """False only when positives are disallowed and ``value`` is positive."""
    return True if allowed else value <= 0


def count_decimal_places(value: Real) -> int:
    """Count digits after the decimal point.

    Trailing zeros are not counted, so ``2.50`` has one decimal place.
    Non-finite values have none.
    """
    if isinstance(value, int):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    try:
        exponent = Decimal(str(value)).normalize().as_tuple().exponent
    except InvalidOperation:
        return 0
    if not isinstance(exponent, int):
        return 0
    return max(0, -exponent)


def must_have_decimal(value: Real, required: bool = True) -> bool:
    """True if ``value`` has a fractional part, or if none is required."""
    if not required:
        return True
    return count_decimal_places(value) > 0


def is_valid_max_decimal_places(value: Real, max_places: int) -> bool:
    return count_decimal_places(value) <= max_places


def is_valid_min_decimal_places(value: Real, min_places: int) -> bool:
    return count_decimal_places(value) >= min_places


def is_binary(value: Real) -> bool:
    """True for non-negative integers written only with the digits 0 and 1."""
    if value < 0 or not _is_integral(value):
        return False
    return set(str(int(value))) <= {"0", "1"}
