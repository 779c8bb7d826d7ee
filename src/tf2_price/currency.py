"""The Currency primitive: a 64-bit signed integer count of scrap, keys or cents.

Python integers never overflow, so the 64-bit range is enforced here. Every
arithmetic helper comes in three families:

- checked: returns None when the true result is not representable
- saturating: clamps to `CURRENCY_MIN`/`CURRENCY_MAX`
- strict: raises `OverflowError`

Division by zero is never saturated. Checked division returns None for it,
saturating division raises `ZeroDivisionError`.
"""

from __future__ import annotations

import logging
import math
from typing import TypeAlias

from tf2_price.constants import CURRENCY_MAX, CURRENCY_MIN

logger = logging.getLogger(__name__)

Currency: TypeAlias = int


def is_currency(value: object) -> bool:
    """Return True if $value is an int (not a bool) inside the 64-bit range."""
    return isinstance(value, int) and not isinstance(value, bool) and CURRENCY_MIN <= value <= CURRENCY_MAX


def validate_currency(value: object, name: str) -> Currency:
    """Validate that $value can be stored as a Currency and return it.

    Args:
        value: Candidate value.
        name: Parameter name used in error messages.

    Returns:
        The value unchanged.

    Raises:
        TypeError: If $value is not an int (bools are rejected).
        ValueError: If $value is outside the 64-bit signed range.
    """
    # Raise: bool is an int subclass but never a meaningful amount
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"${name} must be an int, but provided value is: {value!r} (type '{type(value).__name__}')")

    # Raise: amounts are 64-bit signed integers
    if not CURRENCY_MIN <= value <= CURRENCY_MAX:
        raise ValueError(f"${name} must be within [{CURRENCY_MIN}, {CURRENCY_MAX}], but provided value is: {value}")

    return value


def checked_currency(value: int) -> int | None:
    if CURRENCY_MIN <= value <= CURRENCY_MAX:
        return value
    return None


def saturate_currency(value: int) -> Currency:
    if value > CURRENCY_MAX:
        logger.debug(f"Saturated {value} to CURRENCY_MAX")
        return CURRENCY_MAX
    if value < CURRENCY_MIN:
        logger.debug(f"Saturated {value} to CURRENCY_MIN")
        return CURRENCY_MIN
    return value


def _trunc_div(a: int, b: int) -> int:
    # Integer division truncating toward zero (Python's `//` floors)
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def round_half_away(value: float) -> float:
    """Round $value to the nearest integer, ties away from zero.

    Python's builtin `round` uses banker's rounding (`round(2.5) == 2`), which is
    not the conventional rounding users expect for prices.

    Examples:
        >>> round_half_away(2.5)
        3.0
        >>> round_half_away(-2.5)
        -3.0
    """
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


# region Checked


def checked_add(a: Currency, b: Currency) -> Currency | None:
    return checked_currency(a + b)


def checked_sub(a: Currency, b: Currency) -> Currency | None:
    return checked_currency(a - b)


def checked_mul(a: Currency, b: Currency) -> Currency | None:
    return checked_currency(a * b)


def checked_div(a: Currency, b: Currency) -> Currency | None:
    """Divide truncating toward zero; None on zero divisor or `CURRENCY_MIN / -1`."""
    if b == 0:
        return None
    return checked_currency(_trunc_div(a, b))


def checked_from_float(value: float) -> Currency | None:
    """Round a float half away from zero into a Currency; None if non-finite or out of range."""
    if not math.isfinite(value):
        return None
    return checked_currency(int(round_half_away(value)))


def checked_mul_float(a: Currency, b: float) -> Currency | None:
    return checked_from_float(a * b) if math.isfinite(b) else None


def checked_div_float(a: Currency, b: float) -> Currency | None:
    if b == 0 or not math.isfinite(b):
        return None
    return checked_from_float(a / b)


# endregion

# region Saturating


def saturating_add(a: Currency, b: Currency) -> Currency:
    return saturate_currency(a + b)


def saturating_sub(a: Currency, b: Currency) -> Currency:
    return saturate_currency(a - b)


def saturating_mul(a: Currency, b: Currency) -> Currency:
    return saturate_currency(a * b)


def saturating_div(a: Currency, b: Currency) -> Currency:
    """Divide truncating toward zero, clamping `CURRENCY_MIN / -1` to `CURRENCY_MAX`.

    Raises:
        ZeroDivisionError: If $b is zero.
    """
    # Raise: a zero divisor has no bound to clamp to
    if b == 0:
        raise ZeroDivisionError(f"Cannot call `saturating_div` because $b is zero (a = {a})")
    return saturate_currency(_trunc_div(a, b))


def saturating_from_float(value: float) -> Currency:
    """Round a float half away from zero into a Currency, clamping to the bounds.

    NaN has no bound to clamp to and collapses to 0; infinities clamp to the
    matching bound.
    """
    if math.isnan(value):
        logger.debug("Saturated NaN to 0")
        return 0
    if math.isinf(value):
        return saturate_currency(CURRENCY_MAX + 1 if value > 0 else CURRENCY_MIN - 1)
    return saturate_currency(int(round_half_away(value)))


def saturating_mul_float(a: Currency, b: float) -> Currency:
    # 0 * inf is NaN; a zero amount stays zero for any factor
    if a == 0:
        return 0
    return saturating_from_float(a * b)


def saturating_div_float(a: Currency, b: float) -> Currency:
    """Divide by a float, rounding half away from zero and clamping.

    Raises:
        ZeroDivisionError: If $b is zero.
    """
    # Raise: a zero divisor has no bound to clamp to
    if b == 0:
        raise ZeroDivisionError(f"Cannot call `saturating_div_float` because $b is zero (a = {a})")
    if a == 0:
        return 0
    return saturating_from_float(a / b)


# endregion

# region Strict


def strict_add(a: Currency, b: Currency) -> Currency:
    """Add, raising instead of clamping. Used where overflow indicates a caller bug.

    Raises:
        OverflowError: If the result does not fit in 64 bits.
    """
    result = checked_add(a, b)
    if result is None:
        raise OverflowError(f"Cannot call `strict_add` because {a} + {b} overflows 64 bits")
    return result


def strict_sub(a: Currency, b: Currency) -> Currency:
    result = checked_sub(a, b)
    if result is None:
        raise OverflowError(f"Cannot call `strict_sub` because {a} - {b} overflows 64 bits")
    return result


def strict_mul(a: Currency, b: Currency) -> Currency:
    result = checked_mul(a, b)
    if result is None:
        raise OverflowError(f"Cannot call `strict_mul` because {a} * {b} overflows 64 bits")
    return result


# endregion

# region Float axis


def checked_float(value: float, bound: float) -> float | None:
    """Return $value if it is finite and within [-$bound, $bound], else None."""
    if not math.isfinite(value) or abs(value) > bound:
        return None
    return value


def saturating_float(value: float, bound: float) -> float:
    """Clamp $value into [-$bound, $bound]. NaN collapses to 0.0."""
    if math.isnan(value):
        logger.debug("Saturated NaN to 0.0")
        return 0.0
    if value > bound:
        logger.debug(f"Saturated {value} to {bound}")
        return bound
    if value < -bound:
        logger.debug(f"Saturated {value} to {-bound}")
        return -bound
    return value


# endregion
