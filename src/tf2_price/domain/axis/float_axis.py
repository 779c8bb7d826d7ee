from __future__ import annotations

import math

from tf2_price.constants import FLOAT_KEYS_MAX
from tf2_price.currency import checked_float, saturating_float

from .protocol import Axis


def _as_float(value: int | float) -> float:
    # Ints beyond the float range become a signed infinity instead of raising OverflowError
    try:
        return float(value)
    except OverflowError:
        return math.copysign(math.inf, value)


class FloatAxis(Axis[float]):
    """Axis over finite floats bounded by [-$bound, $bound].

    Stored values never become NaN or infinite: checked operations return None
    for such results and saturating operations clamp them to the bound (NaN
    collapses to 0.0).
    """

    __slots__ = ("_bound",)

    zero = 0.0

    def __init__(self, bound: float) -> None:
        # Raise: the bound itself must be a usable finite limit
        if not math.isfinite(bound) or bound <= 0:
            raise ValueError(f"$bound must be a positive finite float, but provided value is: {bound}")
        self._bound = bound

    @property
    def bound(self) -> float:
        return self._bound

    def validate(self, value: object, name: str) -> float:
        """Implements: Axis.validate

        Accepts int and float (not bool) and returns a float.
        """
        # Raise: only real numbers can be stored
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise TypeError(f"${name} must be a float, but provided value is: {value!r} (type '{type(value).__name__}')")

        result = _as_float(value)

        # Raise: stored floats are always finite and inside the bound
        if checked_float(result, self._bound) is None:
            raise ValueError(f"${name} must be finite and within [{-self._bound}, {self._bound}], but provided value is: {value}")

        return result

    def checked_add(self, a: float, b: float) -> float | None:
        return checked_float(a + b, self._bound)

    def checked_sub(self, a: float, b: float) -> float | None:
        return checked_float(a - b, self._bound)

    def checked_mul(self, a: float, factor: int | float) -> float | None:
        factor = _as_float(factor)
        if not math.isfinite(factor):
            return None
        return checked_float(a * factor, self._bound)

    def checked_div(self, a: float, divisor: int | float) -> float | None:
        divisor = _as_float(divisor)
        if divisor == 0 or not math.isfinite(divisor):
            return None
        return checked_float(a / divisor, self._bound)

    def saturating_add(self, a: float, b: float) -> float:
        return saturating_float(a + b, self._bound)

    def saturating_sub(self, a: float, b: float) -> float:
        return saturating_float(a - b, self._bound)

    def saturating_mul(self, a: float, factor: int | float) -> float:
        # 0 * inf is NaN; a zero amount stays zero for any factor
        if a == 0:
            return 0.0
        return saturating_float(a * _as_float(factor), self._bound)

    def saturating_div(self, a: float, divisor: int | float) -> float:
        # Raise: a zero divisor has no bound to clamp to
        if divisor == 0:
            raise ZeroDivisionError(f"Cannot call `saturating_div` because $divisor is zero (a = {a})")
        return saturating_float(a / _as_float(divisor), self._bound)

    def strict_add(self, a: float, b: float) -> float:
        result = self.checked_add(a, b)
        if result is None:
            raise OverflowError(f"Cannot call `strict_add` because {a} + {b} leaves [{-self._bound}, {self._bound}]")
        return result


FLOAT_KEYS_AXIS = FloatAxis(FLOAT_KEYS_MAX)
