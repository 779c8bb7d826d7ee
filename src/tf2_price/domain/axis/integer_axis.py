from __future__ import annotations

from tf2_price import currency
from tf2_price.currency import Currency

from .protocol import Axis


class IntegerAxis(Axis[int]):
    """Axis over 64-bit signed integers (scrap, whole keys, cents).

    Integer factors and divisors use exact integer arithmetic (division truncates
    toward zero). Float factors and divisors round the result half away from zero.
    """

    __slots__ = ()

    zero = 0

    def validate(self, value: object, name: str) -> Currency:
        """Implements: Axis.validate"""
        return currency.validate_currency(value, name)

    def checked_add(self, a: Currency, b: Currency) -> Currency | None:
        return currency.checked_add(a, b)

    def checked_sub(self, a: Currency, b: Currency) -> Currency | None:
        return currency.checked_sub(a, b)

    def checked_mul(self, a: Currency, factor: int | float) -> Currency | None:
        if isinstance(factor, float):
            return currency.checked_mul_float(a, factor)
        return currency.checked_mul(a, factor)

    def checked_div(self, a: Currency, divisor: int | float) -> Currency | None:
        if isinstance(divisor, float):
            return currency.checked_div_float(a, divisor)
        return currency.checked_div(a, divisor)

    def saturating_add(self, a: Currency, b: Currency) -> Currency:
        return currency.saturating_add(a, b)

    def saturating_sub(self, a: Currency, b: Currency) -> Currency:
        return currency.saturating_sub(a, b)

    def saturating_mul(self, a: Currency, factor: int | float) -> Currency:
        if isinstance(factor, float):
            return currency.saturating_mul_float(a, factor)
        return currency.saturating_mul(a, factor)

    def saturating_div(self, a: Currency, divisor: int | float) -> Currency:
        if isinstance(divisor, float):
            return currency.saturating_div_float(a, divisor)
        return currency.saturating_div(a, divisor)

    def strict_add(self, a: Currency, b: Currency) -> Currency:
        return currency.strict_add(a, b)


INTEGER_AXIS = IntegerAxis()
