from __future__ import annotations

from typing import Protocol, TypeVar

T = TypeVar("T", int, float)

# region Interface


class Axis(Protocol[T]):
    """Arithmetic over one field of a two-axis currency value.

    A currency shape is a pair of independent axes (keys and metal, or keys and
    cents). Each axis knows how to validate its values and how to add, subtract,
    multiply and divide them in the checked, saturating and strict families.
    Factors and divisors may be another value of the same axis or an int/float scalar.
    """

    zero: T

    def validate(self, value: object, name: str) -> T:
        """Return $value converted to this axis, raising TypeError/ValueError if it cannot be stored."""
        ...

    def checked_add(self, a: T, b: T) -> T | None: ...

    def checked_sub(self, a: T, b: T) -> T | None: ...

    def checked_mul(self, a: T, factor: int | float) -> T | None: ...

    def checked_div(self, a: T, divisor: int | float) -> T | None:
        """Divide $a by $divisor; None on a zero divisor or an unrepresentable result."""
        ...

    def saturating_add(self, a: T, b: T) -> T: ...

    def saturating_sub(self, a: T, b: T) -> T: ...

    def saturating_mul(self, a: T, factor: int | float) -> T: ...

    def saturating_div(self, a: T, divisor: int | float) -> T:
        """Divide $a by $divisor, clamping the result.

        Raises:
            ZeroDivisionError: If $divisor is zero.
        """
        ...

    def strict_add(self, a: T, b: T) -> T:
        """Add, raising OverflowError instead of clamping."""
        ...


# endregion
