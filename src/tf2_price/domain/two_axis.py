from __future__ import annotations

from functools import total_ordering
from types import NotImplementedType
from typing import Any, Callable, ClassVar, Self

from tf2_price.domain.axis import INTEGER_AXIS, Axis

Scalar = int | float


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@total_ordering
class TwoAxisCurrencies:
    """Base for currency values made of a keys axis and an amount axis.

    Keys and the amount (scrap or cents) are independent: no operation carries
    one into the other. A subclass picks the arithmetic of each field by setting
    `KEYS_AXIS` and `AMOUNT_AXIS`, and names the amount field with `AMOUNT_NAME`.
    This class then provides, once for every shape:

    - checked arithmetic (`checked_add`, ...) returning None on overflow or a zero divisor
    - saturating arithmetic (`saturating_add`, ...) clamping each field to its bounds
    - operators `+ - * /` (and their assignment forms), which are saturating
    - equality, hashing and ordering

    `*` and `/` accept another value of the same type (field by field) or an
    int/float scalar (applied to both fields). `/` raises ZeroDivisionError for a
    zero divisor; it never clamps one.

    Ordering is lexicographic on (keys, amount): keys always dominate. It is NOT
    an ordering by economic value; `Currencies(1, 0) > Currencies(0, 10_000)` holds
    whatever a key costs. Use `can_afford` to compare by value.

    Values are immutable. Every operation returns a new instance.
    """

    __slots__ = ("_keys", "_amount")

    KEYS_AXIS: ClassVar[Axis] = INTEGER_AXIS
    AMOUNT_AXIS: ClassVar[Axis] = INTEGER_AXIS
    AMOUNT_NAME: ClassVar[str] = "amount"

    def __init__(self, keys: Scalar = 0, amount: int = 0) -> None:
        self._keys = self.KEYS_AXIS.validate(keys, "keys")
        self._amount = self.AMOUNT_AXIS.validate(amount, self.AMOUNT_NAME)

    @classmethod
    def _new(cls, keys: Any, amount: int) -> Self:
        # Skips validation; callers pass values already produced by the axes
        result = cls.__new__(cls)
        result._keys = keys
        result._amount = amount
        return result

    @property
    def keys(self) -> Scalar:
        """Get the key count."""
        return self._keys

    def to_tuple(self) -> tuple[Scalar, int]:
        """Return (keys, amount)."""
        return self._keys, self._amount

    def is_empty(self) -> bool:
        """Return True if both fields are zero."""
        return self._keys == 0 and self._amount == 0

    def __bool__(self) -> bool:
        return not self.is_empty()

    # region Arithmetic helpers

    def _same_shape(self, other: object) -> bool:
        return type(other) is type(self)

    def _apply(self, other: object, keys_op: Callable, amount_op: Callable, allow_scalar: bool) -> Self | None:
        """Apply an axis operation field by field. Returns None if any field fails."""
        if self._same_shape(other):
            keys = keys_op(self._keys, other._keys)
            amount = amount_op(self._amount, other._amount)
        elif allow_scalar and _is_scalar(other):
            keys = keys_op(self._keys, other)
            amount = amount_op(self._amount, other)
        else:
            raise TypeError(f"Cannot combine {self.__class__.__name__} with {type(other).__name__}")

        if keys is None or amount is None:
            return None
        return self._new(keys, amount)

    def _accepts(self, other: object, allow_scalar: bool) -> bool:
        return self._same_shape(other) or (allow_scalar and _is_scalar(other))

    # endregion

    # region Checked

    def checked_add(self, other: Self) -> Self | None:
        """Add field by field; None if either field overflows."""
        return self._apply(other, self.KEYS_AXIS.checked_add, self.AMOUNT_AXIS.checked_add, allow_scalar=False)

    def checked_sub(self, other: Self) -> Self | None:
        """Subtract field by field; None if either field overflows."""
        return self._apply(other, self.KEYS_AXIS.checked_sub, self.AMOUNT_AXIS.checked_sub, allow_scalar=False)

    def checked_mul(self, other: Self | Scalar) -> Self | None:
        """Multiply by another value (field by field) or a scalar; None if either field overflows."""
        return self._apply(other, self.KEYS_AXIS.checked_mul, self.AMOUNT_AXIS.checked_mul, allow_scalar=True)

    def checked_div(self, other: Self | Scalar) -> Self | None:
        """Divide by another value (field by field) or a scalar.

        Returns:
            None if any divisor is zero or either field overflows.
        """
        return self._apply(other, self.KEYS_AXIS.checked_div, self.AMOUNT_AXIS.checked_div, allow_scalar=True)

    # endregion

    # region Saturating

    def saturating_add(self, other: Self) -> Self:
        return self._apply(other, self.KEYS_AXIS.saturating_add, self.AMOUNT_AXIS.saturating_add, allow_scalar=False)

    def saturating_sub(self, other: Self) -> Self:
        return self._apply(other, self.KEYS_AXIS.saturating_sub, self.AMOUNT_AXIS.saturating_sub, allow_scalar=False)

    def saturating_mul(self, other: Self | Scalar) -> Self:
        return self._apply(other, self.KEYS_AXIS.saturating_mul, self.AMOUNT_AXIS.saturating_mul, allow_scalar=True)

    def saturating_div(self, other: Self | Scalar) -> Self:
        """Divide by another value (field by field) or a scalar, clamping each field.

        Raises:
            ZeroDivisionError: If any divisor is zero.
        """
        return self._apply(other, self.KEYS_AXIS.saturating_div, self.AMOUNT_AXIS.saturating_div, allow_scalar=True)

    # endregion

    # region Operators

    def __add__(self, other: object) -> Self | NotImplementedType:
        if not self._accepts(other, allow_scalar=False):
            return NotImplemented
        return self.saturating_add(other)

    def __sub__(self, other: object) -> Self | NotImplementedType:
        if not self._accepts(other, allow_scalar=False):
            return NotImplemented
        return self.saturating_sub(other)

    def __mul__(self, other: object) -> Self | NotImplementedType:
        if not self._accepts(other, allow_scalar=True):
            return NotImplemented
        return self.saturating_mul(other)

    def __rmul__(self, other: object) -> Self | NotImplementedType:
        if not _is_scalar(other):
            return NotImplemented
        return self.saturating_mul(other)

    def __truediv__(self, other: object) -> Self | NotImplementedType:
        if not self._accepts(other, allow_scalar=True):
            return NotImplemented
        return self.saturating_div(other)

    def __neg__(self) -> Self:
        return self.saturating_mul(-1)

    def __pos__(self) -> Self:
        return self

    # endregion

    # region Comparison

    def __eq__(self, other: object) -> bool:
        if not self._same_shape(other):
            return NotImplemented
        return self._keys == other._keys and self._amount == other._amount

    def __lt__(self, other: object) -> bool | NotImplementedType:
        """Lexicographic on (keys, amount); see the class docstring."""
        if not self._same_shape(other):
            return NotImplemented
        return (self._keys, self._amount) < (other._keys, other._amount)

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._keys, self._amount))

    # endregion

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(keys={self._keys!r}, {self.AMOUNT_NAME}={self._amount!r})"
