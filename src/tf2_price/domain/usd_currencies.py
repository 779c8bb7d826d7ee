from __future__ import annotations

from typing import Self

from tf2_price.constants import ELEMENT_SEPARATOR, EMPTY_SYMBOL, KEY_SYMBOL, KEYS_SYMBOL, ONE_DOLLAR, USD_SYMBOL
from tf2_price.currency import Currency
from tf2_price.domain.two_axis import TwoAxisCurrencies
from tf2_price.utils.metal_tools import pluralize


class USDCurrencies(TwoAxisCurrencies):
    """Cash-denominated currencies: whole keys plus US dollars in cents.

    Attributes:
        keys (int): Whole keys, 64-bit signed.
        usd (int): Cash amount in cents, 64-bit signed.

    Arithmetic is the same checked/saturating family as `Currencies`; no metal
    rounding applies because cents are already whole.

    Examples:
        >>> str(USDCurrencies(2, 150))
        '2 keys, $1.50'
    """

    __slots__ = ()

    AMOUNT_NAME = "usd"

    def __init__(self, keys: Currency = 0, usd: Currency = 0) -> None:
        super().__init__(keys, usd)

    @property
    def usd(self) -> Currency:
        """Get the cash amount in cents."""
        return self._amount

    @classmethod
    def from_usd(cls, usd: Currency) -> Self:
        """Create a value with no keys and $usd cents."""
        return cls(0, usd)

    def __str__(self) -> str:
        """Return text like '2 keys, $1.50', or 'nothing' when empty."""
        elements = []
        if self._keys != 0:
            elements.append(f"{self._keys} {pluralize(self._keys, KEY_SYMBOL, KEYS_SYMBOL)}")
        if self._amount != 0:
            sign = "-" if self._amount < 0 else ""
            dollars, cents = divmod(abs(self._amount), ONE_DOLLAR)
            elements.append(f"{sign}{USD_SYMBOL}{dollars}.{cents:02d}")
        return ELEMENT_SEPARATOR.join(elements) or EMPTY_SYMBOL
