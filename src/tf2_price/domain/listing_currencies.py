from __future__ import annotations

import math
from typing import Self

from tf2_price.currency import Currency
from tf2_price.domain.axis import FLOAT_KEYS_AXIS
from tf2_price.domain.currencies import Currencies
from tf2_price.domain.metal_currencies import MetalCurrencies
from tf2_price.rounding import Rounding
from tf2_price.utils.metal_tools import print_float


class ListingCurrencies(MetalCurrencies):
    """Currencies as priced in trade listings: fractional keys plus metal in scrap.

    Attributes:
        keys (float): Key count, possibly fractional. Always finite and within the
            32-bit float range; arithmetic clamps to that range instead of producing
            NaN or infinity.
        metal (int): Metal in scrap, 64-bit signed.

    Examples:
        >>> str(ListingCurrencies(1.5, 18))
        '1.50 keys, 2 ref'
    """

    __slots__ = ()

    KEYS_AXIS = FLOAT_KEYS_AXIS

    def __init__(self, keys: float = 0.0, metal: Currency = 0) -> None:
        super().__init__(keys, metal)

    @classmethod
    def from_currencies(cls, currencies: Currencies) -> Self:
        """Create listing currencies with the same keys and metal as $currencies."""
        return cls(float(currencies.keys), currencies.metal)

    def to_currencies(self, key_price: float, rounding: Rounding = Rounding.NEAREST_SCRAP) -> Currencies:
        """Convert into whole-key currencies; see `Currencies.from_listing_currencies`."""
        return Currencies.from_listing_currencies(self, key_price, rounding)

    def checked_to_currencies(self, key_price: float, rounding: Rounding = Rounding.NEAREST_SCRAP) -> Currencies | None:
        return Currencies.checked_from_listing_currencies(self, key_price, rounding)

    def is_whole_keys(self) -> bool:
        """Return True if the key count has no fractional part."""
        return self._keys == math.trunc(self._keys)

    @classmethod
    def _format_keys(cls, keys: float) -> str:
        return print_float(keys)

    @classmethod
    def _parse_keys(cls, count: str) -> float:
        return cls.KEYS_AXIS.validate(float(count), "keys")
