from __future__ import annotations

import math
from typing import TYPE_CHECKING, Self

from tf2_price.currency import Currency, checked_add, checked_currency, saturate_currency, saturating_add
from tf2_price.domain.metal_currencies import MetalCurrencies
from tf2_price.rounding import Rounding, checked_round_refined, round_refined

if TYPE_CHECKING:
    from tf2_price.domain.listing_currencies import ListingCurrencies


class Currencies(MetalCurrencies):
    """In-game currencies: a whole number of keys plus metal in scrap.

    Attributes:
        keys (int): Whole keys, 64-bit signed.
        metal (int): Metal in scrap (9 scrap = 1 refined), 64-bit signed.

    Both fields saturate independently under `+ - * /`; keys are never carried
    into metal or back. Converting between them always takes an explicit key price.

    Examples:
        >>> str(Currencies(2, 21))
        '2 keys, 2.33 ref'
        >>> str(Currencies())
        'nothing'
    """

    __slots__ = ()

    def __init__(self, keys: Currency = 0, metal: Currency = 0) -> None:
        super().__init__(keys, metal)

    @classmethod
    def from_keys(cls, keys: Currency) -> Self:
        """Create a value with $keys keys and no metal."""
        return cls(keys, 0)

    # region From fractional keys

    @classmethod
    def from_keys_float(cls, keys: float, key_price: float, rounding: Rounding = Rounding.NEAREST_SCRAP) -> Self:
        """Create a value from a fractional key count.

        Whole keys are kept (truncated toward zero) and the fractional remainder is
        converted into metal at $key_price using $rounding. Out-of-range results saturate.

        Args:
            keys: Key count, possibly fractional (e.g. 1.5).
            key_price: Price of one key in refined.
            rounding: Policy used for the converted remainder.

        Raises:
            ValueError: If $keys is not finite or the converted remainder is NaN.

        Examples:
            >>> Currencies.from_keys_float(1.5, 10.0)
            Currencies(keys=1, metal=45)
        """
        return cls.from_listing_currencies(_listing(keys, 0), key_price, rounding)

    @classmethod
    def from_listing_currencies(
        cls,
        listing: ListingCurrencies,
        key_price: float,
        rounding: Rounding = Rounding.NEAREST_SCRAP,
    ) -> Self:
        """Convert listing currencies (fractional keys) into whole-key currencies.

        The fractional part of $listing.keys times $key_price is converted into scrap
        with $rounding and added to $listing.metal, saturating on overflow.

        Args:
            listing: Listing value to convert.
            key_price: Price of one key in refined.
            rounding: Policy used for the converted remainder.

        Raises:
            ValueError: If the converted remainder is NaN (e.g. $key_price is NaN).
        """
        whole = math.trunc(listing.keys)
        fraction = listing.keys - whole
        extra = round_refined(fraction * key_price, rounding) if fraction != 0 else 0
        return cls(saturate_currency(whole), saturating_add(listing.metal, extra))

    @classmethod
    def checked_from_listing_currencies(
        cls,
        listing: ListingCurrencies,
        key_price: float,
        rounding: Rounding = Rounding.NEAREST_SCRAP,
    ) -> Self | None:
        """Like `from_listing_currencies`, but None when any step is non-finite or overflows."""
        whole = math.trunc(listing.keys)
        if checked_currency(whole) is None:
            return None

        fraction = listing.keys - whole
        extra = 0
        if fraction != 0:
            extra = checked_round_refined(fraction * key_price, rounding)
            if extra is None:
                return None

        metal = checked_add(listing.metal, extra)
        if metal is None:
            return None
        return cls._new(whole, metal)

    # endregion

    def to_listing_currencies(self) -> ListingCurrencies:
        """Return the same value as listing currencies (keys become a float)."""
        from tf2_price.domain.listing_currencies import ListingCurrencies

        return ListingCurrencies.from_currencies(self)

    @classmethod
    def _parse_keys(cls, count: str) -> Currency:
        return cls.KEYS_AXIS.validate(int(count), "keys")


def _listing(keys: float, metal: Currency) -> ListingCurrencies:
    from tf2_price.domain.listing_currencies import ListingCurrencies

    return ListingCurrencies(keys, metal)
