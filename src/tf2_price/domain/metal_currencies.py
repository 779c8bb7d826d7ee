from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Self

from tf2_price.constants import (
    ELEMENT_SEPARATOR,
    EMPTY_SYMBOL,
    KEY_SYMBOL,
    KEYS_SYMBOL,
    METAL_FLOAT_MAX,
    METAL_SYMBOL,
    ONE_REF,
    RECLAIMED_SYMBOL,
    REFINED_SYMBOL,
    SCRAP_SYMBOL,
)
from tf2_price.currency import Currency, checked_float, saturating_float
from tf2_price.domain.two_axis import Scalar, TwoAxisCurrencies
from tf2_price.errors import CurrencyParseError
from tf2_price.rounding import Rounding, round_metal
from tf2_price.utils.metal_tools import format_metal, get_metal_from_float, pluralize, split_denominations


class MetalCurrencies(TwoAxisCurrencies, ABC):
    """Keys plus metal stored as a scrap count.

    Shared by `Currencies` (whole keys) and `ListingCurrencies` (fractional keys).
    Key prices passed to the conversion methods are in refined (e.g. 70.33).
    """

    __slots__ = ()

    AMOUNT_NAME = "metal"

    def __init__(self, keys: Scalar = 0, metal: Currency = 0) -> None:
        super().__init__(keys, metal)

    @property
    def metal(self) -> Currency:
        """Get the metal amount in scrap."""
        return self._amount

    @classmethod
    def from_metal(cls, metal: Currency) -> Self:
        """Create a value with no keys and $metal scrap."""
        return cls(cls.KEYS_AXIS.zero, metal)

    # region Conversion

    def _metal_total(self, key_price: float) -> float:
        # A zero key count contributes nothing, even for an infinite $key_price
        key_part = self._keys * key_price if self._keys != 0 else 0.0
        return key_part + self._amount / ONE_REF

    def to_metal(self, key_price: float) -> float:
        """Total value in refined: keys * $key_price + metal.

        The result is clamped to [-`METAL_FLOAT_MAX`, `METAL_FLOAT_MAX`], the range
        that converts back into a scrap count, so it can never overflow into a
        corrupted integer.

        Args:
            key_price: Price of one key in refined.

        Returns:
            Value in refined.

        Raises:
            ValueError: If $key_price is NaN and there are keys to price.
        """
        total = self._metal_total(key_price)

        # Raise: NaN has no bound to clamp to
        if math.isnan(total):
            raise ValueError(f"Cannot call `to_metal` because $key_price ({key_price}) is not a number")

        return saturating_float(total, METAL_FLOAT_MAX)

    def checked_to_metal(self, key_price: float) -> float | None:
        """Like `to_metal`, but None if $key_price is not finite or the total is out of range."""
        if not math.isfinite(key_price):
            return None
        return checked_float(self._metal_total(key_price), METAL_FLOAT_MAX)

    def can_afford(self, price: MetalCurrencies, key_price: float) -> bool:
        """Return True if this value is worth at least $price when one key costs $key_price refined."""
        return self.to_metal(key_price) >= price.to_metal(key_price)

    # endregion

    # region Normalization

    def round(self, rounding: Rounding) -> Self:
        """Return a copy with metal rounded by $rounding; keys are untouched."""
        return self._new(self._keys, round_metal(self._amount, rounding))

    def neaten(self, key_price: float | None = None) -> Self:
        """Return an equivalent value in canonical form.

        Without $key_price the stored fields are already canonical (metal is a whole
        scrap count) and an equal copy is returned.

        With $key_price, whole keys' worth of metal is moved into keys and the signs
        of keys and metal are made to agree, so `Currencies(0, 160).neaten(8)` is
        `Currencies(2, 16)` and `Currencies(2, -9).neaten(8)` is `Currencies(1, 63)`.
        Total value at that key price (rounded to whole scrap) is preserved exactly.

        Args:
            key_price: Optional price of one key in refined.

        Raises:
            ValueError: If $key_price is not worth at least one scrap.
            OverflowError: If the moved keys do not fit in the keys field.
        """
        if key_price is None:
            return self._new(self._keys, self._amount)

        key_scrap = get_metal_from_float(key_price)

        # Raise: metal can only be folded into keys that are worth something
        if key_scrap <= 0:
            raise ValueError(f"Cannot call `neaten` because $key_price ({key_price}) is worth less than one scrap")

        moved = abs(self._amount) // key_scrap
        if self._amount < 0:
            moved = -moved
        metal = self._amount - moved * key_scrap
        keys = self.KEYS_AXIS.strict_add(self._keys, moved)

        if keys >= 1 and metal < 0:
            keys = self.KEYS_AXIS.strict_add(keys, -1)
            metal += key_scrap
        elif keys <= -1 and metal > 0:
            keys = self.KEYS_AXIS.strict_add(keys, 1)
            metal -= key_scrap

        return self._new(keys, metal)

    # endregion

    # region Text

    @classmethod
    def _format_keys(cls, keys: Scalar) -> str:
        return str(keys)

    @classmethod
    @abstractmethod
    def _parse_keys(cls, count: str) -> Scalar:
        """Parse the key count of a text element."""
        ...

    def _keys_element(self) -> str:
        return f"{self._format_keys(self._keys)} {pluralize(self._keys, KEY_SYMBOL, KEYS_SYMBOL)}"

    def __str__(self) -> str:
        """Return text like '2 keys, 2.33 ref', or 'nothing' when empty."""
        elements = []
        if self._keys != 0:
            elements.append(self._keys_element())
        if self._amount != 0:
            elements.append(f"{format_metal(self._amount)} {METAL_SYMBOL}")
        return ELEMENT_SEPARATOR.join(elements) or EMPTY_SYMBOL

    def to_long_str(self) -> str:
        """Return text listing every nonzero unit, e.g. '2 keys, 2 refined, 1 reclaimed, 1 scrap'."""
        elements = []
        if self._keys != 0:
            elements.append(self._keys_element())
        for count, symbol in zip(split_denominations(self._amount), (REFINED_SYMBOL, RECLAIMED_SYMBOL, SCRAP_SYMBOL)):
            if count != 0:
                elements.append(f"{count} {symbol}")
        return ELEMENT_SEPARATOR.join(elements) or EMPTY_SYMBOL

    @classmethod
    def from_str(cls, text: str) -> Self:
        """Parse text like '2 keys, 2.33 ref', '1 key' or '5 ref'.

        The literal 'nothing' parses as an empty value.

        Args:
            text: Text in the format produced by `str()`.

        Returns:
            The parsed value.

        Raises:
            CurrencyParseError: If the text is malformed or names no currencies.
        """
        # Raise: only text can be parsed
        if not isinstance(text, str):
            raise TypeError(f"$text must be a string, but provided value is: {text!r}")

        text = text.strip()
        if text == EMPTY_SYMBOL:
            return cls()

        keys = cls.KEYS_AXIS.zero
        metal = 0

        for element in text.split(ELEMENT_SEPARATOR):
            parts = element.split(" ")

            # Raise: each element is exactly "<count> <symbol>"
            if len(parts) != 2:
                raise CurrencyParseError(f"Invalid currencies format in $text = '{text}'", field=element)

            count, symbol = parts
            if symbol in (KEY_SYMBOL, KEYS_SYMBOL):
                try:
                    keys = cls._parse_keys(count)
                except (TypeError, ValueError) as e:
                    raise CurrencyParseError(f"Error parsing key count '{count}' in $text = '{text}'", field="keys") from e
            elif symbol == METAL_SYMBOL:
                try:
                    refined = float(count)
                except ValueError as e:
                    raise CurrencyParseError(f"Error parsing metal count '{count}' in $text = '{text}'", field="metal") from e

                # Raise: metal must be a finite amount that fits in scrap
                if checked_float(refined, METAL_FLOAT_MAX) is None:
                    raise CurrencyParseError(f"Metal count '{count}' in $text = '{text}' is out of range", field="metal")
                metal = get_metal_from_float(refined)
            else:
                raise CurrencyParseError(f"Unknown currency '{symbol}' in $text = '{text}'", field=element)

        # Raise: text must name at least one nonzero currency
        if keys == 0 and metal == 0:
            raise CurrencyParseError(f"No currencies could be parsed from $text = '{text}'")

        return cls(keys, metal)

    # endregion
