"""Currency value types.

`Currencies` (whole keys + scrap), `ListingCurrencies` (fractional keys + scrap)
and `USDCurrencies` (whole keys + cents) share one generic checked/saturating
arithmetic implementation in `TwoAxisCurrencies`.
"""

from tf2_price.domain.two_axis import TwoAxisCurrencies
from tf2_price.domain.currencies import Currencies
from tf2_price.domain.listing_currencies import ListingCurrencies
from tf2_price.domain.usd_currencies import USDCurrencies

__all__ = [
    "TwoAxisCurrencies",
    "Currencies",
    "ListingCurrencies",
    "USDCurrencies",
]
