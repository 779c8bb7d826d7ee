__version__ = "0.0.1"

from tf2_price.domain.currencies import Currencies
from tf2_price.domain.listing_currencies import ListingCurrencies
from tf2_price.domain.usd_currencies import USDCurrencies
from tf2_price.errors import CurrencyParseError
from tf2_price.rounding import Rounding

__all__ = ["Currencies", "ListingCurrencies", "USDCurrencies", "Rounding", "CurrencyParseError"]
