"""Wire-format encoding and decoding of the currency value types."""

from tf2_price.serialization.wire import (
    CurrenciesModel,
    ListingCurrenciesModel,
    USDCurrenciesModel,
    currencies_from_dict,
    currencies_from_json,
    currencies_to_dict,
    currencies_to_json,
    listing_currencies_from_dict,
    listing_currencies_from_json,
    listing_currencies_to_dict,
    listing_currencies_to_json,
    usd_currencies_from_dict,
    usd_currencies_from_json,
    usd_currencies_to_dict,
    usd_currencies_to_json,
)

__all__ = [
    "CurrenciesModel",
    "ListingCurrenciesModel",
    "USDCurrenciesModel",
    "currencies_from_dict",
    "currencies_from_json",
    "currencies_to_dict",
    "currencies_to_json",
    "listing_currencies_from_dict",
    "listing_currencies_from_json",
    "listing_currencies_to_dict",
    "listing_currencies_to_json",
    "usd_currencies_from_dict",
    "usd_currencies_from_json",
    "usd_currencies_to_dict",
    "usd_currencies_to_json",
]
