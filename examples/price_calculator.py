from __future__ import annotations

import logging

from tf2_price import Currencies, ListingCurrencies, Rounding
from tf2_price.serialization import currencies_to_json, listing_currencies_from_dict

logger = logging.getLogger(__name__)

# Price of one key in refined
KEY_PRICE = 70.33


def main() -> None:
    # Listing as received from a trading API
    listing = listing_currencies_from_dict({"keys": 1.5, "metal": 2.33})
    logger.info(f"Listing price: {listing}")

    # Fold the half key into metal and snap to whole refined for a cleaner offer
    offer = listing.to_currencies(KEY_PRICE).round(Rounding.UP_REFINED)
    logger.info(f"Offer: {offer} ({offer.to_long_str()})")

    wallet = Currencies.from_str("1 key, 40 ref")
    if wallet.can_afford(offer, KEY_PRICE):
        change = (wallet - offer).neaten(KEY_PRICE)
        logger.info(f"Affordable, left over: {change}")
    else:
        missing = offer.to_metal(KEY_PRICE) - wallet.to_metal(KEY_PRICE)
        logger.info(f"Missing {missing:.2f} ref")

    # Wire shape sent back to the API
    logger.info(f"Payload: {currencies_to_json(offer)}")
    logger.info(f"Offer as listing: {ListingCurrencies.from_currencies(offer)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
