"""Mapping between the currency value types and the trading API wire shape.

The wire shape is a JSON object with separate "keys" and "metal" fields, metal
being refined as a decimal number (`{"keys": 2, "metal": 2.22}`). Cash values
carry a "usd" field in dollars instead of "metal". Omitted fields mean zero.

Metal and dollars travel as `Decimal`, never as float: refined truncated to 2
decimals must decode back to the exact scrap count across the whole 64-bit range,
which a float cannot hold above 2**53.

The pydantic models below mirror that JSON exactly; the value types themselves
know nothing about serialization.
"""

from __future__ import annotations

import json
import logging
from decimal import ROUND_HALF_UP, Decimal, DecimalException
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_core import to_json

from tf2_price.constants import (
    CURRENCY_MAX,
    CURRENCY_MIN,
    FLOAT_KEYS_MAX,
    KEYS_FIELD,
    METAL_FIELD,
    ONE_DOLLAR,
    ONE_REF,
    USD_FIELD,
)
from tf2_price.currency import Currency
from tf2_price.domain import Currencies, ListingCurrencies, USDCurrencies
from tf2_price.errors import CurrencyParseError
from tf2_price.utils.metal_tools import format_metal

logger = logging.getLogger(__name__)

WireNumber = int | float | Decimal

# region Wire models


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)


class CurrenciesModel(_WireModel):
    """Wire shape of `Currencies`."""

    keys: int = Field(default=0, ge=CURRENCY_MIN, le=CURRENCY_MAX, description="Whole keys")
    metal: Decimal = Field(default=Decimal(0), description="Metal in refined")


class ListingCurrenciesModel(_WireModel):
    """Wire shape of `ListingCurrencies`."""

    keys: float = Field(default=0.0, ge=-FLOAT_KEYS_MAX, le=FLOAT_KEYS_MAX, description="Keys, possibly fractional")
    metal: Decimal = Field(default=Decimal(0), description="Metal in refined")


class USDCurrenciesModel(_WireModel):
    """Wire shape of `USDCurrencies`."""

    keys: int = Field(default=0, ge=CURRENCY_MIN, le=CURRENCY_MAX, description="Whole keys")
    usd: Decimal = Field(default=Decimal(0), description="US dollars")


# endregion

# region Helpers


def _validate(model_cls: type[_WireModel], data: Any) -> _WireModel:
    """Validate a dict against $model_cls, raising CurrencyParseError naming the first bad field."""
    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        raise _parse_error(model_cls, e) from e


def _validate_json(model_cls: type[_WireModel], text: str | bytes) -> _WireModel:
    # Fractional numbers are read as Decimal so no digit of the JSON text is lost
    try:
        data = json.loads(text, parse_float=Decimal)
    except ValueError as e:
        logger.debug(f"Rejected {model_cls.__name__} payload: {e}")
        raise CurrencyParseError(f"Invalid {model_cls.__name__} JSON: {e}") from e

    # Fractional listing keys are a float field
    if model_cls is ListingCurrenciesModel and isinstance(data, dict) and isinstance(data.get(KEYS_FIELD), Decimal):
        data[KEYS_FIELD] = float(data[KEYS_FIELD])

    return _validate(model_cls, data)


def _parse_error(model_cls: type[_WireModel], error: ValidationError) -> CurrencyParseError:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or None
    logger.debug(f"Rejected {model_cls.__name__} payload: field '{field}': {first['msg']}")
    return CurrencyParseError(f"Invalid {model_cls.__name__} field '{field}': {first['msg']}", field=field)


def _to_units(value: Decimal, scale: int, field: str) -> Currency:
    """Multiply $value by $scale and round half away from zero into a 64-bit count."""
    try:
        units = (value * scale).to_integral_value(rounding=ROUND_HALF_UP)
    except DecimalException as e:
        raise CurrencyParseError(f"Invalid {field} value {value}", field=field) from e

    # Raise: decoded amount must be a finite count that fits in 64 bits
    if not units.is_finite() or not CURRENCY_MIN <= units <= CURRENCY_MAX:
        raise CurrencyParseError(f"Invalid {field} value {value}: out of range", field=field)

    return int(units)


def _metal_to_wire(scrap: Currency) -> int | Decimal:
    # Whole refined is emitted as an integer (2 rather than 2.00)
    if scrap % ONE_REF == 0:
        return scrap // ONE_REF
    return Decimal(format_metal(scrap))


def _metal_from_wire(refined: Decimal) -> Currency:
    return _to_units(refined, ONE_REF, METAL_FIELD)


def _keys_to_wire(keys: float) -> int | float:
    return int(keys) if keys.is_integer() else keys


def _dump_json(data: dict[str, WireNumber]) -> str:
    # Decimal is written as a bare JSON number; pydantic would quote it as a string
    members = []
    for name, value in data.items():
        number = str(value) if isinstance(value, Decimal) else to_json(value).decode()
        members.append(f"{to_json(name).decode()}:{number}")
    return "{" + ",".join(members) + "}"


# endregion

# region Currencies


def currencies_to_dict(currencies: Currencies) -> dict[str, WireNumber]:
    """Encode $currencies as `{"keys": <int>, "metal": <refined>}`.

    Metal is refined truncated to 2 decimals as an exact `Decimal` (or an int for
    whole refined), which always decodes back to the same scrap count.
    """
    return {KEYS_FIELD: currencies.keys, METAL_FIELD: _metal_to_wire(currencies.metal)}


def currencies_from_dict(data: Any) -> Currencies:
    """Decode `{"keys": <int>, "metal": <refined>}` into Currencies.

    Raises:
        CurrencyParseError: If a field is missing its number or out of range.
    """
    model = _validate(CurrenciesModel, data)
    return Currencies(model.keys, _metal_from_wire(model.metal))


def currencies_to_json(currencies: Currencies) -> str:
    return _dump_json(currencies_to_dict(currencies))


def currencies_from_json(text: str | bytes) -> Currencies:
    model = _validate_json(CurrenciesModel, text)
    return Currencies(model.keys, _metal_from_wire(model.metal))


# endregion

# region ListingCurrencies


def listing_currencies_to_dict(listing: ListingCurrencies) -> dict[str, WireNumber]:
    """Encode $listing as `{"keys": <float>, "metal": <refined>}`; whole key counts are emitted as ints."""
    return {KEYS_FIELD: _keys_to_wire(listing.keys), METAL_FIELD: _metal_to_wire(listing.metal)}


def listing_currencies_from_dict(data: Any) -> ListingCurrencies:
    """Decode `{"keys": <float>, "metal": <refined>}` into ListingCurrencies.

    Raises:
        CurrencyParseError: If a field is missing its number or out of range.
    """
    model = _validate(ListingCurrenciesModel, data)
    return ListingCurrencies(model.keys, _metal_from_wire(model.metal))


def listing_currencies_to_json(listing: ListingCurrencies) -> str:
    return _dump_json(listing_currencies_to_dict(listing))


def listing_currencies_from_json(text: str | bytes) -> ListingCurrencies:
    model = _validate_json(ListingCurrenciesModel, text)
    return ListingCurrencies(model.keys, _metal_from_wire(model.metal))


# endregion

# region USDCurrencies


def _usd_to_wire(cents: Currency) -> int | Decimal:
    if cents % ONE_DOLLAR == 0:
        return cents // ONE_DOLLAR
    return Decimal(cents).scaleb(-2).normalize()


def _usd_from_wire(dollars: Decimal) -> Currency:
    return _to_units(dollars, ONE_DOLLAR, USD_FIELD)


def usd_currencies_to_dict(usd_currencies: USDCurrencies) -> dict[str, WireNumber]:
    """Encode $usd_currencies as `{"keys": <int>, "usd": <dollars>}`."""
    return {KEYS_FIELD: usd_currencies.keys, USD_FIELD: _usd_to_wire(usd_currencies.usd)}


def usd_currencies_from_dict(data: Any) -> USDCurrencies:
    """Decode `{"keys": <int>, "usd": <dollars>}` into USDCurrencies, rounding dollars half up to the cent.

    Raises:
        CurrencyParseError: If a field is missing its number or out of range.
    """
    model = _validate(USDCurrenciesModel, data)
    return USDCurrencies(model.keys, _usd_from_wire(model.usd))


def usd_currencies_to_json(usd_currencies: USDCurrencies) -> str:
    return _dump_json(usd_currencies_to_dict(usd_currencies))


def usd_currencies_from_json(text: str | bytes) -> USDCurrencies:
    model = _validate_json(USDCurrenciesModel, text)
    return USDCurrencies(model.keys, _usd_from_wire(model.usd))


# endregion
