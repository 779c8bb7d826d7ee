from __future__ import annotations

import math

import pytest

from tf2_price import CurrencyParseError, Rounding
from tf2_price.constants import CURRENCY_MAX, CURRENCY_MIN, FLOAT_KEYS_MAX
from tf2_price.domain import Currencies, ListingCurrencies

# Adversarial factors for the float keys axis
HUGE_FACTORS = [1e300, -1e300, math.inf, -math.inf, math.nan, FLOAT_KEYS_MAX, 10**400, -(10**400)]


def test_constructor_requires_finite_keys():
    """Verify keys are finite and inside the 32-bit float range."""
    assert ListingCurrencies(1, 9).keys == 1.0

    with pytest.raises(ValueError):
        ListingCurrencies(math.nan, 0)
    with pytest.raises(ValueError):
        ListingCurrencies(math.inf, 0)
    with pytest.raises(ValueError):
        ListingCurrencies(1e39, 0)
    with pytest.raises(ValueError):
        ListingCurrencies(10**400, 0)
    with pytest.raises(TypeError):
        ListingCurrencies("1.5", 0)


def test_display():
    """Verify fractional keys print with two decimals and whole keys as integers."""
    assert str(ListingCurrencies(1.5, 18)) == "1.50 keys, 2 ref"
    assert str(ListingCurrencies(1.0, 0)) == "1 key"
    assert str(ListingCurrencies(0.0, -5)) == "-0.55 ref"
    assert str(ListingCurrencies()) == "nothing"
    assert ListingCurrencies(1.5, 4).to_long_str() == "1.50 keys, 1 reclaimed, 1 scrap"


def test_from_str():
    """Verify listing text accepts fractional keys."""
    assert ListingCurrencies.from_str("1.5 keys, 3 ref") == ListingCurrencies(1.5, 27)
    assert ListingCurrencies.from_str("1 key") == ListingCurrencies(1.0, 0)

    with pytest.raises(CurrencyParseError):
        ListingCurrencies.from_str("nan keys")


def test_arithmetic():
    """Verify float keys and scrap metal combine field by field."""
    assert ListingCurrencies(1.5, 9) + ListingCurrencies(0.25, 9) == ListingCurrencies(1.75, 18)
    assert ListingCurrencies(1.5, 9) - ListingCurrencies(0.5, 18) == ListingCurrencies(1.0, -9)
    assert ListingCurrencies(1.5, 9) * 2 == ListingCurrencies(3.0, 18)
    assert ListingCurrencies(1.0, 10) / 4 == ListingCurrencies(0.25, 2)


@pytest.mark.parametrize("factor", HUGE_FACTORS)
def test_saturating_mul_never_stores_non_finite_keys(factor):
    """Verify adversarially large factors clamp keys to a finite bound."""
    for listing in [ListingCurrencies(2.0, 9), ListingCurrencies(-FLOAT_KEYS_MAX, -9), ListingCurrencies(0.0, 0)]:
        result = listing * factor
        assert math.isfinite(result.keys)
        assert abs(result.keys) <= FLOAT_KEYS_MAX


@pytest.mark.parametrize("divisor", [1e-300, -1e-300, math.inf, math.nan])
def test_saturating_div_never_stores_non_finite_keys(divisor):
    """Verify adversarially small divisors clamp keys to a finite bound."""
    result = ListingCurrencies(FLOAT_KEYS_MAX, 0) / divisor
    assert math.isfinite(result.keys)
    assert abs(result.keys) <= FLOAT_KEYS_MAX


def test_saturating_add_clamps_keys():
    """Verify key overflow clamps to the largest finite value."""
    top = ListingCurrencies(FLOAT_KEYS_MAX, CURRENCY_MAX)
    assert top + top == top
    assert (-top - top).keys == -FLOAT_KEYS_MAX
    assert (ListingCurrencies(2.0, 9) * math.inf).keys == FLOAT_KEYS_MAX
    assert (ListingCurrencies(2.0, 9) * math.inf).metal == CURRENCY_MAX


def test_checked_operations_fail_instead_of_clamping():
    """Verify checked arithmetic reports non-finite and overflowing results."""
    top = ListingCurrencies(FLOAT_KEYS_MAX, 0)
    assert top.checked_add(top) is None
    assert top.checked_mul(2) is None
    assert ListingCurrencies(1.0, 0).checked_mul(math.nan) is None
    assert ListingCurrencies(1.0, 0).checked_div(1e-300) is None
    assert ListingCurrencies(1.0, 4).checked_mul(0.5) == ListingCurrencies(0.5, 2)


def test_division_by_zero():
    """Verify checked division returns None and the operator raises."""
    assert ListingCurrencies(1.5, 9).checked_div(0) is None
    assert ListingCurrencies(1.5, 9).checked_div(0.0) is None
    assert ListingCurrencies(1.5, 9).checked_div(ListingCurrencies(0.0, 1)) is None

    with pytest.raises(ZeroDivisionError):
        ListingCurrencies(1.5, 9) / 0.0


def test_to_metal_and_can_afford():
    """Verify fractional keys are priced into refined."""
    assert ListingCurrencies(1.5, 9).to_metal(10.0) == 16.0
    assert ListingCurrencies(0.5, 0).can_afford(Currencies(0, 45), 10.0)
    assert not ListingCurrencies(0.5, 0).can_afford(Currencies(0, 46), 10.0)
    assert ListingCurrencies(FLOAT_KEYS_MAX, 0).checked_to_metal(1e30) is None


def test_to_currencies():
    """Verify conversion to whole keys folds the fraction into metal."""
    assert ListingCurrencies(2.5, 0).to_currencies(10.0) == Currencies(2, 45)
    assert ListingCurrencies(2.5, 0).to_currencies(10.0, Rounding.DOWN_REFINED) == Currencies(2, 45)
    assert ListingCurrencies(2.25, 0).to_currencies(10.0, Rounding.DOWN_REFINED) == Currencies(2, 18)
    assert ListingCurrencies(2.5, 0).checked_to_currencies(math.inf) is None
    assert ListingCurrencies.from_currencies(Currencies(3, 4)) == ListingCurrencies(3.0, 4)


def test_is_whole_keys():
    """Verify whole key detection."""
    assert ListingCurrencies(2.0, 5).is_whole_keys()
    assert not ListingCurrencies(2.5, 5).is_whole_keys()


def test_round_and_neaten():
    """Verify metal rounding and neatening work with float keys."""
    assert ListingCurrencies(1.5, 13).round(Rounding.NEAREST_REFINED) == ListingCurrencies(1.5, 9)
    assert ListingCurrencies(0.5, 160).neaten(8.0) == ListingCurrencies(2.5, 16)
    assert ListingCurrencies(0.5, 160).neaten() == ListingCurrencies(0.5, 160)


def test_ordering_is_lexicographic():
    """Verify keys dominate metal."""
    assert ListingCurrencies(1.5, 0) > ListingCurrencies(1.25, 1000)
    assert ListingCurrencies(1.5, 0) < ListingCurrencies(1.5, 1)


def test_integers_beyond_float_range():
    """Verify int scalars too large for a float clamp or fail instead of raising OverflowError."""
    listing = ListingCurrencies(2.0, 9)

    assert listing * (10**400) == ListingCurrencies(FLOAT_KEYS_MAX, CURRENCY_MAX)
    assert listing * -(10**400) == ListingCurrencies(-FLOAT_KEYS_MAX, CURRENCY_MIN)
    assert listing / (10**400) == ListingCurrencies(0.0, 0)
    assert listing.checked_mul(10**400) is None
    assert listing.checked_div(10**400) is None


def test_tiny_key_count_display_parses_back():
    """Verify a key count below a hundredth still prints as nonzero text that parses back."""
    listing = ListingCurrencies(0.001, 0)
    assert str(listing) == "0.001 keys"
    assert ListingCurrencies.from_str(str(listing)) == listing
    assert ListingCurrencies.from_str(str(ListingCurrencies(-0.004, 3))) == ListingCurrencies(-0.004, 3)
