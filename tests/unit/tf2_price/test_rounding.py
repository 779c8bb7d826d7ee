from __future__ import annotations

import math

import pytest

from tf2_price.constants import CURRENCY_MAX, CURRENCY_MIN, REFINED_SCRAP_MAX
from tf2_price.domain import Currencies
from tf2_price.rounding import Rounding, checked_round_refined, round_metal, round_refined

SAMPLE_METAL = [0, 1, 4, 5, 8, 9, 13, 14, 22, -1, -4, -5, -13, -14, -22, CURRENCY_MAX, CURRENCY_MIN]


@pytest.mark.parametrize("rounding", list(Rounding))
def test_rounding_is_idempotent(rounding):
    """Verify rounding twice equals rounding once for every policy."""
    for metal in SAMPLE_METAL:
        once = Currencies.from_metal(metal).round(rounding)
        assert once.round(rounding) == once


@pytest.mark.parametrize("rounding", list(Rounding))
def test_zero_is_a_fixed_point(rounding):
    """Verify zero is unchanged by every policy."""
    assert round_metal(0, rounding) == 0
    assert round_refined(0.0, rounding) == 0


@pytest.mark.parametrize("rounding", [Rounding.NEAREST_SCRAP, Rounding.UP_SCRAP, Rounding.DOWN_SCRAP])
def test_scrap_policies_keep_stored_scrap(rounding):
    """Verify stored scrap is already whole scrap."""
    assert round_metal(13, rounding) == 13
    assert round_metal(-13, rounding) == -13


def test_refined_policies_on_stored_scrap():
    """Verify refined policies snap to multiples of 9 scrap, symmetric in sign."""
    assert round_metal(13, Rounding.NEAREST_REFINED) == 9
    assert round_metal(14, Rounding.NEAREST_REFINED) == 18
    assert round_metal(10, Rounding.UP_REFINED) == 18
    assert round_metal(17, Rounding.DOWN_REFINED) == 9

    assert round_metal(-13, Rounding.NEAREST_REFINED) == -9
    assert round_metal(-14, Rounding.NEAREST_REFINED) == -18
    assert round_metal(-13, Rounding.UP_REFINED) == -18
    assert round_metal(-13, Rounding.DOWN_REFINED) == -9


def test_refined_rounding_saturates_to_whole_refined():
    """Verify rounding up near the bound stays in range and stays whole refined."""
    assert round_metal(CURRENCY_MAX, Rounding.UP_REFINED) == REFINED_SCRAP_MAX
    assert round_metal(CURRENCY_MIN, Rounding.UP_REFINED) == -REFINED_SCRAP_MAX
    assert REFINED_SCRAP_MAX % 9 == 0


def test_round_refined_float():
    """Verify float refined values convert to scrap with each policy."""
    assert round_refined(2.33, Rounding.NEAREST_SCRAP) == 21
    assert round_refined(2.33, Rounding.UP_SCRAP) == 21
    assert round_refined(2.33, Rounding.DOWN_SCRAP) == 20
    assert round_refined(2.33, Rounding.NEAREST_REFINED) == 18
    assert round_refined(2.5, Rounding.NEAREST_REFINED) == 27
    assert round_refined(2.33, Rounding.UP_REFINED) == 27
    assert round_refined(2.33, Rounding.DOWN_REFINED) == 18


def test_round_refined_negative_is_symmetric():
    """Verify negative values mirror positive ones instead of rounding toward +infinity."""
    for rounding in Rounding:
        assert round_refined(-2.33, rounding) == -round_refined(2.33, rounding)


def test_round_refined_ignores_float_noise():
    """Verify values within float noise of a whole unit are not pushed over it."""
    assert round_refined(2.0000000001, Rounding.UP_REFINED) == 18
    assert round_refined(1.9999999999, Rounding.DOWN_REFINED) == 18
    assert round_refined(1.0000000001, Rounding.UP_SCRAP) == 9


def test_round_refined_non_finite_and_huge():
    """Verify NaN raises, infinities saturate and checked rounding fails on both."""
    with pytest.raises(ValueError, match="\\$refined is NaN"):
        round_refined(math.nan, Rounding.NEAREST_SCRAP)

    assert round_refined(math.inf, Rounding.NEAREST_SCRAP) == CURRENCY_MAX
    assert round_refined(-math.inf, Rounding.UP_REFINED) == -REFINED_SCRAP_MAX
    assert round_refined(1e30, Rounding.DOWN_SCRAP) == CURRENCY_MAX

    assert checked_round_refined(math.nan, Rounding.NEAREST_SCRAP) is None
    assert checked_round_refined(math.inf, Rounding.NEAREST_SCRAP) is None
    assert checked_round_refined(1e30, Rounding.NEAREST_REFINED) is None
    assert checked_round_refined(2.33, Rounding.NEAREST_SCRAP) == 21


def test_is_refined():
    """Verify policies report their granularity."""
    assert Rounding.UP_REFINED.is_refined
    assert not Rounding.UP_SCRAP.is_refined
