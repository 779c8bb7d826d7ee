from __future__ import annotations

from tf2_price.constants import CURRENCY_MAX, CURRENCY_MIN
from tf2_price.utils.metal_tools import (
    format_metal,
    get_metal_float,
    get_metal_from_float,
    pluralize,
    print_float,
    split_denominations,
)


def test_prints_float_rounded_whole_number():
    """Verify whole floats print without decimals."""
    assert print_float(1.0) == "1"
    assert print_float(-3.0) == "-3"


def test_prints_float_proper_decimal_places():
    """Verify fractional floats print with two decimals."""
    assert print_float(1.55555) == "1.56"


def test_prints_tiny_float_without_losing_it():
    """Verify nonzero values below a hundredth are not printed as zero."""
    assert print_float(0.001) == "0.001"
    assert print_float(-0.004) == "-0.004"
    assert print_float(1e-05) == "1e-05"


def test_converts_from_metal_float():
    """Verify refined floats convert to the nearest scrap."""
    assert get_metal_from_float(0.33) == 3
    assert get_metal_from_float(2.22) == 20
    assert get_metal_from_float(-0.55) == -5


def test_converts_to_metal_float():
    """Verify scrap converts to refined truncated to two decimals."""
    assert get_metal_float(6) == 0.66
    assert get_metal_float(3) == 0.33
    assert get_metal_float(20) == 2.22
    assert get_metal_float(-5) == -0.55


def test_format_metal():
    """Verify refined text keeps the sign and drops decimals for whole refined."""
    assert format_metal(21) == "2.33"
    assert format_metal(18) == "2"
    assert format_metal(0) == "0"
    assert format_metal(-5) == "-0.55"
    assert format_metal(-9) == "-1"


def test_format_metal_is_exact_at_the_bounds():
    """Verify formatting never loses digits to float precision."""
    assert format_metal(CURRENCY_MAX) == "1024819115206086200.77"
    assert format_metal(CURRENCY_MIN) == "-1024819115206086200.88"


def test_split_denominations():
    """Verify scrap splits into refined, reclaimed and scrap carrying its sign."""
    assert split_denominations(22) == (2, 1, 1)
    assert split_denominations(9) == (1, 0, 0)
    assert split_denominations(-5) == (0, -1, -2)


def test_pluralize():
    """Verify only exactly one is singular."""
    assert pluralize(1, "key", "keys") == "key"
    assert pluralize(2, "key", "keys") == "keys"
    assert pluralize(-1, "key", "keys") == "keys"
    assert pluralize(1.0, "key", "keys") == "key"
