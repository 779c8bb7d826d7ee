from __future__ import annotations

from tf2_price.constants import ONE_REC, ONE_REF
from tf2_price.currency import Currency, round_half_away, saturating_from_float


def _split_refined(scrap: Currency) -> tuple[str, int, int]:
    # (sign, whole refined, hundredths of refined truncated toward zero)
    magnitude = abs(scrap)
    sign = "-" if scrap < 0 else ""
    return sign, magnitude // ONE_REF, (magnitude % ONE_REF) * 100 // ONE_REF


def format_metal(scrap: Currency) -> str:
    """Format a scrap count as refined with at most 2 decimals, truncated toward zero.

    Uses integer arithmetic only, so it stays exact across the whole 64-bit range.

    Examples:
        >>> format_metal(21)
        '2.33'
        >>> format_metal(18)
        '2'
        >>> format_metal(-5)
        '-0.55'
    """
    sign, whole, hundredths = _split_refined(scrap)
    if hundredths == 0:
        return f"{sign}{whole}" if whole != 0 else "0"
    return f"{sign}{whole}.{hundredths:02d}"


def get_metal_float(scrap: Currency) -> float:
    """Convert a scrap count into refined, truncated to 2 decimals.

    Examples:
        >>> get_metal_float(6)
        0.66
        >>> get_metal_float(3)
        0.33
    """
    return float(format_metal(scrap))


def get_metal_from_float(refined: float) -> Currency:
    """Convert a refined value into the nearest scrap count (ties away from zero).

    Out-of-range and infinite values saturate; NaN collapses to 0.

    Examples:
        >>> get_metal_from_float(0.33)
        3
        >>> get_metal_from_float(2.22)
        20
    """
    return saturating_from_float(round_half_away(refined * ONE_REF))


def print_float(value: float) -> str:
    """Print whole floats as integers and everything else with 2 decimals.

    Nonzero values that would print as zero at 2 decimals use the shortest exact
    repr instead (`0.001` rather than `0.00`), so the text still parses back.

    Examples:
        >>> print_float(1.5)
        '1.50'
        >>> print_float(0.001)
        '0.001'
    """
    if value % 1 == 0:
        return str(int(value))
    text = f"{value:.2f}"
    if float(text) == 0:
        return repr(value)
    return text


def pluralize(amount: float, singular: str, plural: str) -> str:
    return singular if amount == 1 else plural


def split_denominations(scrap: Currency) -> tuple[int, int, int]:
    """Break a scrap count into (refined, reclaimed, scrap), each carrying the sign of $scrap.

    Examples:
        >>> split_denominations(22)
        (2, 1, 1)
        >>> split_denominations(-5)
        (0, -1, -2)
    """
    magnitude = abs(scrap)
    sign = -1 if scrap < 0 else 1
    refined, rest = divmod(magnitude, ONE_REF)
    reclaimed, leftover = divmod(rest, ONE_REC)
    return sign * refined, sign * reclaimed, sign * leftover
