from __future__ import annotations

import logging
import math
from enum import Enum

from tf2_price.constants import CURRENCY_MAX, CURRENCY_MIN, FLOAT_SNAP_EPSILON, ONE_REF, REFINED_SCRAP_MAX, REFINED_SCRAP_MIN
from tf2_price.currency import Currency, round_half_away

logger = logging.getLogger(__name__)


class Rounding(Enum):
    """Strategy for snapping a metal amount onto whole scrap or whole refined.

    Every policy is symmetric in sign: "up" moves away from zero, "down" moves
    toward zero and "nearest" breaks ties away from zero. Zero is a fixed point
    of every policy and applying a policy twice equals applying it once.

    Members:
        NEAREST_SCRAP: Nearest whole scrap.
        UP_SCRAP: Whole scrap, away from zero.
        DOWN_SCRAP: Whole scrap, toward zero.
        NEAREST_REFINED: Nearest whole refined (multiple of 9 scrap).
        UP_REFINED: Whole refined, away from zero.
        DOWN_REFINED: Whole refined, toward zero.
    """

    NEAREST_SCRAP = "NEAREST_SCRAP"
    UP_SCRAP = "UP_SCRAP"
    DOWN_SCRAP = "DOWN_SCRAP"
    NEAREST_REFINED = "NEAREST_REFINED"
    UP_REFINED = "UP_REFINED"
    DOWN_REFINED = "DOWN_REFINED"

    @property
    def is_refined(self) -> bool:
        """True for policies that snap to whole refined."""
        return self in _REFINED_POLICIES

    @property
    def _direction(self) -> str:
        return _DIRECTIONS[self]


_REFINED_POLICIES = frozenset({Rounding.NEAREST_REFINED, Rounding.UP_REFINED, Rounding.DOWN_REFINED})

_DIRECTIONS = {
    Rounding.NEAREST_SCRAP: "nearest",
    Rounding.UP_SCRAP: "up",
    Rounding.DOWN_SCRAP: "down",
    Rounding.NEAREST_REFINED: "nearest",
    Rounding.UP_REFINED: "up",
    Rounding.DOWN_REFINED: "down",
}


def round_metal(metal: Currency, rounding: Rounding) -> Currency:
    """Apply $rounding to a stored scrap count.

    Scrap is the smallest stored unit, so scrap policies leave $metal unchanged.
    Refined policies snap to a multiple of `ONE_REF`, saturating to
    `REFINED_SCRAP_MIN`/`REFINED_SCRAP_MAX` so the result is always whole refined.

    Args:
        metal: Amount in scrap.
        rounding: Policy to apply.

    Returns:
        The rounded scrap count.

    Examples:
        >>> round_metal(13, Rounding.NEAREST_REFINED)
        9
        >>> round_metal(-13, Rounding.UP_REFINED)
        -18
    """
    if metal == 0 or not rounding.is_refined:
        return metal

    magnitude = abs(metal)
    remainder = magnitude % ONE_REF
    snapped = magnitude - remainder

    if remainder != 0:
        direction = rounding._direction
        # ONE_REF is odd, so a remainder can never sit exactly halfway
        if direction == "up" or (direction == "nearest" and remainder * 2 > ONE_REF):
            snapped += ONE_REF

    if snapped > REFINED_SCRAP_MAX:
        logger.debug(f"Saturated rounded metal {snapped} to REFINED_SCRAP_MAX")
        snapped = REFINED_SCRAP_MAX

    return snapped if metal > 0 else -snapped


def _apply_direction(value: float, direction: str) -> float:
    if not math.isfinite(value):
        return value
    nearest = round_half_away(value)
    if direction == "nearest":
        return nearest
    # Float noise (e.g. 2.0000000001) must not push a value over a whole-unit boundary
    if abs(value - nearest) < FLOAT_SNAP_EPSILON:
        return nearest
    if direction == "up":
        return math.copysign(math.ceil(abs(value)), value)
    return float(math.trunc(value))


def _refined_to_units(refined: float, rounding: Rounding) -> tuple[float, int, int, int]:
    # Returns (rounded value, multiplier to scrap, lower bound, upper bound)
    if rounding.is_refined:
        return _apply_direction(refined, rounding._direction), ONE_REF, REFINED_SCRAP_MIN, REFINED_SCRAP_MAX
    return _apply_direction(refined * ONE_REF, rounding._direction), 1, CURRENCY_MIN, CURRENCY_MAX


def checked_round_refined(refined: float, rounding: Rounding) -> Currency | None:
    """Like `round_refined` but returns None for non-finite or unrepresentable results."""
    if not math.isfinite(refined):
        return None

    units, multiplier, lower, upper = _refined_to_units(refined, rounding)
    if not math.isfinite(units):
        return None

    scrap = int(units) * multiplier
    if not lower <= scrap <= upper:
        return None
    return scrap


def round_refined(refined: float, rounding: Rounding) -> Currency:
    """Convert a float refined amount into a scrap count using $rounding.

    Scrap policies multiply by `ONE_REF` and round the scrap value; refined
    policies round the refined value and then multiply. Results outside the
    64-bit range saturate.

    Args:
        refined: Amount in refined (e.g. 2.33).
        rounding: Policy to apply.

    Returns:
        Scrap count.

    Raises:
        ValueError: If $refined is NaN.

    Examples:
        >>> round_refined(2.33, Rounding.NEAREST_SCRAP)
        21
        >>> round_refined(2.33, Rounding.UP_REFINED)
        27
    """
    # Raise: NaN has no direction to round in
    if math.isnan(refined):
        raise ValueError("Cannot call `round_refined` because $refined is NaN")

    units, multiplier, lower, upper = _refined_to_units(refined, rounding)
    if math.isinf(units):
        return upper if units > 0 else lower

    scrap = int(units) * multiplier
    if scrap > upper:
        logger.debug(f"Saturated rounded refined {refined} to {upper}")
        return upper
    if scrap < lower:
        logger.debug(f"Saturated rounded refined {refined} to {lower}")
        return lower
    return scrap
