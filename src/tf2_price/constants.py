"""Units, bounds and symbols shared across the package.

Single source of truth: every other module imports its numbers from here.
"""

from __future__ import annotations

from typing import Final

# Metal units, expressed in scrap (the smallest stored unit)
ONE_SCRAP: Final[int] = 1
ONE_REC: Final[int] = 3
ONE_REF: Final[int] = 9

# Cents per dollar for cash-denominated currencies
ONE_DOLLAR: Final[int] = 100

# 64-bit signed range of every stored integer amount
CURRENCY_MAX: Final[int] = 2**63 - 1
CURRENCY_MIN: Final[int] = -(2**63)

# Largest scrap counts that are still whole refined
REFINED_SCRAP_MAX: Final[int] = CURRENCY_MAX - CURRENCY_MAX % ONE_REF
REFINED_SCRAP_MIN: Final[int] = -REFINED_SCRAP_MAX

# Largest finite 32-bit float; listing keys never leave [-FLOAT_KEYS_MAX, FLOAT_KEYS_MAX]
FLOAT_KEYS_MAX: Final[float] = 3.4028234663852886e38

# Largest refined value that still converts back into a scrap count
METAL_FLOAT_MAX: Final[float] = CURRENCY_MAX / ONE_REF

# Directional float rounding snaps values this close to an integer onto it
FLOAT_SNAP_EPSILON: Final[float] = 1e-6

# Text symbols
KEY_SYMBOL: Final[str] = "key"
KEYS_SYMBOL: Final[str] = "keys"
METAL_SYMBOL: Final[str] = "ref"
REFINED_SYMBOL: Final[str] = "refined"
RECLAIMED_SYMBOL: Final[str] = "reclaimed"
SCRAP_SYMBOL: Final[str] = "scrap"
USD_SYMBOL: Final[str] = "$"
EMPTY_SYMBOL: Final[str] = "nothing"
ELEMENT_SEPARATOR: Final[str] = ", "

# Wire field names
KEYS_FIELD: Final[str] = "keys"
METAL_FIELD: Final[str] = "metal"
USD_FIELD: Final[str] = "usd"
