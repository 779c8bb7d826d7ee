"""Per-field arithmetic used by the two-axis currency types."""

from tf2_price.domain.axis.protocol import Axis
from tf2_price.domain.axis.integer_axis import INTEGER_AXIS, IntegerAxis
from tf2_price.domain.axis.float_axis import FLOAT_KEYS_AXIS, FloatAxis

__all__ = ["Axis", "IntegerAxis", "INTEGER_AXIS", "FloatAxis", "FLOAT_KEYS_AXIS"]
