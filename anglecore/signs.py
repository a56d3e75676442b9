from __future__ import annotations
import math
from typing import Union

Number = Union[int, float]

def sign(value: Number, zero_for_zero: bool = True) -> int:
    """Return -1, 0 or 1 for the sign of *value*.

    With ``zero_for_zero=False`` a zero reports the sign of the zero itself:
    -1 for ``-0.0`` and 1 for ``0`` / ``+0.0``.
    """
    if value > 0:
        return 1
    if value < 0:
        return -1
    if zero_for_zero:
        return 0
    if isinstance(value, float) and math.copysign(1.0, value) < 0.0:
        return -1
    return 1

def copy_sign(num: Number, sign_source: Number) -> Number:
    """Return ``abs(num)`` carrying the sign of *sign_source* (zero sign included)."""
    if (isinstance(num, float) and math.isnan(num)) or (
        isinstance(sign_source, float) and math.isnan(sign_source)
    ):
        raise ValueError("NaN is not allowed for either parameter")
    return abs(num) * sign(sign_source, False)
