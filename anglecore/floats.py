"""IEEE-754 double precision helpers.

Signed zero, special-value classification, lossless narrowing, bit-exact
hex keys, ULP navigation and component codec.  Bit reinterpretation goes
through numpy ``view`` between ``float64`` and 64-bit integers, so the
results do not depend on host byte order.

Layout of a float64::

    sign (1 bit) | exponent (11 bits, bias 1023) | fraction (52 bits)
"""

from __future__ import annotations

import math
from typing import NamedTuple, Optional

import numpy as np

from . import rng
from .constants import DEFAULT_APPROX_EPSILON, EXPONENT_MAX, FLOAT_MAX, FRACTION_MASK

_INF = math.inf


class FloatParts(NamedTuple):
    sign: int
    exponent: int
    fraction: int


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def is_negative_zero(x: float) -> bool:
    # copysign(1, x) is the sign 1/x would have, without the division error
    return x == 0.0 and math.copysign(1.0, x) < 0.0


def is_positive_zero(x: float) -> bool:
    return x == 0.0 and math.copysign(1.0, x) > 0.0


def normalize_zero(x: float) -> float:
    """Return ``0.0`` for ``-0.0``; any other value is returned unchanged."""
    return 0.0 if is_negative_zero(x) else x


def is_negative(x: float) -> bool:
    """True for ``-0.0``, ``-inf`` and negative values; NaN is neither sign."""
    return not math.isnan(x) and (x < 0.0 or is_negative_zero(x))


def is_positive(x: float) -> bool:
    """True for ``+0.0``, ``+inf`` and positive values; NaN is neither sign."""
    return not math.isnan(x) and (x > 0.0 or is_positive_zero(x))


def is_special(x: float) -> bool:
    """NaN, ``-0.0`` and the infinities are special; ``+0.0`` is not."""
    return not math.isfinite(x) or is_negative_zero(x)


def approx_equal(a: float, b: float, epsilon: float = DEFAULT_APPROX_EPSILON) -> bool:
    if epsilon < 0.0:
        raise ValueError("epsilon must be non-negative")
    return abs(a - b) <= epsilon


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def to_hex(x: float) -> str:
    """16 hex digits of the little-endian float64 bytes.

    Unlike ``repr`` or ``format``, every bit pattern gets its own string
    (``-0.0`` vs ``0.0``, every NaN payload), so the result is safe to use
    as a dictionary key.
    """
    return np.array(x, dtype="<f8").tobytes().hex()


def try_convert_to_int(x: float) -> Optional[int]:
    """Return ``int(x)`` if that loses nothing, else ``None``."""
    if not math.isfinite(x):
        return None
    i = int(x)
    if float(i) == x:
        return i
    return None


def _float_to_bits(x: float) -> int:
    return int(np.array(x, dtype=np.float64).view(np.int64))


def _bits_to_float(bits: int) -> float:
    return float(np.array(bits, dtype=np.int64).view(np.float64))


# ---------------------------------------------------------------------------
# ULP navigation
# ---------------------------------------------------------------------------

def next_float(x: float) -> float:
    """Adjacent representable float toward +inf."""
    if math.isnan(x):
        return math.nan
    if x == FLOAT_MAX or x == _INF:
        return _INF
    if x == -_INF:
        return -FLOAT_MAX
    if is_negative_zero(x):
        return 0.0
    bits = _float_to_bits(x)
    # magnitude grows with |bits| on both sides of the sign bit
    bits += 1 if bits >= 0 else -1
    return _bits_to_float(bits)


def previous_float(x: float) -> float:
    """Adjacent representable float toward -inf."""
    if math.isnan(x):
        return math.nan
    if x == -FLOAT_MAX or x == -_INF:
        return -_INF
    if x == _INF:
        return FLOAT_MAX
    if is_positive_zero(x):
        return -0.0
    bits = _float_to_bits(x)
    bits += -1 if bits >= 0 else 1
    return _bits_to_float(bits)


# ---------------------------------------------------------------------------
# Component codec
# ---------------------------------------------------------------------------

def disassemble(x: float) -> FloatParts:
    bits = int(np.array(x, dtype=np.float64).view(np.uint64))
    return FloatParts(
        sign=(bits >> 63) & 0x1,
        exponent=(bits >> 52) & EXPONENT_MAX,
        fraction=bits & FRACTION_MASK,
    )


def assemble(sign: int, exponent: int, fraction: int) -> float:
    if sign not in (0, 1):
        raise ValueError("sign must be 0 or 1")
    if exponent < 0 or exponent > EXPONENT_MAX:
        raise ValueError(f"exponent must be in the range [0, {EXPONENT_MAX}]")
    if fraction < 0 or fraction > FRACTION_MASK:
        raise ValueError("fraction must be in the range [0, 2^52 - 1]")
    bits = (int(sign) << 63) | (int(exponent) << 52) | int(fraction)
    return float(np.array(bits, dtype=np.uint64).view(np.float64))


# ---------------------------------------------------------------------------
# Random generation
# ---------------------------------------------------------------------------

def _check_bounds(min_value: float, max_value: float) -> None:
    if not math.isfinite(min_value) or not math.isfinite(max_value):
        raise ValueError("min and max must be finite")
    if min_value > max_value:
        raise ValueError("min must be less than or equal to max")


def _rand_any() -> float:
    while True:
        f = float(np.frombuffer(rng.random_bytes(8), dtype="<f8")[0])
        if not is_special(f):
            return f


def rand(min_value: float = -FLOAT_MAX, max_value: float = FLOAT_MAX) -> float:
    """Random finite float in [min_value, max_value].

    Any representable float in the range can come out, with density
    growing toward zero (every exponent is equally likely).  Sign,
    exponent and fraction are drawn within the bounds' component ranges,
    then the candidate is rejected until it lands inside the range.
    Never returns NaN, an infinity or ``-0.0``.
    """
    _check_bounds(min_value, max_value)
    min_value = normalize_zero(float(min_value))
    max_value = normalize_zero(float(max_value))

    if min_value == max_value:
        return min_value
    if min_value == -FLOAT_MAX and max_value == FLOAT_MAX:
        return _rand_any()

    lo = disassemble(min_value)
    hi = disassemble(max_value)
    min_exp = min(lo.exponent, hi.exponent)
    max_exp = max(lo.exponent, hi.exponent)
    min_frac = min(lo.fraction, hi.fraction)
    max_frac = max(lo.fraction, hi.fraction)
    same_sign = lo.sign == hi.sign
    same_exp = lo.exponent == hi.exponent

    while True:
        if same_sign:
            sign = lo.sign
            exp = rng.random_int(min_exp, max_exp)
        else:
            sign = rng.random_int(0, 1)
            exp = rng.random_int(0, max_exp)
        if same_sign and same_exp:
            fraction = rng.random_int(min_frac, max_frac)
        else:
            fraction = rng.random_int(0, FRACTION_MASK)
        f = assemble(sign, exp, fraction)
        if not is_special(f) and min_value <= f <= max_value:
            return f


_UNIFORM_STEPS = 2**31 - 1


def rand_uniform(min_value: float, max_value: float) -> float:
    """Evenly distributed float in [min_value, max_value].

    Faster than ``rand`` but limited to 2^31 distinct outputs.
    """
    _check_bounds(min_value, max_value)
    u = rng.random_int(0, _UNIFORM_STEPS) / _UNIFORM_STEPS
    span = max_value - min_value
    if math.isinf(span):
        # bounds straddle more than FLOAT_MAX; interpolate without the span
        return (1.0 - u) * min_value + u * max_value
    return min_value + u * span
