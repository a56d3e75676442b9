from __future__ import annotations
import math
import numpy as np
from .constants import DEGREES_PER_TURN, GRADIANS_PER_TURN, TAU
from .floats import normalize_zero

def wrap_value(value: float, period: float, signed: bool = True) -> float:
    """Reduce *value* into one period.

    signed=False -> [0, period)                 (lower bound included)
    signed=True  -> (-period/2, period/2]       (upper bound included,
                                                 principal-value convention)
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError("value must be finite")
    r = math.fmod(value, period)
    if signed:
        half = period / 2.0
        if r <= -half:
            r += period
        elif r > half:
            r -= period
    else:
        if r < 0.0:
            r += period
        # a tiny negative remainder can round up to exactly one period
        if r >= period:
            r -= period
    return normalize_zero(r)

def wrap_radians(radians: float, signed: bool = True) -> float:
    """Wrap into [0, τ) or (-π, π]."""
    return wrap_value(radians, TAU, signed)

def wrap_degrees(degrees: float, signed: bool = True) -> float:
    """Wrap into [0, 360) or (-180, 180]."""
    return wrap_value(degrees, DEGREES_PER_TURN, signed)

def wrap_gradians(gradians: float, signed: bool = True) -> float:
    """Wrap into [0, 400) or (-200, 200]."""
    return wrap_value(gradians, GRADIANS_PER_TURN, signed)

def wrap_array(values: np.ndarray, period: float = TAU, signed: bool = True) -> np.ndarray:
    """Element-wise ``wrap_value`` for an array; returns a new float array."""
    x = np.asarray(values, dtype=float)
    if not np.all(np.isfinite(x)):
        raise ValueError("values must be finite")
    period = float(period)
    r = np.fmod(x, period)
    if signed:
        half = period / 2.0
        r = np.where(r <= -half, r + period, r)
        r = np.where(r > half, r - period, r)
    else:
        r = np.where(r < 0.0, r + period, r)
        r = np.where(r >= period, r - period, r)
    # adding +0.0 turns -0.0 into +0.0 and leaves everything else alone
    return r + 0.0
