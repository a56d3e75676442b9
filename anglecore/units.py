"""Unit conversions between radians and the other angular units."""

from __future__ import annotations

import math

from .constants import (
    ARCMINUTES_PER_DEGREE,
    ARCSECONDS_PER_ARCMINUTE,
    ARCSECONDS_PER_DEGREE,
    DEGREES_PER_RADIAN,
    GRADIANS_PER_RADIAN,
    RADIANS_PER_TURN,
    UNIT_ARCMINUTE,
    UNIT_ARCSECOND,
    UNIT_DEGREE,
)
from .floats import normalize_zero
from .signs import sign


def dms_to_degrees(degrees: float, arcmin: float = 0.0, arcsec: float = 0.0) -> float:
    # Parts are summed as given; mixed signs are the caller's business.
    return degrees + arcmin / ARCMINUTES_PER_DEGREE + arcsec / ARCSECONDS_PER_DEGREE


def degrees_to_radians(degrees: float) -> float:
    return degrees / DEGREES_PER_RADIAN


def radians_to_degrees(radians: float) -> float:
    return radians * DEGREES_PER_RADIAN


def gradians_to_radians(gradians: float) -> float:
    return gradians / GRADIANS_PER_RADIAN


def radians_to_gradians(radians: float) -> float:
    return radians * GRADIANS_PER_RADIAN


def turns_to_radians(turns: float) -> float:
    return turns * RADIANS_PER_TURN


def radians_to_turns(radians: float) -> float:
    return radians / RADIANS_PER_TURN


def split_dms(degrees: float, smallest_unit: int = UNIT_ARCSECOND) -> tuple[float, ...]:
    """Split degrees into (d,), (d, m) or (d, m, s).

    Only the last component has a fractional part.  The sign of *degrees*
    is applied to every component, so a negative angle gives all
    non-positive parts; ``-0.0`` never appears in the result.
    """
    s = sign(degrees, False)
    a = abs(degrees)

    if smallest_unit == UNIT_DEGREE:
        return (normalize_zero(a * s),)

    if smallest_unit == UNIT_ARCMINUTE:
        d = float(math.floor(a))
        m = (a - d) * ARCMINUTES_PER_DEGREE
        return (normalize_zero(d * s), normalize_zero(m * s))

    if smallest_unit == UNIT_ARCSECOND:
        d = float(math.floor(a))
        f_min = (a - d) * ARCMINUTES_PER_DEGREE
        m = float(math.floor(f_min))
        sec = (f_min - m) * ARCSECONDS_PER_ARCMINUTE
        return (normalize_zero(d * s), normalize_zero(m * s), normalize_zero(sec * s))

    raise ValueError(
        "smallest_unit must be 0 (degrees), 1 (arcminutes) or 2 (arcseconds)"
    )
