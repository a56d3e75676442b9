"""Immutable angle value type.

An ``Angle`` stores one finite float: its size in radians.  Every
operation returns a new instance; nothing mutates in place.

Comparison uses an absolute tolerance of ``RAD_EPSILON`` radians and is
not wrap-aware: 10° and 370° differ until both are wrapped.  Since equality
is tolerance based, angles are not hashable; key dictionaries on
``floats.to_hex(angle.to_radians())`` when an exact key is needed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

from . import comparison
from .constants import RAD_EPSILON, TRIG_EPSILON, UNIT_ARCSECOND, UNIT_DEGREE
from .errors import AngleParseError
from .notation import format_radians, parse_radians
from .signs import copy_sign
from .units import (
    degrees_to_radians,
    dms_to_degrees,
    gradians_to_radians,
    radians_to_degrees,
    radians_to_gradians,
    radians_to_turns,
    split_dms,
    turns_to_radians,
)
from .wrap import wrap_radians


def _require_finite(value: float, what: str) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{what} cannot be ±inf or NaN")
    return value


@dataclass(frozen=True, eq=False)
class Angle:
    radians: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "radians", _require_finite(self.radians, "angle size"))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        return cls(radians)

    @classmethod
    def from_degrees(cls, degrees: float, arcmin: float = 0.0, arcsec: float = 0.0) -> "Angle":
        """Build from degrees plus optional arcminutes and arcseconds.

        The parts are summed as given and are not range-checked.  Give all
        parts the same sign: -12° 34′ 56″ is ``from_degrees(-12, -34, -56)``.
        """
        return cls(degrees_to_radians(dms_to_degrees(degrees, arcmin, arcsec)))

    @classmethod
    def from_gradians(cls, gradians: float) -> "Angle":
        return cls(gradians_to_radians(gradians))

    @classmethod
    def from_turns(cls, turns: float) -> "Angle":
        return cls(turns_to_radians(turns))

    @classmethod
    def parse(cls, text: str) -> "Angle":
        """Parse CSS-unit or degree-symbol text; raises AngleParseError."""
        try:
            return cls(parse_radians(text))
        except AngleParseError:
            raise
        except ValueError as exc:
            # digits that overflow to inf are not a valid angle
            raise AngleParseError(text) from exc

    @classmethod
    def try_parse(cls, text: str) -> Optional["Angle"]:
        try:
            return cls.parse(text)
        except AngleParseError:
            return None

    # ------------------------------------------------------------------
    # Units
    # ------------------------------------------------------------------

    def to_radians(self) -> float:
        return self.radians

    def to_degrees(self) -> float:
        return self.to_dms(UNIT_DEGREE)[0]

    def to_gradians(self) -> float:
        return radians_to_gradians(self.radians)

    def to_turns(self) -> float:
        return radians_to_turns(self.radians)

    def to_dms(self, smallest_unit: int = UNIT_ARCSECOND) -> tuple[float, ...]:
        """Degrees, arcminutes and arcseconds as 1-3 floats.

        ``smallest_unit`` is UNIT_DEGREE, UNIT_ARCMINUTE or UNIT_ARCSECOND.
        Higher parts are whole numbers; all parts carry the angle's sign.
        """
        return split_dms(radians_to_degrees(self.radians), smallest_unit)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: "Angle") -> "Angle":
        return Angle(self.radians + other.radians)

    def sub(self, other: "Angle") -> "Angle":
        return Angle(self.radians - other.radians)

    def mul(self, k: float) -> "Angle":
        k = _require_finite(k, "multiplier")
        return Angle(self.radians * k)

    def div(self, k: float) -> "Angle":
        if k == 0:
            raise ZeroDivisionError("divisor cannot be 0")
        k = _require_finite(k, "divisor")
        return Angle(self.radians / k)

    def abs(self) -> "Angle":
        return Angle(abs(self.radians))

    def neg(self) -> "Angle":
        return Angle(-self.radians)

    def __add__(self, other: Any) -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, k: Any) -> "Angle":
        if isinstance(k, Angle):
            return NotImplemented
        return self.mul(k)

    __rmul__ = __mul__

    def __truediv__(self, k: Any) -> "Angle":
        if isinstance(k, Angle):
            return NotImplemented
        return self.div(k)

    def __abs__(self) -> "Angle":
        return self.abs()

    def __neg__(self) -> "Angle":
        return self.neg()

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare(self, other: Any) -> int:
        """-1, 0 or 1 by raw size; within RAD_EPSILON counts as equal.

        Raises TypeError if *other* is not an Angle.  Wrap both sides first
        to compare angular positions.
        """
        if not isinstance(other, Angle):
            raise TypeError(f"cannot compare Angle with {type(other).__name__}")
        if abs(self.radians - other.radians) < RAD_EPSILON:
            return 0
        return -1 if self.radians < other.radians else 1

    def equals(self, other: Any) -> bool:
        return comparison.equals(self, other)

    def is_less_than(self, other: Any) -> bool:
        return comparison.is_less_than(self, other)

    def is_less_than_or_equal(self, other: Any) -> bool:
        return comparison.is_less_than_or_equal(self, other)

    def is_greater_than(self, other: Any) -> bool:
        return comparison.is_greater_than(self, other)

    def is_greater_than_or_equal(self, other: Any) -> bool:
        return comparison.is_greater_than_or_equal(self, other)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        return not self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Any) -> bool:
        return self.is_less_than(other)

    def __le__(self, other: Any) -> bool:
        return self.is_less_than_or_equal(other)

    def __gt__(self, other: Any) -> bool:
        return self.is_greater_than(other)

    def __ge__(self, other: Any) -> bool:
        return self.is_greater_than_or_equal(other)

    # ------------------------------------------------------------------
    # Trigonometry
    # ------------------------------------------------------------------

    def sin(self) -> float:
        return math.sin(self.radians)

    def cos(self) -> float:
        return math.cos(self.radians)

    def tan(self) -> float:
        """Tangent; ±inf (sign of sine) where cosine is within TRIG_EPSILON of 0."""
        s = math.sin(self.radians)
        c = math.cos(self.radians)
        if abs(c) < TRIG_EPSILON:
            return copy_sign(math.inf, s)
        return s / c

    def sinh(self) -> float:
        return math.sinh(self.radians)

    def cosh(self) -> float:
        return math.cosh(self.radians)

    def tanh(self) -> float:
        return math.tanh(self.radians)

    # ------------------------------------------------------------------
    # Wrapping and text
    # ------------------------------------------------------------------

    def wrap(self, signed: bool = True) -> "Angle":
        """New angle wrapped into (-π, π] (signed) or [0, τ)."""
        return Angle(wrap_radians(self.radians, signed))

    def format(self, style: str = "rad", decimals: Optional[int] = None) -> str:
        return format_radians(self.radians, style, decimals)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Angle(radians={self.radians!r})"


from_radians = Angle.from_radians
from_degrees = Angle.from_degrees
from_gradians = Angle.from_gradians
from_turns = Angle.from_turns
