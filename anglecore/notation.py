"""Textual angle grammar.

Parsing accepts two notations (surrounding whitespace is ignored):

* CSS units, case-insensitive: ``-12.5deg``, ``0.25 turn``, ``3.14rad``,
  ``100grad``.  Whitespace is allowed between number and unit.
* Degrees/arcminutes/arcseconds: ``12° 34′ 56″`` or ``-12°34'56"``.  Any
  ordered subset of the three parts, at least one.  A leading sign applies
  to every part.

Formatting produces the same notations, so ``parse(format(x, style, 17))``
gives back ``x`` within ``RAD_EPSILON`` for every style.
"""

from __future__ import annotations

import re
from typing import Optional

from .constants import (
    ARCMINUTES_PER_DEGREE,
    ARCSECONDS_PER_ARCMINUTE,
    UNIT_ARCMINUTE,
    UNIT_ARCSECOND,
    UNIT_DEGREE,
)
from .errors import AngleParseError
from .floats import normalize_zero
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

CSS_STYLES = ("rad", "deg", "grad", "turn")
DMS_STYLES = {"d": UNIT_DEGREE, "dm": UNIT_ARCMINUTE, "dms": UNIT_ARCSECOND}
FORMAT_STYLES = CSS_STYLES + tuple(DMS_STYLES)

_NUM = r"(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)"

_CSS_RE = re.compile(rf"^(?P<num>[-+]?{_NUM})\s*(?P<unit>rad|deg|grad|turn)$", re.IGNORECASE)

_DMS_RE = re.compile(
    rf"^(?P<sign>[-+]?)\s*"
    rf"(?:(?P<deg>{_NUM})°\s*)?"
    rf"(?:(?P<min>{_NUM})[′']\s*)?"
    rf"(?:(?P<sec>{_NUM})[″\"])?$"
)

_CSS_TO_RADIANS = {
    "rad": float,
    "deg": degrees_to_radians,
    "grad": gradians_to_radians,
    "turn": turns_to_radians,
}


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_radians(text: str) -> float:
    """Parse angle text and return its size in radians.

    Raises AngleParseError for empty or malformed input.
    """
    if not isinstance(text, str):
        raise AngleParseError(str(text))
    value = text.strip()
    if not value:
        raise AngleParseError(text)

    m = _DMS_RE.match(value)
    if m is not None:
        parts = [m.group("deg"), m.group("min"), m.group("sec")]
        if all(p is None for p in parts):
            raise AngleParseError(text)
        k = -1.0 if m.group("sign") == "-" else 1.0
        d, mi, s = (k * float(p) if p is not None else 0.0 for p in parts)
        return degrees_to_radians(dms_to_degrees(d, mi, s))

    m = _CSS_RE.match(value)
    if m is not None:
        return _CSS_TO_RADIANS[m.group("unit").lower()](float(m.group("num")))

    raise AngleParseError(text)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_float(value: float, decimals: Optional[int] = None) -> str:
    """Fixed-point text; ``decimals=None`` means 17 places with trailing zeros trimmed."""
    value = normalize_zero(value)
    if decimals is not None:
        return f"{value:.{decimals}f}"
    text = f"{value:.17f}"
    return text.rstrip("0").rstrip(".")


def _format_whole(value: float) -> str:
    return f"{value:.0f}"


def _format_dms(radians: float, smallest_unit: int, decimals: Optional[int]) -> str:
    sign = "-" if radians < 0.0 else ""
    parts = split_dms(radians_to_degrees(abs(radians)), smallest_unit)

    if smallest_unit == UNIT_DEGREE:
        (d,) = parts
        return f"{sign}{format_float(d, decimals)}°"

    if smallest_unit == UNIT_ARCMINUTE:
        d, m = parts
        if decimals is not None:
            m = round(m, decimals)
            if m >= ARCMINUTES_PER_DEGREE:
                m = 0.0
                d += 1.0
        return f"{sign}{_format_whole(d)}° {format_float(m, decimals)}′"

    d, m, s = parts
    if decimals is not None:
        s = round(s, decimals)
        # carry cascades: seconds may push minutes to 60 as well
        if s >= ARCSECONDS_PER_ARCMINUTE:
            s = 0.0
            m += 1.0
        if m >= ARCMINUTES_PER_DEGREE:
            m = 0.0
            d += 1.0
    return f"{sign}{_format_whole(d)}° {_format_whole(m)}′ {format_float(s, decimals)}″"


def format_radians(radians: float, style: str = "rad", decimals: Optional[int] = None) -> str:
    """Render an angle given in radians.

    style: rad | deg | grad | turn (CSS, unit suffix) or d | dm | dms
    (degree symbols).  *decimals* applies to the value, or to the smallest
    DMS component; None means full precision without trailing zeros.
    """
    if decimals is not None:
        decimals = int(decimals)
        if decimals < 0:
            raise ValueError("decimals must be non-negative or None")
    key = str(style).strip().lower()

    if key == "rad":
        return format_float(radians, decimals) + "rad"
    if key == "deg":
        return format_float(split_dms(radians_to_degrees(radians), UNIT_DEGREE)[0], decimals) + "deg"
    if key == "grad":
        return format_float(radians_to_gradians(radians), decimals) + "grad"
    if key == "turn":
        return format_float(radians_to_turns(radians), decimals) + "turn"
    if key in DMS_STYLES:
        return _format_dms(radians, DMS_STYLES[key], decimals)
    raise ValueError(f"invalid format style {style!r}; allowed: {', '.join(FORMAT_STYLES)}")
