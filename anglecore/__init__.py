"""anglecore package.

Version is single-sourced from the repository root VERSION file.
"""

from __future__ import annotations
from pathlib import Path

def _read_version() -> str:
    repo_root = Path(__file__).resolve().parents[1]
    try:
        return (repo_root / "VERSION").read_text(encoding="utf-8").strip()
    except OSError:
        return "1.0.0"

__version__ = _read_version()

from .angle import Angle, from_degrees, from_gradians, from_radians, from_turns  # noqa: E402
from .constants import (  # noqa: E402
    RAD_EPSILON,
    TAU,
    TRIG_EPSILON,
    UNIT_ARCMINUTE,
    UNIT_ARCSECOND,
    UNIT_DEGREE,
)
from .errors import AngleParseError  # noqa: E402
from .wrap import wrap_array, wrap_degrees, wrap_gradians, wrap_radians  # noqa: E402

__all__ = [
    "Angle",
    "AngleParseError",
    "RAD_EPSILON",
    "TAU",
    "TRIG_EPSILON",
    "UNIT_ARCMINUTE",
    "UNIT_ARCSECOND",
    "UNIT_DEGREE",
    "from_degrees",
    "from_gradians",
    "from_radians",
    "from_turns",
    "wrap_array",
    "wrap_degrees",
    "wrap_gradians",
    "wrap_radians",
]
