"""Named numeric constants for anglecore.

Any change to these values is a behaviour change: the epsilons define
what counts as "equal" for angles and where tangent is treated as
singular.

Categories
----------
RAD_EPSILON
    Absolute tolerance, in radians, for angle equality and ordering.
    Two angles closer than this compare equal.

TRIG_EPSILON
    Threshold below which ``|cos|`` is treated as exactly zero, so that
    ``tan`` returns a signed infinity at 90° / 270° instead of a large,
    platform-dependent finite value.

DEFAULT_APPROX_EPSILON
    Default tolerance for ``floats.approx_equal``.

Unit ratios
    One turn is 2π radians, 360 degrees or 400 gradians.  One degree is
    60 arcminutes or 3600 arcseconds.
"""

from __future__ import annotations

import math
import sys

# ---------------------------------------------------------------------------
# Comparison tolerances
# ---------------------------------------------------------------------------
RAD_EPSILON: float = 1e-9
TRIG_EPSILON: float = 1e-12
DEFAULT_APPROX_EPSILON: float = 1e-10

# ---------------------------------------------------------------------------
# Float64 limits
# ---------------------------------------------------------------------------
FLOAT_MAX: float = sys.float_info.max
FRACTION_MASK: int = 0xFFFFFFFFFFFFF  # 52 bits
EXPONENT_MAX: int = 0x7FF             # 11 bits
# Digits past this many decimal places carry no float64 information.
MAX_DECIMALS: int = 17

# ---------------------------------------------------------------------------
# Turns
# ---------------------------------------------------------------------------
TAU: float = 2.0 * math.pi
RADIANS_PER_TURN: float = TAU
DEGREES_PER_TURN: float = 360.0
GRADIANS_PER_TURN: float = 400.0

# ---------------------------------------------------------------------------
# Radians to other units
# ---------------------------------------------------------------------------
DEGREES_PER_RADIAN: float = 180.0 / math.pi
ARCMINUTES_PER_RADIAN: float = 10800.0 / math.pi
ARCSECONDS_PER_RADIAN: float = 648000.0 / math.pi
GRADIANS_PER_RADIAN: float = 200.0 / math.pi

# ---------------------------------------------------------------------------
# Degrees, arcminutes, arcseconds, gradians
# ---------------------------------------------------------------------------
ARCMINUTES_PER_DEGREE: float = 60.0
ARCSECONDS_PER_ARCMINUTE: float = 60.0
ARCSECONDS_PER_DEGREE: float = 3600.0
DEGREES_PER_GRADIAN: float = 0.9

# ---------------------------------------------------------------------------
# Smallest-unit selectors for DMS decomposition
# ---------------------------------------------------------------------------
UNIT_DEGREE: int = 0
UNIT_ARCMINUTE: int = 1
UNIT_ARCSECOND: int = 2
