from __future__ import annotations

import math

import numpy as np
import pytest

from anglecore import rng
from anglecore.constants import TAU
from anglecore.floats import is_negative_zero, rand_uniform
from anglecore.wrap import wrap_array, wrap_degrees, wrap_gradians, wrap_radians, wrap_value

# ---------------------------------------------------------------------------
# Boundary inclusion
# ---------------------------------------------------------------------------


def test_unsigned_includes_zero_excludes_period():
    assert wrap_degrees(0.0, signed=False) == 0.0
    assert wrap_degrees(360.0, signed=False) == 0.0
    assert wrap_degrees(-360.0, signed=False) == 0.0
    assert wrap_degrees(359.5, signed=False) == 359.5


def test_signed_excludes_lower_includes_upper():
    assert wrap_degrees(-180.0, signed=True) == 180.0
    assert wrap_degrees(180.0, signed=True) == 180.0
    assert wrap_degrees(-179.5, signed=True) == -179.5
    assert wrap_degrees(540.0, signed=True) == 180.0


def test_signed_is_default():
    assert wrap_degrees(270.0) == -90.0
    assert wrap_radians(-math.pi) == math.pi


def test_radians_boundaries():
    assert wrap_radians(0.0, False) == 0.0
    assert wrap_radians(TAU, False) == 0.0
    assert wrap_radians(-TAU, False) == 0.0
    assert wrap_radians(-math.pi, False) == pytest.approx(math.pi)
    assert wrap_radians(math.pi, True) == math.pi
    assert wrap_radians(TAU, True) == 0.0
    assert wrap_radians(-TAU, True) == 0.0


def test_quadrant_values():
    assert wrap_radians(3 * math.pi, False) == pytest.approx(math.pi)
    assert wrap_radians(-3 * math.pi / 2, False) == pytest.approx(math.pi / 2)
    assert wrap_radians(5 * math.pi / 4, True) == pytest.approx(-3 * math.pi / 4)
    assert wrap_radians(-5 * math.pi / 4, True) == pytest.approx(3 * math.pi / 4)


def test_degrees_and_gradians():
    assert wrap_degrees(410.0, False) == pytest.approx(50.0)
    assert wrap_degrees(-210.0, True) == pytest.approx(150.0)
    assert wrap_degrees(-450.0, False) == pytest.approx(270.0)
    assert wrap_gradians(450.0, False) == pytest.approx(50.0)
    assert wrap_gradians(-210.0, True) == pytest.approx(190.0)
    assert wrap_gradians(-200.0, True) == 200.0


def test_result_is_never_negative_zero():
    for x, signed in ((-0.0, True), (-0.0, False), (-360.0, False), (-360.0, True), (720.0, True)):
        r = wrap_degrees(x, signed)
        assert r == 0.0
        assert not is_negative_zero(r)


def test_tiny_negative_does_not_land_on_period():
    # -1e-20 + 360 rounds to 360.0, which is outside [0, 360)
    r = wrap_degrees(-1e-20, signed=False)
    assert 0.0 <= r < 360.0


def test_rejects_non_finite():
    for bad in (math.inf, -math.inf, math.nan):
        with pytest.raises(ValueError, match="finite"):
            wrap_degrees(bad)
        with pytest.raises(ValueError, match="finite"):
            wrap_radians(bad, False)


def test_wrap_is_idempotent():
    rng.seed(7)
    for _ in range(200):
        x = rand_uniform(-1e4, 1e4)
        for signed in (True, False):
            once = wrap_degrees(x, signed)
            assert wrap_degrees(once, signed) == once
            if signed:
                assert -180.0 < once <= 180.0
            else:
                assert 0.0 <= once < 360.0
    rng.seed(None)


def test_wrap_value_custom_period():
    assert wrap_value(25.0, 24.0, signed=False) == 1.0
    assert wrap_value(-12.0, 24.0, signed=True) == 12.0


# ---------------------------------------------------------------------------
# wrap_array
# ---------------------------------------------------------------------------


def test_wrap_array_signed():
    x = np.array([360.0, -180.0, 180.0, 410.0, -0.0])
    r = wrap_array(x, 360.0, signed=True)
    assert r.tolist() == [0.0, 180.0, 180.0, pytest.approx(50.0), 0.0]
    assert not np.any(np.signbit(r[[0, 4]]))


def test_wrap_array_unsigned():
    r = wrap_array([360.0, -45.0, -1e-20, 725.0], 360.0, signed=False)
    assert r.tolist() == pytest.approx([0.0, 315.0, 0.0, 5.0])
    assert np.all((r >= 0.0) & (r < 360.0))


def test_wrap_array_matches_scalar():
    rng.seed(11)
    vals = np.array([rand_uniform(-50.0, 50.0) for _ in range(100)])
    for signed in (True, False):
        r = wrap_array(vals, TAU, signed)
        expected = [wrap_radians(float(v), signed) for v in vals]
        assert r.tolist() == expected
    rng.seed(None)


def test_wrap_array_does_not_modify_input():
    x = np.array([400.0, -10.0])
    wrap_array(x, 360.0, signed=False)
    assert x.tolist() == [400.0, -10.0]


def test_wrap_array_rejects_non_finite():
    with pytest.raises(ValueError, match="finite"):
        wrap_array(np.array([1.0, np.nan]))
