from __future__ import annotations

import math

import pytest

from anglecore.signs import copy_sign, sign


def test_sign_of_nonzero_values():
    assert sign(3) == 1
    assert sign(-2.5) == -1
    assert sign(math.inf) == 1
    assert sign(-math.inf) == -1


def test_sign_of_zero():
    assert sign(0) == 0
    assert sign(-0.0) == 0
    assert sign(0, False) == 1
    assert sign(0.0, False) == 1
    assert sign(-0.0, False) == -1


def test_copy_sign():
    assert copy_sign(5, -0.0) == -5
    assert copy_sign(-5.0, 2.0) == 5.0
    assert copy_sign(math.inf, -1.0) == -math.inf
    assert copy_sign(math.inf, 0.0) == math.inf


def test_copy_sign_rejects_nan():
    with pytest.raises(ValueError, match="NaN"):
        copy_sign(math.nan, 1.0)
    with pytest.raises(ValueError, match="NaN"):
        copy_sign(1.0, math.nan)
