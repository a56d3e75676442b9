from __future__ import annotations

from typing import Any

import pytest

from anglecore import comparison
from anglecore.angle import Angle
from anglecore.comparison import Comparable


class Version:
    """Minimal three-way comparable used to exercise the free functions."""

    def __init__(self, n: int):
        self.n = n

    def compare(self, other: Any) -> int:
        if not isinstance(other, Version):
            raise TypeError("not a Version")
        return (self.n > other.n) - (self.n < other.n)


def test_protocol_membership():
    assert isinstance(Version(1), Comparable)
    assert isinstance(Angle(0.0), Comparable)
    assert not isinstance(1.0, Comparable)


def test_derived_functions():
    a, b, c = Version(1), Version(2), Version(1)
    assert comparison.equals(a, c)
    assert not comparison.equals(a, b)
    assert comparison.is_less_than(a, b)
    assert not comparison.is_less_than(a, c)
    assert comparison.is_less_than_or_equal(a, c)
    assert comparison.is_greater_than(b, a)
    assert comparison.is_greater_than_or_equal(a, c)
    assert not comparison.is_greater_than_or_equal(a, b)


def test_equals_is_lenient_ordering_is_strict():
    a = Version(1)
    assert comparison.equals(a, 1) is False
    assert comparison.equals(a, "1") is False
    with pytest.raises(TypeError):
        comparison.is_less_than(a, 1)
    with pytest.raises(TypeError):
        comparison.is_greater_than_or_equal(a, None)
