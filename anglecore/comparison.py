"""Derived comparisons for types exposing a three-way ``compare``.

``compare(other)`` returns -1, 0 or 1 and raises ``TypeError`` when
*other* is not comparable.  ``equals`` is the lenient exception: it
returns False for a foreign type instead of raising.
"""

from __future__ import annotations
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Comparable(Protocol):
    def compare(self, other: Any) -> int: ...


def equals(a: Comparable, b: Any) -> bool:
    return isinstance(b, type(a)) and a.compare(b) == 0


def is_less_than(a: Comparable, b: Any) -> bool:
    return a.compare(b) == -1


def is_less_than_or_equal(a: Comparable, b: Any) -> bool:
    return not is_greater_than(a, b)


def is_greater_than(a: Comparable, b: Any) -> bool:
    return a.compare(b) == 1


def is_greater_than_or_equal(a: Comparable, b: Any) -> bool:
    return not is_less_than(a, b)
