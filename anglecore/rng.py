"""Process-wide random source for the float generators.

numpy ``Generator`` objects are not thread-safe, so every draw goes
through a lock.  ``seed`` resets the generator for reproducible runs.
"""

from __future__ import annotations

import threading
from typing import Optional

import numpy as np

_lock = threading.Lock()
_generator: np.random.Generator = np.random.default_rng()


def seed(value: Optional[int] = None) -> None:
    """Reseed the shared generator (``None`` draws fresh OS entropy)."""
    global _generator
    with _lock:
        _generator = np.random.default_rng(None if value is None else int(value))


def random_bytes(n: int) -> bytes:
    if n < 0:
        raise ValueError("n must be non-negative")
    with _lock:
        return _generator.bytes(int(n))


def random_int(lo: int, hi: int) -> int:
    """Uniform integer in the closed range [lo, hi]."""
    lo = int(lo); hi = int(hi)
    if lo > hi:
        raise ValueError("lo must be less than or equal to hi")
    with _lock:
        return int(_generator.integers(lo, hi, endpoint=True))
