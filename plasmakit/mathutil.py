"""Small numeric helpers."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def _min(a, b):
    return a if a < b else b


def _max(a, b):
    return b if a < b else a


def sign(x: float) -> float:
    """Return 1.0 for non-negative ``x`` (including -0.0), otherwise -1.0."""
    value = float(x)
    if value >= 0.0:
        return 1.0
    return -1.0


def min3(a: T, b: T, c: T) -> T:
    """Smallest of three values."""
    return _min(_min(a, b), c)


def max3(a: T, b: T, c: T) -> T:
    """Largest of three values."""
    return _max(_max(a, b), c)