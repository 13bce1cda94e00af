"""Scalar helpers used by the geometry and placement layers."""

from typing import Optional


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(hi, value))


def in_range(
    number: float, bound: Optional[float] = None, upper: Optional[float] = None
) -> bool:
    """Check whether ``number`` lies in a half-open range.

    ``in_range(n)`` tests ``[0, 1)``, ``in_range(n, upper)`` tests
    ``[0, upper)`` and ``in_range(n, lower, upper)`` tests ``[lower, upper)``.
    Reversed bounds are swapped before testing.
    """
    lower = 0.0
    if bound is None:
        hi = 1.0
    elif upper is None:
        hi = bound
    else:
        lower, hi = bound, upper
    if lower > hi:
        lower, hi = hi, lower
    return lower <= number < hi


__all__ = ["clamp", "in_range"]
