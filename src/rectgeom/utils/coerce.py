"""Input coercion for loosely typed geometry arguments.

Every helper here returns ``None`` instead of raising when the value cannot
be interpreted, so callers can degrade to their documented sentinel.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, Optional

import numpy as np

from ..primitives import Point, Rect


def as_number(value: Any) -> Optional[float]:
    """Return ``value`` as a float, or ``None`` when it is not a number or is NaN."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(number):
        return None
    return number


def is_sequence(value: Any) -> bool:
    """True for lists, tuples and 1-D arrays; strings do not count."""
    if isinstance(value, (str, bytes)):
        return False
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    return isinstance(value, Sequence)


def _numbers(value: Any, count: int) -> Optional[list[float]]:
    if not is_sequence(value) or len(value) < count:
        return None
    numbers = [as_number(item) for item in value[:count]]
    if any(n is None for n in numbers):
        return None
    return [float(n) for n in numbers if n is not None]


def as_rect(value: Any) -> Optional[Rect]:
    """Coerce a 4-sequence into a :class:`Rect`."""
    numbers = _numbers(value, 4)
    if numbers is None:
        return None
    return Rect(*numbers)


def as_point(value: Any) -> Optional[Point]:
    """Coerce a 2-sequence into a :class:`Point`."""
    numbers = _numbers(value, 2)
    if numbers is None:
        return None
    return Point(*numbers)


__all__ = ["as_number", "is_sequence", "as_rect", "as_point"]
