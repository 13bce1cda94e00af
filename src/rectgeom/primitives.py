"""Value types shared by the rectangle and point helpers.

Rectangles use the y-up convention of the host application: ``top`` is the
larger y coordinate and ``bottom`` the smaller one.
"""

from __future__ import annotations

from typing import Any, Literal, NamedTuple, Sequence, Union

import numpy as np


class Point(NamedTuple):
    """A 2D point ``(x, y)``."""

    x: float
    y: float


class Rect(NamedTuple):
    """An axis-aligned rectangle ``(left, top, right, bottom)``."""

    left: float
    top: float
    right: float
    bottom: float


ZERO_RECT = Rect(0.0, 0.0, 0.0, 0.0)
ORIGIN = Point(0.0, 0.0)

Side = Literal["left", "top", "right", "bottom", "centerX", "centerY"]
Corner = Literal["topLeft", "topRight", "bottomLeft", "bottomRight", "center"]

# Anything with enough numeric items: tuples, lists, 1-D arrays.
RectLike = Union[Rect, Sequence[Any], np.ndarray]
PointLike = Union[Point, Sequence[Any], np.ndarray]


__all__ = [
    "Point",
    "Rect",
    "ZERO_RECT",
    "ORIGIN",
    "Side",
    "Corner",
    "RectLike",
    "PointLike",
]
