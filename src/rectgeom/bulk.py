"""Vectorised helpers for many points or rectangles at once."""

from __future__ import annotations

import math
from typing import Any, Iterable, Optional

import numpy as np

from .primitives import ORIGIN, ZERO_RECT, PointLike, Rect, RectLike
from .rect import rect_point
from .utils.coerce import as_point, as_rect
from .utils.log import get_logger

logger = get_logger(__name__)


def as_points_array(points: Any) -> np.ndarray:
    """Return ``points`` as a float64 array of shape ``(N, 2)``.

    A single point is accepted as well. Rows containing NaN are dropped and
    input that cannot be read as points gives an empty array.
    """
    empty = np.empty((0, 2), dtype=np.float64)
    if points is None:
        return empty
    try:
        arr = np.asarray(points, dtype=np.float64)
    except (TypeError, ValueError):
        logger.debug("as_points_array: unreadable points %r", points)
        return empty
    if arr.ndim == 1 and arr.size >= 2:
        arr = arr[None, :]
    if arr.ndim != 2 or arr.shape[1] < 2:
        return empty
    arr = arr[:, :2]
    return arr[~np.isnan(arr).any(axis=1)]


def bounds_of_points(points: Any) -> Rect:
    """Return the smallest y-up rectangle containing every point."""
    arr = as_points_array(points)
    if arr.shape[0] == 0:
        return ZERO_RECT
    xs = arr[:, 0]
    ys = arr[:, 1]
    return Rect(
        float(xs.min()),
        float(ys.max()),
        float(xs.max()),
        float(ys.min()),
    )


def union_all(rects: Iterable[Optional[RectLike]]) -> Rect:
    """Bounding rectangle of all valid rectangles in ``rects``."""
    valid = [r for r in (as_rect(rect) for rect in rects) if r is not None]
    if not valid:
        return ZERO_RECT
    arr = np.asarray(valid, dtype=np.float64)
    return Rect(
        float(arr[:, 0].min()),
        float(arr[:, 1].max()),
        float(arr[:, 2].max()),
        float(arr[:, 3].min()),
    )


def rotate_points(
    points: Any, angle_deg: float, pivot: Optional[PointLike] = None
) -> np.ndarray:
    """Rotate ``points`` counter-clockwise by ``angle_deg`` about ``pivot``."""
    arr = as_points_array(points)
    c = as_point(pivot) if pivot is not None else None
    center = np.asarray(ORIGIN if c is None else c, dtype=np.float64)
    theta = math.radians(angle_deg)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    rotation = np.array([[cos_t, -sin_t], [sin_t, cos_t]], dtype=np.float64)
    return (arr - center) @ rotation.T + center


def rotated_bounds(
    rect: Optional[RectLike], angle_deg: float, pivot: Optional[PointLike] = None
) -> Rect:
    """Bounding rectangle of ``rect`` after rotating it by ``angle_deg``.

    ``pivot`` defaults to the center of ``rect``.
    """
    r = as_rect(rect)
    if r is None:
        return ZERO_RECT
    corners = np.array(
        [
            [r.left, r.top],
            [r.right, r.top],
            [r.right, r.bottom],
            [r.left, r.bottom],
        ],
        dtype=np.float64,
    )
    if pivot is None:
        pivot = rect_point(r, "center")
    return bounds_of_points(rotate_points(corners, angle_deg, pivot))


__all__ = [
    "as_points_array",
    "bounds_of_points",
    "union_all",
    "rotate_points",
    "rotated_bounds",
]
