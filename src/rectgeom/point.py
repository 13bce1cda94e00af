"""Point algebra: sums, differences, distances, angles and rotation."""

from __future__ import annotations

import math
from typing import Any, Optional

from .primitives import ORIGIN, Point, PointLike
from .utils.coerce import as_point
from .utils.log import get_logger

logger = get_logger(__name__)


def _point_or_origin(value: Any) -> Point:
    if value is None:
        return ORIGIN
    point = as_point(value)
    if point is None:
        logger.debug("malformed point %r treated as origin", value)
        return ORIGIN
    return point


def add_points(
    point1: Optional[PointLike], point2: Optional[PointLike] = None
) -> Point:
    """Add two points component-wise; missing points count as ``(0, 0)``."""
    p1 = _point_or_origin(point1)
    p2 = _point_or_origin(point2)
    return Point(p1.x + p2.x, p1.y + p2.y)


def subtract_points(
    point1: Optional[PointLike], point2: Optional[PointLike] = None
) -> Point:
    """Subtract ``point2`` from ``point1``; missing points count as ``(0, 0)``."""
    p1 = _point_or_origin(point1)
    p2 = _point_or_origin(point2)
    return Point(p1.x - p2.x, p1.y - p2.y)


def distance(point1: Optional[PointLike], point2: Optional[PointLike] = None) -> float:
    """Euclidean distance between two points.

    ``point2`` defaults to ``point1``, giving a distance of zero.
    """
    p1 = _point_or_origin(point1)
    p2 = p1 if point2 is None else _point_or_origin(point2)
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def inclination(
    point1: Optional[PointLike], point2: Optional[PointLike] = None
) -> float:
    """Angle of the line through two points, in degrees within ``[0, 180)``.

    The angle is measured counter-clockwise from the x axis. A vertical line
    gives 90; coincident points have no direction and give 0.
    """
    p1 = _point_or_origin(point1)
    p2 = p1 if point2 is None else _point_or_origin(point2)
    angle = math.degrees(math.atan2(p2.y - p1.y, p2.x - p1.x))
    # Both directions of a line share one inclination.
    angle %= 180.0
    # Tiny negative angles round up to 180 under the modulo.
    return 0.0 if angle >= 180.0 else angle


def rotate_point(
    point: PointLike, angle_deg: float, pivot: Optional[PointLike] = None
) -> Point:
    """Rotate a point around ``pivot`` by ``angle_deg`` degrees counter-clockwise."""
    p = _point_or_origin(point)
    c = _point_or_origin(pivot)
    theta = math.radians(angle_deg)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    x0 = p.x - c.x
    y0 = p.y - c.y
    xr = x0 * cos_t - y0 * sin_t + c.x
    yr = x0 * sin_t + y0 * cos_t + c.y
    return Point(xr, yr)


__all__ = [
    "add_points",
    "subtract_points",
    "distance",
    "inclination",
    "rotate_point",
]
