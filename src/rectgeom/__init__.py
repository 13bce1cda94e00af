"""rectgeom: rectangle and point geometry for vector-graphics automation scripts."""

from __future__ import annotations

from ._version import get_version
from .models import Offsets, PlacementOptions
from .point import add_points, distance, inclination, rotate_point, subtract_points
from .primitives import ORIGIN, ZERO_RECT, Corner, Point, Rect, Side
from .rect import (
    align_rect,
    create_rect,
    expand_rect,
    intersect_rects,
    move_rect,
    offset_rect,
    offset_rect_from,
    parse_rect_args,
    rect_area,
    rect_copy,
    rect_from_points,
    rect_from_sides,
    rect_from_size,
    rect_height,
    rect_point,
    rect_side,
    rect_width,
    rects_intersect,
    translate_rect,
    union_rects,
)
from .utils import clamp, in_range, setup_logging

__version__ = get_version()


__all__ = [
    "__version__",
    "get_version",
    "Offsets",
    "PlacementOptions",
    "Point",
    "Rect",
    "ORIGIN",
    "ZERO_RECT",
    "Side",
    "Corner",
    "add_points",
    "subtract_points",
    "distance",
    "inclination",
    "rotate_point",
    "align_rect",
    "create_rect",
    "expand_rect",
    "intersect_rects",
    "move_rect",
    "offset_rect",
    "offset_rect_from",
    "parse_rect_args",
    "rect_area",
    "rect_copy",
    "rect_from_points",
    "rect_from_sides",
    "rect_from_size",
    "rect_height",
    "rect_point",
    "rect_side",
    "rect_width",
    "rects_intersect",
    "translate_rect",
    "union_rects",
    "clamp",
    "in_range",
    "setup_logging",
]
