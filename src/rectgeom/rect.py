"""Axis-aligned rectangle helpers in a y-up coordinate system.

A rectangle is ``(left, top, right, bottom)`` with ``top >= bottom`` when
normalized. Normalization is never enforced: width and height are plain
differences and may come out negative.

No function here raises on malformed input. Unusable rectangles degrade to
:data:`~rectgeom.primitives.ZERO_RECT`, absent results are ``None`` and
numeric queries fall back to ``0.0``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .models import Offsets
from .point import subtract_points
from .primitives import ORIGIN, ZERO_RECT, Point, PointLike, Rect, RectLike
from .utils.coerce import as_number, as_point, as_rect, is_sequence
from .utils.log import get_logger

logger = get_logger(__name__)


# ------------------------------ Construction ---------------------------------


def rect_copy(rect: RectLike) -> Rect:
    """Return a new rectangle with the first four values of ``rect``."""
    coerced = as_rect(rect)
    return ZERO_RECT if coerced is None else coerced


def rect_from_points(point1: PointLike, point2: PointLike) -> Rect:
    """Return the rectangle spanned by two opposite corners, in any order."""
    p1 = as_point(point1)
    p2 = as_point(point2)
    if p1 is None or p2 is None:
        return ZERO_RECT
    return Rect(
        min(p1.x, p2.x),
        max(p1.y, p2.y),
        max(p1.x, p2.x),
        min(p1.y, p2.y),
    )


def rect_from_size(width: float, height: float, origin: PointLike = ORIGIN) -> Rect:
    """Return a ``width x height`` rectangle whose top-left corner is ``origin``.

    The height extends downwards, so ``bottom = top - height``.
    """
    w = as_number(width)
    h = as_number(height)
    o = as_point(origin)
    if w is None or h is None or o is None:
        return ZERO_RECT
    return Rect(o.x, o.y, o.x + w, o.y - h)


def rect_from_sides(left: float, top: float, right: float, bottom: float) -> Rect:
    """Return the rectangle with the given sides, used verbatim."""
    return rect_copy((left, top, right, bottom))


@dataclass(frozen=True)
class CopyFrom:
    """Copy of an existing rectangle."""

    rect: Rect

    def build(self) -> Rect:
        return rect_copy(self.rect)


@dataclass(frozen=True)
class TwoPoints:
    """Rectangle spanned by two opposite corners."""

    point1: Point
    point2: Point

    def build(self) -> Rect:
        return rect_from_points(self.point1, self.point2)


@dataclass(frozen=True)
class WidthHeightOrigin:
    """Rectangle of a given size hanging down from its top-left corner."""

    width: float
    height: float
    origin: Point = ORIGIN

    def build(self) -> Rect:
        return rect_from_size(self.width, self.height, self.origin)


@dataclass(frozen=True)
class FourSides:
    """Rectangle given by its four sides."""

    left: float
    top: float
    right: float
    bottom: float

    def build(self) -> Rect:
        return rect_from_sides(self.left, self.top, self.right, self.bottom)


RectArgs = Union[CopyFrom, TwoPoints, WidthHeightOrigin, FourSides]


def parse_rect_args(*args: Any) -> Optional[RectArgs]:
    """Classify the arguments of :func:`create_rect`.

    Recognised shapes, checked in order:

    * ``(rect,)`` -- a sequence of four numbers to copy;
    * ``(point1, point2)`` -- two opposite corners;
    * ``(width, height[, origin])`` -- size and optional top-left corner;
    * ``(left, top, right, bottom)`` -- explicit sides.

    Returns ``None`` when the shape is not recognised or a component is not
    numeric.
    """
    count = len(args)

    if count == 1 and is_sequence(args[0]):
        rect = as_rect(args[0])
        return None if rect is None else CopyFrom(rect)

    if count == 2 and is_sequence(args[0]) and is_sequence(args[1]):
        p1 = as_point(args[0])
        p2 = as_point(args[1])
        if p1 is None or p2 is None:
            return None
        return TwoPoints(p1, p2)

    if count in (2, 3):
        width = as_number(args[0])
        height = as_number(args[1])
        if width is None or height is None:
            return None
        origin: Optional[Point] = ORIGIN
        if count == 3 and is_sequence(args[2]):
            origin = as_point(args[2])
        if origin is None:
            return None
        return WidthHeightOrigin(width, height, origin)

    if count >= 4:
        rect = as_rect(args[:4])
        if rect is None:
            return None
        return FourSides(*rect)

    return None


def create_rect(*args: Any) -> Rect:
    """Create a rectangle from any of the shapes accepted by :func:`parse_rect_args`.

    Unrecognised or non-numeric arguments give the zero rectangle.

    >>> create_rect(10, 20)
    Rect(left=0.0, top=0.0, right=10.0, bottom=-20.0)
    >>> create_rect((5, 0), (0, 5))
    Rect(left=0.0, top=5.0, right=5.0, bottom=0.0)
    """
    parsed = parse_rect_args(*args)
    if parsed is None:
        logger.debug("create_rect: unrecognised arguments %r", args)
        return ZERO_RECT
    return parsed.build()


# -------------------------------- Metrics ------------------------------------


_SIDES: Dict[str, Callable[[Rect], float]] = {
    "left": lambda r: r.left,
    "top": lambda r: r.top,
    "right": lambda r: r.right,
    "bottom": lambda r: r.bottom,
    "centerX": lambda r: r.left + (r.right - r.left) / 2,
    "centerY": lambda r: r.top + (r.bottom - r.top) / 2,
}

_CORNERS: Dict[str, Callable[[Rect], Point]] = {
    "topLeft": lambda r: Point(r.left, r.top),
    "topRight": lambda r: Point(r.right, r.top),
    "bottomLeft": lambda r: Point(r.left, r.bottom),
    "bottomRight": lambda r: Point(r.right, r.bottom),
    "center": lambda r: Point(_SIDES["centerX"](r), _SIDES["centerY"](r)),
}

_HORIZONTAL_SIDES = frozenset({"left", "right", "centerX"})
_VERTICAL_SIDES = frozenset({"top", "bottom", "centerY"})


def rect_side(rect: Optional[RectLike], side: str) -> Optional[float]:
    """Return the coordinate of ``side`` (``left``, ``centerX``, ...) or ``None``."""
    r = as_rect(rect)
    getter = _SIDES.get(side)
    if r is None or getter is None:
        return None
    return getter(r)


def rect_point(rect: Optional[RectLike], corner: str) -> Optional[Point]:
    """Return the point at ``corner`` (``topLeft``, ``center``, ...) or ``None``."""
    r = as_rect(rect)
    getter = _CORNERS.get(corner)
    if r is None or getter is None:
        return None
    return getter(r)


def rect_width(rect: Optional[RectLike]) -> float:
    """Return ``right - left``; ``0.0`` for a malformed rectangle."""
    r = as_rect(rect)
    return 0.0 if r is None else r.right - r.left


def rect_height(rect: Optional[RectLike]) -> float:
    """Return ``top - bottom``; ``0.0`` for a malformed rectangle."""
    r = as_rect(rect)
    return 0.0 if r is None else r.top - r.bottom


def rect_area(rect: Optional[RectLike]) -> float:
    """Return width times height; negative when exactly one axis is flipped."""
    return rect_width(rect) * rect_height(rect)


# ------------------------------ Set algebra ----------------------------------


def rects_intersect(rect1: Optional[RectLike], rect2: Optional[RectLike]) -> bool:
    """Whether two rectangles overlap. Rectangles sharing only an edge do not."""
    a = as_rect(rect1)
    b = as_rect(rect2)
    if a is None or b is None:
        return False
    return (
        a.left < b.right and a.top > b.bottom and a.right > b.left and a.bottom < b.top
    )


def intersect_rects(
    rect1: Optional[RectLike], rect2: Optional[RectLike]
) -> Optional[Rect]:
    """Return the overlap of two rectangles, or ``None`` if they do not intersect."""
    if not rects_intersect(rect1, rect2):
        return None
    a = rect_copy(rect1)
    b = rect_copy(rect2)
    return Rect(
        max(a.left, b.left),
        min(a.top, b.top),
        min(a.right, b.right),
        max(a.bottom, b.bottom),
    )


def union_rects(rect1: Optional[RectLike], rect2: Optional[RectLike]) -> Rect:
    """Return the smallest rectangle containing both inputs.

    A missing input falls back to the other one; two missing inputs give the
    zero rectangle.
    """
    a = as_rect(rect1)
    b = as_rect(rect2)
    a = a if a is not None else b
    b = b if b is not None else a
    if a is None or b is None:
        return ZERO_RECT
    return Rect(
        min(a.left, b.left),
        max(a.top, b.top),
        max(a.right, b.right),
        min(a.bottom, b.bottom),
    )


# ------------------------------- Transforms ----------------------------------


def _as_offsets(amount: Any) -> Offsets:
    if isinstance(amount, Offsets):
        return amount
    if isinstance(amount, Mapping):
        return Offsets.from_dict(amount)
    value = as_number(amount)
    return Offsets.uniform(0.0 if value is None else value)


def translate_rect(
    rect: Optional[RectLike], dx: Optional[float] = 0.0, dy: Optional[float] = 0.0
) -> Rect:
    """Shift ``rect`` by ``(dx, dy)``; missing deltas count as zero."""
    r = as_rect(rect)
    if r is None:
        logger.debug("translate_rect: malformed rect %r", rect)
        return ZERO_RECT
    x = as_number(dx) or 0.0
    y = as_number(dy) or 0.0
    return Rect(r.left + x, r.top + y, r.right + x, r.bottom + y)


def offset_rect(
    rect: Optional[RectLike], amount: Union[float, Offsets, Mapping[str, Any]] = 0.0
) -> Rect:
    """Offset the sides of ``rect`` by a uniform amount or per-side amounts.

    ``left`` and ``bottom`` amounts are subtracted, ``top`` and ``right``
    amounts are added, so a positive uniform amount grows the rectangle.
    A negative result width collapses left and right onto their midpoint;
    height collapses the same way, so the result never inverts.
    """
    r = as_rect(rect)
    if r is None:
        logger.debug("offset_rect: malformed rect %r", rect)
        return ZERO_RECT
    d = _as_offsets(amount)

    left = r.left - d.left
    top = r.top + d.top
    right = r.right + d.right
    bottom = r.bottom - d.bottom

    if right - left < 0:
        left = right = left + (right - left) / 2
    if top - bottom < 0:
        top = bottom = top + (bottom - top) / 2

    return Rect(left, top, right, bottom)


def expand_rect(
    rect: Optional[RectLike],
    horizontal: float = 0.0,
    vertical: Optional[float] = None,
) -> Rect:
    """Grow ``rect`` by ``horizontal`` in width and ``vertical`` in height, centered.

    ``vertical`` defaults to ``horizontal``.
    """
    hor = as_number(horizontal) or 0.0
    ver = hor if vertical is None else (as_number(vertical) or 0.0)
    return offset_rect(rect, Offsets(hor / 2, ver / 2, hor / 2, ver / 2))


def move_rect(
    rect: Optional[RectLike],
    to_point: Optional[PointLike],
    from_point: Optional[PointLike] = None,
) -> Rect:
    """Translate ``rect`` so that ``from_point`` lands on ``to_point``.

    ``from_point`` defaults to the top-left corner of ``rect``.
    """
    r = as_rect(rect)
    if r is None:
        logger.debug("move_rect: malformed rect %r", rect)
        return ZERO_RECT
    origin = as_point(from_point) if from_point is not None else None
    if origin is None:
        origin = Point(r.left, r.top)
    target = as_point(to_point) if to_point is not None else None
    if target is None:
        target = origin
    delta = subtract_points(target, origin)
    return translate_rect(r, delta.x, delta.y)


def align_rect(
    rect: Optional[RectLike], target: Optional[RectLike], side: str
) -> Rect:
    """Translate ``rect`` along one axis so its ``side`` matches ``target``'s.

    Horizontal sides (``left``, ``right``, ``centerX``) move along x, vertical
    sides along y. Unknown sides leave ``rect`` where it is.
    """
    r = as_rect(rect)
    if r is None:
        logger.debug("align_rect: malformed rect %r", rect)
        return ZERO_RECT
    t = as_rect(target) if target is not None else r
    to = rect_side(t, side)
    frm = rect_side(r, side)
    if to is None or frm is None:
        logger.debug("align_rect: cannot align %r to %r on %r", rect, target, side)
        return r
    delta = to - frm
    if side in _HORIZONTAL_SIDES:
        return translate_rect(r, delta, 0.0)
    if side in _VERTICAL_SIDES:
        return translate_rect(r, 0.0, delta)
    return r


def offset_rect_from(
    rect: Optional[RectLike],
    target: Optional[RectLike],
    side: str,
    amount: Optional[float] = 0.0,
) -> Rect:
    """Place ``rect`` next to ``target`` on ``side``, separated by ``amount``.

    Only ``left``, ``top``, ``right`` and ``bottom`` are supported; placing on
    the left puts ``rect``'s right edge ``amount`` units left of ``target``'s
    left edge, and so on.
    """
    r = as_rect(rect)
    if r is None:
        logger.debug("offset_rect_from: malformed rect %r", rect)
        return ZERO_RECT
    t = as_rect(target) if target is not None else None
    if t is None:
        t = ZERO_RECT
    gap = as_number(amount) or 0.0

    dx = 0.0
    dy = 0.0
    if side == "left":
        dx = t.left - r.right - gap
    elif side == "top":
        dy = t.top - r.bottom + gap
    elif side == "right":
        dx = t.right - r.left + gap
    elif side == "bottom":
        dy = t.bottom - r.top - gap

    return translate_rect(r, dx, dy)


__all__ = [
    "CopyFrom",
    "TwoPoints",
    "WidthHeightOrigin",
    "FourSides",
    "RectArgs",
    "parse_rect_args",
    "create_rect",
    "rect_copy",
    "rect_from_points",
    "rect_from_size",
    "rect_from_sides",
    "rect_side",
    "rect_point",
    "rect_width",
    "rect_height",
    "rect_area",
    "rects_intersect",
    "intersect_rects",
    "union_rects",
    "translate_rect",
    "offset_rect",
    "expand_rect",
    "move_rect",
    "align_rect",
    "offset_rect_from",
]
