"""Placement of page items relative to other items or rectangles.

An item is any object shaped like a host page item: it exposes
``geometric_bounds`` and ``visible_bounds`` as ``(left, top, right, bottom)``
sequences, an ``editable`` flag and a ``translate(dx, dy)`` method. The
helpers compute the required translation with :mod:`rectgeom.rect` and hand
it to the item. Items that cannot be moved are skipped and the skip is
logged at DEBUG level.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Union

from .models import PlacementOptions
from .point import rotate_point, subtract_points
from .primitives import Point, PointLike, Rect, RectLike
from .rect import align_rect, offset_rect_from, rect_point
from .utils.coerce import as_number, as_point, as_rect
from .utils.log import get_logger

logger = get_logger(__name__)


class PageItem(Protocol):
    """Shape of a host page item as seen by the placement helpers."""

    editable: bool
    geometric_bounds: Any
    visible_bounds: Any

    def translate(self, dx: float, dy: float) -> Any: ...


OptionsLike = Union[PlacementOptions, Mapping[str, Any], None]


def is_page_item(value: Any) -> bool:
    """Whether ``value`` has both bounds attributes and a ``translate`` method."""
    return (
        hasattr(value, "geometric_bounds")
        and hasattr(value, "visible_bounds")
        and callable(getattr(value, "translate", None))
    )


def item_bounds(item: Any, consider_stroke: bool = False) -> Optional[Rect]:
    """Visible bounds of ``item`` when ``consider_stroke`` is set, else geometric."""
    attr = "visible_bounds" if consider_stroke else "geometric_bounds"
    return as_rect(getattr(item, attr, None))


def _options(options: OptionsLike) -> PlacementOptions:
    if options is None:
        return PlacementOptions()
    if isinstance(options, PlacementOptions):
        return options
    return PlacementOptions.from_dict(options)


def _movable_bounds(item: Any, consider_stroke: bool) -> Optional[Rect]:
    if not is_page_item(item):
        logger.debug("skipping %r: not a page item", item)
        return None
    if not getattr(item, "editable", False):
        logger.debug("skipping %r: item is not editable", item)
        return None
    bounds = item_bounds(item, consider_stroke)
    if bounds is None:
        logger.debug("skipping %r: unreadable bounds", item)
    return bounds


def _target_bounds(
    target: Union[PageItem, RectLike, None], consider_stroke: bool
) -> Optional[Rect]:
    if target is None:
        return None
    if is_page_item(target):
        return item_bounds(target, consider_stroke)
    return as_rect(target)


def _delta(before: Rect, after: Rect) -> Point:
    return Point(after.left - before.left, after.top - before.top)


def _apply(item: Any, delta: Optional[Point]) -> bool:
    if delta is None:
        return False
    item.translate(delta.x, delta.y)
    return True


def align_delta(
    item: Any,
    target: Union[PageItem, RectLike, None],
    side: str,
    options: OptionsLike = None,
) -> Optional[Point]:
    """Translation that aligns ``item`` to ``target`` on ``side``."""
    opts = _options(options)
    bounds = _movable_bounds(item, opts.consider_stroke)
    target_rect = _target_bounds(target, opts.consider_stroke)
    if bounds is None or target_rect is None:
        return None
    return _delta(bounds, align_rect(bounds, target_rect, side))


def offset_from_delta(
    item: Any,
    target: Union[PageItem, RectLike, None],
    side: str,
    options: OptionsLike = None,
) -> Optional[Point]:
    """Translation that places ``item`` beside ``target``, ``options.amount`` apart."""
    opts = _options(options)
    bounds = _movable_bounds(item, opts.consider_stroke)
    target_rect = _target_bounds(target, opts.consider_stroke)
    if bounds is None or target_rect is None:
        return None
    placed = offset_rect_from(bounds, target_rect, side, opts.amount)
    return _delta(bounds, placed)


def move_delta(
    item: Any, to_point: Optional[PointLike], options: OptionsLike = None
) -> Optional[Point]:
    """Translation moving ``options.from_point`` (default top-left) to ``to_point``."""
    opts = _options(options)
    bounds = _movable_bounds(item, opts.consider_stroke)
    target = as_point(to_point) if to_point is not None else None
    if bounds is None or target is None:
        return None
    origin = opts.from_point
    if origin is None:
        origin = Point(bounds.left, bounds.top)
    return subtract_points(target, origin)


def align(
    item: Any,
    target: Union[PageItem, RectLike, None],
    side: str,
    options: OptionsLike = None,
) -> bool:
    """Align ``item`` to ``target`` on ``side``. Returns whether it was moved."""
    return _apply(item, align_delta(item, target, side, options))


def offset_from(
    item: Any,
    target: Union[PageItem, RectLike, None],
    side: str,
    options: OptionsLike = None,
) -> bool:
    """Place ``item`` beside ``target`` on ``side``. Returns whether it was moved."""
    return _apply(item, offset_from_delta(item, target, side, options))


def move(item: Any, to_point: Optional[PointLike], options: OptionsLike = None) -> bool:
    """Move ``item`` to ``to_point``. Returns whether it was moved."""
    return _apply(item, move_delta(item, to_point, options))


def rotation_pivot_delta(
    center: Optional[PointLike], pivot: Optional[PointLike], angle_deg: float
) -> Point:
    """Translation turning a rotation about ``center`` into one about ``pivot``.

    Rotating about the center and then translating by the returned delta is
    the same as rotating about ``pivot``.
    """
    pivot_norm = subtract_points(pivot, center)
    return subtract_points(pivot_norm, rotate_point(pivot_norm, angle_deg))


def rotate(item: Any, angle_deg: float, pivot: Optional[PointLike] = None) -> bool:
    """Rotate ``item`` by ``angle_deg`` about ``pivot`` (default: its center).

    The item must expose ``rotate(angle)`` rotating about its own center.
    Returns whether the item was rotated.
    """
    angle = as_number(angle_deg)
    if angle is None:
        logger.debug("skipping rotation of %r: angle %r", item, angle_deg)
        return False
    bounds = _movable_bounds(item, consider_stroke=False)
    rotate_fn = getattr(item, "rotate", None)
    if bounds is None or not callable(rotate_fn):
        return False

    rotate_fn(angle)
    if pivot is not None:
        center = rect_point(bounds, "center")
        delta = rotation_pivot_delta(center, pivot, angle)
        item.translate(delta.x, delta.y)
    return True


__all__ = [
    "PageItem",
    "OptionsLike",
    "is_page_item",
    "item_bounds",
    "align_delta",
    "offset_from_delta",
    "move_delta",
    "align",
    "offset_from",
    "move",
    "rotation_pivot_delta",
    "rotate",
]
