import numpy as np
import pytest

from rectgeom.models import Offsets
from rectgeom.primitives import ZERO_RECT, Point, Rect
from rectgeom.rect import (
    CopyFrom,
    FourSides,
    TwoPoints,
    WidthHeightOrigin,
    align_rect,
    create_rect,
    expand_rect,
    intersect_rects,
    move_rect,
    offset_rect,
    offset_rect_from,
    parse_rect_args,
    rect_area,
    rect_from_points,
    rect_from_size,
    rect_height,
    rect_point,
    rect_side,
    rect_width,
    rects_intersect,
    translate_rect,
    union_rects,
)

# ------------------------------ Construction ---------------------------------


def test_create_rect_from_width_and_height_uses_y_up() -> None:
    rect = create_rect(10, 20)

    assert rect == (0, 0, 10, -20)
    assert rect_width(rect) == 10
    assert rect_height(rect) == 20


def test_create_rect_with_origin() -> None:
    assert create_rect(10, 20, (5, 100)) == (5, 100, 15, 80)


def test_create_rect_ignores_non_point_origin() -> None:
    assert create_rect(10, 20, None) == (0, 0, 10, -20)


@pytest.mark.parametrize(
    ("p1", "p2"),
    (
        ((0, 0), (10, 5)),
        ((10, 5), (0, 0)),
        ((0, 5), (10, 0)),
        ((10, 0), (0, 5)),
    ),
)
def test_create_rect_from_points_is_order_independent(p1, p2) -> None:
    assert create_rect(p1, p2) == Rect(0, 5, 10, 0)


def test_create_rect_copies_sequence() -> None:
    source = [1, 2, 3, 4]
    rect = create_rect(source)

    assert rect == (1, 2, 3, 4)
    assert isinstance(rect, Rect)
    source[0] = 99
    assert rect.left == 1


def test_create_rect_from_four_values_coerces_numbers() -> None:
    assert create_rect("1", 2, 3.5, np.float64(4)) == (1.0, 2.0, 3.5, 4.0)


def test_create_rect_accepts_numpy_rows() -> None:
    assert create_rect(np.array([0.0, 10.0, 5.0, 0.0])) == (0, 10, 5, 0)


@pytest.mark.parametrize(
    "args",
    (
        (),
        (5,),
        ("a", 1),
        ([1, 2], 5),
        ([1, 2, 3],),
        (1, 2, "x", 4),
        ([1, None], [2, 3]),
        (None, None),
        (True, 2),
        (float("nan"), 1),
        (10**400, 1),
    ),
)
def test_create_rect_degrades_to_zero_rect(args) -> None:
    assert create_rect(*args) == ZERO_RECT


def test_parse_rect_args_picks_variant() -> None:
    assert isinstance(parse_rect_args((0, 1, 2, 3)), CopyFrom)
    assert isinstance(parse_rect_args((0, 1), (2, 3)), TwoPoints)
    assert isinstance(parse_rect_args(1, 2), WidthHeightOrigin)
    assert isinstance(parse_rect_args(1, 2, (0, 0)), WidthHeightOrigin)
    assert isinstance(parse_rect_args(0, 1, 2, 3), FourSides)
    assert parse_rect_args("nope") is None


def test_named_constructors_degrade_on_bad_input() -> None:
    assert rect_from_points((0, 0), "x") == ZERO_RECT
    assert rect_from_size(None, 1) == ZERO_RECT


# -------------------------------- Metrics ------------------------------------


def test_rect_sides_and_centers() -> None:
    rect = Rect(0, 10, 20, 0)

    assert rect_side(rect, "left") == 0
    assert rect_side(rect, "top") == 10
    assert rect_side(rect, "right") == 20
    assert rect_side(rect, "bottom") == 0
    assert rect_side(rect, "centerX") == 10
    assert rect_side(rect, "centerY") == 5


def test_rect_side_unknown_name_is_none() -> None:
    assert rect_side(Rect(0, 10, 20, 0), "middle") is None
    assert rect_side(None, "left") is None


def test_rect_points() -> None:
    rect = Rect(0, 10, 20, 0)

    assert rect_point(rect, "topLeft") == Point(0, 10)
    assert rect_point(rect, "topRight") == Point(20, 10)
    assert rect_point(rect, "bottomLeft") == Point(0, 0)
    assert rect_point(rect, "bottomRight") == Point(20, 0)
    assert rect_point(rect, "center") == Point(10, 5)
    assert rect_point(rect, "somewhere") is None


def test_metrics_are_not_normalized() -> None:
    flipped = Rect(10, 0, 0, 5)

    assert rect_width(flipped) == -10
    assert rect_height(flipped) == -5
    assert rect_area(flipped) == 50
    assert rect_area(Rect(0, 0, 10, 5)) == -50


def test_metrics_of_missing_rect_are_zero() -> None:
    assert rect_width(None) == 0.0
    assert rect_height("abc") == 0.0
    assert rect_area(None) == 0.0


# ------------------------------ Set algebra ----------------------------------


def test_touching_rects_do_not_intersect() -> None:
    a = Rect(0, 10, 10, 0)
    b = Rect(10, 10, 20, 0)

    assert not rects_intersect(a, b)
    assert intersect_rects(a, b) is None


def test_overlapping_rects_intersect() -> None:
    a = Rect(0, 10, 10, 0)
    b = Rect(5, 15, 20, 5)

    assert rects_intersect(a, b)
    assert rects_intersect(b, a)
    assert intersect_rects(a, b) == (5, 10, 10, 5)


def test_intersect_with_missing_rect() -> None:
    assert not rects_intersect(None, Rect(0, 10, 10, 0))
    assert intersect_rects(Rect(0, 10, 10, 0), None) is None


def test_union_of_disjoint_rects_contains_both() -> None:
    a = Rect(0, 10, 10, 0)
    b = Rect(20, -5, 30, -15)
    u = union_rects(a, b)

    assert u == (0, 10, 30, -15)
    for rect in (a, b):
        assert u.left <= rect.left and u.right >= rect.right
        assert u.top >= rect.top and u.bottom <= rect.bottom


def test_union_falls_back_to_present_rect() -> None:
    a = Rect(0, 10, 10, 0)

    assert union_rects(a, None) == a
    assert union_rects(None, a) == a
    assert union_rects(None, None) == ZERO_RECT


# ------------------------------- Transforms ----------------------------------


@pytest.mark.parametrize(
    ("dx", "dy"),
    ((0, 0), (5, -3), (-2.5, 7.25), (1e6, -1e6)),
)
def test_translate_round_trip(dx: float, dy: float) -> None:
    rect = Rect(1, 9, 4, 2)

    moved = translate_rect(rect, dx, dy)

    assert translate_rect(moved, -dx, -dy) == pytest.approx(rect)


def test_translate_defaults_missing_deltas() -> None:
    rect = Rect(1, 9, 4, 2)

    assert translate_rect(rect) == rect
    assert translate_rect(rect, None, 3) == (1, 12, 4, 5)
    assert translate_rect(None, 1, 1) == ZERO_RECT


def test_offset_uniform_grows_rect() -> None:
    assert offset_rect(Rect(0, 10, 10, 0), 2) == (-2, 12, 12, -2)


def test_offset_per_side() -> None:
    rect = Rect(0, 10, 10, 0)

    assert offset_rect(rect, {"left": 1, "top": 2}) == (-1, 12, 10, 0)
    assert offset_rect(rect, Offsets(right=3, bottom=4)) == (0, 10, 13, -4)


def test_offset_collapses_to_center_instead_of_inverting() -> None:
    result = offset_rect(Rect(0, 10, 10, 0), -8)

    assert result == (5, 5, 5, 5)
    assert rect_width(result) == 0
    assert rect_height(result) == 0


def test_asymmetric_offset_collapses_onto_offset_edges() -> None:
    result = offset_rect(Rect(0, 10, 10, 0), {"left": -20})

    assert result == (15, 10, 15, 0)


def test_huge_values_degrade_instead_of_raising() -> None:
    rect = Rect(0, 1, 1, 0)

    assert translate_rect(rect, 10**400, 0) == rect
    assert offset_rect(rect, 10**400) == rect
    assert expand_rect(rect, 10**400) == rect


@pytest.mark.parametrize(
    "amount",
    (-100, -5.5, 0, 3, {"left": -20}, {"top": -30, "bottom": 1}, Offsets(-1, -50)),
)
def test_offset_never_gives_negative_size(amount) -> None:
    for rect in (Rect(0, 10, 10, 0), Rect(10, 0, 0, 10), Rect(-3, 4, 2, -1)):
        result = offset_rect(rect, amount)
        assert rect_width(result) >= 0
        assert rect_height(result) >= 0


def test_expand_rect_is_centered() -> None:
    rect = Rect(0, 10, 20, 0)

    expanded = expand_rect(rect, 10)

    assert expanded == (-5, 15, 25, -5)
    assert rect_point(expanded, "center") == rect_point(rect, "center")


def test_expand_rect_with_separate_amounts() -> None:
    assert expand_rect(Rect(0, 10, 20, 0), 4, 2) == (-2, 11, 22, -1)


def test_move_rect_defaults_to_top_left() -> None:
    rect = Rect(0, 10, 20, 0)

    assert move_rect(rect, (100, 100)) == (100, 100, 120, 90)
    assert move_rect(rect, (100, 100), (10, 5)) == (90, 105, 110, 95)
    assert move_rect(rect, None) == rect


def test_align_left_moves_only_x() -> None:
    result = align_rect(Rect(0, 10, 10, 0), Rect(20, 30, 30, 20), "left")

    assert result == (20, 10, 30, 0)


@pytest.mark.parametrize(
    ("side", "expected"),
    (
        ("right", (20, 10, 30, 0)),
        ("centerX", (20, 10, 30, 0)),
        ("top", (0, 30, 10, 20)),
        ("bottom", (0, 30, 10, 20)),
        ("centerY", (0, 30, 10, 20)),
        ("diagonal", (0, 10, 10, 0)),
    ),
)
def test_align_sides(side: str, expected) -> None:
    assert align_rect(Rect(0, 10, 10, 0), Rect(20, 30, 30, 20), side) == expected


def test_align_without_target_is_noop() -> None:
    rect = Rect(0, 10, 10, 0)

    assert align_rect(rect, None, "left") == rect


@pytest.mark.parametrize(
    ("side", "expected"),
    (
        ("left", (8, 10, 18, 0)),
        ("right", (32, 10, 42, 0)),
        ("top", (0, 42, 10, 32)),
        ("bottom", (0, 18, 10, 8)),
        ("centerX", (0, 10, 10, 0)),
    ),
)
def test_offset_rect_from_places_adjacent(side: str, expected) -> None:
    rect = Rect(0, 10, 10, 0)
    target = Rect(20, 30, 30, 20)

    assert offset_rect_from(rect, target, side, 2) == expected


def test_offset_rect_from_defaults() -> None:
    rect = Rect(0, 10, 10, 0)

    assert offset_rect_from(rect, None, "left") == (-10, 10, 0, 0)
    assert offset_rect_from(rect, Rect(20, 30, 30, 20), "right", None) == (
        30,
        10,
        40,
        0,
    )
