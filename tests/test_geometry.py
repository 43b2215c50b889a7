from __future__ import annotations

import pytest
from mini_arcade_core.spaces.d2.geometry2d import Position2D

from rally_pong.geometry import (
    WorldBounds,
    rect_overlap,
    remap_range,
    segment_intersection,
)


def test_remap_range_maps_endpoints_and_midpoint():
    assert remap_range(150, 150, 250, -1, 1) == pytest.approx(-1)
    assert remap_range(200, 150, 250, -1, 1) == pytest.approx(0)
    assert remap_range(250, 150, 250, -1, 1) == pytest.approx(1)


def test_remap_range_extrapolates_outside_source():
    assert remap_range(300, 150, 250, -1, 1) == pytest.approx(2)
    assert remap_range(100, 150, 250, -1, 1) == pytest.approx(-2)


def test_remap_range_rejects_empty_interval():
    with pytest.raises(ValueError):
        remap_range(5, 3, 3, -1, 1)


def test_segment_intersection_of_crossing_segments():
    point = segment_intersection(
        Position2D(0, 0), Position2D(10, 10), Position2D(0, 10), Position2D(10, 0)
    )
    assert point is not None
    assert point.x == pytest.approx(5)
    assert point.y == pytest.approx(5)


def test_segment_intersection_point_lies_on_both_segments():
    a_start, a_end = Position2D(-3, 1), Position2D(7, 6)
    b_start, b_end = Position2D(4, -2), Position2D(0, 9)
    point = segment_intersection(a_start, a_end, b_start, b_end)
    assert point is not None

    for start, end in ((a_start, a_end), (b_start, b_end)):
        cross = (end.x - start.x) * (point.y - start.y) - (end.y - start.y) * (
            point.x - start.x
        )
        assert cross == pytest.approx(0, abs=1e-9)
        assert min(start.x, end.x) - 1e-9 <= point.x <= max(start.x, end.x) + 1e-9
        assert min(start.y, end.y) - 1e-9 <= point.y <= max(start.y, end.y) + 1e-9


def test_segment_intersection_parallel_segments():
    assert (
        segment_intersection(
            Position2D(0, 0), Position2D(10, 0), Position2D(0, 5), Position2D(10, 5)
        )
        is None
    )


def test_segment_intersection_collinear_segments_count_as_parallel():
    assert (
        segment_intersection(
            Position2D(0, 0), Position2D(10, 0), Position2D(5, 0), Position2D(15, 0)
        )
        is None
    )


def test_segment_intersection_beyond_second_segment_end():
    # the lines cross at (5, 5) but the second segment stops at (4, 6)
    assert (
        segment_intersection(
            Position2D(0, 0), Position2D(10, 10), Position2D(0, 10), Position2D(4, 6)
        )
        is None
    )


def test_segment_intersection_beyond_first_segment_end():
    # the lines cross at (5, 5) but the first segment stops at (4, 4)
    assert (
        segment_intersection(
            Position2D(0, 0), Position2D(4, 4), Position2D(0, 10), Position2D(10, 0)
        )
        is None
    )


def test_segment_intersection_at_shared_endpoint():
    point = segment_intersection(
        Position2D(0, 0), Position2D(4, 0), Position2D(4, 0), Position2D(4, 8)
    )
    assert point is not None
    assert point.to_tuple() == pytest.approx((4, 0))


def test_rect_overlap():
    assert rect_overlap(
        Position2D(0, 0), Position2D(10, 10), Position2D(5, 5), Position2D(15, 15)
    )
    assert not rect_overlap(
        Position2D(0, 0), Position2D(10, 10), Position2D(20, 0), Position2D(30, 10)
    )


def test_rect_overlap_touching_edges_do_not_overlap():
    assert not rect_overlap(
        Position2D(0, 0), Position2D(10, 10), Position2D(10, 0), Position2D(20, 10)
    )
    assert not rect_overlap(
        Position2D(0, 0), Position2D(10, 10), Position2D(0, 10), Position2D(10, 20)
    )


def test_world_bounds_from_window(bounds):
    assert bounds.minimum.to_tuple() == (0.0, 50.0)
    assert bounds.maximum.to_tuple() == (800.0, 500.0)
    assert bounds.width == 800
    assert bounds.height == 450


@pytest.mark.parametrize(
    "minimum, maximum",
    [((0, 0), (0, 10)), ((0, 10), (10, 10)), ((5, 5), (1, 1))],
)
def test_world_bounds_rejects_degenerate_rectangles(minimum, maximum):
    with pytest.raises(ValueError):
        WorldBounds(Position2D(*minimum), Position2D(*maximum))


def test_world_bounds_clamp_y(bounds):
    assert bounds.clamp_y(0, 50) == 100
    assert bounds.clamp_y(1000, 50) == 450
    assert bounds.clamp_y(300, 50) == 300
