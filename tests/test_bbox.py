"""Tests for segment bounding boxes."""

import pytest

from segkit.bbox import BoundingBox, bounding_box, outline_bbox
from segkit.errors import EmptySegmentError
from segkit.geom import point, vclose
from segkit.segment import make_arc, make_circle, make_line


def _corners(box):
    return (box.min_corner.x, box.min_corner.y, box.max_corner.x, box.max_corner.y)


def _approx(box, expected, tol=1e-9):
    return all(abs(a - b) < tol for a, b in zip(_corners(box), expected))


class TestLineBox:
    def test_diagonal(self):
        box = bounding_box(make_line((3, -1), (-2, 4)))
        assert _corners(box) == (-2, -1, 3, 4)
        assert box.top_left == point(-2, 4)
        assert box.bottom_right == point(3, -1)

    def test_vertical_line(self):
        box = bounding_box(make_line((1, -5), (1, 5)))
        assert box.top_left == point(1, 5)
        assert box.bottom_right == point(1, -5)
        flipped = bounding_box(make_line((1, 5), (1, -5)))
        assert flipped == box

    def test_horizontal_line(self):
        box = bounding_box(make_line((4, 2), (-4, 2)))
        assert _corners(box) == (-4, 2, 4, 2)
        assert box.height == 0


class TestArcBox:
    def test_circle(self):
        box = bounding_box(make_circle((1, 1), 2))
        assert _corners(box) == (-1, -1, 3, 3)

    def test_quarter_arc(self):
        box = bounding_box(make_arc((0, 0), (5, 0), (0, 5)))
        assert _approx(box, (0, 0, 5, 5))

    def test_upper_half(self):
        box = bounding_box(make_arc((0, 0), (5, 0), (-5, 0)))
        assert _approx(box, (-5, 0, 5, 5))

    def test_small_arc_has_no_extrema(self):
        box = bounding_box(make_arc((0, 0), (4, 3), (3, 4)))
        assert _approx(box, (3, 3, 4, 4))

    def test_arc_across_the_cut(self):
        # left half runs through pi, where atan2 wraps
        box = bounding_box(make_arc((0, 0), (0, 5), (0, -5)))
        assert _approx(box, (-5, -5, 0, 5))

    def test_clockwise_three_quarters(self):
        # clockwise from (5,0) to (0,5) sweeps through pi and 3pi/2
        box = bounding_box(make_arc((0, 0), (5, 0), (0, 5), clockwise=True))
        assert _approx(box, (-5, -5, 5, 5))

    def test_offset_center(self):
        box = bounding_box(make_arc((10, 10), (12, 10), (8, 10)))
        assert _approx(box, (8, 10, 12, 12))


class TestBoxHelpers:
    def test_contains_and_overlaps(self):
        box = BoundingBox(point(0, 0), point(2, 2))
        assert box.contains((1, 1))
        assert not box.contains((3, 1))
        assert box.overlaps(BoundingBox(point(1, 1), point(3, 3)))
        assert not box.overlaps(BoundingBox(point(2.5, 0), point(3, 1)))

    def test_outline_bbox(self):
        box = outline_bbox([make_line((0, 0), (4, 0)), make_circle((4, 2), 1)])
        assert _corners(box) == (0, 0, 5, 3)

    def test_outline_bbox_empty(self):
        with pytest.raises(ValueError):
            outline_bbox([])

    def test_not_a_segment(self):
        with pytest.raises(EmptySegmentError):
            bounding_box(point(1, 1))
