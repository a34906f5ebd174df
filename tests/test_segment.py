"""Tests for segment construction, queries and splitting."""

import pytest
from math import pi

from segkit.errors import (
    DiagnosticSink,
    DegenerateGeometryError,
    EmptySegmentError,
    ErrorCode,
    NonPlanarInputError,
    RadiusMismatchError,
)
from segkit.geom import point, vclose, close
from segkit.segment import (
    Arc, Circle, Line, SegmentKind,
    isarc, iscircle, isline, issegment,
    make_arc, make_circle, make_line,
    length, on_segment, reverse, sample, split,
)


class TestMakeLine:
    """Test line construction."""

    def test_create(self):
        ln = make_line((0, 0), (3, 4))
        assert isline(ln) and issegment(ln)
        assert ln.kind is SegmentKind.LINE
        assert ln.start == point(0, 0)
        assert ln.end == point(3, 4)

    def test_degenerate(self):
        with pytest.raises(DegenerateGeometryError):
            make_line((1, 1), (1 + 1e-9, 1))

    def test_almost_degenerate_is_fine(self):
        ln = make_line((1, 1), (1 + 1e-6, 1))
        assert isline(ln)

    def test_non_planar(self):
        with pytest.raises(NonPlanarInputError):
            make_line((0, 0, 1), (1, 0))

    def test_sink_records_failure(self):
        sink = DiagnosticSink()
        with pytest.raises(DegenerateGeometryError):
            make_line((0, 0), (0, 0), sink=sink)
        assert sink.codes() == [ErrorCode.DEGENERATE_GEOMETRY]


class TestMakeArc:
    """Test arc and circle construction."""

    def test_ccw_arc(self):
        a = make_arc((0, 0), (5, 0), (0, 5))
        assert isarc(a)
        assert not a.clockwise
        assert close(a.radius, 5.0)
        assert close(a.start_angle, 0.0)
        assert close(a.end_angle, pi / 2)
        assert a.start == point(5, 0)
        assert a.end == point(0, 5)

    def test_clockwise_swaps_start_and_end(self):
        A = point(5, 0)
        B = point(0, 5)
        a = make_arc((0, 0), A, B, clockwise=True)
        assert a.clockwise
        assert a.start == B
        assert a.end == A
        # the caller's orientation is still available
        assert a.trace_start == A
        assert a.trace_end == B
        # three quarters of a turn, counter-clockwise from B to A
        assert close(a.start_angle, pi / 2)
        assert close(a.end_angle, 2 * pi)

    def test_end_angle_unwrapped(self):
        a = make_arc((0, 0), (0, -5), (0, 5))
        assert a.end_angle >= a.start_angle
        assert close(a.sweep, pi)
        b = make_arc((0, 0), (-5, 1e-3), (-5, -1e-3))
        assert b.end_angle >= b.start_angle
        assert b.sweep < 1e-3

    def test_coincident_endpoints_make_a_circle(self):
        c = make_arc((1, 1), (1, 4), (1, 4))
        assert iscircle(c)
        assert not isarc(c)
        assert close(c.radius, 3.0)
        assert c.start == point(4, 1)
        assert c.end == point(4, 1)

    def test_center_on_endpoint(self):
        with pytest.raises(DegenerateGeometryError):
            make_arc((0, 0), (0, 0), (0, 5))
        with pytest.raises(DegenerateGeometryError):
            make_arc((0, 0), (5, 0), (0, 0))

    def test_radius_mismatch(self):
        with pytest.raises(RadiusMismatchError):
            make_arc((0, 0), (5, 0), (0, 5.01))
        # within tolerance
        a = make_arc((0, 0), (5, 0), (0, 5.0005))
        assert isarc(a)

    def test_non_planar(self):
        with pytest.raises(NonPlanarInputError):
            make_arc((0, 0, 0.5), (5, 0), (0, 5))

    def test_make_circle(self):
        c = make_circle((1, 2), 3)
        assert iscircle(c)
        assert c.kind is SegmentKind.CIRCLE
        assert c.start == point(4, 2)
        assert close(c.end_angle - c.start_angle, 2 * pi)
        with pytest.raises(DegenerateGeometryError):
            make_circle((0, 0), 0.0)


class TestQueries:
    """Test length, sampling, reversal and point membership."""

    def test_length(self):
        assert close(length(make_line((0, 0), (3, 4))), 5.0)
        assert close(length(make_arc((0, 0), (1, 0), (0, 1))), pi / 2)
        assert close(length(make_circle((0, 0), 2)), 4 * pi)

    def test_length_not_a_segment(self):
        with pytest.raises(EmptySegmentError):
            length(None)

    def test_sample_line(self):
        ln = make_line((0, 0), (4, 2))
        assert vclose(sample(ln, 0.5), point(2, 1))

    def test_sample_arc_follows_ccw_parameterization(self):
        a = make_arc((0, 0), (5, 0), (0, 5), clockwise=True)
        assert vclose(sample(a, 0.0), a.start)
        assert vclose(sample(a, 1.0), a.end, 1e-9)
        # halfway round the three-quarter arc is at 5pi/4
        assert vclose(sample(a, 0.5), point(-5 / 2 ** 0.5, -5 / 2 ** 0.5), 1e-9)

    def test_reverse(self):
        ln = reverse(make_line((0, 0), (1, 0)))
        assert ln.start == point(1, 0)
        a = make_arc((0, 0), (5, 0), (0, 5))
        r = reverse(a)
        assert r.clockwise
        assert r.trace_start == a.trace_end
        # same geometry
        assert r.start == a.start and r.end == a.end
        assert r.start_angle == a.start_angle and r.end_angle == a.end_angle
        c = make_circle((0, 0), 1)
        assert reverse(c) is c

    def test_on_segment(self):
        ln = make_line((0, 0), (4, 0))
        assert on_segment(ln, (2, 0))
        assert on_segment(ln, (4, 0))
        assert not on_segment(ln, (5, 0))
        assert not on_segment(ln, (2, 0.1))
        a = make_arc((0, 0), (5, 0), (-5, 0))
        assert on_segment(a, (0, 5))
        assert not on_segment(a, (0, -5))
        assert on_segment(make_circle((0, 0), 5), (0, -5))


class TestSplit:
    """Test subdividing segments at points."""

    def test_split_line(self):
        pieces = split(make_line((0, 0), (4, 0)), [(3, 0), (1, 0)])
        assert len(pieces) == 3
        assert all(isline(p) for p in pieces)
        assert vclose(pieces[0].end, point(1, 0))
        assert vclose(pieces[1].end, point(3, 0))
        assert pieces[2].end == point(4, 0)

    def test_split_line_at_endpoint_ignored(self):
        ln = make_line((0, 0), (4, 0))
        pieces = split(ln, [(0, 0), (2, 0)])
        assert len(pieces) == 2

    def test_split_circle_two_points(self):
        c = make_circle((0, 0), 5)
        pieces = split(c, [(-5, 0), (5, 0)])
        assert len(pieces) == 2
        upper, lower = pieces
        assert isarc(upper) and isarc(lower)
        assert not upper.clockwise and not lower.clockwise
        assert vclose(upper.start, point(5, 0))
        assert vclose(upper.end, point(-5, 0), 1e-9)
        assert on_segment(upper, (0, 5))
        assert on_segment(lower, (0, -5))

    def test_split_circle_one_point(self):
        c = make_circle((0, 0), 5)
        assert split(c, [(0, 5)]) == [c]

    def test_split_arc(self):
        a = make_arc((0, 0), (5, 0), (-5, 0))
        first, second = split(a, [(0, 5)])
        assert first.start == a.start
        assert vclose(first.end, point(0, 5), 1e-9)
        assert vclose(second.start, point(0, 5), 1e-9)
        assert second.end == a.end
        assert close(first.end_angle, second.start_angle)

    def test_split_clockwise_arc_keeps_trace_order(self):
        a = make_arc((0, 0), (-5, 0), (5, 0), clockwise=True)
        first, second = split(a, [(0, 5)])
        assert first.clockwise and second.clockwise
        assert first.trace_start == point(-5, 0)
        assert vclose(first.trace_end, point(0, 5), 1e-9)
        assert second.trace_end == point(5, 0)

    def test_split_point_not_on_segment(self):
        with pytest.raises(DegenerateGeometryError):
            split(make_line((0, 0), (4, 0)), [(2, 1)])

    def test_split_point_count(self):
        ln = make_line((0, 0), (4, 0))
        with pytest.raises(DegenerateGeometryError):
            split(ln, [])
        with pytest.raises(DegenerateGeometryError):
            split(ln, [(1, 0), (2, 0), (3, 0)])
