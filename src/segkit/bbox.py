## axis-aligned bounding boxes for outline segments
## Copyright (c) 2026 segkit contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""axis-aligned bounding boxes for **segkit** segments"""

from __future__ import annotations

from dataclasses import dataclass
from math import pi
from typing import Iterable

from segkit.geom import COINCIDENT_TOL, Point, angle_in_range
from segkit.segment import isline, iscircle, require_segment


@dataclass(frozen=True)
class BoundingBox:
    """Box spanning ``min_corner`` (lower left) to ``max_corner`` (upper right)."""

    min_corner: Point
    max_corner: Point

    @property
    def top_left(self) -> Point:
        return Point(self.min_corner.x, self.max_corner.y, 0.0)

    @property
    def bottom_right(self) -> Point:
        return Point(self.max_corner.x, self.min_corner.y, 0.0)

    @property
    def width(self) -> float:
        return self.max_corner.x - self.min_corner.x

    @property
    def height(self) -> float:
        return self.max_corner.y - self.min_corner.y

    def contains(self, p, tol=COINCIDENT_TOL) -> bool:
        return (self.min_corner.x - tol <= p[0] <= self.max_corner.x + tol
                and self.min_corner.y - tol <= p[1] <= self.max_corner.y + tol)

    def overlaps(self, other: "BoundingBox", tol=COINCIDENT_TOL) -> bool:
        return not (other.min_corner.x > self.max_corner.x + tol
                    or other.max_corner.x < self.min_corner.x - tol
                    or other.min_corner.y > self.max_corner.y + tol
                    or other.max_corner.y < self.min_corner.y - tol)

    def union(self, other: "BoundingBox") -> "BoundingBox":
        return BoundingBox(
            Point(min(self.min_corner.x, other.min_corner.x),
                  min(self.min_corner.y, other.min_corner.y), 0.0),
            Point(max(self.max_corner.x, other.max_corner.x),
                  max(self.max_corner.y, other.max_corner.y), 0.0))


def _points_box(pts):
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    return BoundingBox(Point(min(xs), min(ys), 0.0), Point(max(xs), max(ys), 0.0))


## the four axis extrema of a circle, as (angle, dx, dy) on the unit circle
_EXTREMA = ((0.0, 1.0, 0.0),
            (0.5 * pi, 0.0, 1.0),
            (pi, -1.0, 0.0),
            (1.5 * pi, 0.0, -1.0))


def bounding_box(seg, *, tol=COINCIDENT_TOL, sink=None) -> BoundingBox:
    """Return the bounding box of a segment.

    A vertical line (``|dx| < tol``) is returned with its own endpoints
    as corners, the endpoint with the greater y being the upper one.
    Raises ``EmptySegmentError`` if ``seg`` is not a segment.
    """
    seg = require_segment(seg, sink=sink)

    if isline(seg):
        s, e = seg.start, seg.end
        if abs(s.x - e.x) < tol:
            # vertical line
            if s.y > e.y:
                return BoundingBox(e, s)
            return BoundingBox(s, e)
        return _points_box([s, e])

    c = seg.center
    r = seg.radius

    if iscircle(seg):
        return BoundingBox(Point(c.x - r, c.y - r, 0.0), Point(c.x + r, c.y + r, 0.0))

    ## bounds of an arc: the box of its endpoints, grown by every axis
    ## extremum that falls inside the sweep
    pts = [seg.start, seg.end]
    for ang, dx, dy in _EXTREMA:
        if angle_in_range(ang, seg.start_angle, seg.end_angle):
            pts.append(Point(c.x + r * dx, c.y + r * dy, 0.0))
    return _points_box(pts)


def outline_bbox(segments: Iterable) -> BoundingBox:
    """bounding box of a collection of segments"""
    box = None
    for seg in segments:
        b = bounding_box(seg)
        box = b if box is None else box.union(b)
    if box is None:
        raise ValueError('outline_bbox needs at least one segment')
    return box


__all__ = [
    'BoundingBox',
    'bounding_box',
    'outline_bbox',
]
