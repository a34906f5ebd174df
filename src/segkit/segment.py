## planar outline segments: lines, arcs and circles
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

"""planar outline segments for **segkit**

A segment is one of three immutable kinds:

* ``Line``: two distinct endpoints.
* ``Arc``: a center, a radius, two distinct endpoints on the circle, and
  an angular range ``[start_angle, end_angle]`` in the counter-clockwise
  parameterization, with ``end_angle >= start_angle``.  The
  ``clockwise`` flag records that the caller traced the arc the other
  way round.
* ``Circle``: a center and a radius.  Its start and end are both the
  point at angle 0, ``center + (radius, 0, 0)``.

Use ``make_line()``, ``make_arc()`` and ``make_circle()`` to build
segments; they validate their input and raise a ``SegmentError``
subclass on failure, so there is never a partially-valid segment.

orientation
===========

``Arc.start`` and ``Arc.end`` always return the endpoints in the order
of the CCW angle parameterization.  For an arc built with
``clockwise=True`` that is the *swap* of the points passed in.  Code
that needs the caller's orientation reads ``trace_start`` /
``trace_end`` or the ``clockwise`` flag.  Nothing else in segkit swaps
endpoints by hand.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import pi
from typing import ClassVar, List, Sequence, Union

from segkit.errors import (
    error_degenerate,
    error_empty_segment,
    error_non_planar,
    error_radius_mismatch,
)
from segkit.geom import (
    COINCIDENT_TOL,
    RADIUS_TOL,
    Point,
    angleXY,
    angle_in_range,
    dist,
    dot,
    isplanar,
    lerp,
    pi2,
    point,
    pointmatches,
    polarXY,
    sub,
    unwrap_after,
)


class SegmentKind(Enum):
    LINE = "line"
    ARC = "arc"
    CIRCLE = "circle"


@dataclass(frozen=True)
class Line:
    """A line segment from ``start`` to ``end``."""

    start: Point
    end: Point

    kind: ClassVar[SegmentKind] = SegmentKind.LINE


@dataclass(frozen=True)
class Circle:
    """A full circle."""

    center: Point
    radius: float

    kind: ClassVar[SegmentKind] = SegmentKind.CIRCLE
    clockwise: ClassVar[bool] = False
    start_angle: ClassVar[float] = 0.0
    end_angle: ClassVar[float] = pi2

    @property
    def start(self) -> Point:
        return Point(self.center.x + self.radius, self.center.y, self.center.z)

    @property
    def end(self) -> Point:
        return self.start


@dataclass(frozen=True)
class Arc:
    """A circular arc.

    ``trace_start`` and ``trace_end`` are the endpoints as the caller gave
    them.  ``start_angle`` and ``end_angle`` always describe the CCW sweep.
    """

    center: Point
    radius: float
    trace_start: Point
    trace_end: Point
    start_angle: float
    end_angle: float
    clockwise: bool = False

    kind: ClassVar[SegmentKind] = SegmentKind.ARC

    @property
    def start(self) -> Point:
        """first endpoint of the CCW sweep"""
        if self.clockwise:
            return self.trace_end
        return self.trace_start

    @property
    def end(self) -> Point:
        """last endpoint of the CCW sweep"""
        if self.clockwise:
            return self.trace_start
        return self.trace_end

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle


Segment = Union[Line, Arc, Circle]
SEGMENT_TYPES = (Line, Arc, Circle)


def issegment(x) -> bool:
    return isinstance(x, SEGMENT_TYPES)


def isline(x) -> bool:
    return isinstance(x, Line)


def isarc(x) -> bool:
    """True for true arcs only, not circles"""
    return isinstance(x, Arc)


def iscircle(x) -> bool:
    return isinstance(x, Circle)


def require_segment(x, which: str = "segment", sink=None) -> Segment:
    """Return ``x`` if it is a segment, otherwise raise ``EmptySegmentError``."""
    if not issegment(x):
        raise error_empty_segment(which, sink)
    return x


## constructors
## ------------

def make_line(start, end, *, tol=COINCIDENT_TOL, sink=None) -> Line:
    """Make a line segment from ``start`` to ``end``.

    Raises ``NonPlanarInputError`` if either point has a non-zero z, and
    ``DegenerateGeometryError`` if the points coincide within ``tol``.
    """
    s = point(start)
    e = point(end)

    if not isplanar(s, e):
        raise error_non_planar("line", sink)

    if pointmatches(s, e, tol):
        raise error_degenerate("line", sink)

    return Line(s, e)


def make_arc(center, start, end, clockwise=False, *,
             tol=COINCIDENT_TOL, radius_tol=RADIUS_TOL, sink=None) -> Union[Arc, Circle]:
    """Make an arc about ``center`` from ``start`` to ``end``.

    The arc is traced counter-clockwise as viewed from +Z unless
    ``clockwise`` is true.  If ``start`` and ``end`` coincide the result
    is a ``Circle``.

    Parameters
    ----------
    center, start, end : point-like
        Defining points; all must have z == 0.
    clockwise : bool
        Trace direction of the caller's points.
    tol : float
        Point coincidence tolerance.
    radius_tol : float
        Largest allowed difference between the start and end radii.
    sink : DiagnosticSink, optional
        Receives a diagnostic for any failure.

    Returns
    -------
    Arc or Circle
    """
    c = point(center)
    s = point(start)
    e = point(end)

    if not isplanar(c, s, e):
        raise error_non_planar("arc", sink)

    if pointmatches(c, s, tol) or pointmatches(c, e, tol):
        raise error_degenerate("arc", sink)

    radius = dist(s, c)

    if pointmatches(s, e, tol):
        return Circle(c, radius)

    r2 = dist(e, c)
    if abs(r2 - radius) > radius_tol:
        raise error_radius_mismatch(radius, r2, radius_tol, sink)

    sang = angleXY(s, c)
    eang = angleXY(e, c)

    # angles are always stored in CCW order
    if clockwise:
        sang, eang = eang, sang

    eang = unwrap_after(eang, sang)

    return Arc(c, radius, s, e, sang, eang, bool(clockwise))


def make_circle(center, radius, *, tol=COINCIDENT_TOL, sink=None) -> Circle:
    """Make a full circle of ``radius`` about ``center``."""
    c = point(center)
    if not isplanar(c):
        raise error_non_planar("circle", sink)
    if radius <= tol:
        raise error_degenerate("circle", sink)
    return Circle(c, float(radius))


## queries
## -------

def length(seg: Segment) -> float:
    """Length of the segment."""
    seg = require_segment(seg)
    if isline(seg):
        return dist(seg.start, seg.end)
    return seg.radius * (seg.end_angle - seg.start_angle)


def sample(seg: Segment, u: float) -> Point:
    """Return the point at parameter ``u`` in ``[0, 1]``.

    Lines are sampled from ``start`` to ``end``; arcs and circles along
    their CCW parameterization, so ``u=0`` is always ``seg.start``.
    """
    seg = require_segment(seg)
    if isline(seg):
        return lerp(seg.start, seg.end, u)
    ang = seg.start_angle + u * (seg.end_angle - seg.start_angle)
    return polarXY(seg.center, seg.radius, ang)


def reverse(seg: Segment) -> Segment:
    """Return the same geometry traced the opposite way."""
    seg = require_segment(seg)
    if isline(seg):
        return Line(seg.end, seg.start)
    if iscircle(seg):
        return seg
    return Arc(seg.center, seg.radius, seg.trace_end, seg.trace_start,
               seg.start_angle, seg.end_angle, not seg.clockwise)


def on_segment(seg: Segment, p, tol=RADIUS_TOL) -> bool:
    """True if point ``p`` lies on ``seg`` within ``tol``."""
    seg = require_segment(seg)
    p = point(p)
    if isline(seg):
        d = sub(seg.end, seg.start)
        t = dot(sub(p, seg.start), d) / dot(d, d)
        if t < 0.0 or t > 1.0:
            return (dist(p, seg.start) <= tol or dist(p, seg.end) <= tol)
        return dist(p, lerp(seg.start, seg.end, t)) <= tol
    if abs(dist(p, seg.center) - seg.radius) > tol:
        return False
    if iscircle(seg):
        return True
    return angle_in_range(angleXY(p, seg.center), seg.start_angle, seg.end_angle,
                          tol / seg.radius)


## splitting
## ---------

def split(seg: Segment, points: Sequence, *, tol=RADIUS_TOL, sink=None) -> List[Segment]:
    """Subdivide ``seg`` at one or two points lying on it.

    The pieces are returned in trace order: a line from ``start`` to
    ``end``, an arc from ``trace_start`` to ``trace_end`` (each piece
    keeps the arc's ``clockwise`` flag).  A circle split at two points
    becomes two CCW arcs; split at one point it is returned whole.
    Points within ``tol`` of an existing endpoint, or of each other, do
    not produce a piece.

    Raises ``DegenerateGeometryError`` if ``points`` does not hold one or
    two points, or a point is not on the segment.
    """
    seg = require_segment(seg, sink=sink)
    pts = [point(p) for p in points]
    if len(pts) < 1 or len(pts) > 2:
        raise error_degenerate("split: expected 1 or 2 split points, got {}".format(len(pts)), sink)
    for p in pts:
        if not on_segment(seg, p, tol):
            raise error_degenerate("split: point ({:g}, {:g}) is not on the segment".format(p.x, p.y),
                                   sink)

    if isline(seg):
        return _split_line(seg, pts, tol)
    if iscircle(seg):
        return _split_circle(seg, pts, tol)
    return _split_arc(seg, pts, tol)


def _split_line(seg, pts, tol):
    d = sub(seg.end, seg.start)
    dd = dot(d, d)
    params = sorted(dot(sub(p, seg.start), d) / dd for p in pts)
    chain = [seg.start]
    for t in params:
        q = lerp(seg.start, seg.end, t)
        if dist(q, chain[-1]) > tol and dist(q, seg.end) > tol:
            chain.append(q)
    chain.append(seg.end)
    return [Line(a, b) for a, b in zip(chain, chain[1:])]


def _split_circle(seg, pts, tol):
    angles = sorted(unwrap_after(angleXY(p, seg.center), 0.0) for p in pts)
    if len(angles) < 2 or seg.radius * (angles[1] - angles[0]) <= tol:
        return [seg]
    q0 = polarXY(seg.center, seg.radius, angles[0])
    q1 = polarXY(seg.center, seg.radius, angles[1])
    return [make_arc(seg.center, q0, q1), make_arc(seg.center, q1, q0)]


def _split_arc(seg, pts, tol):
    r = seg.radius
    angles = sorted(unwrap_after(angleXY(p, seg.center), seg.start_angle) for p in pts)
    chain = [seg.start_angle]
    for ang in angles:
        if r * (ang - chain[-1]) > tol and r * (seg.end_angle - ang) > tol:
            chain.append(ang)
    chain.append(seg.end_angle)
    if len(chain) == 2:
        return [seg]

    # snap the interior split points onto the circle; keep the endpoints
    ccw = [seg.start] + [polarXY(seg.center, r, a) for a in chain[1:-1]] + [seg.end]
    pieces = []
    for i in range(len(ccw) - 1):
        sang, eang = chain[i], chain[i + 1]
        # keep start_angle in the atan2 range
        while sang > pi:
            sang -= pi2
            eang -= pi2
        pieces.append(Arc(seg.center, r, ccw[i], ccw[i + 1], sang, eang, False))
    if seg.clockwise:
        pieces = [reverse(p) for p in reversed(pieces)]
    return pieces


__all__ = [
    'SegmentKind',
    'Line',
    'Arc',
    'Circle',
    'Segment',
    'SEGMENT_TYPES',
    'issegment',
    'isline',
    'isarc',
    'iscircle',
    'require_segment',
    'make_line',
    'make_arc',
    'make_circle',
    'length',
    'sample',
    'reverse',
    'on_segment',
    'split',
]
