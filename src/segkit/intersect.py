## pairwise intersection of outline segments
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

"""pairwise intersection of **segkit** segments

``intersect(a, b)`` returns an ``Intersection``: a tuple of zero, one or
two points plus an ``IntersectionFlag``.  The flag and the points never
both carry information except for ``EDGE``:

==========  ===========================================================
flag        meaning
==========  ===========================================================
NONE        ordinary result; ``points`` holds 0-2 crossing points
IDENTICAL   the two segments are the same circle
TANGENT     single point of contact, not reported as a coordinate
ENCIRCLES   the second operand lies wholly inside the first's circle
INSIDE      the first operand lies wholly inside the second's circle
EDGE        the operands overlap along a run; ``points`` is its ends
==========  ===========================================================

The public function is value-safe: it checks that both operands are
segments.  The ``_check*`` solvers assume they are handed the kinds
they expect.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import sqrt
from typing import List, Sequence, Tuple

import mpmath as mpm

from segkit.geom import (
    COINCIDENT_TOL,
    RADIUS_TOL,
    Point,
    angleXY,
    angle_in_range,
    crossXY,
    dist,
    dot,
    lerp,
    mag,
    normalize_angle,
    pi2,
    pointmatches,
    polarXY,
    sub,
    unwrap_after,
)
from segkit.segment import (
    SegmentKind,
    isarc,
    iscircle,
    isline,
    require_segment,
)


class IntersectionFlag(Enum):
    NONE = "none"
    IDENTICAL = "identical"
    TANGENT = "tangent"
    ENCIRCLES = "encircles"
    INSIDE = "inside"
    EDGE = "edge"

    def mirrored(self) -> "IntersectionFlag":
        """The flag seen with the operands exchanged."""
        if self is IntersectionFlag.ENCIRCLES:
            return IntersectionFlag.INSIDE
        if self is IntersectionFlag.INSIDE:
            return IntersectionFlag.ENCIRCLES
        return self


@dataclass(frozen=True)
class Intersection:
    """Result of a pairwise intersection test."""

    points: Tuple[Point, ...] = ()
    flag: IntersectionFlag = IntersectionFlag.NONE

    def __bool__(self) -> bool:
        return len(self.points) > 0

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)


_MISS = Intersection()


def _flagged(flag):
    return Intersection((), flag)


## shared helpers
## --------------

def _order_about(center, pts):
    """order points by angle about ``center`` measured from angle 0"""
    return sorted(pts, key=lambda p: normalize_angle(angleXY(p, center)))


def _order_along(arc, pts):
    """order points by increasing angle along an arc's CCW sweep"""
    return sorted(pts, key=lambda p: unwrap_after(angleXY(p, arc.center), arc.start_angle))


def _on_arc(arc, p, tol):
    """angular membership test; circles contain every point"""
    if not isarc(arc):
        return True
    return angle_in_range(angleXY(p, arc.center), arc.start_angle, arc.end_angle,
                          tol / arc.radius)


## compute the two intersection points of circles (c1, r1) and (c2, r2)
## whose centers are ``d`` apart.  The radical line crosses the center
## axis at distance rd = (d^2 - r2^2 + r1^2)/2d from c1; the points lie
## on it at height h = sqrt(r1^2 - rd^2) either side of the axis.

def _circle_intercepts(c1, r1, c2, r2, d):
    rd = (d * d - r2 * r2 + r1 * r1) / (2.0 * d)
    ux = (c2[0] - c1[0]) / d
    uy = (c2[1] - c1[1]) / d

    x = c1[0] + rd * ux
    y = c1[1] + rd * uy

    h = sqrt(max(r1 * r1 - rd * rd, 0.0))

    p0 = Point(x - h * uy, y + h * ux, 0.0)
    p1 = Point(x + h * uy, y - h * ux, 0.0)

    return _order_about(c1, [p0, p1])


def _classify_circles(c1, r1, c2, r2, radius_tol):
    """Classify two circles.

    Returns ``(flag, d)`` where ``flag`` is ``None`` when the circles
    cross at two points, ``IntersectionFlag.NONE`` when they are too far
    apart, or one of the degenerate flags.
    """
    d = dist(c1, c2)

    if d > r1 + r2:
        return IntersectionFlag.NONE, d

    if pointmatches(c1, c2, radius_tol) and abs(r1 - r2) < radius_tol:
        return IntersectionFlag.IDENTICAL, d

    if abs(d - r1 - r2) < radius_tol:
        return IntersectionFlag.TANGENT, d

    if d <= abs(r1 - r2):
        if r1 > r2:
            return IntersectionFlag.ENCIRCLES, d
        return IntersectionFlag.INSIDE, d

    return None, d


## solvers
## -------

def _checkCircles(a, b, tol=COINCIDENT_TOL, radius_tol=RADIUS_TOL):
    """both segments are full circles"""
    flag, d = _classify_circles(a.center, a.radius, b.center, b.radius, radius_tol)
    if flag is IntersectionFlag.NONE:
        return _MISS
    if flag is not None:
        return _flagged(flag)
    return Intersection(tuple(_circle_intercepts(a.center, a.radius, b.center, b.radius, d)))


def _checkArcLine(a, b, tol=COINCIDENT_TOL, radius_tol=RADIUS_TOL):
    """one segment is an arc or circle, the other a line"""
    if isline(a):
        ln, arc = a, b
    else:
        arc, ln = a, b

    S = ln.start
    E = ln.end
    C = arc.center
    R = arc.radius

    ## the line is parameterized as P(t) = t*S + (1-t)*E, t in [0, 1].
    ## Substituting into |P - C|^2 = R^2 with V = S - E and Q = E - C:
    ##     t^2 (V.V) + 2t (V.Q) + Q.Q - R^2 = 0
    ## the coefficients are carried as mpmath floats.

    V = sub(S, E)
    Q = sub(E, C)
    mpV0 = mpm.mpf(V[0])
    mpV1 = mpm.mpf(V[1])
    mpQ0 = mpm.mpf(Q[0])
    mpQ1 = mpm.mpf(Q[1])
    mpR = mpm.mpf(R)

    A = mpV0 * mpV0 + mpV1 * mpV1
    B = 2 * (mpV0 * mpQ0 + mpV1 * mpQ1)
    Cc = mpQ0 * mpQ0 + mpQ1 * mpQ1 - mpR * mpR

    D = B * B - 4 * A * Cc

    if mpm.fabs(D) < radius_tol:
        # a single contact point, not reported as a coordinate
        return _flagged(IntersectionFlag.TANGENT)

    if D < 0:
        return _MISS

    t0 = float((-B + mpm.sqrt(D)) / (2 * A))
    t1 = float((-B - mpm.sqrt(D)) / (2 * A))

    pts = [lerp(E, S, t) for t in (t0, t1) if 0.0 <= t <= 1.0]

    if iscircle(arc):
        if len(pts) < 2:
            return Intersection(tuple(pts))
        return Intersection(tuple(_order_about(C, pts)))

    pts = [p for p in pts if _on_arc(arc, p, tol)]

    if len(pts) < 2:
        return Intersection(tuple(pts))

    return Intersection(tuple(_order_along(arc, pts)))


def _checkLines(a, b, tol=COINCIDENT_TOL, radius_tol=RADIUS_TOL):
    """both segments are lines"""
    da = sub(a.end, a.start)
    db = sub(b.end, b.start)
    la = mag(da)
    lb = mag(db)
    w = sub(b.start, a.start)

    denom = crossXY(da, db)

    if abs(denom) <= tol * la * lb:
        ## parallel.  colinear only if b lies on the infinite line of a
        if abs(crossXY(da, w)) / la > tol:
            return _MISS

        ta0 = dot(w, da) / (la * la)
        ta1 = dot(sub(b.end, a.start), da) / (la * la)
        lo = max(0.0, min(ta0, ta1))
        hi = min(1.0, max(ta0, ta1))

        if (hi - lo) * la < -tol:
            return _MISS

        if (hi - lo) * la <= tol:
            # the segments only touch end to end
            t = 0.5 * (lo + hi)
            return Intersection((lerp(a.start, a.end, t),))

        return Intersection((lerp(a.start, a.end, lo), lerp(a.start, a.end, hi)),
                            IntersectionFlag.EDGE)

    ## solve a.start + ta*da = b.start + tb*db by Cramer's rule
    ta = crossXY(w, db) / denom
    tb = crossXY(w, da) / denom

    if ta < -tol / la or ta > 1.0 + tol / la:
        return _MISS
    if tb < -tol / lb or tb > 1.0 + tol / lb:
        return _MISS

    ta = min(max(ta, 0.0), 1.0)
    return Intersection((lerp(a.start, a.end, ta),))


def _overlap_point(a, b, shift, ang, tol):
    """point at unwrapped angle ``ang`` on the circle shared by ``a`` and
    ``b``, preferring an existing arc endpoint when the angle lands on one"""
    for ref, p in ((a.start_angle, a.start), (a.end_angle, a.end),
                   (b.start_angle + shift, b.start), (b.end_angle + shift, b.end)):
        if abs(ref - ang) * a.radius <= tol:
            return p
    return polarXY(a.center, a.radius, ang)


def _arc_overlap(a, b, tol):
    """overlap of two arcs on the same circle"""
    r = a.radius
    a0, a1 = a.start_angle, a.end_angle
    k = unwrap_after(b.start_angle, a0) - b.start_angle

    runs = []
    for shift in (k - pi2, k):
        lo = max(a0, b.start_angle + shift)
        hi = min(a1, b.end_angle + shift)
        if (hi - lo) * r >= -tol:
            runs.append((lo, hi, shift))

    if not runs:
        return _MISS

    edges = [run for run in runs if (run[1] - run[0]) * r > tol]

    if not edges:
        # the arcs only touch end to end, at one or both ends
        pts = [_overlap_point(a, b, shift, 0.5 * (lo + hi), tol) for lo, hi, shift in runs]
        if len(pts) == 2 and dist(pts[0], pts[1]) <= tol:
            pts = pts[:1]
        return Intersection(tuple(_order_along(a, pts)))

    ## two disjoint runs happen when the arcs overlap at both ends;
    ## report the longer one
    lo, hi, shift = max(edges, key=lambda run: (run[1] - run[0],
                                                -normalize_angle(run[0])))
    return Intersection((_overlap_point(a, b, shift, lo, tol),
                         _overlap_point(a, b, shift, hi, tol)),
                        IntersectionFlag.EDGE)


def _checkArcs(a, b, tol=COINCIDENT_TOL, radius_tol=RADIUS_TOL):
    """both segments are arcs, or one is an arc and the other a circle"""
    c1, r1 = a.center, a.radius
    c2, r2 = b.center, b.radius

    if pointmatches(c1, c2, radius_tol) and abs(r1 - r2) < radius_tol:
        # same supporting circle: any intersection is along an edge
        if iscircle(a):
            return Intersection((b.start, b.end), IntersectionFlag.EDGE)
        if iscircle(b):
            return Intersection((a.start, a.end), IntersectionFlag.EDGE)
        return _arc_overlap(a, b, tol)

    flag, d = _classify_circles(c1, r1, c2, r2, radius_tol)

    if flag is IntersectionFlag.NONE:
        return _MISS

    if flag is not None:
        return _flagged(flag)

    pts = [p for p in _circle_intercepts(c1, r1, c2, r2, d)
           if _on_arc(a, p, tol) and _on_arc(b, p, tol)]

    if len(pts) < 2:
        return Intersection(tuple(pts))

    return Intersection(tuple(_order_along(a if isarc(a) else b, pts)))


_LINE = SegmentKind.LINE
_ARC = SegmentKind.ARC
_CIRCLE = SegmentKind.CIRCLE

_SOLVERS = {
    (_CIRCLE, _CIRCLE): _checkCircles,
    (_CIRCLE, _ARC): _checkArcs,
    (_ARC, _CIRCLE): _checkArcs,
    (_ARC, _ARC): _checkArcs,
    (_CIRCLE, _LINE): _checkArcLine,
    (_ARC, _LINE): _checkArcLine,
    (_LINE, _CIRCLE): _checkArcLine,
    (_LINE, _ARC): _checkArcLine,
    (_LINE, _LINE): _checkLines,
}


def intersect(a, b, *, tol=COINCIDENT_TOL, radius_tol=RADIUS_TOL, sink=None) -> Intersection:
    """Compute the intersection of two segments.

    Parameters
    ----------
    a, b : Segment
        The operands.  Flags are reported from the point of view of
        ``a``: ``ENCIRCLES`` means ``b`` is inside ``a``.
    tol : float
        Coincidence and parallelism tolerance.
    radius_tol : float
        Radius agreement tolerance, also used for tangency.
    sink : DiagnosticSink, optional
        Receives a diagnostic if an operand is not a segment.

    Returns
    -------
    Intersection

    Raises
    ------
    EmptySegmentError
        If either operand is not a segment.
    """
    require_segment(a, "first segment", sink)
    require_segment(b, "second segment", sink)
    return _SOLVERS[(a.kind, b.kind)](a, b, tol, radius_tol)


def intersect_all(segments: Sequence, **kwargs) -> List[Tuple[int, int, Intersection]]:
    """Intersect every pair of ``segments``.

    Returns ``(i, j, result)`` for each pair ``i < j`` whose result holds
    points or a flag other than ``NONE``.
    """
    found = []
    for i in range(len(segments)):
        for j in range(i + 1, len(segments)):
            res = intersect(segments[i], segments[j], **kwargs)
            if res.points or res.flag is not IntersectionFlag.NONE:
                found.append((i, j, res))
    return found


__all__ = [
    'IntersectionFlag',
    'Intersection',
    'intersect',
    'intersect_all',
]
