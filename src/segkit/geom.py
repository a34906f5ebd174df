## numeric foundations for segkit: tolerances, points and angles
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

"""numeric foundations for **segkit**

====================
OVERVIEW
====================

The segkit.geom module provides the tolerances, the point type and
the small vector and angle helpers shared by the segment, intersection,
bounding box and extrusion code.

constants
=========

Tolerances are named constants so that they can be tuned, or passed
explicitly to the functions that use them:

* ``COINCIDENT_TOL`` (1E-8): two points are the same point, a line has
  zero length, two directions are parallel.
* ``RADIUS_TOL`` (1E-3): two radii agree, two circles are identical or
  tangent, a line/circle discriminant is zero.
* ``EXTRUSION_TOL`` (1E-6): smallest usable extrusion height.

``pi2`` is 2*pi.  Redefine these at your peril.

points
======

A ``Point`` is an immutable ``(x, y, z)`` triple of floats.  It unpacks
like a tuple, so ``x, y, z = p`` works.  Segment geometry always lies in
the z=0 plane; z only becomes meaningful when a segment is extruded.
The ``point()`` convenience function builds a point from numbers, a
sequence, or another point.

angles
======

Angles are in radians, right-handed (counter-clockwise positive) as
viewed from +Z.  ``atan2`` results lie in ``[-pi, pi]``; arcs store
their angular range unwrapped so that ``end >= start``, and membership
tests have to consider a candidate angle both as-is and shifted by
``2*pi``.

"""

from dataclasses import dataclass
from math import atan2, cos, pi, sin, sqrt

## constants
COINCIDENT_TOL = 1e-8
RADIUS_TOL = 1e-3
EXTRUSION_TOL = 1e-6
pi2 = 2.0 * pi


@dataclass(frozen=True)
class Point:
    """An immutable point in 3-space."""

    x: float
    y: float
    z: float = 0.0

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __getitem__(self, i):
        return (self.x, self.y, self.z)[i]

    def __len__(self):
        return 3

    def with_z(self, z):
        """return a copy of this point lifted to height ``z``"""
        return Point(self.x, self.y, float(z))


## utility function to determine if argument is a "real" python
## number, since booleans are considered ints

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def point(x=0.0, y=0.0, z=0.0):
    """Convenience function for making a ``Point`` from practically
    anything: ``point(1, 2)``, ``point(1, 2, 3)``, ``point((1, 2))``,
    or ``point(other_point)``.
    """
    if isinstance(x, Point):
        return x
    if isinstance(x, (tuple, list)):
        if len(x) < 2:
            raise ValueError('point needs at least two coordinates: {}'.format(x))
        zz = x[2] if len(x) > 2 else 0.0
        return Point(float(x[0]), float(x[1]), float(zz))
    if not (isgoodnum(x) and isgoodnum(y) and isgoodnum(z)):
        raise ValueError('bad point coordinates: {} {} {}'.format(x, y, z))
    return Point(float(x), float(y), float(z))


def ispoint(p):
    return isinstance(p, Point)


## scalar comparisons
## ------------------

def close(a, b, tol=COINCIDENT_TOL):
    """ are two scalars the same within ``tol``
    """
    return abs(a - b) < tol


def vclose(a, b, tol=COINCIDENT_TOL):
    """ are two points the same within ``tol`` (euclidean distance)
    """
    return dist(a, b) < tol


def pointmatches(a, b, tol=COINCIDENT_TOL):
    """Return ``True`` if ``a`` and ``b`` agree within ``tol`` on every
    axis.  This is the coincidence test used when validating segments.
    """
    return (abs(a[0] - b[0]) <= tol and abs(a[1] - b[1]) <= tol
            and abs(a[2] - b[2]) <= tol)


def isplanar(*points):
    """ true if every point lies exactly in the z=0 plane
    """
    return all(p[2] == 0 for p in points)


## vector operations, treating points as displacement vectors
## -----------------------------------------------------------

def add(a, b):
    """ `a + b`"""
    return Point(a[0] + b[0], a[1] + b[1], a[2] + b[2])


def sub(a, b):
    """ `a - b`"""
    return Point(a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale3(a, c):
    """ `a * c` for scalar ``c``"""
    return Point(a[0] * c, a[1] * c, a[2] * c)


def dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a, b):
    return Point(a[1] * b[2] - a[2] * b[1],
                 a[2] * b[0] - a[0] * b[2],
                 a[0] * b[1] - a[1] * b[0])


## z component of the cross product of two XY vectors
def crossXY(a, b):
    return a[0] * b[1] - a[1] * b[0]


def mag(a):
    return sqrt(dot(a, a))


def dist(a, b):
    """ compute distance between two points a & b"""
    return mag(sub(a, b))


def lerp(a, b, t):
    """ point at parameter ``t`` from ``a`` (t=0) to ``b`` (t=1)"""
    return Point(a[0] + t * (b[0] - a[0]),
                 a[1] + t * (b[1] - a[1]),
                 a[2] + t * (b[2] - a[2]))


## angle operations
## ----------------

def angleXY(p, center):
    """ angle of ``p`` about ``center`` as returned by ``atan2``"""
    return atan2(p[1] - center[1], p[0] - center[0])


def polarXY(center, radius, ang):
    """ point on the circle of ``radius`` about ``center`` at angle ``ang``"""
    return Point(center[0] + radius * cos(ang),
                 center[1] + radius * sin(ang),
                 center[2])


def normalize_angle(ang):
    """ map ``ang`` into ``[0, 2*pi)``"""
    a = ang % pi2
    if a >= pi2:
        a = 0.0
    return a


def unwrap_after(ang, start):
    """Add ``2*pi`` to ``ang`` until it is no less than ``start``."""
    while ang < start:
        ang += pi2
    return ang


def angle_in_range(ang, start, end, tol=0.0):
    """Determine if ``ang`` (an ``atan2`` result) falls in the unwrapped
    interval ``[start, end]``.  The angle is tested as-is and shifted by
    ``2*pi`` in either direction to account for wraparound.
    """
    for a in (ang, ang + pi2, ang - pi2):
        if start - tol <= a <= end + tol:
            return True
    return False


__all__ = [
    'COINCIDENT_TOL',
    'RADIUS_TOL',
    'EXTRUSION_TOL',
    'pi2',
    'Point',
    'isgoodnum',
    'point',
    'ispoint',
    'close',
    'vclose',
    'pointmatches',
    'isplanar',
    'add',
    'sub',
    'scale3',
    'dot',
    'cross',
    'crossXY',
    'mag',
    'dist',
    'lerp',
    'angleXY',
    'polarXY',
    'normalize_angle',
    'unwrap_after',
    'angle_in_range',
]
