"""Surface builders for segkit.

A builder is a short-lived object that collects the geometric
parameters of one patch and asks a model to instantiate it.

- CylinderBuilder: center and two CCW-ordered boundary points, plus a
  height range, for arcs and circles
- WallBuilder: four corner points of a vertical quadrilateral, for lines

``instantiate()`` returns the patch registered by the model, or ``None``
if the model could not build it.

Copyright (c) 2026 segkit contributors
MIT License
"""

from segkit.geom import COINCIDENT_TOL, angleXY, dist, pi2, point, pointmatches, unwrap_after


class CylinderBuilder:
    """Builds a trimmed cylinder patch about a vertical axis."""

    def __init__(self):
        self.center = None
        self.start = None
        self.end = None

    def set_params(self, center, start, end, *, tol=COINCIDENT_TOL):
        """Set the axis position and the boundary points.

        ``start`` and ``end`` bound the patch counter-clockwise about
        ``center``; coincident points give a full cylinder.  Only the x
        and y coordinates are used.
        """
        c = point(center)
        s = point(start)
        e = point(end)
        if pointmatches(c, s, tol) or pointmatches(c, e, tol):
            raise ValueError("Cylinder boundary point coincides with its center")
        self.center = c.with_z(0.0)
        self.start = s.with_z(0.0)
        self.end = e.with_z(0.0)

    @property
    def radius(self):
        return dist(self.center, self.start)

    @property
    def angles(self):
        """CCW angular range ``(start_angle, end_angle)`` of the patch"""
        sang = angleXY(self.start, self.center)
        if pointmatches(self.start, self.end):
            return sang, sang + pi2
        return sang, unwrap_after(angleXY(self.end, self.center), sang)

    def instantiate(self, model, z_top, z_bottom):
        if self.center is None:
            raise ValueError("CylinderBuilder.set_params() has not been called")
        sang, eang = self.angles
        try:
            return model.instantiate_cylinder_patch(
                self.center, self.radius, sang, eang,
                min(z_top, z_bottom), max(z_top, z_bottom))
        except ValueError:
            return None


class WallBuilder:
    """Builds a planar quadrilateral patch."""

    def __init__(self):
        self.corners = None

    def set_params(self, p0, p1, p2, p3):
        """Set the corners, in boundary order."""
        self.corners = (point(p0), point(p1), point(p2), point(p3))

    def instantiate(self, model):
        if self.corners is None:
            raise ValueError("WallBuilder.set_params() has not been called")
        try:
            return model.instantiate_plane_patch(self.corners)
        except ValueError:
            return None


__all__ = [
    'CylinderBuilder',
    'WallBuilder',
]
