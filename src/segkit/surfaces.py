"""Trimmed surface patches for segkit.

Extruding a segment produces one of two bounded analytic patches:

- cylinder_patch: the part of a vertical cylinder between two angles
  and two heights, produced by arcs and circles
- plane_patch: a planar quadrilateral, produced by lines

Patches use the list form of analytic surfaces,
``[kind, origin, metadata_dict]``, so they can be evaluated at ``(u, v)``
parameters and tessellated on demand.  Every patch carries a unique
``id`` in its metadata.

Copyright (c) 2026 segkit contributors
MIT License
"""

import uuid
from math import cos, sin

import numpy as np

from segkit.geom import (
    COINCIDENT_TOL,
    EXTRUSION_TOL,
    Point,
    add,
    cross,
    dot,
    lerp,
    mag,
    point,
    scale3,
    sub,
)


def _new_id():
    return str(uuid.uuid4())


# -----------------------------------------------------------------------------
# Cylinder patch
# -----------------------------------------------------------------------------

def cylinder_patch(center, radius, *, u_range, v_range):
    """Create a trimmed cylinder patch with its axis along +Z.

    The patch is parameterized as:
    - u: angle about the axis, from ``u_range[0]`` to ``u_range[1]``
    - v: absolute z height, from ``v_range[0]`` (bottom) to ``v_range[1]`` (top)

    Parameters
    ----------
    center : point
        Center of the cylinder on the z=0 plane.
    radius : float
        Cylinder radius.
    u_range : tuple
        CCW angular range ``(start_angle, end_angle)``, radians.
    v_range : tuple
        Height range ``(z_bottom, z_top)``.

    Returns
    -------
    list
        ``['cylinder_patch', origin, metadata_dict]``
    """
    origin = point(center)
    if radius <= 0:
        raise ValueError("Radius must be positive")

    u0, u1 = float(u_range[0]), float(u_range[1])
    v0, v1 = float(v_range[0]), float(v_range[1])
    if u1 <= u0:
        raise ValueError("Angular range must be increasing")
    if v1 - v0 < EXTRUSION_TOL:
        raise ValueError("Height range must be increasing")

    meta = {
        'id': _new_id(),
        'axis': Point(0.0, 0.0, 1.0),
        'radius': float(radius),
        'ref_direction': Point(1.0, 0.0, 0.0),
        'u_range': (u0, u1),
        'v_range': (v0, v1),
    }
    return ['cylinder_patch', origin, meta]


def is_cylinder_patch(obj):
    """Return True if obj is a cylinder patch."""
    return (isinstance(obj, list) and len(obj) == 3 and obj[0] == 'cylinder_patch'
            and isinstance(obj[2], dict) and 'radius' in obj[2])


def evaluate_cylinder_patch(surf, u, v):
    """Point at angle ``u`` and height ``v`` on a cylinder patch."""
    if not is_cylinder_patch(surf):
        raise ValueError("Not a cylinder patch")
    c = surf[1]
    r = surf[2]['radius']
    return Point(c[0] + r * cos(u), c[1] + r * sin(u), v)


def cylinder_patch_normal(surf, u, v):
    """Return the outward unit normal at (u, v) on a cylinder patch."""
    if not is_cylinder_patch(surf):
        raise ValueError("Not a cylinder patch")
    return Point(cos(u), sin(u), 0.0)


# -----------------------------------------------------------------------------
# Plane patch
# -----------------------------------------------------------------------------

def _newell_normal(corners):
    n = Point(0.0, 0.0, 0.0)
    for i, p in enumerate(corners):
        n = add(n, cross(p, corners[(i + 1) % len(corners)]))
    return n


def plane_patch(corners, *, tol=COINCIDENT_TOL):
    """Create a planar quadrilateral patch from four corners.

    The patch is the bilinear map of the unit square onto the corners:
    ``(0, 0)`` is ``corners[0]``, ``(1, 0)`` is ``corners[1]``, ``(1, 1)``
    is ``corners[2]`` and ``(0, 1)`` is ``corners[3]``.  The normal
    follows the winding of the corners.

    Raises ValueError if the corners do not span an area or are not
    coplanar within ``tol``.
    """
    pts = [point(c) for c in corners]
    if len(pts) != 4:
        raise ValueError("A plane patch needs exactly 4 corners")

    n = _newell_normal(pts)
    nmag = mag(n)
    if nmag < tol:
        raise ValueError("Plane patch corners do not span an area")
    norm = scale3(n, 1.0 / nmag)

    for p in pts[1:]:
        if abs(dot(sub(p, pts[0]), norm)) > tol:
            raise ValueError("Plane patch corners are not coplanar")

    meta = {
        'id': _new_id(),
        'corners': tuple(pts),
        'normal': norm,
        'area': 0.5 * nmag,
        'u_range': (0.0, 1.0),
        'v_range': (0.0, 1.0),
    }
    return ['plane_patch', pts[0], meta]


def is_plane_patch(obj):
    """Return True if obj is a plane patch."""
    return (isinstance(obj, list) and len(obj) == 3 and obj[0] == 'plane_patch'
            and isinstance(obj[2], dict) and 'corners' in obj[2])


def evaluate_plane_patch(surf, u, v):
    if not is_plane_patch(surf):
        raise ValueError("Not a plane patch")
    c0, c1, c2, c3 = surf[2]['corners']
    return lerp(lerp(c0, c1, u), lerp(c3, c2, u), v)


def plane_patch_normal(surf, u, v):
    """For a plane, the normal is constant everywhere."""
    if not is_plane_patch(surf):
        raise ValueError("Not a plane patch")
    return surf[2]['normal']


# -----------------------------------------------------------------------------
# Generic patch operations
# -----------------------------------------------------------------------------

def is_patch(obj):
    """Return True if obj is any kind of patch."""
    return is_cylinder_patch(obj) or is_plane_patch(obj)


def patch_id(surf):
    if not is_patch(surf):
        raise ValueError("Not a patch")
    return surf[2]['id']


def evaluate_patch(surf, u, v):
    """Evaluate a point on a patch at parameters (u, v)."""
    if is_cylinder_patch(surf):
        return evaluate_cylinder_patch(surf, u, v)
    elif is_plane_patch(surf):
        return evaluate_plane_patch(surf, u, v)
    else:
        raise ValueError("Not a patch")


def patch_normal(surf, u, v):
    """Return the unit normal at (u, v) on a patch."""
    if is_cylinder_patch(surf):
        return cylinder_patch_normal(surf, u, v)
    elif is_plane_patch(surf):
        return plane_patch_normal(surf, u, v)
    else:
        raise ValueError("Not a patch")


def tessellate_patch(surf, *, u_divisions=None, v_divisions=1):
    """Convert a patch to a triangle mesh.

    Parameters
    ----------
    surf : patch
        A cylinder or plane patch.
    u_divisions : int, optional
        Number of divisions in u.  Defaults to one per 1/16 turn of a
        cylinder (at least one), and 1 for a plane.
    v_divisions : int
        Number of divisions in v.

    Returns
    -------
    tuple
        ``(vertices, normals, faces)``: float arrays of shape (n, 3) and
        an int array of shape (m, 3).  Faces wind counter-clockwise seen
        from the side the normals point to.
    """
    if not is_patch(surf):
        raise ValueError("Not a patch")

    meta = surf[2]
    u_min, u_max = meta['u_range']
    v_min, v_max = meta['v_range']

    if u_divisions is None:
        if is_cylinder_patch(surf):
            u_divisions = max(1, int(np.ceil((u_max - u_min) / (np.pi / 8.0))))
        else:
            u_divisions = 1
    if u_divisions < 1 or v_divisions < 1:
        raise ValueError("Divisions must be at least 1")

    us = np.linspace(u_min, u_max, u_divisions + 1)
    vs = np.linspace(v_min, v_max, v_divisions + 1)

    vertices = np.array([tuple(evaluate_patch(surf, u, v)) for v in vs for u in us],
                        dtype=np.float64)
    normals = np.array([tuple(patch_normal(surf, u, v)) for v in vs for u in us],
                       dtype=np.float64)

    # two triangles per grid quad
    j, i = np.meshgrid(np.arange(v_divisions), np.arange(u_divisions), indexing='ij')
    i00 = (j * (u_divisions + 1) + i).ravel()
    i10 = i00 + 1
    i01 = i00 + (u_divisions + 1)
    i11 = i01 + 1
    faces = np.concatenate([np.stack([i00, i10, i11], axis=1),
                            np.stack([i00, i11, i01], axis=1)]).astype(np.int64)

    return vertices, normals, faces


__all__ = [
    'cylinder_patch',
    'is_cylinder_patch',
    'evaluate_cylinder_patch',
    'cylinder_patch_normal',
    'plane_patch',
    'is_plane_patch',
    'evaluate_plane_patch',
    'plane_patch_normal',
    'is_patch',
    'patch_id',
    'evaluate_patch',
    'patch_normal',
    'tessellate_patch',
]
