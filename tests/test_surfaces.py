"""Tests for trimmed surface patches."""

import numpy as np
import pytest
from math import pi

from segkit.geom import point, vclose
from segkit.surfaces import (
    cylinder_patch, is_cylinder_patch, evaluate_cylinder_patch, cylinder_patch_normal,
    plane_patch, is_plane_patch, evaluate_plane_patch, plane_patch_normal,
    is_patch, patch_id, evaluate_patch, patch_normal, tessellate_patch,
)


class TestCylinderPatch:
    """Test cylinder patch operations."""

    def test_create(self):
        c = cylinder_patch([1, 2], 3.0, u_range=(0, pi), v_range=(0, 5))
        assert is_cylinder_patch(c)
        assert is_patch(c)
        assert c[0] == 'cylinder_patch'
        assert c[2]['radius'] == 3.0
        assert c[2]['u_range'] == (0.0, pi)

    def test_evaluation(self):
        c = cylinder_patch([1, 2], 3.0, u_range=(0, pi), v_range=(0, 5))
        pt = evaluate_cylinder_patch(c, pi / 2, 4.0)
        assert vclose(pt, point(1, 5, 4))

    def test_normal_outward(self):
        c = cylinder_patch([0, 0], 2.0, u_range=(0, pi), v_range=(0, 1))
        n = cylinder_patch_normal(c, 0.0, 0.5)
        assert abs(n[0] - 1.0) < 1e-10
        assert abs(n[2]) < 1e-10

    def test_invalid(self):
        with pytest.raises(ValueError):
            cylinder_patch([0, 0], 0.0, u_range=(0, pi), v_range=(0, 1))
        with pytest.raises(ValueError):
            cylinder_patch([0, 0], 1.0, u_range=(pi, 0), v_range=(0, 1))
        with pytest.raises(ValueError):
            cylinder_patch([0, 0], 1.0, u_range=(0, pi), v_range=(1, 1))

    def test_unique_ids(self):
        a = cylinder_patch([0, 0], 1.0, u_range=(0, pi), v_range=(0, 1))
        b = cylinder_patch([0, 0], 1.0, u_range=(0, pi), v_range=(0, 1))
        assert patch_id(a) != patch_id(b)


class TestPlanePatch:
    """Test plane patch operations."""

    CORNERS = [(0, 0, 1), (4, 0, 1), (4, 0, 0), (0, 0, 0)]

    def test_create(self):
        p = plane_patch(self.CORNERS)
        assert is_plane_patch(p)
        assert p[0] == 'plane_patch'
        assert abs(p[2]['area'] - 4.0) < 1e-10

    def test_evaluation(self):
        p = plane_patch(self.CORNERS)
        assert vclose(evaluate_plane_patch(p, 0, 0), point(0, 0, 1))
        assert vclose(evaluate_plane_patch(p, 1, 1), point(4, 0, 0))
        assert vclose(evaluate_plane_patch(p, 0.5, 0.5), point(2, 0, 0.5))

    def test_normal_follows_winding(self):
        p = plane_patch(self.CORNERS)
        n = plane_patch_normal(p, 0.2, 0.3)
        assert vclose(n, point(0, 1, 0))
        q = plane_patch(list(reversed(self.CORNERS)))
        assert vclose(plane_patch_normal(q, 0, 0), point(0, -1, 0))

    def test_invalid(self):
        with pytest.raises(ValueError):
            plane_patch([(0, 0, 0), (1, 0, 0), (2, 0, 0), (3, 0, 0)])
        with pytest.raises(ValueError):
            plane_patch([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 1)])
        with pytest.raises(ValueError):
            plane_patch([(0, 0, 0), (1, 0, 0), (1, 1, 0)])


class TestGenericPatch:
    """Test the generic dispatchers and tessellation."""

    def test_dispatch(self):
        c = cylinder_patch([0, 0], 1.0, u_range=(0, pi), v_range=(0, 1))
        p = plane_patch(TestPlanePatch.CORNERS)
        assert vclose(evaluate_patch(c, 0, 0), point(1, 0, 0))
        assert vclose(evaluate_patch(p, 1, 0), point(4, 0, 1))
        assert vclose(patch_normal(p, 0, 0), point(0, 1, 0))
        with pytest.raises(ValueError):
            evaluate_patch(['plane_surface', point(0, 0), {}], 0, 0)

    def test_tessellate_plane(self):
        verts, norms, faces = tessellate_patch(plane_patch(TestPlanePatch.CORNERS))
        assert verts.shape == (4, 3)
        assert norms.shape == (4, 3)
        assert faces.shape == (2, 3)

    def test_tessellate_cylinder(self):
        c = cylinder_patch([0, 0], 2.0, u_range=(0, 2 * pi), v_range=(-1, 1))
        verts, norms, faces = tessellate_patch(c)
        # one division per sixteenth of a turn
        assert verts.shape == (17 * 2, 3)
        assert faces.shape == (32, 3)
        radii = np.hypot(verts[:, 0], verts[:, 1])
        assert np.allclose(radii, 2.0)
        assert verts[:, 2].min() == -1.0 and verts[:, 2].max() == 1.0

    def test_tessellate_winding_matches_normals(self):
        c = cylinder_patch([0, 0], 1.0, u_range=(0, pi), v_range=(0, 1))
        verts, norms, faces = tessellate_patch(c, u_divisions=4, v_divisions=2)
        v0, v1, v2 = verts[faces[:, 0]], verts[faces[:, 1]], verts[faces[:, 2]]
        facet = np.cross(v1 - v0, v2 - v0)
        assert np.all(np.einsum('ij,ij->i', facet, norms[faces[:, 0]]) > 0)

    def test_tessellate_bad_divisions(self):
        c = cylinder_patch([0, 0], 1.0, u_range=(0, pi), v_range=(0, 1))
        with pytest.raises(ValueError):
            tessellate_patch(c, u_divisions=0)
