## vertical extrusion of outline segments into model surfaces
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

"""vertical extrusion of segments into trimmed surface patches

``build_vertical_surface()`` sweeps one segment along +Z between two
heights and registers the resulting patch in a model: arcs and circles
become cylinder patches, lines become planar walls.
``build_vertical_walls()`` does the same for a whole outline.
"""

from __future__ import annotations

from typing import Iterable, List

from segkit.builders import CylinderBuilder, WallBuilder
from segkit.errors import (
    SegmentError,
    error_degenerate_extrusion,
    error_null_model,
    error_surface_construction,
)
from segkit.geom import EXTRUSION_TOL
from segkit.model import BaseModel
from segkit.segment import isline, require_segment


def build_vertical_surface(model, segment, z_top, z_bottom, *,
                           tol=EXTRUSION_TOL, sink=None):
    """Extrude ``segment`` between ``z_bottom`` and ``z_top`` into ``model``.

    Returns the patch the model registered.  Raises
    ``DegenerateExtrusionError`` if the heights are within ``tol`` of
    each other (no builder is created in that case),
    ``EmptySegmentError`` if ``segment`` is not a segment,
    ``NullModelError`` if ``model`` is not a ``BaseModel``, and
    ``SurfaceConstructionError`` if the model cannot build the patch,
    in which case the model is left unmodified.
    """
    if abs(z_top - z_bottom) < tol:
        raise error_degenerate_extrusion(z_top, z_bottom, sink)

    seg = require_segment(segment, sink=sink)

    if not isinstance(model, BaseModel):
        raise error_null_model(sink)

    if isline(seg):
        builder = WallBuilder()
        builder.set_params(seg.start.with_z(z_top), seg.end.with_z(z_top),
                           seg.end.with_z(z_bottom), seg.start.with_z(z_bottom))
        surf = builder.instantiate(model)
        what = "wall"
    else:
        # start/end are already in CCW order for clockwise arcs
        builder = CylinderBuilder()
        try:
            builder.set_params(seg.center, seg.start, seg.end)
        except ValueError:
            raise error_surface_construction("cylinder", sink)
        surf = builder.instantiate(model, z_top, z_bottom)
        what = "cylinder"

    if surf is None:
        raise error_surface_construction(what, sink)
    return surf


def build_vertical_walls(model, segments: Iterable, z_top, z_bottom, *,
                         tol=EXTRUSION_TOL, sink=None) -> List:
    """Extrude every segment of an outline.

    All or nothing: if any segment fails, patches already registered by
    this call are rolled back (the model must support ``checkpoint()`` and
    ``rollback()``) and the error is re-raised.
    """
    if not isinstance(model, BaseModel):
        raise error_null_model(sink)

    mark = model.checkpoint()
    surfaces = []
    try:
        for seg in segments:
            surfaces.append(build_vertical_surface(model, seg, z_top, z_bottom,
                                                   tol=tol, sink=sink))
    except SegmentError:
        model.rollback(mark)
        raise
    return surfaces


__all__ = [
    'build_vertical_surface',
    'build_vertical_walls',
]
