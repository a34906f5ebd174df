## DXF output of segkit outlines using the ezdxf package
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

"""write outlines as DXF LINE, ARC and CIRCLE entities"""

from math import degrees

import ezdxf

from segkit.segment import isline, iscircle, require_segment

OUTLINE_LAYER = 'OUTLINE'


def new_document():
    """Return a new metric R2010 document with the outline layer defined."""
    # setup=False avoids default blocks some CAD programs cannot read
    doc = ezdxf.new(dxfversion='R2010', setup=False)
    doc.header['$MEASUREMENT'] = 1 # metric
    doc.header['$INSUNITS'] = 4 # millimeters
    doc.layers.new(OUTLINE_LAYER, dxfattribs={'color': 7}) #white
    return doc


def add_segment(msp, seg, *, layer=OUTLINE_LAYER):
    """Add one segment to a DXF layout, returning the new entity."""
    seg = require_segment(seg)
    attribs = {'layer': layer}
    if isline(seg):
        return msp.add_line((seg.start.x, seg.start.y), (seg.end.x, seg.end.y),
                            dxfattribs=attribs)
    c = (seg.center.x, seg.center.y)
    if iscircle(seg):
        return msp.add_circle(c, seg.radius, dxfattribs=attribs)
    ## DXF arcs always run counter-clockwise, in degrees
    return msp.add_arc(c, seg.radius,
                       degrees(seg.start_angle), degrees(seg.end_angle),
                       dxfattribs=attribs)


def add_segments(msp, segments, *, layer=OUTLINE_LAYER):
    """Add every segment to a DXF layout; return the list of entities."""
    return [add_segment(msp, seg, layer=layer) for seg in segments]


def write_dxf(segments, path, *, layer=OUTLINE_LAYER):
    """Write ``segments`` to a new DXF file at ``path``; return the document."""
    doc = new_document()
    if layer not in doc.layers:
        doc.layers.new(layer)
    add_segments(doc.modelspace(), segments, layer=layer)
    doc.saveas(str(path))
    return doc


__all__ = [
    'OUTLINE_LAYER',
    'new_document',
    'add_segment',
    'add_segments',
    'write_dxf',
]
