"""Tests for DXF output of outlines."""

import ezdxf
import pytest

from segkit.dxf import OUTLINE_LAYER, add_segments, new_document, write_dxf
from segkit.errors import EmptySegmentError
from segkit.segment import make_arc, make_circle, make_line


def _outline():
    return [
        make_line((0, 0), (10, 0)),
        make_arc((10, 5), (10, 0), (10, 10)),
        make_circle((5, 5), 2),
    ]


def test_add_segments_entity_types():
    doc = new_document()
    msp = doc.modelspace()
    entities = add_segments(msp, _outline())
    assert [e.dxftype() for e in entities] == ['LINE', 'ARC', 'CIRCLE']
    assert all(e.dxf.layer == OUTLINE_LAYER for e in entities)


def test_arc_angles_in_degrees():
    doc = new_document()
    arc, = add_segments(doc.modelspace(), [make_arc((0, 0), (5, 0), (0, 5), clockwise=True)])
    # clockwise from (5,0) to (0,5) is the CCW sweep from 90 to 360 degrees
    assert abs(arc.dxf.start_angle - 90.0) < 1e-9
    assert abs(arc.dxf.end_angle % 360.0) < 1e-9
    assert abs(arc.dxf.radius - 5.0) < 1e-9


def test_write_and_read_back(tmp_path):
    path = tmp_path / 'outline.dxf'
    write_dxf(_outline(), path)
    assert path.exists()
    doc = ezdxf.readfile(str(path))
    msp = doc.modelspace()
    assert len(msp.query('LINE')) == 1
    assert len(msp.query('ARC')) == 1
    circle, = msp.query('CIRCLE')
    assert abs(circle.dxf.radius - 2.0) < 1e-9


def test_custom_layer(tmp_path):
    doc = write_dxf(_outline(), tmp_path / 'layer.dxf', layer='CUT')
    assert 'CUT' in doc.layers
    assert all(e.dxf.layer == 'CUT' for e in doc.modelspace())


def test_not_a_segment():
    doc = new_document()
    with pytest.raises(EmptySegmentError):
        add_segments(doc.modelspace(), [None])
