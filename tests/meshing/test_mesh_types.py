import numpy as np
import pytest

from hexmorph.meshing.settings import MeshSettings
from hexmorph.meshing.types import VERTEX_LAYOUT, Mesh


def _arrays(n=3, lines=(0, 1), triangles=(0, 1, 2), index_dtype=np.uint32):
    return dict(
        points=np.zeros((n, 2), dtype=np.float32),
        attractors=np.zeros((n, 2), dtype=np.float32),
        kinds=np.zeros(n, dtype=np.uint32),
        lines=np.array(lines, dtype=index_dtype),
        triangles=np.array(triangles, dtype=index_dtype),
    )


def test_mesh_buffers_are_read_only(unit_mesh):
    with pytest.raises(ValueError):
        unit_mesh.points[0, 0] = 5.0

    with pytest.raises(ValueError):
        unit_mesh.lines[0] = 3


def test_mesh_leaves_caller_arrays_writable():
    arrays = _arrays()
    mesh = Mesh(**arrays)

    arrays["points"][0, 0] = 7.0
    arrays["lines"][0] = 2

    assert arrays["points"].flags.writeable
    assert mesh.points[0, 0] == 0.0
    assert mesh.lines[0] == 0
    assert not mesh.points.flags.writeable


def test_mesh_rejects_mismatched_vertex_buffers():
    arrays = _arrays()
    arrays["kinds"] = np.zeros(2, dtype=np.uint32)

    with pytest.raises(ValueError, match="differ in length"):
        Mesh(**arrays)


def test_mesh_rejects_out_of_range_index():
    with pytest.raises(ValueError, match="out of range"):
        Mesh(**_arrays(lines=(0, 3)))


def test_mesh_rejects_partial_primitives():
    with pytest.raises(ValueError, match="whole lines"):
        Mesh(**_arrays(lines=(0, 1, 2)))


def test_empty_mesh():
    mesh = Mesh.empty(np.dtype(np.uint16))

    assert mesh.vertex_count == 0
    assert mesh.line_count == 0
    assert mesh.triangle_count == 0
    assert mesh.index_dtype == np.uint16


def test_translated_moves_points_and_attractors(unit_mesh):
    moved = unit_mesh.translated(1.0, 1.0)

    np.testing.assert_allclose(moved.points, unit_mesh.points + 1.0)
    np.testing.assert_allclose(moved.attractors, unit_mesh.attractors + 1.0)
    np.testing.assert_array_equal(moved.lines, unit_mesh.lines)
    assert tuple(moved.points[0]) == (0.0, 0.0)


def test_vertex_layout_matches_mesh_fields(unit_mesh):
    for layout in VERTEX_LAYOUT:
        data = getattr(unit_mesh, layout.buffer)
        assert data.itemsize * (data.size // len(data)) == layout.stride_bytes


def test_settings_reject_unknown_index_width():
    with pytest.raises(ValueError, match="index_width"):
        MeshSettings(index_width=8)


def test_settings_capacity():
    assert MeshSettings(index_width=16).max_vertex_count == 65536
    assert MeshSettings().max_vertex_count == 2**32
