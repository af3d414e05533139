# hexmorph/morph.py
"""
CPU reference of the per-vertex morph applied by the vertex shaders.

    multiplier = 0 for CORNER, b for INTERNAL, a for MID
    p = position + offset
    displaced = p + multiplier * (attractor + offset - p)

The shaders in hexmorph/graphics/shaders/default must follow the same rule.
"""
from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np

from hexmorph.meshing.kinds import Kind
from hexmorph.meshing.types import POSITION_DTYPE, Mesh
from hexmorph.types import Point, Scalar

Offset = Tuple[Scalar, Scalar]


def multiplier(kind: Kind | int, a: Scalar, b: Scalar) -> Scalar:
    kind = Kind(kind)
    if kind == Kind.CORNER:
        return 0.0
    if kind == Kind.INTERNAL:
        return b
    return a


def morph_point(
    point: Point,
    attractor: Point,
    kind: Kind | int,
    a: Scalar,
    b: Scalar,
    offset: Offset = (0.0, 0.0),
) -> Point:
    m = multiplier(kind, a, b)
    p = point.translated(*offset)
    v = attractor.translated(*offset) - p
    return p + v * m


def multipliers(kinds: np.ndarray, a: Scalar, b: Scalar) -> np.ndarray:
    """Per-vertex multiplier for a whole kind buffer."""
    return np.where(
        kinds == Kind.CORNER,
        np.float32(0.0),
        np.where(kinds == Kind.INTERNAL, np.float32(b), np.float32(a)),
    ).astype(POSITION_DTYPE)


VertexArrays = Tuple[np.ndarray, np.ndarray, np.ndarray]
MorphSource = Union[Mesh, Sequence[np.ndarray]]


def vertex_arrays(source: MorphSource) -> VertexArrays:
    """
    (points, attractors, kinds) of a mesh in any of its public shapes.

    Accepts a `Mesh`, a (points, attractors, kinds) triple, or the
    (points, lines, triangles, attractors, kinds) tuple returned by `mesh()`.
    """
    if isinstance(source, Mesh):
        return source.points, source.attractors, source.kinds

    arrays = tuple(source)
    if len(arrays) == 3:
        points, attractors, kinds = arrays
    elif len(arrays) == 5:
        points, _, _, attractors, kinds = arrays
    else:
        raise TypeError(
            "expected a Mesh, (points, attractors, kinds) or the mesh() tuple, "
            f"got {len(arrays)} arrays"
        )

    points = np.asarray(points, dtype=POSITION_DTYPE).reshape(-1, 2)
    attractors = np.asarray(attractors, dtype=POSITION_DTYPE).reshape(-1, 2)
    kinds = np.asarray(kinds)
    if not len(points) == len(attractors) == len(kinds):
        raise ValueError(
            f"vertex arrays disagree: {len(points)} points, "
            f"{len(attractors)} attractors, {len(kinds)} kinds"
        )
    return points, attractors, kinds


def morph_positions(
    source: MorphSource,
    a: Scalar,
    b: Scalar,
    offset: Offset = (0.0, 0.0),
) -> np.ndarray:
    """Displaced (N, 2) float32 positions for every vertex of `source`."""
    points, attractors, kinds = vertex_arrays(source)
    shift = np.asarray(offset, dtype=POSITION_DTYPE)
    p = points + shift
    v = attractors + shift - p
    m = multipliers(kinds, a, b)[:, np.newaxis]
    return p + m * v
