# hexmorph/meshing/assembler.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import numpy as np

from hexmorph.grid.coordinates import center, coordinates
from hexmorph.grid.hexagon import CORNER_COUNT, MIDPOINT_COUNT, Hexagon
from hexmorph.meshing.kinds import Kind
from hexmorph.meshing.settings import MeshSettings
from hexmorph.meshing.types import KIND_DTYPE, POSITION_DTYPE, Mesh, MeshBuffers
from hexmorph.types import Point, Scalar

logger = logging.getLogger(__name__)

# center + internal corners + midpoints + boundary corners
VERTICES_PER_HEXAGON = 1 + CORNER_COUNT + MIDPOINT_COUNT + CORNER_COUNT


class IndexOverflowError(ValueError):
    """The grid has more vertices than the index type can address."""


class _VertexArena:
    """Growing parallel vertex buffers addressed by global index."""

    def __init__(self) -> None:
        self.points: List[float] = []
        self.attractors: List[float] = []
        self.kinds: List[int] = []

    def __len__(self) -> int:
        return len(self.kinds)

    def extend(
        self, points: Iterable[Point], attractors: Iterable[Point], kind: Kind
    ) -> int:
        """Append a block of vertices and return the index of its first one."""
        start = len(self)
        for p, attractor in zip(points, attractors, strict=True):
            self.points.extend((p.x, p.y))
            self.attractors.extend((attractor.x, attractor.y))
            self.kinds.append(int(kind))

        assert len(self.points) == 2 * len(self.kinds)
        assert len(self.attractors) == 2 * len(self.kinds)
        return start


class MeshAssembler:
    """
    Builds the hex-grid mesh one hexagon at a time.

    Every hexagon contributes its own block of 25 vertices; nothing is
    shared between neighbours, so each copy of a corner can carry its
    own kind and attractor.
    """

    def __init__(self, settings: Optional[MeshSettings] = None):
        self.settings = settings or MeshSettings()

    def assemble(self, rows: int, columns: int, size: Scalar) -> Mesh:
        if rows < 0 or columns < 0:
            raise ValueError(
                f"rows and columns must be non-negative, got {rows}x{columns}"
            )
        self._check_capacity(rows, columns)

        arena = _VertexArena()
        lines: List[int] = []
        triangles: List[int] = []

        offset = self.settings.center_offset
        for coord in coordinates(rows, columns):
            hexagon = Hexagon.build(center(coord, size), size)
            hexagon = hexagon.translated(offset.x, offset.y)
            self._add_hexagon(hexagon, arena, lines, triangles)

        index_dtype = self.settings.index_dtype
        mesh = Mesh(
            points=np.array(arena.points, dtype=POSITION_DTYPE).reshape(-1, 2),
            attractors=np.array(arena.attractors, dtype=POSITION_DTYPE).reshape(
                -1, 2
            ),
            kinds=np.array(arena.kinds, dtype=KIND_DTYPE),
            lines=np.array(lines, dtype=index_dtype),
            triangles=np.array(triangles, dtype=index_dtype),
        )

        logger.debug(
            "Assembled %dx%d hex mesh: %d vertices, %d lines, %d triangles",
            rows,
            columns,
            mesh.vertex_count,
            mesh.line_count,
            mesh.triangle_count,
        )
        return mesh

    def _check_capacity(self, rows: int, columns: int) -> None:
        vertex_count = rows * columns * VERTICES_PER_HEXAGON
        limit = self.settings.max_vertex_count
        if vertex_count > limit:
            raise IndexOverflowError(
                f"A {rows}x{columns} grid needs {vertex_count} vertices but "
                f"{self.settings.index_width}-bit indices address at most {limit}"
            )

    def _add_hexagon(
        self,
        hexagon: Hexagon,
        arena: _VertexArena,
        lines: List[int],
        triangles: List[int],
    ) -> None:
        corners = hexagon.corners

        # The center shows up in no line or triangle, but it keeps the
        # per-hexagon block layout fixed.
        arena.extend([hexagon.center], [hexagon.center], Kind.INTERNAL)

        internals_idx = arena.extend(
            corners, [hexagon.center] * CORNER_COUNT, Kind.INTERNAL
        )

        mid_attractors = []
        for i in range(CORNER_COUNT):
            mid_attractors.append(corners[i])
            mid_attractors.append(corners[(i + 1) % CORNER_COUNT])
        midpoints_idx = arena.extend(hexagon.midpoints, mid_attractors, Kind.MID)

        # Attractor ignored for fixed corners.
        corners_idx = arena.extend(
            corners, [hexagon.center] * CORNER_COUNT, Kind.CORNER
        )

        for i in range(CORNER_COUNT):
            internal = internals_idx + i
            next_internal = internals_idx + (i + 1) % CORNER_COUNT
            first_mid = midpoints_idx + (2 * i + 1) % MIDPOINT_COUNT
            second_mid = midpoints_idx + 2 * i

            # Internal to first midpoint.
            lines.extend((internal, first_mid))
            # Other internal to second midpoint.
            lines.extend((next_internal, second_mid))

            if self.settings.include_triangles:
                triangles.extend((internal, first_mid, corners_idx + i))
                triangles.extend(
                    (
                        next_internal,
                        second_mid,
                        corners_idx + (i + 1) % CORNER_COUNT,
                    )
                )


def assemble(
    rows: int,
    columns: int,
    size: Scalar,
    settings: Optional[MeshSettings] = None,
) -> Mesh:
    return MeshAssembler(settings).assemble(rows, columns, size)


def mesh(
    rows: int,
    columns: int,
    size: Scalar,
    settings: Optional[MeshSettings] = None,
) -> MeshBuffers:
    """
    Generate the hex grid as (points, lines, triangles, attractors, kinds).

    Same arguments always produce byte-identical buffers.
    """
    return assemble(rows, columns, size, settings).as_tuple()
