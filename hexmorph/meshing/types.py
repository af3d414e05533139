# hexmorph/meshing/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

POSITION_DTYPE = np.dtype(np.float32)
KIND_DTYPE = np.dtype(np.uint32)


@dataclass(frozen=True)
class VertexLayout:
    """Describes one per-vertex buffer for VAO creation."""

    buffer: str  # Mesh field holding the data, e.g. "points"
    attributes: List[str]  # e.g. ["in_position"]
    format: str  # moderngl buffer format string e.g. "2f"
    stride_bytes: int  # e.g. 8


VERTEX_LAYOUT: Tuple[VertexLayout, ...] = (
    VertexLayout("points", ["in_position"], "2f", 8),
    VertexLayout("attractors", ["in_attractor"], "2f", 8),
    VertexLayout("kinds", ["in_kind"], "1u", 4),
)

MeshBuffers = Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray]


def _frozen(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class Mesh:
    """
    Parallel vertex buffers plus line and triangle index lists.

    points, attractors and kinds share one vertex index space; lines holds
    index pairs and triangles index triples into it. The mesh keeps
    read-only copies of the arrays it is given.
    """

    points: np.ndarray  # (N, 2) float32
    attractors: np.ndarray  # (N, 2) float32
    kinds: np.ndarray  # (N,) uint32
    lines: np.ndarray  # (2 * L,) uint16 | uint32
    triangles: np.ndarray  # (3 * T,) uint16 | uint32

    def __post_init__(self) -> None:
        n = len(self.points)
        if len(self.attractors) != n or len(self.kinds) != n:
            raise ValueError(
                "Vertex buffers differ in length: "
                f"points={n}, attractors={len(self.attractors)}, "
                f"kinds={len(self.kinds)}"
            )
        if self.lines.dtype != self.triangles.dtype:
            raise ValueError(
                f"Index buffers differ in type: {self.lines.dtype} vs "
                f"{self.triangles.dtype}"
            )
        if len(self.lines) % 2 or len(self.triangles) % 3:
            raise ValueError("Index buffers must hold whole lines and triangles")

        for indices in (self.lines, self.triangles):
            if indices.size and int(indices.max()) >= n:
                raise ValueError(
                    f"Index {int(indices.max())} out of range for {n} vertices"
                )

        for name in ("points", "attractors", "kinds", "lines", "triangles"):
            object.__setattr__(self, name, _frozen(np.array(getattr(self, name))))

    @staticmethod
    def empty(index_dtype: np.dtype = np.dtype(np.uint32)) -> Mesh:
        return Mesh(
            points=np.zeros((0, 2), dtype=POSITION_DTYPE),
            attractors=np.zeros((0, 2), dtype=POSITION_DTYPE),
            kinds=np.zeros(0, dtype=KIND_DTYPE),
            lines=np.zeros(0, dtype=index_dtype),
            triangles=np.zeros(0, dtype=index_dtype),
        )

    @property
    def vertex_count(self) -> int:
        return len(self.points)

    @property
    def line_count(self) -> int:
        return len(self.lines) // 2

    @property
    def triangle_count(self) -> int:
        return len(self.triangles) // 3

    @property
    def index_dtype(self) -> np.dtype:
        return self.lines.dtype

    def as_tuple(self) -> MeshBuffers:
        """Buffers in (points, lines, triangles, attractors, kinds) order."""
        return (self.points, self.lines, self.triangles, self.attractors, self.kinds)

    def translated(self, dx: float, dy: float) -> Mesh:
        """Copy of the mesh with every point and attractor shifted."""
        shift = np.array([dx, dy], dtype=POSITION_DTYPE)
        return Mesh(
            points=self.points + shift,
            attractors=self.attractors + shift,
            kinds=self.kinds.copy(),
            lines=self.lines.copy(),
            triangles=self.triangles.copy(),
        )
