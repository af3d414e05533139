# hexmorph/export.py
"""
Pointer-based access to the current mesh, for hosts that cannot take
numpy arrays by value (e.g. a page reading buffers out of shared memory).

The exporter keeps exactly one mesh. Every create_mesh() call replaces it,
and views handed out for the previous mesh stop working.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

import numpy as np

from hexmorph.graphics.shaders.sources import load_shader_source
from hexmorph.meshing.assembler import MeshAssembler
from hexmorph.meshing.settings import MeshSettings
from hexmorph.meshing.types import Mesh
from hexmorph.types import Scalar

logger = logging.getLogger(__name__)

# Components per record for each exported buffer.
BUFFER_DIMS: Dict[str, int] = {
    "points": 2,
    "lines": 1,
    "triangles": 1,
    "attractors": 2,
    "kinds": 1,
}


class StaleBufferError(RuntimeError):
    """A buffer view outlived the mesh it was exported from."""


class ExportedBuffer:
    """Read-only view of one buffer of the exporter's current mesh."""

    def __init__(
        self,
        exporter: MeshExporter,
        generation: int,
        name: str,
        array: np.ndarray,
    ) -> None:
        self._exporter = exporter
        self._generation = generation
        self.name = name
        self._array = np.ascontiguousarray(array)

    def _checked(self) -> np.ndarray:
        if self._exporter.generation != self._generation:
            raise StaleBufferError(
                f"Buffer '{self.name}' belongs to mesh generation "
                f"{self._generation}; current is {self._exporter.generation}"
            )
        return self._array

    def length(self) -> int:
        """Number of records (points, not floats; indices, not lines)."""
        return len(self._checked())

    def dim(self) -> int:
        return BUFFER_DIMS[self.name]

    def element_size(self) -> int:
        """Bytes per record."""
        return self._checked().itemsize * self.dim()

    def nbytes(self) -> int:
        return self._checked().nbytes

    def pointer(self) -> int:
        """Address of the first byte of the contiguous buffer."""
        return self._checked().ctypes.data

    def memoryview(self) -> memoryview:
        return memoryview(self._checked())


class MeshExporter:
    """Single-slot mesh cache behind the buffer-export boundary."""

    def __init__(self, settings: Optional[MeshSettings] = None):
        self._assembler = MeshAssembler(settings or MeshSettings(index_width=16))
        self._mesh: Mesh | None = None
        self.generation = 0

    def create_mesh(self, rows: int, columns: int, size: Scalar) -> None:
        # Assemble first: a failed call leaves the current slot untouched.
        mesh = self._assembler.assemble(rows, columns, size)
        self._mesh = mesh
        self.generation += 1
        logger.debug(
            "Export slot now holds generation %d (%d vertices)",
            self.generation,
            mesh.vertex_count,
        )

    @property
    def mesh(self) -> Mesh:
        if self._mesh is None:
            raise RuntimeError("No mesh has been created yet")
        return self._mesh

    def buffer(self, name: str) -> ExportedBuffer:
        if name not in BUFFER_DIMS:
            raise KeyError(f"Unknown buffer '{name}'")
        return ExportedBuffer(self, self.generation, name, getattr(self.mesh, name))

    def points(self) -> ExportedBuffer:
        return self.buffer("points")

    def lines(self) -> ExportedBuffer:
        return self.buffer("lines")

    def triangles(self) -> ExportedBuffer:
        return self.buffer("triangles")

    def attractors(self) -> ExportedBuffer:
        return self.buffer("attractors")

    def kinds(self) -> ExportedBuffer:
        return self.buffer("kinds")

    def vertex_shader(self) -> str:
        return load_shader_source("morph_web.vert")

    def fragment_shader(self) -> str:
        return load_shader_source("solid_web.frag")
