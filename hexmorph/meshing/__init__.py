# hexmorph/meshing/__init__.py
from hexmorph.meshing.assembler import (
    VERTICES_PER_HEXAGON,
    IndexOverflowError,
    MeshAssembler,
    assemble,
    mesh,
)
from hexmorph.meshing.kinds import Kind
from hexmorph.meshing.settings import MeshSettings
from hexmorph.meshing.types import VERTEX_LAYOUT, Mesh, VertexLayout

__all__ = [
    "Kind",
    "Mesh",
    "MeshAssembler",
    "MeshSettings",
    "IndexOverflowError",
    "VertexLayout",
    "VERTEX_LAYOUT",
    "VERTICES_PER_HEXAGON",
    "assemble",
    "mesh",
]
