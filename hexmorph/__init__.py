# hexmorph/__init__.py
from hexmorph.export import ExportedBuffer, MeshExporter, StaleBufferError
from hexmorph.grid import Hexagon, coordinates, fit_size
from hexmorph.meshing import (
    VERTICES_PER_HEXAGON,
    IndexOverflowError,
    Kind,
    Mesh,
    MeshAssembler,
    MeshSettings,
    assemble,
    mesh,
)
from hexmorph.morph import morph_positions, multiplier
from hexmorph.types import GridCoordinate, Point

__all__ = [
    "ExportedBuffer",
    "GridCoordinate",
    "Hexagon",
    "IndexOverflowError",
    "Kind",
    "Mesh",
    "MeshAssembler",
    "MeshExporter",
    "MeshSettings",
    "Point",
    "StaleBufferError",
    "VERTICES_PER_HEXAGON",
    "assemble",
    "coordinates",
    "fit_size",
    "mesh",
    "morph_positions",
    "multiplier",
]
