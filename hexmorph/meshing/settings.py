# hexmorph/meshing/settings.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from hexmorph.types import Point

INDEX_DTYPES = {
    16: np.dtype(np.uint16),
    32: np.dtype(np.uint32),
}


@dataclass(frozen=True, slots=True)
class MeshSettings:
    """
    Options for a single mesh assembly.

    index_width picks the integer type of the line and triangle index
    buffers; 16-bit indices are what WebGL 1 hosts can draw with.
    center_offset is added to every vertex and attractor so the grid
    lands around the origin of normalized device space.
    """

    include_triangles: bool = True
    index_width: int = 32
    center_offset: Point = Point(-1.0, -1.0)

    def __post_init__(self) -> None:
        if self.index_width not in INDEX_DTYPES:
            raise ValueError(
                f"index_width must be one of {sorted(INDEX_DTYPES)}, "
                f"not {self.index_width}"
            )

    @property
    def index_dtype(self) -> np.dtype:
        return INDEX_DTYPES[self.index_width]

    @property
    def max_vertex_count(self) -> int:
        """Largest vertex buffer the index type can fully address."""
        return int(np.iinfo(self.index_dtype).max) + 1
