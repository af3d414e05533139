# hexmorph/graphics/settings.py
from dataclasses import dataclass
from typing import Tuple

from hexmorph.grid.coordinates import fit_size
from hexmorph.meshing.settings import MeshSettings

Color = Tuple[float, float, float]


@dataclass(slots=True)
class DrawSettings:
    """
    Per-frame draw state, changed live by the input layer.
    """

    a: float = 0.1
    b: float = 0.6
    # Second, mirrored draw of the whole grid. (0, 0) overlaps the first.
    offset: Tuple[float, float] = (0.0, 0.0)

    draw_grid: bool = True
    draw_triangles: bool = True
    draw_lines: bool = True

    grid_color: Color = (0.3, 0.3, 0.3)
    line_color: Color = (1.0, 1.0, 1.0)
    fill_color: Color = (1.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class ViewerSettings:
    """
    Window and grid configuration for the interactive viewer.
    """

    width: int = 800
    height: int = 800
    title: str = "hexmorph"

    rows: int = 5
    columns: int = 5
    index_width: int = 32
    include_triangles: bool = True

    @property
    def size(self) -> float:
        return fit_size(self.columns)

    @property
    def mesh_settings(self) -> MeshSettings:
        return MeshSettings(
            include_triangles=self.include_triangles,
            index_width=self.index_width,
        )
