# hexmorph/graphics/__init__.py
from hexmorph.graphics.gpu_mesh import GPUHexMesh
from hexmorph.graphics.renderer import HexRenderer
from hexmorph.graphics.settings import DrawSettings, ViewerSettings

__all__ = [
    "GPUHexMesh",
    "HexRenderer",
    "DrawSettings",
    "ViewerSettings",
]
