# hexmorph/grid/__init__.py
from hexmorph.grid.coordinates import (
    CoordinateRange,
    center,
    coordinates,
    fit_size,
)
from hexmorph.grid.hexagon import (
    CORNER_COUNT,
    MIDPOINT_COUNT,
    Hexagon,
    build,
    flat_hex_corner,
)

__all__ = [
    "CoordinateRange",
    "center",
    "coordinates",
    "fit_size",
    "Hexagon",
    "build",
    "flat_hex_corner",
    "CORNER_COUNT",
    "MIDPOINT_COUNT",
]
