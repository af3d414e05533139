# hexmorph/meshing/kinds.py
from enum import IntEnum


class Kind(IntEnum):
    """
    Per-vertex tag selecting which morph coefficient moves the vertex.

    The integer values are written into the kind buffer and compared
    against in the vertex shaders, so they must not change.
    """

    # A corner copy pulled by the center attractor into the tile. Uses `b`.
    INTERNAL = 0
    # An edge midpoint pulled toward one of its corners. Uses `a`.
    MID = 1
    # A fixed corner on the tile outline. Attractor ignored.
    CORNER = 2
