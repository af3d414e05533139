# hexmorph/grid/hexagon.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from hexmorph.types import Point, Scalar

CORNER_COUNT = 6
MIDPOINT_COUNT = 2 * CORNER_COUNT


def flat_hex_corner(center: Point, size: Scalar, i: int) -> Point:
    """Corner `i` of a flat-top hexagon; corner 0 lies due east of center."""
    angle_rad = math.radians(60.0 * i)
    return Point(
        center.x + size * math.cos(angle_rad),
        center.y + size * math.sin(angle_rad),
    )


@dataclass(frozen=True, slots=True)
class Hexagon:
    """
    One tile of the grid, built per cell and discarded once appended.

    Each edge midpoint appears twice (at 2i and 2i + 1) so that the two
    copies can be pulled toward different corners.
    """

    center: Point
    corners: Tuple[Point, ...]
    midpoints: Tuple[Point, ...]

    @staticmethod
    def build(center: Point, size: Scalar) -> Hexagon:
        corners = tuple(
            flat_hex_corner(center, size, i) for i in range(CORNER_COUNT)
        )

        midpoints = []
        for i in range(CORNER_COUNT):
            mid = corners[i].midpoint(corners[(i + 1) % CORNER_COUNT])
            midpoints.append(mid)
            midpoints.append(mid)

        return Hexagon(center=center, corners=corners, midpoints=tuple(midpoints))

    def translated(self, dx: Scalar, dy: Scalar) -> Hexagon:
        return Hexagon(
            center=self.center.translated(dx, dy),
            corners=tuple(p.translated(dx, dy) for p in self.corners),
            midpoints=tuple(p.translated(dx, dy) for p in self.midpoints),
        )


def build(center: Point, size: Scalar) -> Hexagon:
    return Hexagon.build(center, size)
