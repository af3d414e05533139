# hexmorph/types.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple, TypeAlias

Scalar: TypeAlias = float

Size = Tuple[int, int]  # width, height

SQRT_3 = math.sqrt(3.0)


@dataclass(frozen=True, slots=True)
class Point:
    x: Scalar
    y: Scalar

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def midpoint(self, other: Point) -> Point:
        return Point((self.x + other.x) / 2.0, (self.y + other.y) / 2.0)

    def translated(self, dx: Scalar, dy: Scalar) -> Point:
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True, slots=True)
class GridCoordinate:
    """A cell of the even-column-offset hex grid."""

    column: int
    row: int

    def center(self, size: Scalar) -> Point:
        """
        Center of the flat-top hexagon at this cell.

        Odd columns sit half a hexagon height lower than even ones.
        """
        x = size * 1.5 * self.column
        y = size * SQRT_3 * (self.row - 0.5 * (self.column & 1))
        return Point(x, y)
