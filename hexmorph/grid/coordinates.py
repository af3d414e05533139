# hexmorph/grid/coordinates.py
from typing import Iterator

from hexmorph.types import GridCoordinate, Point, Scalar


def center(coord: GridCoordinate, size: Scalar) -> Point:
    """Center of a flat-top hexagon in the even-column-offset layout."""
    return coord.center(size)


class CoordinateRange:
    """
    Every cell of a rows x columns grid, column-major.

    `rows` drives the outer loop and feeds the column term of the layout,
    `columns` drives the inner loop and feeds the row term. Iterating twice
    yields the same cells in the same order.
    """

    def __init__(self, rows: int, columns: int):
        self.rows = rows
        self.columns = columns

    def __iter__(self) -> Iterator[GridCoordinate]:
        for column in range(self.rows):
            for row in range(self.columns):
                yield GridCoordinate(column=column, row=row)

    def __len__(self) -> int:
        return max(self.rows, 0) * max(self.columns, 0)

    def __repr__(self) -> str:
        return f"CoordinateRange(rows={self.rows}, columns={self.columns})"


def coordinates(rows: int, columns: int) -> CoordinateRange:
    return CoordinateRange(rows, columns)


def fit_size(columns: int) -> Scalar:
    """Edge size at which `columns` hexagons span the [-1, 1] device range."""
    if columns <= 1:
        return 1.0
    return (1.0 - -1.0) / ((columns - 1) * 1.5)
