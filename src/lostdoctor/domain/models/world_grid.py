from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from lostdoctor.domain.models.cell import Cell


VIEWPORT_WIDTH = 10
VIEWPORT_HEIGHT = 4


class WorldGrid:
    """Mutable copy of the world map, addressed as ``[row][col]``.

    Coordinates used by rules are fixed at design time, so an out-of-range
    access is left to raise ``IndexError`` rather than being recovered from.
    """

    def __init__(self, rows: Sequence[Sequence[int]]) -> None:
        if not rows:
            raise ValueError("WorldGrid requires at least one row")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("WorldGrid rows must all have the same width")
        self._cells: list[list[int]] = [[int(value) for value in row] for row in rows]

    @property
    def height(self) -> int:
        return len(self._cells)

    @property
    def width(self) -> int:
        return len(self._cells[0])

    def get_cell(self, row: int, col: int) -> int:
        self._check(row, col)
        return self._cells[row][col]

    def set_cell(self, row: int, col: int, cell: int) -> None:
        self._check(row, col)
        self._cells[row][col] = int(cell)

    def rows(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self._cells)

    def _check(self, row: int, col: int) -> None:
        # Negative indices would silently wrap in Python lists.
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"cell ({row}, {col}) is outside the {self.height}x{self.width} world")


@dataclass
class Viewport:
    origin_x: int
    origin_y: int
    world_width: int
    world_height: int
    width: int = VIEWPORT_WIDTH
    height: int = VIEWPORT_HEIGHT

    def __post_init__(self) -> None:
        self.move_to(self.origin_x, self.origin_y)

    @property
    def max_x(self) -> int:
        return self.world_width - self.width

    @property
    def max_y(self) -> int:
        return self.world_height - self.height

    def move_to(self, origin_x: int, origin_y: int) -> None:
        self.origin_x = max(0, min(self.max_x, int(origin_x)))
        self.origin_y = max(0, min(self.max_y, int(origin_y)))

    def scroll(self, d_row: int, d_col: int) -> bool:
        """Shift the origin, clamped to the world. Returns whether it moved."""

        before = (self.origin_x, self.origin_y)
        self.move_to(self.origin_x + d_col, self.origin_y + d_row)
        return (self.origin_x, self.origin_y) != before

    def contains(self, x: int, y: int) -> bool:
        return (
            self.origin_x <= x < self.origin_x + self.width
            and self.origin_y <= y < self.origin_y + self.height
        )

    def visible_cells(self, grid: WorldGrid) -> Iterator[tuple[int, int, Cell | int]]:
        for tile_y in range(self.height):
            for tile_x in range(self.width):
                value = grid.get_cell(self.origin_y + tile_y, self.origin_x + tile_x)
                yield tile_x, tile_y, _as_cell(value)


def _as_cell(value: int) -> Cell | int:
    try:
        return Cell(value)
    except ValueError:
        return value
