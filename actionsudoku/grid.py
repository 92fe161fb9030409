"""Geometry of the 9x9 board and the level's solution."""

from __future__ import annotations

from collections.abc import Iterable

_SIZE = 9


def parse_solution(text: str) -> list[int]:
    """Every decimal digit in text, in order, as integers."""
    return [int(char) for char in text if "0" <= char <= "9"]


class Grid:
    """The board's placement on the screen and the digits that solve it."""

    def __init__(
        self, column: int, row: int, tile_height: float, solution: str | Iterable[int]
    ) -> None:
        self.column = int(column)
        self.row = int(row)
        self.tile_height = int(tile_height)
        if isinstance(solution, str):
            self.solution = parse_solution(solution)
        else:
            self.solution = list(solution)
        half = self.tile_height // 2
        self.left = self.column * self.tile_height - half
        self.right = self.left + self.tile_height * _SIZE
        self.top = self.row * self.tile_height - half
        self.bottom = self.top + self.tile_height * _SIZE

    def contains(self, x: float, y: float) -> bool:
        """True if (x, y) lies strictly inside the board."""
        return self.left < x < self.right and self.top < y < self.bottom

    def _cell(self, x: float, y: float) -> tuple[int, int]:
        x, y = int(x), int(y)
        if not self.contains(x, y):
            raise ValueError(f"({x}, {y}) is outside the grid")
        return (y - self.top) // self.tile_height, (x - self.left) // self.tile_height

    def cell_center(self, x: float, y: float) -> tuple[int, int]:
        """Centre of the cell holding (x, y)."""
        row, col = self._cell(x, y)
        half = self.tile_height // 2
        return (
            self.left + col * self.tile_height + half,
            self.top + row * self.tile_height + half,
        )

    def cell_index(self, x: float, y: float) -> int:
        """Row-major position in the solution of the cell holding (x, y)."""
        center_x, center_y = self.cell_center(x, y)
        origin_x = self.column * self.tile_height
        origin_y = self.row * self.tile_height
        return ((center_y - origin_y) // self.tile_height) * _SIZE + (
            center_x - origin_x
        ) // self.tile_height

    def cell_centers(self) -> list[tuple[int, int]]:
        """Centres of all cells, row by row."""
        half = self.tile_height // 2
        return [
            (self.left + col * self.tile_height + half, self.top + row * self.tile_height + half)
            for row in range(_SIZE)
            for col in range(_SIZE)
        ]

    def fill_positions(self) -> list[tuple[int, int, int]]:
        """Where each solution digit goes, as (x, y, value), row by row."""
        origin_x = self.column * self.tile_height
        origin_y = self.row * self.tile_height
        positions = []
        for index, value in enumerate(self.solution):
            row, col = divmod(index, _SIZE)
            positions.append(
                (origin_x + col * self.tile_height, origin_y + row * self.tile_height, value)
            )
        return positions