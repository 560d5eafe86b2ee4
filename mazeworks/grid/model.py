"""Cell and wall data structure for rectangular mazes."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np


class Direction(IntEnum):
    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3


# (row, col) offsets
DIRECTION_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.TOP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.BOTTOM: (1, 0),
    Direction.LEFT: (0, -1),
}

OPPOSITE: Dict[Direction, Direction] = {
    Direction.TOP: Direction.BOTTOM,
    Direction.RIGHT: Direction.LEFT,
    Direction.BOTTOM: Direction.TOP,
    Direction.LEFT: Direction.RIGHT,
}

_WALL_BITS = {
    Direction.TOP: 8,
    Direction.RIGHT: 4,
    Direction.BOTTOM: 2,
    Direction.LEFT: 1,
}


class Cell:
    """A grid cell with four independent walls, all closed initially."""

    __slots__ = ("row", "col", "walls", "visited")

    def __init__(self, row: int, col: int) -> None:
        self.row = row
        self.col = col
        self.walls = [True, True, True, True]
        self.visited = False

    def remove_wall(self, direction: Direction) -> None:
        self.walls[direction] = False

    def has_wall(self, direction: Direction) -> bool:
        return self.walls[direction]

    def mark_visited(self) -> None:
        self.visited = True

    def wall_mask(self) -> int:
        """Closed walls packed as TOP=8, RIGHT=4, BOTTOM=2, LEFT=1."""

        return sum(bit for direction, bit in _WALL_BITS.items() if self.walls[direction])

    def __repr__(self) -> str:
        return f"Cell(row={self.row}, col={self.col}, walls={self.wall_mask():x})"


class MazeGrid:
    """Rows x cols grid of cells. Start is the top-left cell, finish the bottom-right."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.cells: List[List[Cell]] = [
            [Cell(row, col) for col in range(cols)] for row in range(rows)
        ]
        self.start: Tuple[int, int] = (0, 0)
        self.finish: Tuple[int, int] = (rows - 1, cols - 1)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        if not self.is_valid_position(row, col):
            return None
        return self.cells[row][col]

    def is_valid_position(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_neighbor(self, row: int, col: int, direction: Direction) -> Optional[Cell]:
        d_row, d_col = DIRECTION_OFFSETS[direction]
        return self.get_cell(row + d_row, col + d_col)

    def get_unvisited_neighbors(self, row: int, col: int) -> List[Tuple[Cell, Direction]]:
        neighbors: List[Tuple[Cell, Direction]] = []
        for direction in Direction:
            neighbor = self.get_neighbor(row, col, direction)
            if neighbor is not None and not neighbor.visited:
                neighbors.append((neighbor, direction))
        return neighbors

    def remove_wall_between(self, first: Cell, second: Cell) -> None:
        """Open the shared wall of two adjacent cells; no-op otherwise."""

        direction = _direction_between(first.row, first.col, second.row, second.col)
        if direction is None:
            return
        first.remove_wall(direction)
        second.remove_wall(OPPOSITE[direction])

    def open_entrance(self) -> None:
        row, col = self.start
        self.cells[row][col].remove_wall(Direction.TOP)

    def open_exit(self) -> None:
        row, col = self.finish
        self.cells[row][col].remove_wall(Direction.BOTTOM)

    def reset_visited(self) -> None:
        for cell in self.iter_cells():
            cell.visited = False

    def are_connected(self, row1: int, col1: int, row2: int, col2: int) -> bool:
        """True when the two cells are adjacent with no wall between them."""

        cell = self.get_cell(row1, col1)
        if cell is None or self.get_cell(row2, col2) is None:
            return False
        direction = _direction_between(row1, col1, row2, col2)
        if direction is None:
            return False
        return not cell.has_wall(direction)

    def iter_cells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def wall_array(self) -> np.ndarray:
        """Boolean array of shape (rows, cols, 4) in direction order."""

        return np.array(
            [[cell.walls for cell in row] for row in self.cells], dtype=bool
        ).reshape(self.rows, self.cols, 4)

    def wall_signature(self) -> List[str]:
        """One hex digit per cell (see ``Cell.wall_mask``), one string per row."""

        return ["".join(f"{cell.wall_mask():x}" for cell in row) for row in self.cells]


def _direction_between(row1: int, col1: int, row2: int, col2: int) -> Optional[Direction]:
    d_row = row2 - row1
    d_col = col2 - col1
    if abs(d_row) + abs(d_col) != 1:
        return None
    if d_row == -1:
        return Direction.TOP
    if d_row == 1:
        return Direction.BOTTOM
    if d_col == -1:
        return Direction.LEFT
    return Direction.RIGHT


__all__ = [
    "Cell",
    "Direction",
    "DIRECTION_OFFSETS",
    "MazeGrid",
    "OPPOSITE",
]
