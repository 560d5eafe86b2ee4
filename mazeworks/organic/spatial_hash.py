"""Bucket grid for proximity queries over circles."""

from __future__ import annotations

import math
from typing import Iterable, List, Protocol, Tuple


class _Point(Protocol):
    x: float
    y: float


class SpatialHashGrid:
    """Dense array of index buckets, keyed by ``cell_y * cols + cell_x``.

    ``cell_size`` must be at least the largest interaction distance of the
    caller; ``get_nearby`` then only has to look at the 3x3 block of cells
    around a query point. The structure is rebuilt from scratch before each
    use rather than updated incrementally.
    """

    def __init__(
        self,
        min_x: float,
        min_y: float,
        max_x: float,
        max_y: float,
        cell_size: float,
    ) -> None:
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.min_x = min_x
        self.min_y = min_y
        self.cell_size = cell_size
        self.cols = max(1, int(math.ceil((max_x - min_x) / cell_size)))
        self.rows = max(1, int(math.ceil((max_y - min_y) / cell_size)))
        self.buckets: List[List[int]] = [[] for _ in range(self.cols * self.rows)]

    def _cell_of(self, x: float, y: float) -> Tuple[int, int]:
        cell_x = int(math.floor((x - self.min_x) / self.cell_size))
        cell_y = int(math.floor((y - self.min_y) / self.cell_size))
        cell_x = min(max(cell_x, 0), self.cols - 1)
        cell_y = min(max(cell_y, 0), self.rows - 1)
        return cell_x, cell_y

    def clear(self) -> None:
        for bucket in self.buckets:
            bucket.clear()

    def insert(self, index: int, x: float, y: float) -> None:
        cell_x, cell_y = self._cell_of(x, y)
        self.buckets[cell_y * self.cols + cell_x].append(index)

    def rebuild(self, points: Iterable[_Point]) -> None:
        self.clear()
        for index, point in enumerate(points):
            self.insert(index, point.x, point.y)

    def get_nearby(self, x: float, y: float) -> List[int]:
        """Indices bucketed in the query cell and its eight neighbors, ascending."""

        cell_x, cell_y = self._cell_of(x, y)
        nearby: List[int] = []
        for ny in range(max(0, cell_y - 1), min(self.rows, cell_y + 2)):
            row_offset = ny * self.cols
            for nx in range(max(0, cell_x - 1), min(self.cols, cell_x + 2)):
                nearby.extend(self.buckets[row_offset + nx])
        nearby.sort()
        return nearby


__all__ = ["SpatialHashGrid"]
