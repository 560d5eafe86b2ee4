"""Adapters that present grid and organic mazes through one solver contract.

A solver only sees ``get_start``, ``get_finish``, ``get_neighbors`` and
``key``. Neighbors are always listed in a fixed order, which decides the
winner when several shortest paths exist.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import singledispatch
from typing import Generic, Hashable, List, Optional, Tuple, TypeVar

from ..grid.generator import GridMazeRecord
from ..grid.model import DIRECTION_OFFSETS, Direction, MazeGrid
from ..organic.generator import OrganicMazeRecord
from ..organic.graph import OrganicGraph

StateT = TypeVar("StateT")
GridState = Tuple[int, int]


class MazeAdapter(ABC, Generic[StateT]):
    """Topology-agnostic view of a maze for search algorithms."""

    @abstractmethod
    def get_start(self) -> StateT:
        ...

    @abstractmethod
    def get_finish(self) -> StateT:
        ...

    @abstractmethod
    def get_neighbors(self, state: StateT) -> List[StateT]:
        """States reachable in one step, in a deterministic order."""

    @abstractmethod
    def key(self, state: StateT) -> Hashable:
        """Stable identity of a state for visited-set bookkeeping."""

    def get_total_cells(self) -> Optional[int]:
        return None


class GridAdapter(MazeAdapter[GridState]):
    """States are ``(row, col)``; moves follow TOP, RIGHT, BOTTOM, LEFT."""

    def __init__(self, grid: MazeGrid) -> None:
        self.grid = grid

    def get_start(self) -> GridState:
        return self.grid.start

    def get_finish(self) -> GridState:
        return self.grid.finish

    def get_neighbors(self, state: GridState) -> List[GridState]:
        row, col = state
        cell = self.grid.cells[row][col]
        out: List[GridState] = []
        for direction in Direction:
            if cell.has_wall(direction):
                continue
            d_row, d_col = DIRECTION_OFFSETS[direction]
            # the entrance and exit open onto the outside of the grid
            if not self.grid.is_valid_position(row + d_row, col + d_col):
                continue
            out.append((row + d_row, col + d_col))
        return out

    def key(self, state: GridState) -> Hashable:
        return state

    def get_total_cells(self) -> int:
        return self.grid.rows * self.grid.cols


class OrganicAdapter(MazeAdapter[int]):
    """States are node ids; moves follow each node's stored neighbor order."""

    def __init__(self, graph: OrganicGraph, start_id: int, finish_id: int) -> None:
        self.graph = graph
        self.start_id = start_id
        self.finish_id = finish_id

    def get_start(self) -> int:
        return self.start_id

    def get_finish(self) -> int:
        return self.finish_id

    def get_neighbors(self, state: int) -> List[int]:
        return [nid for nid in self.graph.get_neighbors(state) if not self.graph.has_wall(state, nid)]

    def key(self, state: int) -> Hashable:
        return state

    def get_total_cells(self) -> int:
        return self.graph.node_count


@singledispatch
def adapter_for_maze(maze: object) -> MazeAdapter:
    raise TypeError(f"No maze adapter registered for {type(maze).__name__}")


@adapter_for_maze.register(MazeGrid)
def _(maze: MazeGrid) -> MazeAdapter:
    return GridAdapter(maze)


@adapter_for_maze.register(GridMazeRecord)
def _(maze: GridMazeRecord) -> MazeAdapter:
    return GridAdapter(maze.grid)


@adapter_for_maze.register(OrganicMazeRecord)
def _(maze: OrganicMazeRecord) -> MazeAdapter:
    return OrganicAdapter(maze.graph, maze.start_id, maze.finish_id)


__all__ = [
    "GridAdapter",
    "MazeAdapter",
    "OrganicAdapter",
    "adapter_for_maze",
]
