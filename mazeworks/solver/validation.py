"""Solve and certify mazes of any layout.

``solve_maze`` returns ``None`` when no path exists; that is the only
failure signal. ``is_perfect_maze`` checks that every cell or node is
reachable from the start, which for a carved spanning tree certifies a
single path between any two points.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from ..grid.model import Direction
from .adapters import adapter_for_maze
from .algorithms import DEFAULT_SOLVER, Solution, get_solver

DIRECTION_NAMES = {
    Direction.TOP: "up",
    Direction.RIGHT: "right",
    Direction.BOTTOM: "down",
    Direction.LEFT: "left",
}

_STEP_DIRECTIONS = {
    (-1, 0): Direction.TOP,
    (0, 1): Direction.RIGHT,
    (1, 0): Direction.BOTTOM,
    (0, -1): Direction.LEFT,
}


@dataclass
class PerfectMazeReport:
    is_perfect: bool
    reachable_cells: int
    total_cells: int

    @property
    def all_cells_reachable(self) -> bool:
        return self.is_perfect

    def to_dict(self) -> dict:
        return {
            "isPerfect": self.is_perfect,
            "reachableCells": self.reachable_cells,
            "totalCells": self.total_cells,
            "allCellsReachable": self.all_cells_reachable,
        }


def solve_maze(maze: Any, algorithm: str = DEFAULT_SOLVER) -> Optional[Solution]:
    """Solve a grid or organic maze record, or a bare ``MazeGrid``."""

    return get_solver(algorithm)(adapter_for_maze(maze))


def validate_maze(maze: Any, algorithm: str = DEFAULT_SOLVER) -> bool:
    solution = solve_maze(maze, algorithm)
    return solution is not None and solution.solved


def is_perfect_maze(maze: Any) -> PerfectMazeReport:
    adapter = adapter_for_maze(maze)
    total_cells = adapter.get_total_cells()
    if total_cells is None:
        return PerfectMazeReport(is_perfect=False, reachable_cells=0, total_cells=0)

    start = adapter.get_start()
    visited = {adapter.key(start)}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        for next_state in adapter.get_neighbors(state):
            next_key = adapter.key(next_state)
            if next_key in visited:
                continue
            visited.add(next_key)
            queue.append(next_state)

    reachable = len(visited)
    return PerfectMazeReport(
        is_perfect=reachable == total_cells,
        reachable_cells=reachable,
        total_cells=total_cells,
    )


def path_to_directions(path: Sequence[Any]) -> List[str]:
    """Grid paths as 'up'/'right'/'down'/'left' moves; organic paths give []."""

    if len(path) < 2 or not isinstance(path[0], tuple):
        return []
    directions: List[str] = []
    for (prev_row, prev_col), (row, col) in zip(path, path[1:]):
        direction = _STEP_DIRECTIONS[(row - prev_row, col - prev_col)]
        directions.append(DIRECTION_NAMES[direction])
    return directions


__all__ = [
    "PerfectMazeReport",
    "is_perfect_maze",
    "path_to_directions",
    "solve_maze",
    "validate_maze",
]
