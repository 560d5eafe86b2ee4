"""Rectangular maze generators: Prim, recursive backtracker and Kruskal.

Every generator carves a spanning tree out of a grid whose walls all start
closed, so the result is a perfect maze. Each algorithm leaves a different
texture:

* Prim: short branching dead ends, forgiving for younger children.
* Recursive backtracker: long winding corridors.
* Kruskal: many short passages merged from all over the grid.

The order in which each generator consumes random numbers is fixed, which
makes a maze reproducible from its seed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, List, Optional, Tuple

from ..base import AbstractMazeGenerator, MazeBatch
from ..presets import (
    ALGORITHM_IDS,
    ALGORITHMS,
    DEFAULT_AGE_RANGE,
    OLDER_AGE_RANGES_FOR_RANDOMIZER,
    DifficultyPreset,
    get_difficulty_preset,
    validate_quantity,
)
from ..rng import SeededRng, create_rng, generate_seed
from .model import DIRECTION_OFFSETS, Cell, Direction, MazeGrid

logger = logging.getLogger("mazeworks.grid")

GridAlgorithm = Callable[[MazeGrid, SeededRng], None]


@dataclass(frozen=True)
class GridMazeRecord:
    grid: MazeGrid
    seed: int
    age_range: str
    preset: DifficultyPreset
    algorithm: str
    rows: int
    cols: int

    layout: ClassVar[str] = "grid"

    def to_dict(self) -> dict:
        return {
            "layout": self.layout,
            "seed": self.seed,
            "ageRange": self.age_range,
            "preset": self.preset.to_dict(),
            "algorithm": self.algorithm,
            "rows": self.rows,
            "cols": self.cols,
            "walls": self.grid.wall_signature(),
        }


# ----------------------------------------------------------------------
# Prim


def prim_generate(grid: MazeGrid, rng: SeededRng) -> None:
    """Randomized Prim's algorithm over a frontier list of walls."""

    start_row = rng.random_int(0, grid.rows - 1)
    start_col = rng.random_int(0, grid.cols - 1)
    start_cell = grid.cells[start_row][start_col]
    start_cell.mark_visited()

    walls: List[Tuple[Cell, Direction]] = []
    _add_frontier_walls(grid, start_cell, walls)

    while walls:
        index = rng.random_int(0, len(walls) - 1)
        cell, direction = walls[index]
        neighbor = grid.get_neighbor(cell.row, cell.col, direction)
        if neighbor is not None and not neighbor.visited:
            grid.remove_wall_between(cell, neighbor)
            neighbor.mark_visited()
            _add_frontier_walls(grid, neighbor, walls)
        # swap-remove: O(1), reorders the tail
        walls[index] = walls[-1]
        walls.pop()


def _add_frontier_walls(grid: MazeGrid, cell: Cell, walls: List[Tuple[Cell, Direction]]) -> None:
    for direction in Direction:
        d_row, d_col = DIRECTION_OFFSETS[direction]
        neighbor = grid.get_cell(cell.row + d_row, cell.col + d_col)
        if neighbor is not None and not neighbor.visited:
            walls.append((cell, direction))


# ----------------------------------------------------------------------
# Recursive backtracker


def recursive_backtracker_generate(grid: MazeGrid, rng: SeededRng) -> None:
    """Depth-first carve with an explicit stack instead of recursion."""

    start_row = rng.random_int(0, grid.rows - 1)
    start_col = rng.random_int(0, grid.cols - 1)
    start_cell = grid.cells[start_row][start_col]
    start_cell.mark_visited()
    stack: List[Cell] = [start_cell]

    while stack:
        current = stack[-1]
        candidates = grid.get_unvisited_neighbors(current.row, current.col)
        if not candidates:
            stack.pop()
            continue
        rng.shuffle(candidates)
        neighbor, _ = candidates[0]
        grid.remove_wall_between(current, neighbor)
        neighbor.mark_visited()
        stack.append(neighbor)


# ----------------------------------------------------------------------
# Kruskal


def kruskal_generate(grid: MazeGrid, rng: SeededRng) -> None:
    """Randomized Kruskal's algorithm with a path-compressed union-find."""

    cols = grid.cols
    edges: List[Tuple[Cell, Cell]] = []
    for cell in grid.iter_cells():
        # right and bottom only, so each pair is listed once
        for direction in (Direction.RIGHT, Direction.BOTTOM):
            neighbor = grid.get_neighbor(cell.row, cell.col, direction)
            if neighbor is not None:
                edges.append((cell, neighbor))
    rng.shuffle(edges)

    parent = list(range(grid.rows * cols))

    def find(index: int) -> int:
        root = index
        while parent[root] != root:
            root = parent[root]
        while parent[index] != root:
            parent[index], index = root, parent[index]
        return root

    # TODO: add union by rank if preset grids grow well beyond 36x42.
    for first, second in edges:
        root_a = find(first.row * cols + first.col)
        root_b = find(second.row * cols + second.col)
        if root_a == root_b:
            continue
        grid.remove_wall_between(first, second)
        parent[root_b] = root_a

    # a spanning tree reaches every cell
    for cell in grid.iter_cells():
        cell.mark_visited()


GRID_ALGORITHMS: Dict[str, GridAlgorithm] = {
    ALGORITHMS.PRIM: prim_generate,
    ALGORITHMS.RECURSIVE_BACKTRACKER: recursive_backtracker_generate,
    ALGORITHMS.KRUSKAL: kruskal_generate,
}


def get_grid_algorithm(algorithm_id: str) -> GridAlgorithm:
    try:
        return GRID_ALGORITHMS[algorithm_id]
    except KeyError as exc:
        raise KeyError(
            f"Unknown maze algorithm '{algorithm_id}'; expected one of {sorted(GRID_ALGORITHMS)}"
        ) from exc


def carve_grid(rows: int, cols: int, algorithm_id: str, seed: int) -> MazeGrid:
    """Build a grid, carve it with the chosen algorithm and open its ends."""

    carve = get_grid_algorithm(algorithm_id)
    grid = MazeGrid(rows, cols)
    carve(grid, create_rng(seed))
    grid.open_entrance()
    grid.open_exit()
    return grid


class GridMazeGenerator(AbstractMazeGenerator[GridMazeRecord]):
    """Generate rectangular mazes sized by age-range presets."""

    def __init__(
        self,
        *,
        age_range: str = DEFAULT_AGE_RANGE,
        algorithm: Optional[str] = None,
    ) -> None:
        super().__init__(age_range=age_range)
        if algorithm is not None:
            get_grid_algorithm(algorithm)
        self.algorithm = algorithm

    def create_maze(
        self,
        *,
        age_range: Optional[str] = None,
        seed: Optional[int] = None,
        algorithm: Optional[str] = None,
    ) -> GridMazeRecord:
        age_range = age_range or self.age_range
        if seed is None:
            seed = generate_seed()
        preset = get_difficulty_preset(age_range)
        algorithm_id = algorithm or self.algorithm or preset.algorithm or ALGORITHMS.PRIM
        rows, cols = preset.grid_height, preset.grid_width

        grid = carve_grid(rows, cols, algorithm_id, seed)
        logger.debug(
            "Generated %dx%d grid maze with %s (age_range=%s, seed=%d)",
            rows,
            cols,
            algorithm_id,
            age_range,
            seed,
        )
        return GridMazeRecord(
            grid=grid,
            seed=seed,
            age_range=age_range,
            preset=preset,
            algorithm=algorithm_id,
            rows=rows,
            cols=cols,
        )

    def generate_batch(
        self,
        quantity: int,
        *,
        age_range: Optional[str] = None,
        base_seed: Optional[int] = None,
        randomize_algorithms: bool = False,
    ) -> MazeBatch[GridMazeRecord]:
        """Consecutive seeds; older age ranges may vary the algorithm past the first maze."""

        age_range = age_range or self.age_range
        if not randomize_algorithms or age_range not in OLDER_AGE_RANGES_FOR_RANDOMIZER:
            return super().generate_batch(quantity, age_range=age_range, base_seed=base_seed)

        validate_quantity(quantity)
        if base_seed is None:
            base_seed = generate_seed()
        mazes: List[GridMazeRecord] = []
        for index in range(quantity):
            seed = base_seed + index
            algorithm = None if index == 0 else create_rng(seed).pick(ALGORITHM_IDS)
            mazes.append(self.create_maze(age_range=age_range, seed=seed, algorithm=algorithm))
        return MazeBatch(mazes=mazes, base_seed=base_seed, age_range=age_range, quantity=quantity)


def generate_maze(
    age_range: str = DEFAULT_AGE_RANGE,
    seed: Optional[int] = None,
    algorithm: Optional[str] = None,
) -> GridMazeRecord:
    return GridMazeGenerator(age_range=age_range).create_maze(seed=seed, algorithm=algorithm)


def generate_mazes(
    age_range: str,
    quantity: int,
    base_seed: Optional[int] = None,
    *,
    randomize_algorithms: bool = False,
) -> MazeBatch[GridMazeRecord]:
    return GridMazeGenerator(age_range=age_range).generate_batch(
        quantity,
        base_seed=base_seed,
        randomize_algorithms=randomize_algorithms,
    )


def generate_algorithm_showcase(age_range: str, seed: int) -> List[GridMazeRecord]:
    """One maze per algorithm, all from the same seed, for side-by-side comparison."""

    generator = GridMazeGenerator(age_range=age_range)
    return [generator.create_maze(seed=seed, algorithm=algorithm) for algorithm in ALGORITHM_IDS]


__all__ = [
    "GRID_ALGORITHMS",
    "GridMazeGenerator",
    "GridMazeRecord",
    "carve_grid",
    "generate_algorithm_showcase",
    "generate_maze",
    "generate_mazes",
    "get_grid_algorithm",
    "kruskal_generate",
    "prim_generate",
    "recursive_backtracker_generate",
]
