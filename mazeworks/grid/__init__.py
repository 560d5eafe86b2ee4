"""Rectangular maze model and generators."""

__all__ = [
    "Cell",
    "Direction",
    "MazeGrid",
    "GridMazeGenerator",
    "GridMazeRecord",
    "GRID_ALGORITHMS",
    "carve_grid",
    "get_grid_algorithm",
    "generate_maze",
    "generate_mazes",
    "generate_algorithm_showcase",
]

from .model import Cell, Direction, MazeGrid
from .generator import (
    GRID_ALGORITHMS,
    GridMazeGenerator,
    GridMazeRecord,
    carve_grid,
    generate_algorithm_showcase,
    generate_maze,
    generate_mazes,
    get_grid_algorithm,
)
