"""Seeded maze generation and validation toolkit."""

__all__ = [
    "AbstractMazeGenerator",
    "MazeBatch",
    "SeededRng",
    "create_rng",
    "DifficultyPreset",
    "get_difficulty_preset",
    "MazeGrid",
    "GridMazeGenerator",
    "GridMazeRecord",
    "generate_maze",
    "generate_mazes",
    "OrganicMazeGenerator",
    "OrganicMazeRecord",
    "generate_organic_maze",
    "generate_organic_mazes",
    "Solution",
    "PerfectMazeReport",
    "solve_maze",
    "validate_maze",
    "is_perfect_maze",
]

from .base import AbstractMazeGenerator, MazeBatch
from .rng import SeededRng, create_rng
from .presets import DifficultyPreset, get_difficulty_preset
from .grid import (
    GridMazeGenerator,
    GridMazeRecord,
    MazeGrid,
    generate_maze,
    generate_mazes,
)
from .organic import (
    OrganicMazeGenerator,
    OrganicMazeRecord,
    generate_organic_maze,
    generate_organic_mazes,
)
from .solver import (
    PerfectMazeReport,
    Solution,
    is_perfect_maze,
    solve_maze,
    validate_maze,
)
