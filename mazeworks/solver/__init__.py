"""Topology-agnostic maze solving and validation."""

__all__ = [
    "MazeAdapter",
    "GridAdapter",
    "OrganicAdapter",
    "adapter_for_maze",
    "Solution",
    "PerfectMazeReport",
    "get_solver",
    "register_solver",
    "registered_solver_ids",
    "solve_maze",
    "validate_maze",
    "is_perfect_maze",
    "path_to_directions",
]

from .adapters import GridAdapter, MazeAdapter, OrganicAdapter, adapter_for_maze
from .algorithms import Solution, get_solver, register_solver, registered_solver_ids
from .validation import (
    PerfectMazeReport,
    is_perfect_maze,
    path_to_directions,
    solve_maze,
    validate_maze,
)
