"""Organic mazes laid out over packed circles."""

__all__ = [
    "Circle",
    "PackingResult",
    "SpatialHashGrid",
    "RepairReport",
    "OrganicGraph",
    "OrganicNode",
    "OrganicMazeGenerator",
    "OrganicMazeRecord",
    "build_organic_graph",
    "compute_neighbors",
    "find_components",
    "generate_organic_maze",
    "generate_organic_mazes",
    "pack_circles",
    "repair_connectivity",
]

from .spatial_hash import SpatialHashGrid
from .packing import Circle, PackingResult, compute_neighbors, pack_circles
from .repair import RepairReport, find_components, repair_connectivity
from .graph import OrganicGraph, OrganicNode, build_organic_graph
from .generator import (
    OrganicMazeGenerator,
    OrganicMazeRecord,
    generate_organic_maze,
    generate_organic_mazes,
)
