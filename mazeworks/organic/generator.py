"""Organic (non-grid) maze generator.

Pipeline: circle packing, connectivity repair, touch graph, depth-first
spanning-tree carve, then start/finish selection at the top and bottom of
the layout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional, Sequence, Tuple

from ..base import AbstractMazeGenerator, MazeBatch
from ..presets import (
    DEFAULT_AGE_RANGE,
    ORGANIC_BOUNDS_HEIGHT,
    ORGANIC_BOUNDS_WIDTH,
    DifficultyPreset,
    get_difficulty_preset,
)
from ..rng import SeededRng, create_rng, generate_seed
from .graph import OrganicGraph, build_organic_graph
from .packing import compute_neighbors, pack_circles
from .repair import DEFAULT_REPAIR_ROUNDS, RepairReport, repair_connectivity

logger = logging.getLogger("mazeworks.organic")

START_BAND = 0.2
FINISH_BAND = 0.2


@dataclass(frozen=True)
class OrganicMazeRecord:
    graph: OrganicGraph
    node_positions: Dict[int, Tuple[float, float]]
    start_id: int
    finish_id: int
    preset: DifficultyPreset
    seed: int
    bounds_width: float
    bounds_height: float
    age_range: str
    connected_count: int
    repair: RepairReport

    layout: ClassVar[str] = "organic"
    algorithm: ClassVar[str] = "dfs"

    def to_dict(self) -> dict:
        return {
            "layout": self.layout,
            "nodes": [node.to_dict() for node in self.graph.nodes],
            "walls": [list(wall) for wall in sorted(self.graph.walls)],
            "startId": self.start_id,
            "finishId": self.finish_id,
            "preset": self.preset.to_dict(),
            "seed": self.seed,
            "algorithm": self.algorithm,
            "boundsWidth": self.bounds_width,
            "boundsHeight": self.bounds_height,
            "ageRange": self.age_range,
            "connectedCount": self.connected_count,
            "repair": self.repair.to_dict(),
        }


def carve_spanning_tree(graph: OrganicGraph, rng: SeededRng) -> List[int]:
    """Depth-first carve from a random node; returns carved ids in visit order."""

    start_id = graph.nodes[rng.random_int(0, graph.node_count - 1)].id
    visited = {start_id}
    carved = [start_id]
    stack = [start_id]

    while stack:
        current = stack[-1]
        candidates = [nid for nid in graph.get_neighbors(current) if nid not in visited]
        if not candidates:
            stack.pop()
            continue
        rng.shuffle(candidates)
        chosen = candidates[0]
        graph.remove_wall(current, chosen)
        visited.add(chosen)
        carved.append(chosen)
        stack.append(chosen)
    return carved


def choose_start(graph: OrganicGraph, bounds_height: float, carved: Sequence[int]) -> int:
    """Highest carved node within the top band, else the first carved node."""

    return graph.choose_start_in_top_region(bounds_height, START_BAND, candidates=carved)


def choose_finish(graph: OrganicGraph, bounds_height: float, carved: Sequence[int]) -> int:
    """Lowest carved node within the bottom band, else the last carved node."""

    return graph.choose_finish_in_bottom_region(bounds_height, FINISH_BAND, candidates=carved)


class OrganicMazeGenerator(AbstractMazeGenerator[OrganicMazeRecord]):
    """Generate organic mazes over a circle-packed layout."""

    def __init__(
        self,
        *,
        age_range: str = DEFAULT_AGE_RANGE,
        bounds_width: float = ORGANIC_BOUNDS_WIDTH,
        bounds_height: float = ORGANIC_BOUNDS_HEIGHT,
        node_count: Optional[int] = None,
        repair_rounds: int = DEFAULT_REPAIR_ROUNDS,
    ) -> None:
        super().__init__(age_range=age_range)
        if bounds_width <= 0 or bounds_height <= 0:
            raise ValueError(f"bounds must be positive, got {bounds_width}x{bounds_height}")
        if node_count is not None and node_count < 1:
            raise ValueError(f"node_count must be at least 1, got {node_count}")
        self.bounds_width = bounds_width
        self.bounds_height = bounds_height
        self.node_count = node_count
        self.repair_rounds = repair_rounds

    def _target_count(self, preset: DifficultyPreset) -> int:
        if self.node_count is not None:
            return self.node_count
        return preset.organic_node_count or preset.grid_width * preset.grid_height

    def create_maze(
        self,
        *,
        age_range: Optional[str] = None,
        seed: Optional[int] = None,
    ) -> OrganicMazeRecord:
        age_range = age_range or self.age_range
        if seed is None:
            seed = generate_seed()
        preset = get_difficulty_preset(age_range)
        target_count = self._target_count(preset)

        packing = pack_circles(self.bounds_width, self.bounds_height, target_count, seed)
        repair = repair_connectivity(
            packing.circles,
            self.bounds_width,
            self.bounds_height,
            max_rounds=self.repair_rounds,
        )
        graph = build_organic_graph(packing.circles, compute_neighbors(packing.circles))

        carved = carve_spanning_tree(graph, create_rng(seed))
        start_id = choose_start(graph, self.bounds_height, carved)
        finish_id = choose_finish(graph, self.bounds_height, carved)
        logger.debug(
            "Carved %d/%d organic nodes (age_range=%s, seed=%d, start=%d, finish=%d)",
            len(carved),
            graph.node_count,
            age_range,
            seed,
            start_id,
            finish_id,
        )

        return OrganicMazeRecord(
            graph=graph,
            node_positions={node.id: (node.x, node.y) for node in graph.nodes},
            start_id=start_id,
            finish_id=finish_id,
            preset=preset,
            seed=seed,
            bounds_width=self.bounds_width,
            bounds_height=self.bounds_height,
            age_range=age_range,
            connected_count=len(carved),
            repair=repair,
        )


def generate_organic_maze(
    age_range: str = DEFAULT_AGE_RANGE,
    seed: Optional[int] = None,
) -> OrganicMazeRecord:
    return OrganicMazeGenerator(age_range=age_range).create_maze(seed=seed)


def generate_organic_mazes(
    age_range: str,
    quantity: int,
    base_seed: Optional[int] = None,
) -> MazeBatch[OrganicMazeRecord]:
    return OrganicMazeGenerator(age_range=age_range).generate_batch(quantity, base_seed=base_seed)


__all__ = [
    "OrganicMazeGenerator",
    "OrganicMazeRecord",
    "carve_spanning_tree",
    "choose_finish",
    "choose_start",
    "generate_organic_maze",
    "generate_organic_mazes",
]
