"""Organic maze graph: packed circles as nodes, touching pairs as walls."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from .packing import Circle

EdgeKey = Tuple[int, int]


def edge_key(first: int, second: int) -> EdgeKey:
    return (first, second) if first < second else (second, first)


@dataclass
class OrganicNode:
    id: int
    x: float
    y: float
    r: float
    neighbors: List[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "r": self.r,
            "neighbors": list(self.neighbors),
        }


class OrganicGraph:
    """Nodes with fixed neighbor lists and a mutable set of closed walls.

    A wall exists between every pair of touching nodes until carving
    removes it; walls are never added back. The ``y`` axis points up, so
    the top of the maze has the largest ``y``.
    """

    def __init__(self, nodes: Sequence[OrganicNode], walls: Iterable[EdgeKey]) -> None:
        self.nodes: List[OrganicNode] = list(nodes)
        self.walls: Set[EdgeKey] = set(walls)
        self._by_id: Dict[int, OrganicNode] = {node.id: node for node in self.nodes}

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def wall_count(self) -> int:
        return len(self.walls)

    def get_node(self, node_id: int) -> Optional[OrganicNode]:
        return self._by_id.get(node_id)

    def get_neighbors(self, node_id: int) -> List[int]:
        node = self._by_id.get(node_id)
        return node.neighbors if node is not None else []

    def has_wall(self, first: int, second: int) -> bool:
        return edge_key(first, second) in self.walls

    def remove_wall(self, first: int, second: int) -> None:
        self.walls.discard(edge_key(first, second))

    def open_passages(self) -> List[EdgeKey]:
        """Adjacent pairs whose wall has been carved away, ascending."""

        passages: List[EdgeKey] = []
        for node in self.nodes:
            for neighbor_id in node.neighbors:
                if neighbor_id > node.id and not self.has_wall(node.id, neighbor_id):
                    passages.append((node.id, neighbor_id))
        return passages

    def _pool(self, candidates: Optional[Sequence[int]]) -> List[OrganicNode]:
        if candidates is None:
            return self.nodes
        return [self._by_id[node_id] for node_id in candidates if node_id in self._by_id]

    def choose_start_in_top_region(
        self,
        bounds_height: float,
        top_fraction: float = 0.2,
        candidates: Optional[Sequence[int]] = None,
    ) -> int:
        """Highest node in the top band, else the first of ``candidates`` (all nodes by default)."""

        pool = self._pool(candidates)
        threshold = bounds_height * (1 - top_fraction)
        best = None
        for node in pool:
            if node.y >= threshold and (best is None or node.y > best.y):
                best = node
        return best.id if best is not None else pool[0].id

    def choose_finish_in_bottom_region(
        self,
        bounds_height: float,
        bottom_fraction: float = 0.2,
        candidates: Optional[Sequence[int]] = None,
    ) -> int:
        """Lowest node in the bottom band, else the last of ``candidates``."""

        pool = self._pool(candidates)
        threshold = bounds_height * bottom_fraction
        best = None
        for node in pool:
            if node.y <= threshold and (best is None or node.y < best.y):
                best = node
        return best.id if best is not None else pool[-1].id


def build_organic_graph(
    circles: Sequence[Circle],
    neighbor_map: Mapping[int, Sequence[int]],
) -> OrganicGraph:
    """One node per circle, every touching pair walled off."""

    nodes = [
        OrganicNode(
            id=circle.id,
            x=circle.x,
            y=circle.y,
            r=circle.r,
            neighbors=list(neighbor_map.get(circle.id, ())),
        )
        for circle in circles
    ]
    walls = {
        edge_key(node.id, neighbor_id)
        for node in nodes
        for neighbor_id in node.neighbors
        if neighbor_id > node.id
    }
    return OrganicGraph(nodes, walls)


__all__ = [
    "EdgeKey",
    "OrganicGraph",
    "OrganicNode",
    "build_organic_graph",
    "edge_key",
]
