"""Merge disconnected circle-packing fragments into one component.

Relaxation does not guarantee that every circle touches the rest. Each
repair round finds the connected components of the touch graph, keeps the
largest one in place and slides every other fragment towards it until the
closest pair of circles touches. A short repulsion-only pass then resolves
the overlaps the move created.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Mapping, Sequence, Tuple

import numpy as np

from .packing import COINCIDENT_DISTANCE, Circle, compute_neighbors, relax_circles

logger = logging.getLogger("mazeworks.organic")

DEFAULT_REPAIR_ROUNDS = 20
DEFAULT_RELAX_ITERATIONS = 30


@dataclass
class RepairReport:
    rounds: int
    initial_components: int
    final_components: int

    @property
    def connected(self) -> bool:
        return self.final_components <= 1

    def to_dict(self) -> dict:
        return {
            "rounds": self.rounds,
            "initialComponents": self.initial_components,
            "finalComponents": self.final_components,
        }


def find_components(
    circles: Sequence[Circle],
    neighbors: Mapping[int, Sequence[int]],
) -> List[List[int]]:
    """Connected components by BFS, seeded in ascending id order."""

    seen = set()
    components: List[List[int]] = []
    for circle in circles:
        if circle.id in seen:
            continue
        seen.add(circle.id)
        queue = deque([circle.id])
        component: List[int] = []
        while queue:
            current = queue.popleft()
            component.append(current)
            for neighbor_id in neighbors.get(current, ()):
                if neighbor_id not in seen:
                    seen.add(neighbor_id)
                    queue.append(neighbor_id)
        components.append(component)
    return components


def repair_connectivity(
    circles: Sequence[Circle],
    width: float,
    height: float,
    *,
    max_rounds: int = DEFAULT_REPAIR_ROUNDS,
    relax_iterations: int = DEFAULT_RELAX_ITERATIONS,
) -> RepairReport:
    """Move fragments in place until the touch graph is a single component."""

    by_id: Dict[int, Circle] = {circle.id: circle for circle in circles}
    components = find_components(circles, compute_neighbors(circles))
    initial_components = len(components)
    rounds = 0

    while len(components) > 1 and rounds < max_rounds:
        rounds += 1
        main = max(components, key=len)
        main_ids = list(main)
        for component in components:
            if component is main:
                continue
            orphan_id, anchor_id = _closest_pair(by_id, component, main_ids)
            _slide_until_touching(by_id, component, orphan_id, anchor_id, width, height)
            main_ids.extend(component)
        relax_circles(circles, width, height, relax_iterations, attract=False)
        logger.debug(
            "Repair round %d merged %d fragment(s) into a component of %d",
            rounds,
            len(components) - 1,
            len(main),
        )
        components = find_components(circles, compute_neighbors(circles))

    if len(components) > 1:
        logger.warning(
            "Connectivity repair gave up after %d rounds with %d components",
            rounds,
            len(components),
        )
    return RepairReport(
        rounds=rounds,
        initial_components=initial_components,
        final_components=len(components),
    )


def _closest_pair(
    by_id: Mapping[int, Circle],
    component: Sequence[int],
    main_ids: Sequence[int],
) -> Tuple[int, int]:
    """(orphan id, main id) with the smallest centre distance, first one on ties."""

    orphans = np.array([[by_id[cid].x, by_id[cid].y] for cid in component], dtype=float)
    anchors = np.array([[by_id[cid].x, by_id[cid].y] for cid in main_ids], dtype=float)
    delta = orphans[:, np.newaxis, :] - anchors[np.newaxis, :, :]
    distances = np.sqrt((delta ** 2).sum(axis=2))
    row, col = divmod(int(np.argmin(distances)), len(main_ids))
    return component[row], main_ids[col]


def _slide_until_touching(
    by_id: Mapping[int, Circle],
    component: Sequence[int],
    orphan_id: int,
    anchor_id: int,
    width: float,
    height: float,
) -> None:
    orphan = by_id[orphan_id]
    anchor = by_id[anchor_id]
    dx = anchor.x - orphan.x
    dy = anchor.y - orphan.y
    dist = math.sqrt(dx * dx + dy * dy) or COINCIDENT_DISTANCE
    travel = dist - (anchor.r + orphan.r)
    if travel <= 0:
        return
    shift_x = dx / dist * travel
    shift_y = dy / dist * travel
    for cid in component:
        circle = by_id[cid]
        circle.x = min(max(circle.x + shift_x, circle.r), max(circle.r, width - circle.r - 1))
        circle.y = min(max(circle.y + shift_y, circle.r), max(circle.r, height - circle.r - 1))


__all__ = [
    "DEFAULT_REPAIR_ROUNDS",
    "RepairReport",
    "find_components",
    "repair_connectivity",
]
