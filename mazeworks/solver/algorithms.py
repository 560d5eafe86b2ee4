"""Solver algorithm registry.

Each solver maps an adapter to a ``Solution`` or ``None`` when the finish
cannot be reached. Only breadth-first search ships; more algorithms can be
added with ``register_solver``.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple

from .adapters import MazeAdapter

logger = logging.getLogger("mazeworks.solver")

DEFAULT_SOLVER = "bfs"


@dataclass
class Solution:
    path: List[Any]
    length: int
    solved: bool

    def to_dict(self) -> dict:
        return {
            "path": [list(step) if isinstance(step, tuple) else step for step in self.path],
            "length": self.length,
            "solved": self.solved,
        }


SolverFn = Callable[[MazeAdapter], Optional[Solution]]

_REGISTRY: Dict[str, SolverFn] = {}


def register_solver(algorithm_id: str) -> Callable[[SolverFn], SolverFn]:
    def decorator(fn: SolverFn) -> SolverFn:
        _REGISTRY[algorithm_id] = fn
        return fn

    return decorator


@register_solver("bfs")
def solve_bfs(adapter: MazeAdapter) -> Optional[Solution]:
    """Shortest path by breadth-first search, carrying the path with each state."""

    start = adapter.get_start()
    finish_key = adapter.key(adapter.get_finish())
    queue: Deque[Tuple[Any, List[Any]]] = deque([(start, [start])])
    visited = {adapter.key(start)}

    while queue:
        state, path = queue.popleft()
        if adapter.key(state) == finish_key:
            return Solution(path=path, length=len(path), solved=True)
        for next_state in adapter.get_neighbors(state):
            next_key = adapter.key(next_state)
            if next_key in visited:
                continue
            visited.add(next_key)
            queue.append((next_state, path + [next_state]))
    return None


def get_solver(algorithm_id: str = DEFAULT_SOLVER) -> SolverFn:
    solver = _REGISTRY.get(algorithm_id)
    if solver is None:
        logger.warning("Unknown solver '%s', falling back to %s", algorithm_id, DEFAULT_SOLVER)
        return _REGISTRY[DEFAULT_SOLVER]
    return solver


def registered_solver_ids() -> List[str]:
    return list(_REGISTRY)


__all__ = [
    "DEFAULT_SOLVER",
    "Solution",
    "get_solver",
    "register_solver",
    "registered_solver_ids",
    "solve_bfs",
]
