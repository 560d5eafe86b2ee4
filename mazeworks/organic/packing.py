"""Circle packing for organic maze layouts.

Circles are scattered with variable radii (which breaks up the regular hex
pattern equal circles settle into) and then relaxed: overlapping circles
push each other apart while circles just short of touching pull together.
Same seed, same layout.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..rng import create_rng
from .spatial_hash import SpatialHashGrid

logger = logging.getLogger("mazeworks.organic")

FILL_RATIO = 0.4
MIN_RADIUS_FLOOR = 4.0
DAMPING = 0.5
ATTRACT_FRACTION = 0.15
ATTRACT_MIN = 2.0
ATTRACT_STRENGTH = 0.1
TOUCH_FRACTION = 0.05
TOUCH_MIN = 2.0
SETTLE_EPSILON = 1e-3
MIN_ITERATIONS = 200
MAX_ITERATIONS = 500
ITERATIONS_PER_CIRCLE = 2.5
# stand-in distance for coincident centers
COINCIDENT_DISTANCE = 0.001


@dataclass
class Circle:
    id: int
    x: float
    y: float
    r: float

    def to_dict(self) -> dict:
        return {"id": self.id, "x": self.x, "y": self.y, "r": self.r}


@dataclass
class PackingResult:
    circles: List[Circle]
    iterations: int
    base_radius: float
    min_radius: float
    max_radius: float


def iteration_budget(target_count: int) -> int:
    return min(MAX_ITERATIONS, max(MIN_ITERATIONS, int(math.ceil(target_count * ITERATIONS_PER_CIRCLE))))


def attract_range(combined_radius: float) -> float:
    return max(ATTRACT_MIN, combined_radius * ATTRACT_FRACTION)


def touch_distance(first: Circle, second: Circle) -> float:
    combined = first.r + second.r
    return combined + max(TOUCH_MIN, combined * TOUCH_FRACTION)


def pack_circles(
    width: float,
    height: float,
    target_count: int,
    seed: int,
    *,
    max_iterations: Optional[int] = None,
) -> PackingResult:
    """Scatter ``target_count`` circles in a width x height box and relax them."""

    if width <= 0 or height <= 0:
        raise ValueError(f"bounds must be positive, got {width}x{height}")
    if target_count < 1:
        raise ValueError(f"target_count must be at least 1, got {target_count}")

    rng = create_rng(seed)
    area = width * height
    base_r = math.sqrt((area * FILL_RATIO) / (target_count * math.pi))
    min_r = max(MIN_RADIUS_FLOOR, base_r * 0.5)
    max_r = max(min_r + 2, base_r * 1.4)
    padding = max_r + 2

    circles: List[Circle] = []
    for circle_id in range(target_count):
        t = circle_id / max(1, target_count - 1)
        rand = rng.random()
        r = min_r + (max_r - min_r) * (0.6 + 0.4 * (t * 0.3 + rand * 0.7))
        x = padding + rng.random_float(0, width - 2 * padding)
        y = padding + rng.random_float(0, height - 2 * padding)
        circles.append(Circle(circle_id, x, y, max(min_r, r)))

    budget = iteration_budget(target_count) if max_iterations is None else max_iterations
    iterations = relax_circles(circles, width, height, budget, attract=True)
    logger.debug(
        "Packed %d circles in %.1fx%.1f after %d/%d iterations (base radius %.2f)",
        target_count,
        width,
        height,
        iterations,
        budget,
        base_r,
    )
    return PackingResult(
        circles=circles,
        iterations=iterations,
        base_radius=base_r,
        min_radius=min_r,
        max_radius=max_r,
    )


def relax_circles(
    circles: Sequence[Circle],
    width: float,
    height: float,
    iterations: int,
    *,
    attract: bool = True,
) -> int:
    """Move circles in place until they settle or ``iterations`` run out.

    Circles are updated one at a time in id order, each seeing the positions
    already updated this iteration. Returns the number of iterations run.
    """

    if not circles or iterations <= 0:
        return 0
    largest = max(circle.r for circle in circles)
    reach = 2 * largest + attract_range(2 * largest)
    index = SpatialHashGrid(0.0, 0.0, width, height, reach)

    for iteration in range(iterations):
        index.rebuild(circles)
        displacement = 0.0
        for i, a in enumerate(circles):
            fx = 0.0
            fy = 0.0
            for j in index.get_nearby(a.x, a.y):
                if j == i:
                    continue
                b = circles[j]
                dx = a.x - b.x
                dy = a.y - b.y
                dist = math.sqrt(dx * dx + dy * dy) or COINCIDENT_DISTANCE
                overlap = a.r + b.r - dist
                if overlap > 0:
                    strength = 1.0
                elif attract and overlap > -attract_range(a.r + b.r):
                    strength = ATTRACT_STRENGTH
                else:
                    continue
                f = overlap / dist
                fx += (dx / dist) * f * strength
                fy += (dy / dist) * f * strength

            new_x = min(max(a.x + fx * DAMPING, a.r), max(a.r, width - a.r - 1))
            new_y = min(max(a.y + fy * DAMPING, a.r), max(a.r, height - a.r - 1))
            displacement += abs(new_x - a.x) + abs(new_y - a.y)
            a.x = new_x
            a.y = new_y

        if displacement < SETTLE_EPSILON:
            return iteration + 1
    return iterations


def compute_neighbors(circles: Sequence[Circle]) -> Dict[int, List[int]]:
    """Touch relation between circles: id -> ascending list of neighbor ids.

    Two circles touch when the gap between them is at most
    ``max(2, 5% of their combined radius)``. Circles must be ordered by id.
    """

    neighbors: Dict[int, List[int]] = {circle.id: [] for circle in circles}
    if len(circles) < 2:
        return neighbors

    largest = max(circle.r for circle in circles)
    reach = 2 * largest + max(TOUCH_MIN, 2 * largest * TOUCH_FRACTION)
    index = SpatialHashGrid(
        min(circle.x for circle in circles),
        min(circle.y for circle in circles),
        max(circle.x for circle in circles),
        max(circle.y for circle in circles),
        reach,
    )
    index.rebuild(circles)

    for i, a in enumerate(circles):
        for j in index.get_nearby(a.x, a.y):
            if j <= i:
                continue
            b = circles[j]
            dx = a.x - b.x
            dy = a.y - b.y
            if math.sqrt(dx * dx + dy * dy) <= touch_distance(a, b):
                neighbors[a.id].append(b.id)
                neighbors[b.id].append(a.id)
    return neighbors


__all__ = [
    "Circle",
    "PackingResult",
    "compute_neighbors",
    "iteration_budget",
    "pack_circles",
    "relax_circles",
    "touch_distance",
]
