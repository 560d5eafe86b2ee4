"""Age-based difficulty presets and page geometry constants.

Smaller grids, larger cells and thicker lines make a maze easier. Each
preset also names the grid algorithm used by default and the node count of
its organic counterpart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


class ALGORITHMS:
    PRIM = "prim"
    RECURSIVE_BACKTRACKER = "recursive-backtracker"
    KRUSKAL = "kruskal"


ALGORITHM_IDS: Tuple[str, ...] = (
    ALGORITHMS.PRIM,
    ALGORITHMS.RECURSIVE_BACKTRACKER,
    ALGORITHMS.KRUSKAL,
)

# Batches for these age ranges may vary the algorithm after the first maze.
OLDER_AGE_RANGES_FOR_RANDOMIZER: Tuple[str, ...] = ("12-14", "15-17", "18+")

DEFAULT_AGE_RANGE = "9-11"
DEFAULT_QUANTITY = 5
MIN_QUANTITY = 1
MAX_QUANTITY = 10

# US Letter in points (72 points = 1 inch).
PAGE_WIDTH = 8.5 * 72
PAGE_HEIGHT = 11 * 72
MARGIN = 0.5 * 72
FOOTER_HEIGHT = 24
MAZE_TOP_MARGIN = 20
PRINTABLE_WIDTH = PAGE_WIDTH - 2 * MARGIN
PRINTABLE_HEIGHT = PAGE_HEIGHT - 2 * MARGIN

ORGANIC_BOUNDS_WIDTH = PRINTABLE_WIDTH
ORGANIC_BOUNDS_HEIGHT = PRINTABLE_HEIGHT - FOOTER_HEIGHT - MAZE_TOP_MARGIN


@dataclass(frozen=True)
class DifficultyPreset:
    grid_width: int
    grid_height: int
    cell_size: int
    line_thickness: int
    label: str
    algorithm: str = ALGORITHMS.PRIM
    organic_node_count: int = 0

    def to_dict(self) -> dict:
        return {
            "gridWidth": self.grid_width,
            "gridHeight": self.grid_height,
            "cellSize": self.cell_size,
            "lineThickness": self.line_thickness,
            "label": self.label,
            "algorithm": self.algorithm,
            "organicNodeCount": self.organic_node_count,
        }


DIFFICULTY_PRESETS: Dict[str, DifficultyPreset] = {
    "3": DifficultyPreset(6, 7, 72, 4, "Intro", ALGORITHMS.RECURSIVE_BACKTRACKER, 20),
    "4-5": DifficultyPreset(7, 8, 60, 4, "Easy", ALGORITHMS.RECURSIVE_BACKTRACKER, 35),
    "6-8": DifficultyPreset(10, 14, 30, 4, "Medium", ALGORITHMS.RECURSIVE_BACKTRACKER, 70),
    "9-11": DifficultyPreset(12, 18, 24, 2, "Hard", ALGORITHMS.PRIM, 120),
    "12-14": DifficultyPreset(14, 20, 24, 2, "Challenging", ALGORITHMS.PRIM, 180),
    "15-17": DifficultyPreset(24, 30, 20, 2, "Difficult", ALGORITHMS.PRIM, 300),
    "18+": DifficultyPreset(36, 42, 12, 1, "Epic Adventure", ALGORITHMS.PRIM, 500),
}


def get_difficulty_preset(age_range: str) -> DifficultyPreset:
    """Look up the preset for an age range, falling back to the default one."""

    return DIFFICULTY_PRESETS.get(age_range, DIFFICULTY_PRESETS[DEFAULT_AGE_RANGE])


def validate_quantity(quantity: int) -> int:
    if not MIN_QUANTITY <= quantity <= MAX_QUANTITY:
        raise ValueError(
            f"quantity must be between {MIN_QUANTITY} and {MAX_QUANTITY}, got {quantity}"
        )
    return quantity


__all__ = [
    "ALGORITHMS",
    "ALGORITHM_IDS",
    "OLDER_AGE_RANGES_FOR_RANDOMIZER",
    "DEFAULT_AGE_RANGE",
    "DEFAULT_QUANTITY",
    "MIN_QUANTITY",
    "MAX_QUANTITY",
    "ORGANIC_BOUNDS_WIDTH",
    "ORGANIC_BOUNDS_HEIGHT",
    "DifficultyPreset",
    "DIFFICULTY_PRESETS",
    "get_difficulty_preset",
    "validate_quantity",
]
