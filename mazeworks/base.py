"""Abstract interfaces for maze generation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterable, List, Optional, TypeVar

from .presets import DEFAULT_AGE_RANGE, validate_quantity
from .rng import generate_seed

RecordT = TypeVar("RecordT")


@dataclass
class MazeBatch(Generic[RecordT]):
    """A run of mazes whose seeds are consecutive from ``base_seed``."""

    mazes: List[RecordT]
    base_seed: int
    age_range: str
    quantity: int

    @property
    def seeds(self) -> List[int]:
        return [self.base_seed + index for index in range(self.quantity)]

    def to_dict(self) -> dict:
        return {
            "mazes": [getattr(maze, "to_dict")() for maze in self.mazes],
            "baseSeed": self.base_seed,
            "ageRange": self.age_range,
            "quantity": self.quantity,
        }


class AbstractMazeGenerator(ABC, Generic[RecordT]):
    """Base class for builders that emit immutable maze records."""

    def __init__(self, *, age_range: str = DEFAULT_AGE_RANGE) -> None:
        self.age_range = age_range

    @abstractmethod
    def create_maze(self, *, age_range: Optional[str] = None, seed: Optional[int] = None) -> RecordT:
        """Create a maze for the given age range and seed."""

    def create_random_maze(self) -> RecordT:
        """Create a single maze from a fresh seed."""

        return self.create_maze(seed=generate_seed())

    def generate_batch(
        self,
        quantity: int,
        *,
        age_range: Optional[str] = None,
        base_seed: Optional[int] = None,
    ) -> MazeBatch[RecordT]:
        """Generate ``quantity`` mazes, the i-th seeded with ``base_seed + i``."""

        validate_quantity(quantity)
        age_range = age_range or self.age_range
        if base_seed is None:
            base_seed = generate_seed()
        mazes = [
            self.create_maze(age_range=age_range, seed=base_seed + index)
            for index in range(quantity)
        ]
        return MazeBatch(mazes=mazes, base_seed=base_seed, age_range=age_range, quantity=quantity)

    def records_to_dicts(self, records: Iterable[RecordT]) -> List[Dict[str, Any]]:
        return [self.record_to_dict(record) for record in records]

    def record_to_dict(self, record: RecordT) -> Dict[str, Any]:
        """Dictionary serialization hook for maze records."""

        if hasattr(record, "to_dict"):
            return getattr(record, "to_dict")()
        raise TypeError(
            "Maze record must implement to_dict() or override record_to_dict() in the generator."
        )


__all__ = [
    "AbstractMazeGenerator",
    "MazeBatch",
]
