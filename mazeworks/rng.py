"""Seeded pseudo-random source (Mulberry32).

The same seed always yields the same sequence, so every maze can be
regenerated from its seed alone.
"""

from __future__ import annotations

import math
import random as _system_random
import time
from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")

MASK_32 = 0xFFFFFFFF
GOLDEN_GAMMA = 0x6D2B79F5
TWO_POW_32 = 4294967296


class SeededRng:
    """Deterministic generator with the small surface maze builders need."""

    def __init__(self, seed: int) -> None:
        self._state = int(seed) & MASK_32

    @property
    def state(self) -> int:
        return self._state

    def random(self) -> float:
        """Return a float in [0, 1)."""

        self._state = (self._state + GOLDEN_GAMMA) & MASK_32
        t = self._state
        t = ((t ^ (t >> 15)) * (t | 1)) & MASK_32
        t = ((t + (((t ^ (t >> 7)) * (t | 61)) & MASK_32)) & MASK_32) ^ t
        return ((t ^ (t >> 14)) & MASK_32) / TWO_POW_32

    def random_int(self, low: int, high: int) -> int:
        """Return an integer in [low, high], both ends inclusive."""

        return int(math.floor(self.random() * (high - low + 1))) + low

    def random_float(self, low: float, high: float) -> float:
        return self.random() * (high - low) + low

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Fisher-Yates shuffle in place, walking from the last index down."""

        for i in range(len(items) - 1, 0, -1):
            j = self.random_int(0, i)
            items[i], items[j] = items[j], items[i]
        return items

    def pick(self, items: Sequence[T]) -> T:
        return items[self.random_int(0, len(items) - 1)]


def create_rng(seed: int) -> SeededRng:
    return SeededRng(seed)


def generate_seed() -> int:
    """Seed for callers that did not supply one."""

    return (int(time.time() * 1000) ^ _system_random.getrandbits(32)) & MASK_32


__all__ = ["SeededRng", "create_rng", "generate_seed", "MASK_32"]
