"""Shufflers — the pluggable randomness source behind playlist ordering.

Invariants:
    - shuffle() returns a new list and never mutates its input
    - Output is a permutation of the input (same elements, same multiplicity)

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass any object with shuffle()
    - RandomShuffler uses random.Random.shuffle (Fisher-Yates, uniform). Order is
      non-contractual; playlists are not meant to be reproducible unless seeded
"""

import random
from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class Shuffler(Protocol):
    """Contract for anything that can reorder a playlist."""
    def shuffle(self, items: Sequence[T]) -> list[T]: ...


class RandomShuffler:
    """Uniform shuffle backed by a private random.Random instance."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)  # nosec B311 — not security sensitive

    def shuffle(self, items: Sequence[T]) -> list[T]:
        shuffled = list(items)
        self._rng.shuffle(shuffled)
        return shuffled


class IdentityShuffler:
    """Keeps declaration order. Used when shuffling is disabled."""

    def shuffle(self, items: Sequence[T]) -> list[T]:
        return list(items)
