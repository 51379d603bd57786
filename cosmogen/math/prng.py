"""Hierarchical seeded random sources."""
from __future__ import annotations

import hashlib
import math
import random
from typing import Sequence, TypeVar

T = TypeVar("T")

_SEPARATOR = ":"


def _hash_seed(*parts: object) -> int:
    payload = "|".join(str(part) for part in parts)
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()
    return int(digest[:16], 16)


def derive_seed(parent: str, labels: Sequence[object]) -> str:
    """Combine a parent seed with labels into a child seed (order-sensitive)."""

    return _SEPARATOR.join([parent, *(str(label) for label in labels)])


class SeededRandom:
    """Deterministic random stream keyed by a seed string.

    Children are derived from the seed identity alone, so deriving never
    consumes draws from the parent and two equal seed chains always produce
    identical sequences.
    """

    __slots__ = ("_seed", "_rng")

    def __init__(self, seed: str | int) -> None:
        self._seed = str(seed)
        self._rng = random.Random(_hash_seed(self._seed))

    @property
    def seed(self) -> str:
        return self._seed

    @property
    def seed_int(self) -> int:
        """Unsigned 32-bit form of the seed identity for coordinate hashing."""

        return _hash_seed(self._seed) & 0xFFFFFFFF

    def next(self) -> float:
        return self._rng.random()

    def uniform(self, minimum: float, maximum: float) -> float:
        """Float in [minimum, maximum)."""

        return minimum + (maximum - minimum) * self._rng.random()

    def uniform_int(self, minimum: int, maximum: int) -> int:
        """Integer in [minimum, maximum], both ends inclusive."""

        low = math.ceil(minimum)
        high = math.floor(maximum)
        return self._rng.randint(low, high)

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("cannot choose from an empty sequence")
        return items[self._rng.randrange(len(items))]

    def derive_child(self, *labels: object) -> "SeededRandom":
        return SeededRandom(derive_seed(self._seed, labels))

    def __repr__(self) -> str:
        return f"SeededRandom({self._seed!r})"


__all__ = ["SeededRandom", "derive_seed"]
