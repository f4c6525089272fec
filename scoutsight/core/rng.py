"""
Deterministic random-number capability.

Every engine function that needs randomness takes an RNG argument. Nothing
reads from the module-level `random` state, so two sessions driven from
different seeds never interfere and a replay from the same seed produces
identical output.
"""

import hashlib
import random
from typing import Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RNG(Protocol):
    """The draws the engine consumes."""

    def next(self) -> float:
        """Uniform float in [0, 1)."""
        ...

    def next_int(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both inclusive."""
        ...

    def gaussian(self, mean: float, stddev: float) -> float:
        ...

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        ...

    def pick(self, items: Sequence[T]) -> T:
        ...

    def pick_weighted(self, items: Sequence[tuple[T, float]]) -> T:
        ...

    def shuffle(self, items: Sequence[T]) -> list[T]:
        ...


class SeededRNG:
    """
    Seeded RNG backed by a private random.Random instance.

    String seeds are hashed by random.Random itself, which is stable across
    processes (unlike hash()), so the same seed always gives the same stream.

    Usage:
        rng = SeededRNG("season-3-week-12")
        rng.next_int(1, 20)
        rng.gaussian(14, 2.5)
    """

    def __init__(self, seed: str) -> None:
        if not seed:
            raise ValueError("RNG seed must be a non-empty string")
        self.seed = seed
        self._random = random.Random(seed)

    def next(self) -> float:
        return self._random.random()

    def next_int(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"next_int: low ({low}) must be <= high ({high})")
        return self._random.randint(low, high)

    def next_float(self, low: float, high: float) -> float:
        if low > high:
            raise ValueError(f"next_float: low ({low}) must be <= high ({high})")
        return low + self._random.random() * (high - low)

    def gaussian(self, mean: float, stddev: float) -> float:
        if stddev <= 0:
            return mean
        return self._random.gauss(mean, stddev)

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        return self._random.random() < probability

    def pick(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("pick: items must not be empty")
        return items[self._random.randrange(len(items))]

    def pick_weighted(self, items: Sequence[tuple[T, float]]) -> T:
        """Pick an item with probability proportional to its weight."""
        if not items:
            raise ValueError("pick_weighted: items must not be empty")

        total = 0.0
        for _, weight in items:
            if weight < 0:
                raise ValueError(f"pick_weighted: negative weight {weight}")
            total += weight
        if total <= 0:
            raise ValueError("pick_weighted: total weight must be positive")

        threshold = self._random.random() * total
        last = items[0][0]
        for item, weight in items:
            if weight == 0:
                continue
            last = item
            threshold -= weight
            if threshold <= 0:
                return item
        # Float rounding can leave a sliver past the last bucket
        return last

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a shuffled copy; the input is left untouched."""
        result = list(items)
        self._random.shuffle(result)
        return result

    def fork(self, label: str) -> "SeededRNG":
        """
        Derive an independent child stream.

        The child depends only on the parent seed and the label, not on how
        many draws the parent has made, so forks can be taken in any order.
        """
        digest = hashlib.sha256(f"{self.seed}/{label}".encode()).hexdigest()
        return SeededRNG(digest)

    def __repr__(self) -> str:
        return f"SeededRNG(seed={self.seed!r})"
