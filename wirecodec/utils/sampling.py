# wirecodec/utils/sampling.py
"""
Generic sequence producers over a fixed pool.

These have no wire-format meaning; higher layers use them to pick resources
(every k-subset of a candidate pool, or random draws without replacement).
"""
from __future__ import annotations

import itertools
import random
from typing import Any, Collection, Generic, Iterator, List, Mapping, Optional, TypeVar

from wirecodec.core.errors import EmptyPoolError

T = TypeVar("T")
K = TypeVar("K")

_EXHAUSTED = object()


class CombinationGenerator(Generic[T]):
    """
    Lazily yields every `sample_size`-element combination of `pool`.

    The pool is snapshotted on the first has_next()/get() after construction
    or reset(); later changes to the pool are not seen until the next reset().
    """

    def __init__(self, pool: Collection[T], sample_size: int):
        if sample_size < 0:
            raise ValueError(f"sample_size must be >= 0, got {sample_size}")
        self._pool = pool
        self._sample_size = sample_size
        self.reset()

    @property
    def sample_size(self) -> int:
        return self._sample_size

    def reset(self) -> None:
        self._combos: Optional[Iterator[tuple]] = None
        self._next: Any = _EXHAUSTED

    def has_next(self) -> bool:
        self._prime()
        return self._next is not _EXHAUSTED

    def get(self) -> List[T]:
        if not self.has_next():
            raise EmptyPoolError(
                f"No more {self._sample_size}-combinations of a pool of {len(self._pool)}"
            )
        combo = list(self._next)
        self._next = next(self._combos, _EXHAUSTED)  # type: ignore[arg-type]
        return combo

    def __iter__(self) -> Iterator[List[T]]:
        while self.has_next():
            yield self.get()

    def _prime(self) -> None:
        if self._combos is None:
            self._combos = itertools.combinations(list(self._pool), self._sample_size)
            self._next = next(self._combos, _EXHAUSTED)


class RandomGenerator(Generic[K]):
    """
    Draws keys of `pool` at random without replacement.

    Once every key has been drawn the draw list is refilled from the pool, so
    each round returns every key exactly once. reset() starts a new round.
    """

    def __init__(self, pool: Mapping[K, Any], rng: Optional[random.Random] = None):
        self._pool = pool
        self._rng = rng or random.Random()
        self._elems: List[K] = []

    @property
    def remaining(self) -> int:
        """Keys left in the current round (0 before the first draw)."""
        return len(self._elems)

    def reset(self) -> None:
        self._elems.clear()

    def get(self) -> K:
        if not self._elems:
            if not self._pool:
                raise EmptyPoolError("Cannot draw from an empty pool")
            self._elems = list(self._pool)
        return self._elems.pop(self._rng.randrange(len(self._elems)))
