"""Weighted reservoir sampling without replacement.

WeightedReservoir keeps a sample of at most k items from a stream of
(weight, value) pairs of unknown, possibly infinite, length. Each accepted
item gets a random priority key ``Exp(1) / weight`` and the reservoir keeps
the k smallest keys seen so far. For k = 1 an item's selection probability
is exactly its share of the total weight; for larger k the sample follows
successive (order-proportional-to-size) sampling.

Key properties:
- Space: O(k), independent of stream length
- Update: O(log k)
- Query: O(k)
- Single pass, no knowledge of the total weight needed

Zero-weight items are valid. They get the largest representable key, so
they are only kept while fewer than k positive-weight items have been seen.

Reference:
    Efraimidis, Spirakis. "Weighted random sampling with a reservoir" (2006)
"""

from __future__ import annotations

import heapq
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from weightedreservoir.sampling.base import WeightedSampler

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")


@dataclass(order=True, slots=True)
class _Entry(Generic[T]):
    """Heap entry ordered by negated key alone.

    heapq is a min-heap, so storing ``-key`` puts the worst (largest) key on
    top where it can be evicted in O(log k).
    """

    neg_key: float
    value: T = field(compare=False)

    @property
    def key(self) -> float:
        return -self.neg_key


class WeightedReservoir(WeightedSampler[T]):
    """One-pass weighted random sampler without replacement.

    Every fed item is pushed onto a bounded max-heap of keys and, once the
    heap holds more than k entries, the largest key is popped. Inserting
    before evicting keeps k = 0 and the not-yet-full case free of special
    handling.

    Args:
        k: Maximum sample size. Zero is allowed and yields an empty sample.

    Example:
        rng = random.Random(42)
        reservoir = WeightedReservoir[str](k=10)

        for weight, user_id in activity_stream:
            reservoir.feed(user_id, weight, rng)

        # Users picked with probability tied to their activity
        picked = reservoir.drain()
    """

    def __init__(self, k: int):
        """Initialize an empty reservoir.

        Args:
            k: Maximum sample size. Must be >= 0.

        Raises:
            ValueError: If k < 0.
        """
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")

        super().__init__()
        self._k = k
        self._heap: list[_Entry[T]] = []

    @property
    def capacity(self) -> int:
        """Maximum number of items in the sample."""
        return self._k

    def _offer(self, key: float, value: T) -> None:
        heapq.heappush(self._heap, _Entry(-key, value))
        if len(self._heap) > self._k:
            heapq.heappop(self._heap)

    def _values(self) -> Iterator[T]:
        return (entry.value for entry in self._heap)

    def entries(self) -> list[tuple[float, T]]:
        """Return held ``(key, value)`` pairs, smallest key first.

        Mostly useful for diagnostics; keys are only comparable within one
        reservoir's stream.
        """
        self._ensure_live()
        return sorted(((e.key, e.value) for e in self._heap), key=lambda kv: kv[0])

    def drain(self) -> list[T]:
        """Consume the reservoir and return the sampled values.

        Returns:
            List of ``min(k, items_seen)`` values in no particular order.

        Raises:
            RuntimeError: If the reservoir was already drained.
        """
        self._mark_drained()
        values = [entry.value for entry in self._heap]
        self._heap = []
        return values

    @property
    def is_full(self) -> bool:
        """Whether the reservoir holds k items."""
        return len(self._heap) >= self._k

    @property
    def sample_size(self) -> int:
        """Current number of items in the sample."""
        return len(self._heap)

    @property
    def memory_bytes(self) -> int:
        """Estimated memory usage in bytes."""
        entry_bytes = sum(sys.getsizeof(entry) for entry in self._heap)
        return entry_bytes + sys.getsizeof(self._heap) + sys.getsizeof(self)

    def __repr__(self) -> str:
        return (
            f"WeightedReservoir(capacity={self._k}, "
            f"sampled={len(self._heap)}, "
            f"seen={self._total_count})"
        )
