"""Single-item weighted sampling.

SingleItemReservoir is WeightedReservoir specialised to k = 1: a single
optional (key, value) slot instead of a heap. An item replaces the held one
only when its key is strictly smaller, which gives each item a selection
probability equal to its share of the total weight.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TypeVar

from weightedreservoir.sampling.base import WeightedSampler

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")


class SingleItemReservoir(WeightedSampler[T]):
    """Pick one item from a weighted stream in O(1) space and time per item.

    Example:
        rng = random.Random()
        pick = SingleItemReservoir[str]()
        for weight, server in candidates:
            pick.feed(server, weight, rng)
        target = pick.get()
    """

    def __init__(self) -> None:
        super().__init__()
        self._has_value = False
        self._key = 0.0
        self._value: T | None = None

    @property
    def capacity(self) -> int:
        """Always 1."""
        return 1

    def _offer(self, key: float, value: T) -> None:
        if not self._has_value or key < self._key:
            self._has_value = True
            self._key = key
            self._value = value

    def _values(self) -> Iterator[T]:
        if self._has_value:
            yield self._value  # type: ignore[misc]

    def get(self) -> T | None:
        """Return the held value without consuming the reservoir.

        Returns None when nothing has been accepted yet. A held value that is
        itself None is indistinguishable here; use ``peek()`` for that case.
        """
        self._ensure_live()
        return self._value

    def drain(self) -> T | None:
        """Consume the reservoir and return the held value, or None."""
        self._mark_drained()
        value = self._value
        self._has_value = False
        self._value = None
        return value

    @property
    def sample_size(self) -> int:
        return 1 if self._has_value else 0

    @property
    def memory_bytes(self) -> int:
        return sys.getsizeof(self) + sys.getsizeof(self._key)

    def __repr__(self) -> str:
        return f"SingleItemReservoir(sampled={self.sample_size}, seen={self._total_count})"
