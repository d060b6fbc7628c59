"""Base protocol for one-pass weighted samplers.

Both reservoirs in this package share the same lifecycle:
- created empty with a fixed capacity
- fed (weight, value) pairs one at a time or in batches
- inspected by reference with peek() as often as needed
- consumed exactly once with drain()

The batch loop, drain bookkeeping and iteration live here so the concrete
reservoirs only decide how a keyed entry is retained.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from weightedreservoir.sampling.randomness import RandomSource, as_random_source, priority_key
from weightedreservoir.sampling.weights import InvalidWeightError, check_weight

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WeightedSampler(ABC, Generic[T]):
    """Protocol for samplers drawing without replacement, proportional to weight.

    Subclasses implement ``_offer`` (retain or discard a keyed value),
    ``_values``, ``drain`` and the introspection properties.
    """

    def __init__(self) -> None:
        self._total_count = 0
        self._drained = False

    def feed(self, value: T, weight: float, rng: Any) -> None:
        """Offer one value to the sampler.

        The weight is validated before anything is drawn from ``rng``, so a
        rejected item leaves both the sampler and the generator untouched.

        Args:
            value: The caller's item. Never compared or hashed.
            weight: Non-negative finite real number.
            rng: Randomness source, see ``as_random_source``.

        Raises:
            InvalidWeightError: If the weight is NaN, infinite or negative.
            RuntimeError: If the sampler has already been drained.
        """
        self._ensure_live()
        self._feed_one(value, weight, as_random_source(rng))

    def feed_many(self, pairs: Iterable[tuple[float, T]], rng: Any) -> int:
        """Feed ``(weight, value)`` pairs in order.

        Ingestion stops at the first invalid weight. Pairs after the
        failing one are never pulled from ``pairs``.

        Args:
            pairs: Iterable of ``(weight, value)`` tuples, possibly unbounded.
            rng: Randomness source, see ``as_random_source``.

        Returns:
            Number of pairs accepted.

        Raises:
            InvalidWeightError: On the first invalid weight, with
                ``position`` set to the pair's zero-based index.
            RuntimeError: If the sampler has already been drained.
        """
        self._ensure_live()
        source = as_random_source(rng)

        accepted = 0
        for position, (weight, value) in enumerate(pairs):
            try:
                self._feed_one(value, weight, source)
            except InvalidWeightError as e:
                logger.debug("Batch stopped at position %d after %d accepted", position, accepted)
                raise e.at_position(position) from None
            accepted += 1

        logger.debug("Batch complete: accepted=%d sample_size=%d", accepted, self.sample_size)
        return accepted

    def _feed_one(self, value: T, weight: float, source: RandomSource) -> None:
        try:
            check_weight(weight)
        except InvalidWeightError as e:
            logger.debug("Rejected weight %r (%s)", weight, e.kind.value)
            raise

        key = priority_key(weight, source)
        self._total_count += 1
        self._offer(key, value)

    def peek(self) -> Iterator[T]:
        """Lazily iterate over the values currently held.

        Order is unspecified but stable between calls when nothing is fed in
        between. Does not consume the sampler.
        """
        self._ensure_live()
        return self._values()

    def __iter__(self) -> Iterator[T]:
        return self.peek()

    def _ensure_live(self) -> None:
        if self._drained:
            raise RuntimeError(f"{type(self).__name__} has already been drained")

    def _mark_drained(self) -> None:
        self._ensure_live()
        self._drained = True
        logger.debug(
            "%s drained: sampled=%d seen=%d",
            type(self).__name__,
            self.sample_size,
            self._total_count,
        )

    @property
    def item_count(self) -> int:
        """Number of accepted items seen (not sample size)."""
        return self._total_count

    @property
    def is_drained(self) -> bool:
        """Whether drain() has consumed this sampler."""
        return self._drained

    def __len__(self) -> int:
        return self.sample_size

    @abstractmethod
    def _offer(self, key: float, value: T) -> None:
        """Retain or discard a keyed value."""

    @abstractmethod
    def _values(self) -> Iterator[T]:
        """Iterate over retained values without consuming them."""

    @property
    @abstractmethod
    def capacity(self) -> int:
        """Maximum number of items in the sample."""

    @property
    @abstractmethod
    def sample_size(self) -> int:
        """Current number of items in the sample."""

    @property
    @abstractmethod
    def memory_bytes(self) -> int:
        """Estimated memory usage in bytes."""
