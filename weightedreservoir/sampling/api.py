"""One-call helpers composing validation, keying and the reservoirs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from weightedreservoir.sampling.reservoir import WeightedReservoir
from weightedreservoir.sampling.single import SingleItemReservoir

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")


def sample_weighted(pairs: Iterable[tuple[float, T]], rng: Any, k: int) -> Iterator[T]:
    """Draw up to k values without replacement, proportional to weight.

    Args:
        pairs: ``(weight, value)`` tuples. Consumed in a single pass.
        rng: A ``random.Random``, numpy generator or ``RandomSource``.
        k: Sample size.

    Returns:
        A one-shot iterator over ``min(k, len(pairs))`` sampled values in no
        particular order.

    Raises:
        InvalidWeightError: On the first invalid weight. No sample is
            produced in that case.
        ValueError: If k < 0.

    Example:
        >>> import random
        >>> picks = sample_weighted([(1.0, "a"), (5.0, "b"), (2.0, "c")], random.Random(7), k=2)
        >>> len(list(picks))
        2
    """
    reservoir = WeightedReservoir[T](k)
    reservoir.feed_many(pairs, rng)
    return iter(reservoir.drain())


def sample_one(pairs: Iterable[tuple[float, T]], rng: Any) -> T | None:
    """Draw a single value with probability proportional to its weight.

    Returns None for an empty stream.

    Raises:
        InvalidWeightError: On the first invalid weight.
    """
    reservoir = SingleItemReservoir[T]()
    reservoir.feed_many(pairs, rng)
    return reservoir.drain()
