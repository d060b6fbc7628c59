"""One-pass weighted sampling without replacement.

Every accepted item gets a random priority key ``Exp(1) / weight`` and the
samplers keep the smallest keys. This gives inclusion probability
proportional to weight over a single pass of a stream of unknown length.

Quick Reference:
    WeightedReservoir: Keep up to k items, O(log k) per item
    SingleItemReservoir: Keep one item, O(1) per item
    sample_weighted: One call, returns an iterator of up to k values
    sample_one: One call, returns a single value or None
    check_weight: Validate a weight (NaN, infinite, negative are rejected)

Example:
    import random
    from weightedreservoir.sampling import WeightedReservoir, sample_weighted

    rng = random.Random(42)

    reservoir = WeightedReservoir[str](k=3)
    for weight, name in [(1.0, "a"), (4.0, "b"), (0.5, "c"), (2.0, "d")]:
        reservoir.feed(name, weight, rng)
    print(list(reservoir.peek()))

    picks = list(sample_weighted(stream_of_pairs, rng, k=100))
"""

from weightedreservoir.sampling.api import sample_one, sample_weighted
from weightedreservoir.sampling.base import WeightedSampler
from weightedreservoir.sampling.randomness import (
    MAX_KEY,
    NumpyRandomSource,
    RandomSource,
    StdlibRandomSource,
    as_random_source,
    priority_key,
)
from weightedreservoir.sampling.reservoir import WeightedReservoir
from weightedreservoir.sampling.single import SingleItemReservoir
from weightedreservoir.sampling.weights import (
    InvalidWeightError,
    WeightErrorKind,
    check_weight,
    is_valid_weight,
)

__all__ = [
    "MAX_KEY",
    # Errors
    "InvalidWeightError",
    # Randomness
    "NumpyRandomSource",
    "RandomSource",
    # Samplers
    "SingleItemReservoir",
    "StdlibRandomSource",
    "WeightErrorKind",
    "WeightedReservoir",
    "WeightedSampler",
    "as_random_source",
    # Validation
    "check_weight",
    "is_valid_weight",
    "priority_key",
    # Convenience
    "sample_one",
    "sample_weighted",
]
