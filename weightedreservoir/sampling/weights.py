"""Weight validation for weighted sampling.

A weight may only take part in a priority-key comparison when it is finite
and non-negative. Zero is accepted: a zero-weight item gets the worst
possible key rather than being dropped.

The negativity test looks at the sign bit, not at ``weight < 0``, so
negative zero is rejected as well.
"""

from __future__ import annotations

import math
from enum import Enum

__all__ = [
    "InvalidWeightError",
    "WeightErrorKind",
    "check_weight",
    "is_valid_weight",
]


class WeightErrorKind(Enum):
    """Why a weight was rejected."""

    NAN = "NaN"
    INFINITE = "infinite"
    NEGATIVE = "negative"


class InvalidWeightError(ValueError):
    """Raised when an item's weight cannot take part in sampling.

    Attributes:
        kind: Which invalidity the weight exhibits.
        weight: The offending weight, as given by the caller.
        position: Zero-based index of the failing pair when raised from
            batch ingestion, otherwise None.
    """

    def __init__(self, kind: WeightErrorKind, weight: object = None, position: int | None = None):
        self.kind = kind
        self.weight = weight
        self.position = position
        super().__init__(f"cannot sample with invalid weight: {kind.value}")

    def at_position(self, position: int) -> InvalidWeightError:
        """Return a copy of this error tagged with a batch position."""
        return InvalidWeightError(self.kind, self.weight, position)


def check_weight(weight: float) -> None:
    """Validate a weight.

    Args:
        weight: Any real number ``float()`` accepts.

    Raises:
        InvalidWeightError: If the weight is NaN, infinite or has its
            sign bit set.
    """
    w = float(weight)

    if math.isnan(w):
        raise InvalidWeightError(WeightErrorKind.NAN, weight)
    if math.isinf(w):
        raise InvalidWeightError(WeightErrorKind.INFINITE, weight)
    if math.copysign(1.0, w) < 0:
        raise InvalidWeightError(WeightErrorKind.NEGATIVE, weight)


def is_valid_weight(weight: float) -> bool:
    """Return True if ``check_weight`` would accept the weight.

    Handy for pre-filtering a stream when bad items should be skipped
    instead of aborting ingestion.
    """
    try:
        check_weight(weight)
    except InvalidWeightError:
        return False
    return True
