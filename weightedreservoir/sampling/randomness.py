"""Randomness sources and priority-key derivation.

The reservoirs never seed or own a random generator. Callers pass one in
on every feed call and the reservoir only draws Exponential(1) variates
from it. Two backends are supported out of the box:

- ``random.Random`` (or the ``random`` module itself)
- ``numpy.random.Generator`` and the legacy ``numpy.random.RandomState``

Anything implementing ``RandomSource`` works too.

Priority keys follow the exponential form of Efraimidis-Spirakis:
``key = Exp(1) / weight``, smallest key wins. It ranks items the same way
as keeping the largest ``U ** (1 / weight)`` but stays well conditioned for
very large and very small weights.

Reference:
    Efraimidis, Spirakis. "Weighted random sampling with a reservoir" (2006)
    Müller. "Accelerating weighted random sampling without replacement" (2016)
"""

from __future__ import annotations

import random
import sys
from abc import ABC, abstractmethod
from types import ModuleType
from typing import Any

import numpy as np

__all__ = [
    "MAX_KEY",
    "NumpyRandomSource",
    "RandomSource",
    "StdlibRandomSource",
    "as_random_source",
    "priority_key",
]

# Key given to zero-weight items: loses to every real competitor.
MAX_KEY = sys.float_info.max


class RandomSource(ABC):
    """Produces Exponential(rate=1) draws on demand."""

    @abstractmethod
    def exponential(self) -> float:
        """Draw one standard exponential variate."""


class StdlibRandomSource(RandomSource):
    """Adapter over a ``random.Random`` instance.

    Args:
        rng: The generator to draw from. Its state advances by one
            exponential draw per accepted non-zero-weight item.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random):
        self._rng = rng

    def exponential(self) -> float:
        return self._rng.expovariate(1.0)

    def __repr__(self) -> str:
        return f"StdlibRandomSource({self._rng!r})"


class NumpyRandomSource(RandomSource):
    """Adapter over ``numpy.random.Generator`` or ``numpy.random.RandomState``."""

    __slots__ = ("_rng",)

    def __init__(self, rng: np.random.Generator | np.random.RandomState):
        self._rng = rng

    def exponential(self) -> float:
        return float(self._rng.standard_exponential())

    def __repr__(self) -> str:
        return f"NumpyRandomSource({self._rng!r})"


def as_random_source(rng: Any) -> RandomSource:
    """Wrap a caller-supplied generator in a ``RandomSource``.

    Args:
        rng: A ``RandomSource``, a ``random.Random``, the ``random`` module,
            a ``numpy.random.Generator`` or a ``numpy.random.RandomState``.

    Returns:
        A source drawing from ``rng``. Existing sources pass through.

    Raises:
        TypeError: If ``rng`` is none of the supported types. Integer seeds
            are rejected on purpose: the caller owns seeding.
    """
    if isinstance(rng, RandomSource):
        return rng
    if isinstance(rng, random.Random):
        return StdlibRandomSource(rng)
    if isinstance(rng, np.random.Generator | np.random.RandomState):
        return NumpyRandomSource(rng)
    if isinstance(rng, ModuleType) and rng is random:
        # module-level functions draw from the shared global instance
        return StdlibRandomSource(random)  # type: ignore[arg-type]
    raise TypeError(
        f"rng must be a random.Random, numpy Generator/RandomState or RandomSource, "
        f"got {type(rng).__name__}"
    )


def priority_key(weight: float, source: RandomSource) -> float:
    """Derive the retention key for an already validated weight.

    Zero weight maps to ``MAX_KEY`` without consuming a draw.
    """
    w = float(weight)
    if w == 0.0:
        return MAX_KEY
    return source.exponential() / w
