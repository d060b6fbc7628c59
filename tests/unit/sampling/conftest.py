"""Fixtures for sampler tests."""

from collections.abc import Iterable

import pytest

from weightedreservoir.sampling import RandomSource


class ScriptedSource(RandomSource):
    """Returns pre-chosen 'exponential' draws and counts how many were taken."""

    def __init__(self, draws: Iterable[float]):
        self._draws = iter(draws)
        self.calls = 0

    def exponential(self) -> float:
        self.calls += 1
        return next(self._draws)


@pytest.fixture
def scripted():
    """Factory: scripted(draws) -> ScriptedSource."""
    return ScriptedSource
