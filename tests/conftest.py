"""
Shared pytest fixtures for weighted-reservoir tests.
"""

import logging
import random
from pathlib import Path

import numpy as np
import pytest


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Root test_output directory, created once per session. Plots and raw
    data written here outlive the test run.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Per-test output directory: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_dir = test_output_root / module_name / request.node.name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture
def rng() -> random.Random:
    """Seeded stdlib generator."""
    return random.Random(42)


@pytest.fixture
def np_rng() -> np.random.Generator:
    """Seeded numpy generator."""
    return np.random.default_rng(42)


@pytest.fixture(autouse=True)
def reset_weightedreservoir_logging():
    """Give every test a logger with only the library's NullHandler and no level."""
    logger = logging.getLogger("weightedreservoir")

    def _reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()
