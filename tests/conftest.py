"""
Shared pytest fixtures for sortscope tests.
"""

import pytest

from sortscope import SortingEngine, algorithm_keys
from sortscope.inputs import DISTRIBUTIONS, generate
from sortscope.logging_config import disable_console_logging

ALL_KEYS = algorithm_keys()

SAMPLE_INPUTS = [
    [],
    [7],
    [2, 1],
    [5, 3, 1, 4, 2],
    [1, 2, 3, 4, 5, 6],
    [9, 8, 7, 6, 5, 4, 3, 2, 1],
    [3, 3, 1, 3, 2, 1, 2, 3],
    [170, 45, 75, 90, 802, 24, 2, 66],
    [0, 10, 100, 1000, 0, 10, 5, 55, 505, 5005, 1],
    [42, 17, 99, 3, 58, 17, 0, 64, 23, 88, 41, 12, 75, 33, 6, 91, 50],
]

GENERATED_INPUTS = {
    f"{name}-{size}": generate(name, size, seed=size)
    for name in sorted(DISTRIBUTIONS)
    for size in (8, 33, 100)
}

# past the default recursion limit
LARGE_N = 1200


@pytest.fixture
def engine():
    return SortingEngine()


@pytest.fixture(autouse=True)
def _quiet_console():
    yield
    disable_console_logging()
