"""
Seeded input distributions for the engine.

All values are non-negative integers so every algorithm, radix included,
accepts the generated lists.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

import numpy as np


def _random(rng: np.random.Generator, size: int) -> np.ndarray:
    return rng.integers(1, 101, size=size)


def _nearly_sorted(rng: np.random.Generator, size: int) -> np.ndarray:
    arr = np.arange(1, size + 1)
    for _ in range(size // 10):
        i, j = rng.integers(0, size, size=2)
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def _reversed(rng: np.random.Generator, size: int) -> np.ndarray:
    return np.arange(size, 0, -1)


def _few_unique(rng: np.random.Generator, size: int) -> np.ndarray:
    return rng.integers(1, 6, size=size)


DISTRIBUTIONS: Dict[str, Callable[[np.random.Generator, int], np.ndarray]] = {
    "random":        _random,
    "nearly-sorted": _nearly_sorted,
    "reversed":      _reversed,
    "few-unique":    _few_unique,
}


def generate(distribution: str, size: int, seed: Optional[int] = None) -> List[int]:
    if distribution not in DISTRIBUTIONS:
        raise KeyError(f"Unknown distribution: {distribution}")
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    rng = np.random.default_rng(seed)
    return DISTRIBUTIONS[distribution](rng, size).tolist()
