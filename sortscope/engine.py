"""
SortingEngine: runs one algorithm against a fresh Recorder and hands back
the sorted sequence, the complete action log and the run's statistics.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

from sortscope import algorithms
from sortscope.actions import Action
from sortscope.recorder import Recorder, Statistics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    algorithm: str
    sorted_sequence: Tuple[Any, ...]
    action_log: Tuple[Action, ...]
    stats: Statistics

    def to_dict(self, original=None) -> Dict[str, Any]:
        d: Dict[str, Any] = {"algorithm": self.algorithm}
        if original is not None:
            d["input"] = list(original)
        d["sorted"] = list(self.sorted_sequence)
        d["stats"] = self.stats.to_dict()
        d["actions"] = [a.to_dict() for a in self.action_log]
        return d


def as_list(sequence) -> list:
    # numpy arrays and scalars become plain Python numbers
    if hasattr(sequence, "tolist"):
        return list(sequence.tolist())
    return list(sequence)


class SortingEngine:
    """
    One engine per caller. ``run`` is synchronous; the engine only keeps the
    statistics of its latest run for ``get_stats``.
    """

    def __init__(self, radix_base: int = 10):
        if radix_base < 2:
            raise ValueError(f"radix base must be at least 2, got {radix_base}")
        self.radix_base = radix_base
        self._last_stats = Statistics()

    def run(self, algorithm: str, sequence: Sequence) -> RunResult:
        self._last_stats = Statistics()
        key = algorithms.resolve_key(algorithm)
        arr = as_list(sequence)
        if key == "radix":
            algorithms.check_radix_domain(arr)

        rec = Recorder()
        rec.reset_stats()
        algorithms.get_sorter(key, self.radix_base)(rec, arr)

        stats = rec.get_stats()
        self._last_stats = stats
        logger.debug("%s sorted %d elements in %d actions (%d comparisons, %d swaps)",
                     key, len(arr), len(rec.actions), stats.comparisons, stats.swaps)
        return RunResult(key, tuple(arr), rec.actions, stats)

    def get_stats(self) -> Statistics:
        return self._last_stats

    @staticmethod
    def get_complexity(algorithm: str) -> Dict[str, str]:
        return algorithms.get_complexity(algorithm)

    @staticmethod
    def get_description(algorithm: str) -> str:
        return algorithms.get_description(algorithm)


def run(algorithm: str, sequence: Sequence, radix_base: int = 10) -> RunResult:
    return SortingEngine(radix_base).run(algorithm, sequence)


def dump_run(result: RunResult, path, original=None):
    with open(path, "w") as f:
        json.dump(result.to_dict(original), f, indent=2)
