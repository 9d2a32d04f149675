"""Instrumented sorting engine producing replayable action logs."""

import logging

from sortscope.actions import Action, ActionKind, MemorySnapshot
from sortscope.algorithms import (
    ALGORITHMS, AlgorithmInfo, algorithm_keys, get_complexity, get_description, get_info,
)
from sortscope.engine import RunResult, SortingEngine, dump_run, run
from sortscope.recorder import Recorder, Statistics
from sortscope.replay import iter_frames, metric_curves, replay

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ALGORITHMS",
    "Action",
    "ActionKind",
    "AlgorithmInfo",
    "MemorySnapshot",
    "Recorder",
    "RunResult",
    "SortingEngine",
    "Statistics",
    "algorithm_keys",
    "dump_run",
    "get_complexity",
    "get_description",
    "get_info",
    "iter_frames",
    "metric_curves",
    "replay",
    "run",
]
