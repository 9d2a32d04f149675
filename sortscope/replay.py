"""
Headless replay of an action log.

The engine produces the whole log up front; everything here walks an
existing log against a copy of the original input, the way a Player does.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, NamedTuple, Sequence, Tuple

import numpy as np

from sortscope.actions import ARITY, Action, ActionKind, MemorySnapshot
from sortscope.engine import as_list
from sortscope.recorder import Statistics


class ReplayOutcome(NamedTuple):
    sequence: List
    stats: Statistics


def _check(action: Action, n: int):
    if not isinstance(action.kind, ActionKind):
        raise ValueError(f"unknown action kind: {action.kind!r}")
    arity = ARITY[action.kind]
    if len(action.indices) != arity:
        raise ValueError(f"{action.kind.value} action needs {arity} indices, got {action.indices}")
    for i in action.indices:
        if not 0 <= i < n:
            raise ValueError(f"{action.kind.value} action index {i} outside 0..{n - 1}")
    if action.kind is ActionKind.ASSIGN and len(action.values) != 1:
        raise ValueError(f"assign action needs one value, got {action.values}")
    if action.kind.is_memory and action.size is None:
        raise ValueError(f"{action.kind.value} action is missing its size")


def iter_frames(original: Sequence, actions: Sequence[Action]) -> Iterator[Tuple[list, List[int], Action]]:
    """
    Apply ``actions`` one by one to a copy of ``original``.

    Yields ``(state, active_indices, action)`` after each action. ``state`` is
    the live working list, so copy it if a frame must outlive the next step.
    """
    state = as_list(original)
    n = len(state)
    for action in actions:
        _check(action, n)
        if action.kind is ActionKind.SWAP:
            i, j = action.indices
            state[i], state[j] = state[j], state[i]
        elif action.kind is ActionKind.ASSIGN:
            state[action.indices[0]] = action.values[0]
        yield state, list(action.indices), action


def replay(original: Sequence, actions: Sequence[Action]) -> ReplayOutcome:
    """Rebuild the sorted sequence and the statistics from a log alone."""
    comparisons = swaps = accesses = current = peak = 0
    timeline: List[MemorySnapshot] = []
    # stays the untouched copy when the log is empty
    state = as_list(original)
    for state, _, action in iter_frames(original, actions):
        kind = action.kind
        if kind is ActionKind.COMPARE:
            comparisons += 1
        elif kind is ActionKind.ACCESS:
            accesses += 1
        elif kind is ActionKind.SWAP:
            swaps += 1
        elif kind is ActionKind.MEMORY_ALLOC:
            current += action.size; peak = max(peak, current)
            timeline.append(MemorySnapshot("allocate", action.size, current))
        elif kind is ActionKind.MEMORY_FREE:
            current -= action.size
            timeline.append(MemorySnapshot("deallocate", action.size, current))
    stats = Statistics(comparisons, swaps, accesses, current, peak, tuple(timeline))
    return ReplayOutcome(list(state), stats)


def metric_curves(actions: Sequence[Action]) -> Dict[str, np.ndarray]:
    """
    Cumulative counters after every step, for plotting.

    Each curve has ``len(actions) + 1`` points; point 0 is the state before
    the first action and the last point matches the run's statistics.
    """
    kinds = [a.kind for a in actions]
    n = len(kinds)

    def _curve(steps: np.ndarray) -> np.ndarray:
        out = np.zeros(n + 1, dtype=np.int64)
        np.cumsum(steps, out=out[1:])
        return out

    def _is_kind(k) -> np.ndarray:
        return np.fromiter((x is k for x in kinds), dtype=np.int64, count=n)

    mem = np.fromiter(
        (a.size if a.kind is ActionKind.MEMORY_ALLOC else -a.size if a.kind is ActionKind.MEMORY_FREE else 0
         for a in actions),
        dtype=np.int64, count=n)
    return {
        "comparisons": _curve(_is_kind(ActionKind.COMPARE)),
        "swaps":       _curve(_is_kind(ActionKind.SWAP)),
        "accesses":    _curve(_is_kind(ActionKind.ACCESS)),
        "memory":      _curve(mem),
    }
