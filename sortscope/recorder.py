"""
The recorder: the only gateway through which algorithms touch elements.

Each primitive updates the running counters and appends one or more
``Action`` records to the log. A recorder belongs to exactly one run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from sortscope.actions import (
    Action, MemorySnapshot,
    access_action, alloc_action, assign_action, compare_action,
    free_action, swap_action,
)


@dataclass(frozen=True)
class Statistics:
    comparisons: int = 0
    swaps: int = 0
    accesses: int = 0
    current_memory: int = 0
    peak_memory: int = 0
    memory_timeline: Tuple[MemorySnapshot, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "comparisons":    self.comparisons,
            "swaps":          self.swaps,
            "accesses":       self.accesses,
            "current_memory": self.current_memory,
            "peak_memory":    self.peak_memory,
            "memory_timeline": [list(s) for s in self.memory_timeline],
        }


def _check_index(seq, i):
    # negative indices would silently wrap on a list
    if not 0 <= i < len(seq):
        raise IndexError(f"index {i} out of range for sequence of length {len(seq)}")


class Recorder:
    def __init__(self):
        self._log: List[Action] = []
        self._timeline: List[MemorySnapshot] = []
        self.reset_stats()

    def reset_stats(self):
        self.comparisons    = 0
        self.swaps          = 0
        self.accesses       = 0
        self.current_memory = 0
        self.peak_memory    = 0
        self._log.clear()
        self._timeline.clear()

    @property
    def actions(self) -> Tuple[Action, ...]:
        return tuple(self._log)

    def get_stats(self) -> Statistics:
        return Statistics(
            comparisons=self.comparisons,
            swaps=self.swaps,
            accesses=self.accesses,
            current_memory=self.current_memory,
            peak_memory=self.peak_memory,
            memory_timeline=tuple(self._timeline),
        )

    # ------------------------------------------------------------
    # element primitives
    # ------------------------------------------------------------

    def compare(self, seq, i: int, j: int) -> bool:
        """Log a comparison of seq[i] and seq[j]; True iff seq[i] > seq[j]."""
        self.comparisons += 1
        self.access(seq, i)
        self.access(seq, j)
        self._log.append(compare_action(i, j))
        return seq[i] > seq[j]

    def access(self, seq, i: int):
        _check_index(seq, i)
        self.accesses += 1
        self._log.append(access_action(i))
        return seq[i]

    def assign(self, seq, i: int, value):
        # a write is not a read, so accesses stay untouched
        _check_index(seq, i)
        seq[i] = value
        self._log.append(assign_action(i, value))

    def swap(self, seq, i: int, j: int):
        _check_index(seq, i)
        _check_index(seq, j)
        self.swaps += 1
        seq[i], seq[j] = seq[j], seq[i]
        self._log.append(swap_action(i, j, seq[i], seq[j]))

    # ------------------------------------------------------------
    # auxiliary memory
    # ------------------------------------------------------------

    def allocate_memory(self, size: int):
        if size < 0:
            raise ValueError(f"cannot allocate a negative size: {size}")
        self.current_memory += size
        self.peak_memory = max(self.peak_memory, self.current_memory)
        self._timeline.append(MemorySnapshot("allocate", size, self.current_memory))
        self._log.append(alloc_action(size, self.current_memory))

    def deallocate_memory(self, size: int):
        if size < 0:
            raise ValueError(f"cannot release a negative size: {size}")
        self.current_memory -= size
        self._timeline.append(MemorySnapshot("deallocate", size, self.current_memory))
        self._log.append(free_action(size, self.current_memory))
