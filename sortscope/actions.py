"""
Action records emitted by the recorder.

Every element touch or memory event performed by a sorting algorithm is
captured as one immutable ``Action``. A run's action log is the ordered
tuple of these records.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Optional, Tuple


class ActionKind(str, enum.Enum):
    COMPARE      = "compare"
    ACCESS       = "access"
    ASSIGN       = "assign"
    SWAP         = "swap"
    MEMORY_ALLOC = "memory_alloc"
    MEMORY_FREE  = "memory_free"

    @property
    def is_memory(self) -> bool:
        return self in (ActionKind.MEMORY_ALLOC, ActionKind.MEMORY_FREE)


# number of indices each kind carries
ARITY = {
    ActionKind.COMPARE:      2,
    ActionKind.ACCESS:       1,
    ActionKind.ASSIGN:       1,
    ActionKind.SWAP:         2,
    ActionKind.MEMORY_ALLOC: 0,
    ActionKind.MEMORY_FREE:  0,
}


DESCRIPTIONS = {
    ActionKind.COMPARE:      "Comparing elements",
    ActionKind.ACCESS:       "Accessing array element",
    ActionKind.ASSIGN:       "Assigning value to array element",
    ActionKind.SWAP:         "Swapping elements",
    ActionKind.MEMORY_ALLOC: "Allocating memory",
    ActionKind.MEMORY_FREE:  "Releasing memory",
}


@dataclass(frozen=True, slots=True)
class Action:
    """
    One logged elementary operation.

    Attributes
    ----------
    kind        : ActionKind
    indices     : tuple[int, ...] -- positions touched (0, 1 or 2 of them)
    values      : tuple           -- value written (assign) or post-swap pair (swap)
    size        : int | None      -- elements (de)allocated, memory events only
    total       : int | None      -- running memory total, memory events only

    ``description`` and ``notation`` are computed from the fields above.
    """
    kind: ActionKind
    indices: Tuple[int, ...] = ()
    values: Tuple[Any, ...] = ()
    size: Optional[int] = None
    total: Optional[int] = None

    @property
    def description(self) -> str:
        return DESCRIPTIONS[self.kind]

    @property
    def notation(self) -> str:
        k = self.kind
        if k is ActionKind.COMPARE:
            i, j = self.indices; return f"if (a[{i}] > a[{j}])"
        if k is ActionKind.ACCESS:
            return f"value = a[{self.indices[0]}]"
        if k is ActionKind.ASSIGN:
            return f"a[{self.indices[0]}] = {self.values[0]}"
        if k is ActionKind.SWAP:
            i, j = self.indices; return f"swap(a[{i}], a[{j}])"
        if k is ActionKind.MEMORY_ALLOC:
            return f"new Array({self.size})"
        return f"free(Array({self.size}))"

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"kind": self.kind.value, "indices": list(self.indices)}
        if self.values:
            d["values"] = list(self.values)
        if self.kind.is_memory:
            d["size"] = self.size
            d["total"] = self.total
        d["description"] = self.description
        d["notation"] = self.notation
        return d


class MemorySnapshot(NamedTuple):
    operation: str   # "allocate" | "deallocate"
    size: int
    total: int


# ============================================================
# ======================== FACTORIES =========================
# ============================================================

def compare_action(i: int, j: int) -> Action:
    return Action(ActionKind.COMPARE, (i, j))


def access_action(i: int) -> Action:
    return Action(ActionKind.ACCESS, (i,))


def assign_action(i: int, value) -> Action:
    return Action(ActionKind.ASSIGN, (i,), (value,))


def swap_action(i: int, j: int, vi, vj) -> Action:
    return Action(ActionKind.SWAP, (i, j), (vi, vj))


def alloc_action(size: int, total: int) -> Action:
    return Action(ActionKind.MEMORY_ALLOC, size=size, total=total)


def free_action(size: int, total: int) -> Action:
    return Action(ActionKind.MEMORY_FREE, size=size, total=total)
