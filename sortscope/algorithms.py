"""
The ten instrumented sorting algorithms.

Every function here takes a ``Recorder`` and a list, sorts the list in place
and touches it only through the recorder's primitives. None of them copies
the caller's input; ``SortingEngine.run`` does that.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from sortscope.recorder import Recorder

logger = logging.getLogger(__name__)

COMB_SHRINK = 1.3
DEFAULT_ALGORITHM = "bubble"


# ============================================================
# ===================== SORTING ALGORITHMS ===================
# ============================================================

def bubble_sort(rec: Recorder, arr):
    n = len(arr)
    for i in range(n):
        swapped = False
        for j in range(n - i - 1):
            if rec.compare(arr, j, j+1):
                rec.swap(arr, j, j+1); swapped = True
        if not swapped:
            break


def insertion_sort(rec: Recorder, arr):
    for i in range(1, len(arr)):
        key = rec.access(arr, i); j = i - 1
        while j >= 0 and rec.access(arr, j) > key:
            rec.assign(arr, j+1, arr[j]); j -= 1
        rec.assign(arr, j+1, key)


def selection_sort(rec: Recorder, arr):
    n = len(arr)
    for i in range(n - 1):
        mi = i
        for j in range(i+1, n):
            if rec.compare(arr, mi, j):
                mi = j
        if mi != i:
            rec.swap(arr, i, mi)


def merge_sort(rec: Recorder, arr):
    def _m(lo, mid, hi):
        n1, n2 = mid - lo + 1, hi - mid
        rec.allocate_memory(n1); rec.allocate_memory(n2)
        L = [rec.access(arr, lo + i) for i in range(n1)]
        R = [rec.access(arr, mid + 1 + j) for j in range(n2)]
        i = j = 0; k = lo
        # plain <= on the buffers: they are not positions of arr
        while i < n1 and j < n2:
            if L[i] <= R[j]: rec.assign(arr, k, L[i]); i += 1
            else:            rec.assign(arr, k, R[j]); j += 1
            k += 1
        while i < n1: rec.assign(arr, k, L[i]); i += 1; k += 1
        while j < n2: rec.assign(arr, k, R[j]); j += 1; k += 1
        rec.deallocate_memory(n1); rec.deallocate_memory(n2)

    def _ms(lo, hi):
        if lo < hi:
            mid = lo + (hi - lo) // 2
            _ms(lo, mid); _ms(mid+1, hi)
            _m(lo, mid, hi)

    _ms(0, len(arr) - 1)


def quick_sort(rec: Recorder, arr):
    def _partition(lo, hi):
        pivot = rec.access(arr, hi); i = lo - 1
        for j in range(lo, hi):
            if rec.access(arr, j) <= pivot:
                i += 1; rec.swap(arr, i, j)
        rec.swap(arr, i+1, hi)
        return i + 1

    # explicit stack of (lo, hi, depth, stage): stage 0 enters a frame, stage 1
    # leaves it once both subranges are done; each non-root frame costs one
    # unit of memory while it is open
    stack = [(0, len(arr) - 1, 0, 0)]
    while stack:
        lo, hi, depth, stage = stack.pop()
        if stage == 1:
            rec.deallocate_memory(1)
            continue
        if depth > 0:
            rec.allocate_memory(1)
            stack.append((lo, hi, depth, 1))
        if lo < hi:
            p = _partition(lo, hi)
            stack.append((p+1, hi, depth+1, 0))
            stack.append((lo, p-1, depth+1, 0))


def heap_sort(rec: Recorder, arr):
    def hfy(n, i):
        lg, l, r = i, 2*i+1, 2*i+2
        if l < n and rec.compare(arr, lg, l): lg = l
        if r < n and rec.compare(arr, lg, r): lg = r
        if lg != i:
            rec.swap(arr, i, lg); hfy(n, lg)

    n = len(arr)
    for i in range(n//2 - 1, -1, -1): hfy(n, i)
    for i in range(n - 1, 0, -1):
        rec.swap(arr, 0, i); hfy(i, 0)


def shell_sort(rec: Recorder, arr):
    n, gap = len(arr), len(arr) // 2
    while gap > 0:
        for i in range(gap, n):
            t = rec.access(arr, i); j = i
            while j >= gap and rec.access(arr, j-gap) > t:
                rec.assign(arr, j, arr[j-gap]); j -= gap
            rec.assign(arr, j, t)
        gap //= 2


def comb_sort(rec: Recorder, arr):
    n, gap, done = len(arr), len(arr), False
    while not done:
        gap = int(gap / COMB_SHRINK)
        if gap <= 1:
            gap = 1; done = True
        for i in range(n - gap):
            if rec.compare(arr, i, i+gap):
                rec.swap(arr, i, i+gap); done = False


def cocktail_sort(rec: Recorder, arr):
    lo, hi, swapped = 0, len(arr) - 1, True
    while swapped:
        swapped = False
        for i in range(lo, hi):
            if rec.compare(arr, i, i+1):
                rec.swap(arr, i, i+1); swapped = True
        if not swapped:
            break
        swapped = False
        hi -= 1
        for i in range(hi - 1, lo - 1, -1):
            if rec.compare(arr, i, i+1):
                rec.swap(arr, i, i+1); swapped = True
        lo += 1


def _counting_radix(rec: Recorder, arr, exp, base):
    n = len(arr); out = [0]*n; cnt = [0]*base
    for i in range(n):
        cnt[int(rec.access(arr, i) // exp) % base] += 1
    for i in range(1, base):
        cnt[i] += cnt[i-1]
    # reverse scatter keeps equal digits in input order
    for i in range(n-1, -1, -1):
        v = rec.access(arr, i); idx = int(v // exp) % base
        out[cnt[idx]-1] = v; cnt[idx] -= 1
    for i in range(n):
        rec.assign(arr, i, out[i])


def check_radix_domain(values):
    """Raise ValueError unless every value is a non-negative integer."""
    for i, v in enumerate(values):
        try:
            integral = v == int(v)
        except (TypeError, ValueError, OverflowError):
            integral = False
        if not integral or v < 0:
            raise ValueError(f"radix sort needs non-negative integers, got {v!r} at index {i}")


def radix_sort(rec: Recorder, arr, base=10):
    if base < 2:
        raise ValueError(f"radix base must be at least 2, got {base}")
    mv = 0
    for i in range(len(arr)):
        mv = max(mv, rec.access(arr, i))
    exp = 1
    while mv // exp > 0:
        _counting_radix(rec, arr, exp, base); exp *= base


# ============================================================
# ======================= DESCRIPTORS ========================
# ============================================================

@dataclass(frozen=True)
class AlgorithmInfo:
    key: str
    name: str
    time_complexity: str
    space_complexity: str
    description: str
    stable: bool = False


ALGORITHM_INFO: Dict[str, AlgorithmInfo] = {info.key: info for info in (
    AlgorithmInfo(
        "bubble", "Bubble Sort", "O(n²)", "O(1)",
        "Bubble sort repeatedly steps through the list, compares adjacent elements "
        "and swaps them if they are in the wrong order. The pass through the list is "
        "repeated until a pass makes no swaps.",
        stable=True),
    AlgorithmInfo(
        "insertion", "Insertion Sort", "O(n²)", "O(1)",
        "Insertion sort builds the final sorted list one item at a time. It is much "
        "slower than quicksort, heapsort or merge sort on large lists but efficient for "
        "small or partially sorted data.",
        stable=True),
    AlgorithmInfo(
        "selection", "Selection Sort", "O(n²)", "O(1)",
        "Selection sort splits the list into a sorted prefix and an unsorted remainder, "
        "repeatedly selecting the smallest remaining element and moving it to the end "
        "of the prefix."),
    AlgorithmInfo(
        "merge", "Merge Sort", "O(n log n)", "O(n)",
        "Merge sort is a stable divide and conquer algorithm. It splits the input in "
        "two halves, sorts each half recursively and merges the two sorted halves.",
        stable=True),
    AlgorithmInfo(
        "quick", "Quick Sort", "O(n log n) avg", "O(log n) avg",
        "Quick sort picks a pivot element and partitions the other elements into those "
        "smaller and those greater than the pivot, then sorts both partitions recursively."),
    AlgorithmInfo(
        "heap", "Heap Sort", "O(n log n)", "O(1)",
        "Heap sort arranges the input as a binary max-heap, then repeatedly moves the "
        "largest element from the heap to the end of the sorted region."),
    AlgorithmInfo(
        "shell", "Shell Sort", "O(n log² n)", "O(1)",
        "Shell sort generalises insertion sort by exchanging items that are far apart, "
        "shrinking the gap between compared items until it reaches one."),
    AlgorithmInfo(
        "comb", "Comb Sort", "O(n²)", "O(1)",
        "Comb sort improves on bubble sort with a gap that shrinks by a factor of 1.3 "
        "each pass, removing small values near the end of the list early."),
    AlgorithmInfo(
        "cocktail", "Cocktail Shaker", "O(n²)", "O(1)",
        "Cocktail shaker sort is a bidirectional bubble sort: each round runs a forward "
        "pass and then a backward pass over the shrinking unsorted window.",
        stable=True),
    AlgorithmInfo(
        "radix", "LSD Radix Sort", "O(nk)", "O(n + k)",
        "Radix sort is a non-comparative sort for non-negative integer keys. It runs a "
        "stable counting sort on each digit, from the least to the most significant.",
        stable=True),
)}

ALGORITHMS = [(info.name, key) for key, info in ALGORITHM_INFO.items()]

UNKNOWN_COMPLEXITY = {"time": "Unknown", "space": "Unknown"}
NO_DESCRIPTION = "No description available."


def algorithm_keys() -> List[str]:
    return [key for _, key in ALGORITHMS]


def get_info(key: str) -> Optional[AlgorithmInfo]:
    return ALGORITHM_INFO.get(key)


def get_complexity(key: str) -> Dict[str, str]:
    info = ALGORITHM_INFO.get(key)
    if info is None:
        return dict(UNKNOWN_COMPLEXITY)
    return {"time": info.time_complexity, "space": info.space_complexity}


def get_description(key: str) -> str:
    info = ALGORITHM_INFO.get(key)
    return info.description if info else NO_DESCRIPTION


# ============================================================
# ========================= DISPATCH =========================
# ============================================================

def resolve_key(key: str) -> str:
    if key in ALGORITHM_INFO:
        return key
    logger.warning("Unknown algorithm %r, falling back to %s", key, DEFAULT_ALGORITHM)
    return DEFAULT_ALGORITHM


def get_sorter(key: str, radix_base: int = 10) -> Callable[[Recorder, list], None]:
    """Return the implementation for an already resolved key."""
    builtins = {
        "bubble":    bubble_sort,
        "insertion": insertion_sort,
        "selection": selection_sort,
        "merge":     merge_sort,
        "quick":     quick_sort,
        "heap":      heap_sort,
        "shell":     shell_sort,
        "comb":      comb_sort,
        "cocktail":  cocktail_sort,
        "radix":     lambda rec, arr: radix_sort(rec, arr, radix_base),
    }
    if key in builtins: return builtins[key]
    raise KeyError(f"Unknown key: {key}")
