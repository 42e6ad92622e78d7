"""
Bubble sort with a shrinking scan bound.

Each pass remembers where it made its last swap; everything from there on is
already in place, so the next pass stops at that index. A pass without swaps
ends the sort. Theta(n^2) worst case, O(n) on sorted input.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional

from fastalgos.algorithms._config import check_config
from fastalgos.algorithms.swap import swap
from fastalgos.compare import Comparator, comparator_from_config, resolve_comparator

__all__ = ["bubble_sort", "sort"]


def bubble_sort(
    seq: MutableSequence[Any], comparator: Optional[Comparator] = None
) -> MutableSequence[Any]:
    cmp = resolve_comparator(comparator)
    bound = len(seq)
    while bound > 0:
        last_swap = 0
        for i in range(1, bound):
            if cmp(seq[i - 1], seq[i]) > 0:
                swap(seq, i - 1, i)
                last_swap = i
        bound = last_swap
    return seq


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    config = check_config("bubble_sort", config)
    return bubble_sort(list(a), comparator_from_config(config))
