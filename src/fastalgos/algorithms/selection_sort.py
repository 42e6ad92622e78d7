"""
Selection sort, inversion-swap flavour.

For every position i the inner scan swaps i with each later j that compares
smaller, so the minimum still ends up at i but it may take several swaps to
get there. Output is identical to the classic "track the minimum, swap once"
version. Theta(n^2) comparisons.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional

from fastalgos.algorithms._config import check_config
from fastalgos.algorithms.swap import swap
from fastalgos.compare import Comparator, comparator_from_config, resolve_comparator

__all__ = ["selection_sort", "sort"]


def selection_sort(
    seq: MutableSequence[Any], comparator: Optional[Comparator] = None
) -> MutableSequence[Any]:
    cmp = resolve_comparator(comparator)
    n = len(seq)
    for i in range(n):
        for j in range(i + 1, n):
            if cmp(seq[i], seq[j]) > 0:
                swap(seq, i, j)
    return seq


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    config = check_config("selection_sort", config)
    return selection_sort(list(a), comparator_from_config(config))
