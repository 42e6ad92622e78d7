"""
Insertion sort.

Elements greater than the key are shifted one slot right and the key is
written once into the gap, instead of swapping it down pairwise. Shifting
stops at the first element that compares <= 0 against the key, which keeps
equal elements in their original order (stable). Theta(n^2) worst case, O(n)
on nearly sorted input.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional

from fastalgos.algorithms._config import check_config
from fastalgos.compare import Comparator, comparator_from_config, resolve_comparator

__all__ = ["insert_sort", "sort"]


def insert_sort(
    seq: MutableSequence[Any], comparator: Optional[Comparator] = None
) -> MutableSequence[Any]:
    cmp = resolve_comparator(comparator)
    for i in range(1, len(seq)):
        key = seq[i]
        j = i
        while j > 0 and cmp(seq[j - 1], key) > 0:
            seq[j] = seq[j - 1]
            j -= 1
        seq[j] = key
    return seq


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    config = check_config("insert_sort", config)
    return insert_sort(list(a), comparator_from_config(config))
