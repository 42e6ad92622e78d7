"""
Shell sort over the Tokuda gap sequence.

Gaps follow gap_k = ceil((9^k - 4^k) / (5 * 4^(k-1))) for k = 1, 2, ...:
    1, 4, 9, 20, 46, 103, 233, 525, 1182, 2660, ...
Only gaps strictly below the sequence length are used, largest first. Each
gap runs an insertion sort over every residue class modulo the gap; the last
pass (gap 1) is a plain insertion sort over an almost sorted sequence.

Public API (stable):
    tokuda_gaps(n: int) -> list[int]      # ascending
    shell_sort(seq, comparator=None) -> seq
    sort(a, *, config=None) -> list
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional

from fastalgos.algorithms._config import check_config
from fastalgos.compare import Comparator, comparator_from_config, resolve_comparator

__all__ = ["tokuda_gaps", "shell_sort", "sort"]


def _tokuda_gap(k: int) -> int:
    num = 9**k - 4**k
    den = 5 * 4 ** (k - 1)
    # exact integer ceil; floats drift once k gets large
    return -(-num // den)


def tokuda_gaps(n: int) -> List[int]:
    """Return every Tokuda gap smaller than n, in ascending order."""
    gaps: List[int] = []
    k = 1
    while True:
        gap = _tokuda_gap(k)
        if gap >= n:
            return gaps
        gaps.append(gap)
        k += 1


def _gap_insertion_pass(seq: MutableSequence[Any], gap: int, cmp: Comparator) -> None:
    # One sweep from `gap` upward covers all residue classes at once.
    for i in range(gap, len(seq)):
        key = seq[i]
        j = i
        while j >= gap and cmp(seq[j - gap], key) > 0:
            seq[j] = seq[j - gap]
            j -= gap
        seq[j] = key


def shell_sort(
    seq: MutableSequence[Any], comparator: Optional[Comparator] = None
) -> MutableSequence[Any]:
    cmp = resolve_comparator(comparator)
    for gap in reversed(tokuda_gaps(len(seq))):
        _gap_insertion_pass(seq, gap, cmp)
    return seq


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    config = check_config("shell_sort", config)
    return shell_sort(list(a), comparator_from_config(config))
