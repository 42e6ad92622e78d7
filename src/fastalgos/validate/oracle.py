"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth. It is stable, so for any
comparator it gives the one output a stable sort must produce; unstable
algorithms are compared against it only through the property helpers.

Public API (stable):
    oracle_sort(a, comparator=None) -> list
    equals_oracle(a, out, comparator=None) -> bool

The oracle never mutates its input and always returns a new list.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Optional, Sequence

from fastalgos.compare import Comparator, resolve_comparator

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[Any], comparator: Optional[Comparator] = None) -> list:
    """
    Return `a` sorted by `comparator` (ascending natural order if None).

    Parameters
    ----------
    a : Sequence
        Input sequence; not mutated.
    comparator : Comparator | Comparer | None
        Order relation.

    Returns
    -------
    list
        A new, stably sorted list.
    """
    if comparator is None:
        return sorted(a)
    return sorted(a, key=cmp_to_key(resolve_comparator(comparator)))


def equals_oracle(a: Sequence[Any], out: Sequence[Any], comparator: Optional[Comparator] = None) -> bool:
    """True iff `out` equals `oracle_sort(a, comparator)` element for element."""
    return list(out) == oracle_sort(a, comparator)
