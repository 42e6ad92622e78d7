"""
Property helpers for validating sorting results.

Used by the tests and, when an experiment sets `validate: true`, by the
benchmark runner on every output it times.

Public API (stable):
    is_nondecreasing(xs, comparator=None) -> bool
    first_nondecreasing_violation_index(xs, comparator=None) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    assert_no_mutation(before, after) -> None
    is_stable(before, after, key) -> bool

Notes
-----
- Order checks go through a comparator, so they work for any element type
  the sorts accept. Multiset checks need hashable elements.
- Stability cannot be seen from values alone. `is_stable` expects elements
  that carry a sort key plus a unique tag, e.g. (key, original_index) pairs.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence

from fastalgos.compare import Comparator, resolve_comparator

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "is_stable",
]


def is_nondecreasing(xs: Sequence[Any], comparator: Optional[Comparator] = None) -> bool:
    """Return True iff comparator(xs[i], xs[i+1]) <= 0 for all i."""
    return first_nondecreasing_violation_index(xs, comparator) is None


def first_nondecreasing_violation_index(
    xs: Sequence[Any], comparator: Optional[Comparator] = None
) -> int | None:
    """
    Return the first i where comparator(xs[i], xs[i+1]) > 0, or None.

    Useful for precise error messages:
        i = first_nondecreasing_violation_index(out)
        assert i is None, f"out of order at i={i}: {out[i]} > {out[i+1]}"
    """
    cmp = resolve_comparator(comparator)
    for i in range(len(xs) - 1):
        if cmp(xs[i], xs[i + 1]) > 0:
            return i
    return None


def is_permutation(a: Sequence[Hashable], b: Sequence[Hashable]) -> bool:
    """Return True iff `a` and `b` hold exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Hashable], b: Sequence[Hashable]) -> Dict[Hashable, int]:
    """
    Return value -> (count in a) - (count in b) for every value whose counts differ.

    An empty dict means identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that two sequences are equal element-wise, i.e. a call did not
    mutate its input.

    Raises AssertionError naming the first differing index.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x!r}, after={y!r}")


def is_stable(before: Sequence[Any], after: Sequence[Any], key: Callable[[Any], Hashable]) -> bool:
    """
    Return True iff elements with equal `key` appear in `after` in the same
    relative order as in `before`.

    Elements must be distinguishable (compare unequal) within a key group.
    """
    def groups(xs: Sequence[Any]) -> Dict[Hashable, List[Any]]:
        out: Dict[Hashable, List[Any]] = defaultdict(list)
        for x in xs:
            out[key(x)].append(x)
        return out

    return groups(before) == groups(after)
