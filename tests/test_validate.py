"""Oracle and property helpers."""

from __future__ import annotations

import pytest

from fastalgos.compare import by_key, descending
from fastalgos.validate import (
    ORACLE_NAME,
    assert_no_mutation,
    equals_oracle,
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    is_stable,
    oracle_sort,
    permutation_counter_diff,
)


def test_oracle_does_not_mutate_and_sorts() -> None:
    a = [3, 1, 2]
    assert oracle_sort(a) == [1, 2, 3]
    assert a == [3, 1, 2]
    assert ORACLE_NAME == "python_sorted_timsort"


def test_oracle_with_comparator_is_stable() -> None:
    items = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]
    assert oracle_sort(items, by_key(lambda t: t[0])) == [(0, "b"), (0, "d"), (1, "a"), (1, "c")]
    assert oracle_sort([1, 3, 2], descending) == [3, 2, 1]


def test_equals_oracle() -> None:
    assert equals_oracle([2, 1], [1, 2])
    assert not equals_oracle([2, 1], [2, 1])
    assert equals_oracle([2, 1], (1, 2))


def test_nondecreasing_and_violation_index() -> None:
    assert is_nondecreasing([])
    assert is_nondecreasing([1, 1, 2])
    assert not is_nondecreasing([1, 3, 2])
    assert first_nondecreasing_violation_index([1, 3, 2]) == 1
    assert first_nondecreasing_violation_index([3, 2, 1], descending) is None


def test_permutation_helpers() -> None:
    assert is_permutation([1, 2, 2], [2, 1, 2])
    assert not is_permutation([1, 2], [1, 2, 2])
    assert not is_permutation([1, 1], [1, 2])
    assert permutation_counter_diff([1, 1, 3], [1, 2, 3]) == {1: 1, 2: -1}
    assert permutation_counter_diff([4, 5], [5, 4]) == {}


def test_assert_no_mutation() -> None:
    assert_no_mutation([1, 2], [1, 2])
    with pytest.raises(AssertionError, match="index 1"):
        assert_no_mutation([1, 2], [1, 3])
    with pytest.raises(AssertionError, match="length changed"):
        assert_no_mutation([1, 2], [1])


def test_is_stable() -> None:
    before = [(1, "a"), (0, "b"), (1, "c")]
    key = lambda t: t[0]  # noqa: E731
    assert is_stable(before, [(0, "b"), (1, "a"), (1, "c")], key)
    assert not is_stable(before, [(0, "b"), (1, "c"), (1, "a")], key)
