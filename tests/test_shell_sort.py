"""Tokuda gap sequence and the order shell sort consumes it in."""

from __future__ import annotations

import importlib
import math
from typing import List

import pytest

from fastalgos import shell_sort, tokuda_gaps

shell_module = importlib.import_module("fastalgos.algorithms.shell_sort")


def _formula(k: int) -> int:
    return math.ceil((9**k - 4**k) / (5 * 4 ** (k - 1)))


def test_gaps_for_length_10() -> None:
    assert tokuda_gaps(10) == [1, 4, 9]


def test_known_prefix_of_sequence() -> None:
    assert tokuda_gaps(10**4) == [1, 4, 9, 20, 46, 103, 233, 525, 1182, 2660, 5985]


@pytest.mark.parametrize("k", range(1, 12))
def test_gaps_match_formula(k: int) -> None:
    # float ceil is still exact at these sizes
    assert shell_module._tokuda_gap(k) == _formula(k)


def test_gaps_stop_below_length() -> None:
    # 9 is excluded for length 9 (gap must be strictly smaller)
    assert tokuda_gaps(9) == [1, 4]
    assert tokuda_gaps(10) == [1, 4, 9]


@pytest.mark.parametrize("n, expected", [(0, []), (1, []), (2, [1]), (4, [1]), (5, [1, 4])])
def test_gaps_small_lengths(n: int, expected: List[int]) -> None:
    assert tokuda_gaps(n) == expected


def test_gaps_strictly_increasing_and_exact_for_large_k() -> None:
    gaps = tokuda_gaps(10**30)
    assert all(a < b for a, b in zip(gaps, gaps[1:]))
    assert gaps[-1] < 10**30


def test_passes_run_largest_gap_first_and_end_with_one(monkeypatch) -> None:
    used: List[int] = []
    real_pass = shell_module._gap_insertion_pass

    def recording(seq, gap, cmp):
        used.append(gap)
        real_pass(seq, gap, cmp)

    monkeypatch.setattr(shell_module, "_gap_insertion_pass", recording)
    a = [9, 0, 8, 1, 7, 2, 6, 3, 5, 4]
    assert shell_sort(a) == list(range(10))
    assert used == [9, 4, 1]


def test_gaps_computed_once_per_call(monkeypatch) -> None:
    calls = 0
    real = shell_module.tokuda_gaps

    def counting(n: int) -> List[int]:
        nonlocal calls
        calls += 1
        return real(n)

    monkeypatch.setattr(shell_module, "tokuda_gaps", counting)
    shell_sort(list(range(100, 0, -1)))
    assert calls == 1


def test_single_wide_gap_pass_sorts_each_residue_class() -> None:
    a = [5, 4, 3, 2, 1, 0]
    shell_module._gap_insertion_pass(a, 4, shell_module.resolve_comparator(None))
    # classes {0, 4} and {1, 5} sorted; 2 and 3 untouched
    assert a == [1, 0, 3, 2, 5, 4]
