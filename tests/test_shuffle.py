"""Fisher–Yates shuffle: permutation preservation, uniformity, Sattolo mode."""

from __future__ import annotations

import importlib
from collections import Counter
from itertools import permutations
from typing import List

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from fastalgos import EntropySourceUnavailable, RandomSource, shuffle

shuffle_module = importlib.import_module("fastalgos.shuffle")


def _seeded(seed: int) -> RandomSource:
    return RandomSource(np.random.default_rng(seed).bytes)


def _chi_square(counts: Counter, outcomes: List[tuple], trials: int) -> float:
    expected = trials / len(outcomes)
    return sum((counts[o] - expected) ** 2 / expected for o in outcomes)


def _cycle_length_from_zero(p: List[int]) -> int:
    length, i = 1, p[0]
    while i != 0:
        i = p[i]
        length += 1
    return length


# ------------------------- contract ------------------------- #

def test_returns_same_object() -> None:
    a = list(range(10))
    assert shuffle(a, source=_seeded(1)) is a


@pytest.mark.parametrize("a", [[], ["only"]])
def test_trivial_inputs_unchanged_without_drawing(a: list) -> None:
    src = _seeded(1)
    assert shuffle(list(a), source=src) == a
    assert src.draws == 0


@settings(deadline=None, max_examples=100)
@given(st.lists(st.integers(), max_size=200))
def test_output_is_permutation(a: List[int]) -> None:
    out = shuffle(list(a))
    assert Counter(out) == Counter(a)


def test_default_source_uses_os_entropy() -> None:
    a = list(range(100))
    shuffle(a)
    assert sorted(a) == list(range(100))


def test_one_draw_per_position() -> None:
    drawn: List[tuple] = []

    class Recording(RandomSource):
        def random_in_range(self, lo: int, hi: int) -> int:
            drawn.append((lo, hi))
            return super().random_in_range(lo, hi)

    shuffle(list(range(5)), source=Recording(np.random.default_rng(3).bytes))
    assert drawn == [(0, 5), (1, 5), (2, 5), (3, 5)]


def test_entropy_failure_propagates() -> None:
    def broken(n: int) -> bytes:
        raise OSError("entropy pool gone")

    a = [1, 2, 3]
    with pytest.raises(EntropySourceUnavailable):
        shuffle(a, source=RandomSource(broken))


# ------------------------- uniformity ------------------------- #

def test_all_24_permutations_uniform() -> None:
    src = _seeded(12345)
    trials = 24_000
    counts = Counter(tuple(shuffle([0, 1, 2, 3], source=src)) for _ in range(trials))
    outcomes = list(permutations(range(4)))
    assert set(counts) == set(outcomes)
    # df = 23, p = 0.001
    assert _chi_square(counts, outcomes, trials) < 49.728


def test_identity_is_a_possible_outcome() -> None:
    src = _seeded(99)
    assert any(shuffle([0, 1, 2], source=src) == [0, 1, 2] for _ in range(600))


# ------------------------- Sattolo (cyclic) ------------------------- #

@settings(deadline=None, max_examples=60)
@given(n=st.integers(min_value=2, max_value=60), seed=st.integers(min_value=0, max_value=2**32 - 1))
def test_cyclic_yields_single_cycle_without_fixed_points(n: int, seed: int) -> None:
    p = shuffle(list(range(n)), source=_seeded(seed), cyclic=True)
    assert all(p[i] != i for i in range(n))
    assert _cycle_length_from_zero(p) == n


def test_cyclic_draw_ranges_exclude_current_position() -> None:
    drawn: List[tuple] = []

    class Recording(RandomSource):
        def random_in_range(self, lo: int, hi: int) -> int:
            drawn.append((lo, hi))
            return super().random_in_range(lo, hi)

    shuffle(list(range(4)), source=Recording(np.random.default_rng(5).bytes), cyclic=True)
    assert drawn == [(1, 4), (2, 4), (3, 4)]


def test_cyclic_uniform_over_the_six_4_cycles() -> None:
    src = _seeded(777)
    trials = 6_000
    counts = Counter(tuple(shuffle([0, 1, 2, 3], source=src, cyclic=True)) for _ in range(trials))
    outcomes = [p for p in permutations(range(4)) if _cycle_length_from_zero(list(p)) == 4]
    assert len(outcomes) == 6
    assert set(counts) == set(outcomes)
    # df = 5, p = 0.001
    assert _chi_square(counts, outcomes, trials) < 20.515


def test_shuffle_uses_swap_primitive(monkeypatch) -> None:
    calls: List[tuple] = []
    real = shuffle_module.swap

    def counting(seq, i, j):
        calls.append((i, j))
        return real(seq, i, j)

    monkeypatch.setattr(shuffle_module, "swap", counting)
    shuffle(list(range(6)), source=_seeded(8), cyclic=True)
    # cyclic mode never draws r == i, so every step swaps
    assert [i for i, _ in calls] == [0, 1, 2, 3, 4]
