"""
fastalgos: small, stateless algorithms with spelled-out invariants.

    from fastalgos import merge_sort, shell_sort, shuffle, random_in_range, multiply

    merge_sort([5, 3, 8, 1, 9, 2])            # -> [1, 2, 3, 5, 8, 9]
    shell_sort(words, by_key(len))
    shuffle(deck)                              # in place, OS entropy
    random_in_range(1, 7)                      # a fair die
    multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])

Sorts and the shuffle mutate their argument in place and return it.
"""

from fastalgos.algorithms.bubble_sort import bubble_sort
from fastalgos.algorithms.insert_sort import insert_sort
from fastalgos.algorithms.merge_sort import merge_sort, merge_sort_async
from fastalgos.algorithms.selection_sort import selection_sort
from fastalgos.algorithms.shell_sort import shell_sort, tokuda_gaps
from fastalgos.algorithms.swap import swap
from fastalgos.compare import Comparator, Comparer, ascending, by_key, descending
from fastalgos.errors import (
    DimensionMismatch,
    EntropyExhausted,
    EntropySourceUnavailable,
    FastAlgosError,
)
from fastalgos.matrix import multiply
from fastalgos.random_source import RandomSource, random_in_range
from fastalgos.shuffle import shuffle

__version__ = "0.1.0"

__all__ = [
    "selection_sort",
    "bubble_sort",
    "insert_sort",
    "shell_sort",
    "tokuda_gaps",
    "merge_sort",
    "merge_sort_async",
    "swap",
    "shuffle",
    "RandomSource",
    "random_in_range",
    "multiply",
    "Comparator",
    "Comparer",
    "ascending",
    "descending",
    "by_key",
    "FastAlgosError",
    "DimensionMismatch",
    "EntropySourceUnavailable",
    "EntropyExhausted",
]
