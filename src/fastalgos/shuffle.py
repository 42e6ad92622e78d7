"""
Fisher–Yates shuffle.

Walking i = 0 .. n-2, position i receives an element drawn uniformly from
positions [i, n); after step i the prefix [0, i] is fixed. Each of the n!
permutations comes out with probability 1/n! as long as the random source is
unbiased, which `RandomSource` guarantees through rejection sampling.

With `cyclic=True` the draw is from [i + 1, n) instead (Sattolo's algorithm).
Position i can then never keep its own element, and the result is a uniform
random n-cycle: (n-1)! equally likely outcomes, no fixed points.
"""

from __future__ import annotations

from typing import Any, MutableSequence, Optional

from fastalgos.algorithms.swap import swap
from fastalgos.random_source import RandomSource

__all__ = ["shuffle"]


def shuffle(
    seq: MutableSequence[Any],
    *,
    source: Optional[RandomSource] = None,
    cyclic: bool = False,
) -> MutableSequence[Any]:
    """
    Permute `seq` in place uniformly at random and return it.

    Parameters
    ----------
    seq : MutableSequence
        Sequence to permute.
    source : RandomSource | None
        Random source to draw from; a fresh OS-entropy source if omitted.
    cyclic : bool
        Produce a single n-cycle (Sattolo) instead of any permutation.

    Raises
    ------
    EntropySourceUnavailable, EntropyExhausted
        Propagated from the random source.
    """
    if source is None:
        source = RandomSource()
    n = len(seq)
    offset = 1 if cyclic else 0
    for i in range(n - 1):
        r = source.random_in_range(i + offset, n)
        if r != i:
            swap(seq, i, r)
    return seq
