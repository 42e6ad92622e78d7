"""
Top-down merge sort with optionally concurrent halves.

The range [start, end] is split at mid = (start + end) // 2. The two halves
cover disjoint index ranges, so near the top of the recursion they can be
sorted on separate worker threads; the merge waits for both futures before it
reads anything. Deeper levels (or small ranges) recurse sequentially.

Merging copies both halves into temporary lists, then writes them back into
[start, end]. The comparator is always called as `cmp(right, left)`, and the
right element is taken only when that is negative, so equal elements keep
their left-before-right order and the sort is stable.

Theta(n log n) comparisons, Theta(n) auxiliary space per merge.

Public API (stable):
    merge_sort(seq, comparator=None, *, parallel_depth=2, min_parallel_size=4096) -> seq
    merge_sort_async(seq, comparator=None, *, ..., executor=None) -> Future[seq]
    sort(a, *, config=None) -> list
"""

from __future__ import annotations

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Dict, List, MutableSequence, Optional

from fastalgos.algorithms._config import check_config
from fastalgos.compare import Comparator, comparator_from_config, resolve_comparator

DEFAULT_PARALLEL_DEPTH = 2
DEFAULT_MIN_PARALLEL_SIZE = 4096

__all__ = [
    "DEFAULT_PARALLEL_DEPTH",
    "DEFAULT_MIN_PARALLEL_SIZE",
    "merge_sort",
    "merge_sort_async",
    "sort",
]


def merge_sort(
    seq: MutableSequence[Any],
    comparator: Optional[Comparator] = None,
    *,
    parallel_depth: int = DEFAULT_PARALLEL_DEPTH,
    min_parallel_size: int = DEFAULT_MIN_PARALLEL_SIZE,
) -> MutableSequence[Any]:
    """
    Sort `seq` in place and return it.

    Parameters
    ----------
    seq : MutableSequence
        Sequence to sort. Its length never changes.
    comparator : Comparator | Comparer | None
        Order relation; defaults to ascending natural order.
    parallel_depth : int
        Number of recursion levels allowed to fan out onto worker threads.
        0 runs entirely on the calling thread.
    min_parallel_size : int
        Ranges shorter than this are never handed to threads.
    """
    _check_parallel_settings(parallel_depth, min_parallel_size)
    return _sort_all(seq, resolve_comparator(comparator), parallel_depth, min_parallel_size)


def merge_sort_async(
    seq: MutableSequence[Any],
    comparator: Optional[Comparator] = None,
    *,
    parallel_depth: int = DEFAULT_PARALLEL_DEPTH,
    min_parallel_size: int = DEFAULT_MIN_PARALLEL_SIZE,
    executor: Optional[Executor] = None,
) -> Future[MutableSequence[Any]]:
    """
    Start sorting `seq` in place and return a Future without waiting.

    The Future resolves to `seq` itself once it is sorted; comparator
    exceptions are re-raised by `Future.result()`. The caller must not touch
    `seq` until then. Bad settings or a bad comparator raise here, before
    anything is scheduled.

    `executor` runs the top-level sort; by default a private one-worker
    thread pool is used and shut down once the sort finishes. Fan-out below
    the top level still uses its own per-level pools, so passing a busy
    shared executor cannot deadlock the halves.
    """
    _check_parallel_settings(parallel_depth, min_parallel_size)
    cmp = resolve_comparator(comparator)
    args = (seq, cmp, parallel_depth, min_parallel_size)
    if executor is not None:
        return executor.submit(_sort_all, *args)

    pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="merge_sort")
    try:
        return pool.submit(_sort_all, *args)
    finally:
        # Already-submitted work still runs; the worker exits afterwards.
        pool.shutdown(wait=False)


def _check_parallel_settings(parallel_depth: int, min_parallel_size: int) -> None:
    if parallel_depth < 0:
        raise ValueError(f"parallel_depth must be nonnegative; got {parallel_depth}")
    if min_parallel_size < 1:
        raise ValueError(f"min_parallel_size must be positive; got {min_parallel_size}")


def _sort_all(
    seq: MutableSequence[Any],
    cmp: Comparator,
    parallel_depth: int,
    min_parallel_size: int,
) -> MutableSequence[Any]:
    _sort_range(seq, cmp, 0, len(seq) - 1, parallel_depth, min_parallel_size)
    return seq


def _sort_range(
    seq: MutableSequence[Any],
    cmp: Comparator,
    start: int,
    end: int,
    depth_left: int,
    min_parallel_size: int,
) -> None:
    if start >= end:
        return
    mid = (start + end) // 2

    if depth_left > 0 and end - start + 1 >= min_parallel_size:
        with ThreadPoolExecutor(max_workers=2) as pool:
            halves = [
                pool.submit(_sort_range, seq, cmp, start, mid, depth_left - 1, min_parallel_size),
                pool.submit(_sort_range, seq, cmp, mid + 1, end, depth_left - 1, min_parallel_size),
            ]
            # Barrier: both halves must be finished before merging.
            for f in halves:
                f.result()
    else:
        _sort_range(seq, cmp, start, mid, 0, min_parallel_size)
        _sort_range(seq, cmp, mid + 1, end, 0, min_parallel_size)

    _merge(seq, cmp, start, mid, end)


def _merge(seq: MutableSequence[Any], cmp: Comparator, start: int, mid: int, end: int) -> None:
    # Element-wise copies: slicing a NumPy array would give a view, not a buffer.
    left = [seq[k] for k in range(start, mid + 1)]
    right = [seq[k] for k in range(mid + 1, end + 1)]

    i = j = 0
    k = start
    while i < len(left) and j < len(right):
        if cmp(right[j], left[i]) < 0:
            seq[k] = right[j]
            j += 1
        else:
            seq[k] = left[i]
            i += 1
        k += 1

    # At most one of these has anything left.
    while i < len(left):
        seq[k] = left[i]
        i += 1
        k += 1
    while j < len(right):
        seq[k] = right[j]
        j += 1
        k += 1


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    config = check_config("merge_sort", config, extra_keys=("parallel_depth", "min_parallel_size"))
    depth = config.get("parallel_depth", DEFAULT_PARALLEL_DEPTH)
    min_size = config.get("min_parallel_size", DEFAULT_MIN_PARALLEL_SIZE)
    if not isinstance(depth, int) or isinstance(depth, bool):
        raise ValueError(f"merge_sort: config.parallel_depth must be an int; got {depth!r}")
    if not isinstance(min_size, int) or isinstance(min_size, bool):
        raise ValueError(f"merge_sort: config.min_parallel_size must be an int; got {min_size!r}")
    return merge_sort(
        list(a),
        comparator_from_config(config),
        parallel_depth=depth,
        min_parallel_size=min_size,
    )
