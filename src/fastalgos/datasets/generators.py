"""
Input generators for sorting benchmarks.

Distributions:
- "random":        integers drawn uniformly from params["range"] = [lo, hi] (inclusive).
- "nearly_sorted": [0, 1, ..., n-1] with ceil(swap_frac * n) random pair swaps.
- "few_uniques":   n draws from at most k distinct values taken from an
                   optional inclusive range (default [0, 2**32 - 1]).
- "reversed":      [n-1, ..., 0]; params and RNG unused.
- "sorted":        [0, ..., n-1]; params and RNG unused.
- "shuffled":      a uniform permutation of [0, ..., n-1], produced by this
                   library's Fisher–Yates shuffle with `rng.bytes` as entropy.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

The caller owns and seeds the RNG, so a fixed seed reproduces the same data.
Results are plain Python lists; algorithms never see NumPy types.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import numpy as np

from fastalgos.random_source import RandomSource
from fastalgos.shuffle import shuffle

SUPPORTED_DISTS = {
    "random",
    "nearly_sorted",
    "few_uniques",
    "reversed",
    "sorted",
    "shuffled",
}
__all__ = ["SUPPORTED_DISTS", "make_dataset"]

_DEFAULT_FEW_UNIQUES_RANGE = (0, 2**32 - 1)


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset of length `n` according to `spec`.

    Parameters
    ----------
    n : int
        Number of elements, >= 0.
    spec : dict
        {"dist": <one of SUPPORTED_DISTS>, "params": {...}}. See module docstring.
    rng : numpy.random.Generator
        Caller-owned, already seeded.

    Returns
    -------
    list[int]

    Raises
    ------
    ValueError
        On a bad `n`, an unknown distribution or malformed params.
    """
    if not isinstance(n, int) or isinstance(n, bool) or n < 0:
        raise ValueError(f"n must be a nonnegative int; got {n!r}")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    if dist not in SUPPORTED_DISTS:
        raise ValueError(f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}")
    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    if dist == "random":
        if "range" not in params:
            raise ValueError("random.params.range must be provided as [min, max] (inclusive)")
        lo, hi = _parse_range(dist, params["range"])
        # Generator.integers is half-open; +1 makes hi inclusive.
        return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        arr = list(range(n))
        num_swaps = int(np.ceil(swap_frac * n))
        if n == 0 or num_swaps == 0:
            return arr
        idxs = rng.integers(0, n, size=(num_swaps, 2))
        for i, j in idxs.tolist():
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    if dist == "few_uniques":
        k = params.get("k")
        if not isinstance(k, int) or isinstance(k, bool) or k < 1:
            raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
        lo, hi = _parse_range(dist, params.get("range", _DEFAULT_FEW_UNIQUES_RANGE))
        if n == 0:
            return []
        k = min(k, n, hi - lo + 1)
        values = _distinct_values(k, lo, hi, rng)
        return [values[t] for t in rng.integers(0, k, size=n).tolist()]

    if dist == "reversed":
        return list(range(n - 1, -1, -1))

    if dist == "sorted":
        return list(range(n))

    # "shuffled"
    return shuffle(list(range(n)), source=RandomSource(rng.bytes))


# ------------------------- helpers ------------------------- #


def _parse_range(dist: str, raw: Any) -> Tuple[int, int]:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list [min, max]")
    if not all(isinstance(v, (int, np.integer)) for v in raw):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(raw[0]), int(raw[1])
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    raw = params.get("swap_frac", 0.05)
    try:
        x = float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"nearly_sorted.params.swap_frac must be a float; got {raw!r}") from e
    if not 0.0 <= x <= 1.0:
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _distinct_values(k: int, lo: int, hi: int, rng: np.random.Generator) -> List[int]:
    # Oversampled batches until k distinct values are collected; k is small
    # relative to the span in the intended use.
    seen: Dict[int, None] = {}
    while len(seen) < k:
        for v in rng.integers(lo, hi + 1, size=2 * (k - len(seen)), dtype=np.int64).tolist():
            seen.setdefault(v)
            if len(seen) == k:
                break
    return list(seen)
