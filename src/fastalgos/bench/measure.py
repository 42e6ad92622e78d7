"""
Timing harness for sorting algorithms.

Each sample times exactly one `sort(a, config=...)` call with
`time.perf_counter_ns`. Copying the input, warming up and GC handling all
happen outside the timed region.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns per completed sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # set when status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index of the timeout
        "last_output": list | None,         # output of the last completed call
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional

__all__ = ["time_sort_call"]


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., List[Any]],
    a: List[Any],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    defensive_copy: bool,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(a, config=config)`.

    Parameters
    ----------
    algo_name : str
        Name recorded in the result.
    algo_fn : Callable[..., list]
        An algorithm adapter, `sort(a, *, config=None)`.
    a : list
        Input data. Adapters must not mutate it; `defensive_copy` guards
        against ones that do.
    config : dict | None
        Passed through to `algo_fn` unchanged.
    repeats : int
        Number of timed samples.
    warmup : bool
        Make one untimed call first.
    disable_gc : bool
        Collect, then disable the garbage collector for the timed loop.
    timeout_seconds : float
        A sample slower than this marks the run "timeout" and stops sampling.
    defensive_copy : bool
        Hand each call a fresh copy of `a`, made outside the timed region.

    Returns
    -------
    dict
        See module docstring.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
        "last_output": None,
    }

    if warmup and repeats > 0:
        try:
            algo_fn(list(a) if defensive_copy else a, config=config)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    gc_was_enabled = gc.isenabled()
    if disable_gc:
        gc.collect()
        gc.disable()
    try:
        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a) if defensive_copy else a
            try:
                t0 = time.perf_counter_ns()
                out = algo_fn(arg, config=config)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(elapsed)
            result["last_output"] = out
            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Only re-enable what we disabled; respect a caller who had GC off.
        if disable_gc and gc_was_enabled:
            gc.enable()

    return result
