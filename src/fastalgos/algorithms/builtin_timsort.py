"""
Reference baseline: Python's built-in Timsort behind the same adapter as the
hand-written algorithms, so benchmarks have something to measure against.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Dict, List, Optional

from fastalgos.algorithms._config import check_config
from fastalgos.compare import ascending, comparator_from_config

__all__ = ["sort"]


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    config = check_config("builtin_timsort", config)
    cmp = comparator_from_config(config)
    if cmp is ascending:
        return sorted(a)
    return sorted(a, key=cmp_to_key(cmp))
