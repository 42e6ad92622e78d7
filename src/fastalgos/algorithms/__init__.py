"""
Sorting algorithms package.

Every algorithm module exposes two entry points:
    <name>(seq, comparator=None) -> seq     # in place, returns the same object
    sort(a, *, config=None) -> list          # copies first; used by the benchmark runner

Module and function share a name (merge_sort.merge_sort, ...), so this
package does not re-export the functions; import them from `fastalgos` or
from the submodule. `ALGORITHMS` maps each benchmark name to its module.
"""

import importlib
from types import ModuleType
from typing import Dict

ALGORITHM_NAMES = (
    "selection_sort",
    "bubble_sort",
    "insert_sort",
    "shell_sort",
    "merge_sort",
    "builtin_timsort",
)

ALGORITHMS: Dict[str, ModuleType] = {
    name: importlib.import_module(f"{__name__}.{name}") for name in ALGORITHM_NAMES
}

__all__ = ["ALGORITHM_NAMES", "ALGORITHMS"]
