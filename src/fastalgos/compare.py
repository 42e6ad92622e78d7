"""
Comparators.

A comparator is any function `(a, b) -> int` returning a negative number,
zero or a positive number when `a` sorts before, together with, or after `b`.
Objects exposing a `compare(a, b)` method (the `Comparer` protocol) are
accepted anywhere a comparator is.

Public API (stable):
    ascending(a, b) -> int
    descending(a, b) -> int
    by_key(key, *, reverse=False) -> Comparator
    resolve_comparator(comparator) -> Comparator
    comparator_from_config(config) -> Comparator
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol, Union

Comparator = Callable[[Any, Any], int]

__all__ = [
    "Comparator",
    "Comparer",
    "ascending",
    "descending",
    "by_key",
    "resolve_comparator",
    "comparator_from_config",
]


class Comparer(Protocol):
    def compare(self, a: Any, b: Any) -> int: ...


def ascending(a: Any, b: Any) -> int:
    """Natural order: -1 if a < b, 1 if a > b, else 0."""
    # Explicit branches: NumPy bools do not support subtraction.
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def descending(a: Any, b: Any) -> int:
    return ascending(b, a)


def by_key(key: Callable[[Any], Any], *, reverse: bool = False) -> Comparator:
    """Build a comparator that orders elements by `key(element)`."""
    base = descending if reverse else ascending

    def _cmp(a: Any, b: Any) -> int:
        return base(key(a), key(b))

    return _cmp


def resolve_comparator(comparator: Union[Comparator, Comparer, None]) -> Comparator:
    """
    Normalise the comparator argument accepted by every sort.

    None means `ascending`; an object with a `compare` method is used through
    that bound method; any other callable is returned as is.
    """
    if comparator is None:
        return ascending
    compare = getattr(comparator, "compare", None)
    if callable(compare):
        return compare
    if callable(comparator):
        return comparator
    raise TypeError(f"comparator must be callable or define compare(a, b); got {comparator!r}")


def comparator_from_config(config: Optional[Dict[str, Any]]) -> Comparator:
    """Read the `order` key of an algorithm config ("asc" or "desc")."""
    order = (config or {}).get("order", "asc")
    if order == "asc":
        return ascending
    if order == "desc":
        return descending
    raise ValueError(f"config.order must be 'asc' or 'desc'; got {order!r}")
