"""Swap primitive shared by the in-place algorithms."""

from __future__ import annotations

from typing import Any, MutableSequence

__all__ = ["swap"]


def swap(seq: MutableSequence[Any], i: int, j: int) -> MutableSequence[Any]:
    """Exchange seq[i] and seq[j] in place and return seq."""
    seq[i], seq[j] = seq[j], seq[i]
    return seq
