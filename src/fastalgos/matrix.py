"""
Strassen multiplication for a single pair of 2x2 integer matrices.

Seven products instead of the naive eight. Fixed size, so Theta(1); the point
is the multiplication count, not scaling to n x n.
"""

from __future__ import annotations

import numbers
from typing import Any, List, Sequence

import numpy as np

from fastalgos.errors import DimensionMismatch

Matrix = List[List[int]]

__all__ = ["Matrix", "multiply"]


def _is_integer_cell(x: Any) -> bool:
    # bool is an Integral; a 2x2 of flags is not a matrix of integers.
    return isinstance(x, (numbers.Integral, np.integer)) and not isinstance(x, (bool, np.bool_))


def _is_two_by_two(m: Any) -> bool:
    try:
        return (
            len(m) == 2
            and all(len(row) == 2 for row in m)
            and all(_is_integer_cell(x) for row in m for x in row)
        )
    except TypeError:
        return False


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """
    Return a @ b for two 2x2 integer matrices as a new list of lists.

    Accepts nested lists/tuples or 2x2 NumPy integer arrays.

    Raises
    ------
    DimensionMismatch
        If either input is not exactly 2x2 with integer scalar cells.
        Checked before any arithmetic.
    """
    if not _is_two_by_two(a) or not _is_two_by_two(b):
        raise DimensionMismatch("multiply() needs two 2x2 integer matrices")

    (a00, a01), (a10, a11) = ((int(x) for x in row) for row in a)
    (b00, b01), (b10, b11) = ((int(x) for x in row) for row in b)

    s1 = (a00 + a11) * (b00 + b11)
    s2 = (a10 + a11) * b00
    s3 = a00 * (b01 - b11)
    s4 = a11 * (b10 - b00)
    s5 = (a00 + a01) * b11
    s6 = (a10 - a00) * (b00 + b01)
    s7 = (a01 - a11) * (b10 + b11)

    return [
        [s1 + s4 - s5 + s7, s3 + s5],
        [s2 + s4, s1 - s2 + s3 + s6],
    ]
