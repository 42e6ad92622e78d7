"""
Exceptions raised by fastalgos.

Hierarchy:
    FastAlgosError
      ├── DimensionMismatch         (also a ValueError)
      ├── EntropySourceUnavailable  (also a RuntimeError)
      └── EntropyExhausted          (also a RuntimeError)

Sorting routines define no errors of their own: an inconsistent comparator
gives an unspecified order, and an exception raised by the comparator
propagates unchanged.
"""

from __future__ import annotations

__all__ = [
    "FastAlgosError",
    "DimensionMismatch",
    "EntropySourceUnavailable",
    "EntropyExhausted",
]


class FastAlgosError(Exception):
    """Base class for every error raised by this package."""


class DimensionMismatch(FastAlgosError, ValueError):
    """Matrix multiply was given something other than two 2x2 matrices."""


class EntropySourceUnavailable(FastAlgosError, RuntimeError):
    """The byte-entropy provider failed or returned a malformed draw."""


class EntropyExhausted(FastAlgosError, RuntimeError):
    """Rejection sampling gave up after too many out-of-range draws."""

    def __init__(self, span: int, retries: int) -> None:
        super().__init__(
            f"no value below {span} after {retries} draws; entropy source looks biased"
        )
        self.span = span
        self.retries = retries
