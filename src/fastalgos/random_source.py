"""
Unbiased bounded random integers by rejection sampling.

`random_in_range(lo, hi)` returns an integer uniformly distributed over the
half-open range [lo, hi). Reducing random bytes modulo the span would favour
small values whenever the span is not a power of two, so instead:

    span   = hi - lo
    bits   = span.bit_length()          # floor(log2(span)) + 1
    nbytes = bits // 8 + 1
    value  = int(random bytes) & ((1 << bits) - 1)

and any value >= span is thrown away and drawn again. The mask keeps at least
half of the draws in range, so on average fewer than two draws are needed.

The loop has no hard bound in principle; `max_retries` (default 1000) caps it
and raises `EntropyExhausted` instead. A fair source reaches that cap with
probability below 2**-1000, so hitting it means the source is broken.

Entropy comes from any callable `(n) -> bytes` returning n uniformly random
bytes. The default is `secrets.token_bytes` (the OS CSPRNG). For reproducible
runs pass a seeded `numpy.random.Generator(...).bytes`; that is not
cryptographic but is uniform. Provider failures surface as
`EntropySourceUnavailable`; there is no fallback to another generator.

Public API (stable):
    RandomSource(entropy=None, max_retries=1000)
    RandomSource.random_in_range(lo, hi) -> int
    random_in_range(lo, hi, *, entropy=None, max_retries=1000) -> int
"""

from __future__ import annotations

import operator
import secrets
from typing import Callable, Optional

from fastalgos.errors import EntropyExhausted, EntropySourceUnavailable

Entropy = Callable[[int], bytes]

DEFAULT_MAX_RETRIES = 1000

__all__ = [
    "Entropy",
    "DEFAULT_MAX_RETRIES",
    "RandomSource",
    "random_in_range",
]


class RandomSource:
    """
    Bounded random integers over a byte-entropy provider.

    Holds configuration plus a running count of entropy draws (`draws`),
    which is handy for checking the expected-draws bound.
    """

    def __init__(
        self,
        entropy: Optional[Entropy] = None,
        max_retries: Optional[int] = DEFAULT_MAX_RETRIES,
    ) -> None:
        if max_retries is not None and max_retries < 1:
            raise ValueError(f"max_retries must be positive or None; got {max_retries}")
        self.entropy: Entropy = entropy if entropy is not None else secrets.token_bytes
        self.max_retries = max_retries
        self.draws = 0

    def random_in_range(self, lo: int, hi: int) -> int:
        """
        Return a uniform integer in [lo, hi); returns lo when hi <= lo.

        Bounds may be any integer type (`int`, NumPy integers); the result is
        a Python `int`. Non-integer bounds raise `TypeError`.
        """
        lo, hi = operator.index(lo), operator.index(hi)
        span = hi - lo
        if span <= 0:
            return lo

        bits = span.bit_length()
        nbytes = bits // 8 + 1
        mask = (1 << bits) - 1

        attempts = 0
        while self.max_retries is None or attempts < self.max_retries:
            attempts += 1
            value = int.from_bytes(self._draw(nbytes), "little") & mask
            if value < span:
                return lo + value
        raise EntropyExhausted(span, attempts)

    def _draw(self, nbytes: int) -> bytes:
        try:
            buf = self.entropy(nbytes)
        except (OSError, NotImplementedError) as e:
            raise EntropySourceUnavailable(f"entropy provider failed: {e!r}") from e
        self.draws += 1
        if len(buf) != nbytes:
            raise EntropySourceUnavailable(
                f"entropy provider returned {len(buf)} bytes, expected {nbytes}"
            )
        return bytes(buf)

    def __repr__(self) -> str:
        return f"RandomSource(entropy={self.entropy!r}, max_retries={self.max_retries}, draws={self.draws})"


def random_in_range(
    lo: int,
    hi: int,
    *,
    entropy: Optional[Entropy] = None,
    max_retries: Optional[int] = DEFAULT_MAX_RETRIES,
) -> int:
    """One-shot convenience wrapper around `RandomSource.random_in_range`."""
    return RandomSource(entropy, max_retries).random_in_range(lo, hi)
