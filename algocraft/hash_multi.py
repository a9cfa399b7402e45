"""Hashing by multiplication: h(k) = (A*k mod 2^w) >> (w - r)."""

from __future__ import annotations

import math
from dataclasses import dataclass

BITWIDTH = 32
_MASK = (1 << BITWIDTH) - 1


@dataclass(frozen=True)
class MultiHash:
    """A multiplicative hash onto a table of ``2**r`` buckets."""

    a: int
    r: int

    def table_size(self) -> int:
        """Return the number of buckets, ``2**r``."""
        return 1 << self.r

    def hash(self, key: int) -> int:
        """Hash a 32-bit key into ``range(table_size())``."""
        return ((self.a * (key & _MASK)) & _MASK) >> (BITWIDTH - self.r)


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def multi_hash_init(size: int) -> MultiHash:
    """Build a hash whose ``r`` is the first prime at or above ``ceil(log2(size))``."""
    if size < 1:
        raise ValueError("table size must be positive")
    r = max(math.ceil(math.log2(size)), 0)
    while not _is_prime(r):
        r += 1
    if r >= BITWIDTH:
        raise ValueError(f"table size {size} is too large for a {BITWIDTH}-bit hash")
    return MultiHash(a=(1 << (BITWIDTH - r)) + 1, r=r)