"""Prime testing and factorisation of 64-bit unsigned integers."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from itertools import count

MAX_PRIME = 0xFFFFFFFF
_XINT_LIMIT = 1 << 64
_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
_SMALL_PRIMES = tuple(p for p in range(2, 1000) if all(p % d for d in range(2, math.isqrt(p) + 1)))


def _check_xint(x: int) -> None:
    if not 0 <= x < _XINT_LIMIT:
        raise ValueError(f"{x} is not a 64-bit unsigned value")


def is_prime(x: int) -> bool:
    """Return True if ``x`` is prime."""
    _check_xint(x)
    if x < 2:
        return False
    for p in _WITNESSES:
        if x % p == 0:
            return x == p
    d = x - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _WITNESSES:
        y = pow(a, d, x)
        if y in (1, x - 1):
            continue
        for _ in range(s - 1):
            y = y * y % x
            if y == x - 1:
                break
        else:
            return False
    return True


def next_prime(p: int) -> int:
    """Return the smallest prime above ``p``, or 0 if it exceeds ``MAX_PRIME``."""
    if not 0 <= p <= MAX_PRIME:
        raise ValueError(f"{p} is not a 32-bit unsigned value")
    for candidate in range(p + 1, MAX_PRIME + 1):
        if is_prime(candidate):
            return candidate
    return 0


def _pollard_rho(n: int) -> int:
    for c in count(1):
        x = y = 2
        d = 1
        while d == 1:
            x = (x * x + c) % n
            y = (y * y + c) % n
            y = (y * y + c) % n
            d = math.gcd(abs(x - y), n)
        if d != n:
            return d
    raise AssertionError("unreachable")


def _split(n: int, factors: list[int]) -> None:
    stack = [n]
    while stack:
        m = stack.pop()
        if m == 1:
            continue
        if is_prime(m):
            factors.append(m)
            continue
        d = _pollard_rho(m)
        stack.extend((d, m // d))


def decompose(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with repetition."""
    _check_xint(n)
    if n == 0:
        raise ValueError("0 has no prime decomposition")
    factors: list[int] = []
    for p in _SMALL_PRIMES:
        if p * p > n:
            break
        while n % p == 0:
            n //= p
            factors.append(p)
    if n > 1:
        _split(n, factors)
    return sorted(factors)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the factorisation of 2^p - 1 for p from 1 to 63."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        print("usage: prime-decompose", file=sys.stderr)
        return 2
    for p in range(1, 64):
        po = (1 << p) - 1
        line = f"2^{p} - 1 = {po}"
        factors = decompose(po)
        if len(factors) > 1:
            line += "".join(f" {'x' if i else '='} {f}" for i, f in enumerate(factors))
        print(line, flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())