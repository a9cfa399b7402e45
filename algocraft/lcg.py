"""A linear congruential generator of 32-bit numbers."""

from __future__ import annotations

_MASK = 0xFFFFFFFF


class LCG:
    """Endless iterator of values in ``[0, 4294967295]``: X = a*X + c mod 2**32."""

    A = 1664525
    C = 1013904223

    def __init__(self, seed: int = 0) -> None:
        if not 0 <= seed <= _MASK:
            raise ValueError(f"seed {seed} is not a 32-bit unsigned value")
        self.state = seed

    def __iter__(self) -> LCG:
        return self

    def __next__(self) -> int:
        self.state = (self.A * self.state + self.C) & _MASK
        return self.state