"""Injectable source of uniform random integers.

The generator engine draws every random value through a ``RandomSource``.
Production code builds one without a seed (OS-seeded, non-deterministic);
tests pass a seed so shuffle and rejection outcomes are reproducible.

Not suitable for cryptographic use.
"""

from __future__ import annotations

from random import Random
from typing import Optional


class RandomSource:
    """Uniform integers in an inclusive range, optionally seeded.

    Args:
        seed: Seed to initialize the RNG. ``None`` seeds from the operating
            system.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._rng = Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def randint(self, lower: int, upper: int) -> int:
        """Return an integer drawn uniformly from ``[lower, upper]``.

        Raises:
            ValueError: If ``lower`` is greater than ``upper``.
        """
        if lower > upper:
            raise ValueError("lower cannot be greater than upper")
        return self._rng.randint(lower, upper)

    def reseed(self, seed: Optional[int]) -> None:
        self._seed = seed
        self._rng = Random(seed)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed!r})"
