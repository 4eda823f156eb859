"""Sampling algorithms for the number generator.

Every function draws through an object with a ``randint(lower, upper)``
method (see ``seeded_random.RandomSource``), so a seeded source makes the
output reproducible.

Unique sampling uses one of two strategies, picked by ``pick_strategy``:

* shuffle-and-take: Fisher-Yates over the whole universe, keep a prefix.
  Always Θ(universe size), output in shuffle order.
* reject-into-set: draw until enough distinct values are collected. Fast
  while the request is sparse, degrades near saturation. The output order
  is the set's iteration order and must be treated as undefined.
"""
from __future__ import annotations

from typing import List, Sequence

# Above this share of the universe a request counts as dense.
DENSE_THRESHOLD = 0.5

SHUFFLE = "shuffle"
REJECTION = "rejection"


def pick_strategy(count: int, universe_size: int, threshold: float = DENSE_THRESHOLD) -> str:
    if count > threshold * universe_size:
        return SHUFFLE
    return REJECTION


def shuffle_and_take(universe_size: int, count: int, rng) -> List[int]:
    """Return ``count`` distinct offsets in ``[0, universe_size)`` in shuffle order."""
    if count > universe_size:
        raise ValueError("count cannot exceed universe_size")
    offsets = list(range(universe_size))
    # Forward Fisher-Yates; positions past ``count`` never reach the output.
    for i in range(count):
        j = rng.randint(i, universe_size - 1)
        offsets[i], offsets[j] = offsets[j], offsets[i]
    return offsets[:count]


def reject_into_set(universe_size: int, count: int, rng) -> List[int]:
    """Return ``count`` distinct offsets in ``[0, universe_size)``, unordered."""
    if count > universe_size:
        raise ValueError("count cannot exceed universe_size")
    chosen = set()
    while len(chosen) < count:
        chosen.add(rng.randint(0, universe_size - 1))
    return list(chosen)


def unique_offsets(universe_size: int, count: int, rng, threshold: float = DENSE_THRESHOLD) -> List[int]:
    if pick_strategy(count, universe_size, threshold) == SHUFFLE:
        return shuffle_and_take(universe_size, count, rng)
    return reject_into_set(universe_size, count, rng)


def sample_range(lower: int, upper: int, count: int, allow_duplicates: bool, rng) -> List[int]:
    """Draw ``count`` integers from the inclusive range ``[lower, upper]``."""
    if allow_duplicates:
        return [rng.randint(lower, upper) for _ in range(count)]
    size = upper - lower + 1
    return [lower + offset for offset in unique_offsets(size, count, rng)]


def sample_list(candidates: Sequence[int], count: int, allow_duplicates: bool, rng) -> List[int]:
    """Draw ``count`` values from ``candidates`` by index."""
    last = len(candidates) - 1
    if allow_duplicates:
        return [candidates[rng.randint(0, last)] for _ in range(count)]
    return [candidates[index] for index in unique_offsets(len(candidates), count, rng)]
