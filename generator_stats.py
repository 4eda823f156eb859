from __future__ import annotations

from typing import Iterable, Optional

from pydantic import BaseModel


class GeneratorStats(BaseModel):
    count: int
    min: Optional[int] = None
    max: Optional[int] = None
    sum: int = 0
    avg: float = 0.0


def compute_stats(numbers: Iterable[int]) -> GeneratorStats:
    values = list(numbers)
    if not values:
        return GeneratorStats(count=0)
    # Python ints never overflow, so the sum needs no widening.
    total = sum(values)
    return GeneratorStats(
        count=len(values),
        min=min(values),
        max=max(values),
        sum=total,
        avg=total / len(values),
    )
