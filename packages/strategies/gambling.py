"""
Gambling (percentile) strategy.

Buckets are sorted largest first and their sizes accumulated; the first
bucket whose running total pushes the covered fraction strictly above
`factor` decides the score, log2(n / that bucket's size).

  factor = 0    -> the largest bucket, i.e. the worst-case score
  factor -> 1   -> the smallest bucket, an optimistic score

With factor = 1 the fraction can never exceed the threshold, so the last
(smallest) bucket is used.
"""

from __future__ import annotations

import numpy as np

from .base import BaseStrategy, bits, register
from packages.engine.errors import ConfigError


@register
class GamblingStrategy(BaseStrategy):
    id = "gambling"
    name = "Gambling (Percentile)"

    def __init__(self, factor: float = 0.5):
        factor = float(factor)
        if not 0.0 <= factor <= 1.0:
            raise ConfigError(f"gambling factor must be within [0, 1], got {factor}")
        self.factor = factor

    def _evaluate(self, sizes: np.ndarray, total: int) -> float:
        ordered = np.sort(sizes)[::-1]
        covered = np.cumsum(ordered) / total
        crossed = np.flatnonzero(covered > self.factor)
        idx = crossed[0] if crossed.size else ordered.size - 1
        return bits(total, ordered[idx])

    def describe(self) -> str:
        return f"{self.id}({self.factor:g})"

    def __repr__(self) -> str:
        return f"GamblingStrategy(factor={self.factor!r})"
