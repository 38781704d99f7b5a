"""
Average strategy (expected information gain).

Score = sum_i (c_i / n) * log2(n / c_i), the Shannon entropy in bits of the
partition a guess induces, assuming every remaining candidate is equally
likely to be the target.
"""

from __future__ import annotations

import numpy as np

from .base import BaseStrategy, register


@register
class AverageStrategy(BaseStrategy):
    id = "average"
    name = "Average (Expected Information)"

    def _evaluate(self, sizes: np.ndarray, total: int) -> float:
        p = sizes / total
        return float(np.sum(p * np.log2(total / sizes)))
