"""
Worst-Case strategy (minimax).

Score = log2(n / largest bucket): the information guaranteed even when the
feedback lands in the biggest bucket. Good against adversarial variants.
"""

from __future__ import annotations

import numpy as np

from .base import BaseStrategy, bits, register


@register
class WorstCaseStrategy(BaseStrategy):
    id = "worst-case"
    name = "Worst Case"

    def _evaluate(self, sizes: np.ndarray, total: int) -> float:
        return bits(total, sizes.max())
