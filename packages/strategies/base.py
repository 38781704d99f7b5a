from __future__ import annotations

from typing import Dict, Sequence, Type

import numpy as np

# ---- Global strategy registry ----
REGISTRY: Dict[str, Type["BaseStrategy"]] = {}


def register(cls: Type["BaseStrategy"]) -> Type["BaseStrategy"]:
    """
    Decorator: @register on a strategy class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate strategy id: {sid}")
    REGISTRY[sid] = cls
    return cls


def bits(total: int, size) -> float:
    """log2(total / size): information left after landing in a bucket of `size`."""
    return float(np.log2(total / size))


# ---- Base class that strategies inherit ----
class BaseStrategy:
    """
    Turns the bucket-size distribution of one guess into a single score.

    Higher is always better. Subclasses implement `_evaluate`, which only
    ever sees a non-empty int array; an empty distribution scores 0.0.
    """

    id = "base"
    name = "Base"

    def score(self, sizes: Sequence[int], total: int) -> float:
        if total <= 0 or len(sizes) == 0:
            return 0.0
        return self._evaluate(np.asarray(sizes, dtype=np.int64), total)

    def _evaluate(self, sizes: np.ndarray, total: int) -> float:
        raise NotImplementedError("Override in subclass")

    def describe(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
