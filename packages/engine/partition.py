"""
Bucket partitioning: group candidates by the feedback a guess would receive.

Two candidates in the same bucket are indistinguishable after that guess.
This is the hot loop of ranking (|candidates| classifications per guess).
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

from .feedback import classify


def partition(guess: str, candidates: Iterable[str]) -> Dict[str, List[str]]:
    """
    Map each feedback pattern to the candidates that produce it.

    An empty candidate set yields an empty mapping.
    """
    buckets: Dict[str, List[str]] = defaultdict(list)
    for w in candidates:
        buckets[classify(guess, w)].append(w)
    return dict(buckets)


def bucket_sizes(guess: str, candidates: Iterable[str]) -> List[int]:
    """Sizes of the feedback buckets for `guess` (order unspecified)."""
    counts: Dict[str, int] = defaultdict(int)
    # localize for speed
    _classify = classify
    for w in candidates:
        counts[_classify(guess, w)] += 1
    return list(counts.values())
