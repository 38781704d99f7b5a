"""
Candidate filtering given feedback.

reduce_candidates keeps the words that would have produced exactly the
observed pattern for one guess. Survivors keep their relative order, and the
input is never modified; the driver replaces its answer set with the result.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .feedback import classify

logger = logging.getLogger(__name__)


def reduce_candidates(guess: str, observed: str, candidates: Sequence[str]) -> List[str]:
    """
    Return the candidates w with classify(guess, w) == observed.

    Candidates of a different length than the guess can never match and are
    dropped rather than raising.
    """
    n = len(guess)
    out = [w for w in candidates if len(w) == n and classify(guess, w) == observed]
    logger.debug("reduce %s/%s: %d -> %d candidates", guess, observed, len(candidates), len(out))
    return out
