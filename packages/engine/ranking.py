"""
Guess ranking for one round.

Every guess word is scored independently:
    score(g) = strategy.score(bucket_sizes(g, possible_answers), n)
so the work fans out over a process pool in chunks of guess words and is
gathered at the end; nothing is shared or mutated between tasks.

Two views come back, both sorted by descending score with ties kept in input
order (stable sort):
  - suggestions: the whole vocabulary (best information guesses)
  - guesses:     only the still-possible answers (valid final guesses)

Scores live in the returned Ranking only; they depend on this round's
possible answers and are never reused for the next round.
"""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from typing import Dict, List, Sequence, Tuple

from .partition import bucket_sizes

logger = logging.getLogger(__name__)

Scored = Tuple[str, float]

# Prefer an information-only guess when it wins by at least this many bits.
DEFAULT_MARGIN = 0.005


@dataclass
class Ranking:
    suggestions: List[Scored]
    guesses: List[Scored]
    scores: Dict[str, float] = field(repr=False)

    @property
    def remaining(self) -> int:
        return len(self.guesses)

    def top_suggestions(self, k: int) -> List[Scored]:
        return self.suggestions[:k]

    def top_guesses(self, k: int) -> List[Scored]:
        return self.guesses[:k]


def _score_chunk(words: Sequence[str], possible: Sequence[str], strategy) -> List[float]:
    """Worker body: score a slice of guess words against the same answer set."""
    n = len(possible)
    return [strategy.score(bucket_sizes(w, possible), n) for w in words]


def _chunks(words: Sequence[str], parts: int) -> List[Sequence[str]]:
    size = max(1, -(-len(words) // parts))
    return [words[i:i + size] for i in range(0, len(words), size)]


def resolve_workers(workers: int | None) -> int:
    """0 or None means one worker per CPU."""
    if not workers:
        return os.cpu_count() or 1
    return max(1, int(workers))


def compute_scores(guess_words: Sequence[str], possible_answers: Sequence[str],
                   strategy, *, workers: int = 1) -> Dict[str, float]:
    """
    Score each guess word against `possible_answers`; returns {word: score}.

    workers <= 1 runs in-process. Larger values split the guess list into
    ~4 chunks per worker and map them over a ProcessPoolExecutor.
    """
    words = list(guess_words)
    possible = tuple(possible_answers)

    if workers <= 1 or len(words) < 2:
        values = _score_chunk(words, possible, strategy)
    else:
        fn = partial(_score_chunk, possible=possible, strategy=strategy)
        values = []
        with ProcessPoolExecutor(max_workers=workers) as executor:
            for part in executor.map(fn, _chunks(words, workers * 4)):
                values.extend(part)

    return dict(zip(words, values))


def rank(vocabulary: Sequence[str], possible_answers: Sequence[str], strategy,
         *, workers: int = 1) -> Ranking:
    """
    Rank the vocabulary and the possible answers for the next guess.

    Possible answers missing from the vocabulary (a separately supplied
    answer list) are scored as well, after the vocabulary words.
    With no possible answers every score is 0.0; the caller decides what
    that means (see harness.core: STUCK).
    """
    t0 = time.perf_counter()

    in_vocab = set(vocabulary)
    extra = [w for w in dict.fromkeys(possible_answers) if w not in in_vocab]
    scores = compute_scores(list(vocabulary) + extra, possible_answers, strategy,
                            workers=workers)

    def by_score(words: Sequence[str]) -> List[Scored]:
        return sorted(((w, scores[w]) for w in words), key=lambda ws: ws[1], reverse=True)

    ranking = Ranking(suggestions=by_score(vocabulary),
                      guesses=by_score(possible_answers),
                      scores=scores)
    logger.debug("ranked %d guesses against %d answers with %s in %.1f ms",
                 len(scores), len(possible_answers), strategy.describe(),
                 (time.perf_counter() - t0) * 1000.0)
    return ranking


def choose_guess(ranking: Ranking, margin: float = DEFAULT_MARGIN) -> str:
    """
    Pick the word to play.

    Prefer the best possible answer; switch to the best information guess
    only when it carries some information and its score beats that by at
    least `margin` bits.
    """
    if not ranking.guesses:
        raise ValueError("no possible answers left to choose from")
    guess_word, guess_score = ranking.guesses[0]
    if ranking.suggestions:
        sug_word, sug_score = ranking.suggestions[0]
        if sug_score > 0.0 and sug_score >= guess_score + margin:
            return sug_word
    return guess_word
