"""
Interactive game session.

The player types '<word> <pattern>' after every real guess; the session
reduces the possible answers and ranks the next round. The session owns the
answer set: each line replaces `state` with a new RoundState.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from packages.engine import Ranking, rank, choose_guess, parse_feedback_line
from .core import DEFAULT_MARGIN, GameStatus, RoundState, advance, start

logger = logging.getLogger(__name__)


class InteractiveSession:
    def __init__(self, vocabulary: Sequence[str], answers: Sequence[str], strategy, *,
                 N: int = 5, workers: int = 1, margin: float = DEFAULT_MARGIN):
        self.vocabulary = tuple(vocabulary)
        self.strategy = strategy
        self.N = N
        self.workers = workers
        self.margin = margin
        self.state: RoundState = start(answers)

    @property
    def status(self) -> GameStatus:
        return self.state.status

    def suggest(self) -> Ranking:
        return rank(self.vocabulary, self.state.possible_answers, self.strategy,
                    workers=self.workers)

    def recommend(self, ranking: Ranking) -> Optional[str]:
        """Word to try next, or None when nothing is left to choose from."""
        if not ranking.guesses:
            return None
        return choose_guess(ranking, self.margin)

    def apply_line(self, line: str) -> RoundState:
        """
        Parse one feedback line and advance the game.

        Raises FeedbackError on malformed input; the state is unchanged then.
        """
        guess, pattern = parse_feedback_line(line, self.N)
        self.state = advance(self.state, guess, pattern)
        logger.debug("applied %s %s: %d possible answers", guess, pattern,
                     len(self.state.possible_answers))
        return self.state
