"""
Round driver primitives.

- RoundState / advance: the per-game state machine. A state is never
  modified; each round produces a new one with a smaller answer set.
- play_word: batch mode, feedback comes from classifying against a known
  target until the game is SOLVED or STUCK.
- run_batch: play many targets in sequence with a progress bar.

Terminal states:
  SOLVED  one possible answer remains, or a guess scored all-exact
  STUCK   no possible answer remains (contradictory feedback, or the target
          is missing from the answer list)
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from tqdm import tqdm

from packages.engine import classify, is_solved, reduce_candidates, rank, choose_guess, Ranking
from packages.engine.ranking import DEFAULT_MARGIN

logger = logging.getLogger(__name__)

# Wordle's turn budget; games are played to the end but `success` uses it.
WORDLE_MAX_TURNS = 6

# Ranked words kept per list in each round preview.
PREVIEW_SIZE = 10

RoundCallback = Callable[[int, Ranking, str], None]


class GameStatus(str, Enum):
    PLAYING = "playing"
    SOLVED = "solved"
    STUCK = "stuck"


@dataclass(frozen=True)
class RoundState:
    possible_answers: Tuple[str, ...]
    history: Tuple[Tuple[str, str], ...] = ()
    status: GameStatus = GameStatus.PLAYING

    @property
    def solution(self) -> Optional[str]:
        """The identified word once SOLVED, else None."""
        if self.status is not GameStatus.SOLVED:
            return None
        if self.history and is_solved(self.history[-1][1]):
            return self.history[-1][0]
        return self.possible_answers[0]


def _status_for(possible: Sequence[str]) -> GameStatus:
    if not possible:
        return GameStatus.STUCK
    if len(possible) == 1:
        return GameStatus.SOLVED
    return GameStatus.PLAYING


def start(answers: Iterable[str]) -> RoundState:
    possible = tuple(answers)
    return RoundState(possible_answers=possible, status=_status_for(possible))


def advance(state: RoundState, guess: str, pattern: str) -> RoundState:
    """Apply one round of feedback and return the next state."""
    remaining = tuple(reduce_candidates(guess, pattern, state.possible_answers))
    status = GameStatus.SOLVED if is_solved(pattern) else _status_for(remaining)
    return replace(state,
                   possible_answers=remaining,
                   history=state.history + ((guess, pattern),),
                   status=status)


def play_word(
        target: str,
        *,
        vocabulary: Sequence[str],
        answers: Sequence[str],
        strategy,
        workers: int = 1,
        margin: float = DEFAULT_MARGIN,
        shown: int = PREVIEW_SIZE,
        on_round: Optional[RoundCallback] = None,
) -> Dict:
    """
    Play one game against a known target.

    Args:
        target:     the hidden word; feedback is classify(guess, target)
        vocabulary: every word that may be typed
        answers:    initial possible-answer set (often == vocabulary)
        strategy:   a BaseStrategy instance, fixed for the game
        workers:    ranking worker processes (1 = in-process)
        margin:     see ranking.choose_guess
        shown:      how many words of each ranked list a round preview keeps
        on_round:   called as on_round(try_number, ranking, chosen_word)

    Returns:
        dict with keys:
            answer, status, solution, tries, success, time_ms,
            history (list[(guess, pattern)]), strategy,
            rounds (one preview per ranked round: try, remaining, top
            suggestions, top guesses, chosen guess)
    """
    state = start(answers)
    tries = 0
    rounds: List[Dict] = []
    t0 = time.perf_counter()

    while state.status is GameStatus.PLAYING:
        ranking = rank(vocabulary, state.possible_answers, strategy, workers=workers)
        guess = choose_guess(ranking, margin)
        tries += 1
        rounds.append({
            "try": tries,
            "remaining": ranking.remaining,
            "suggestions": ranking.top_suggestions(shown),
            "guesses": ranking.top_guesses(shown),
            "guess": guess,
        })
        if on_round is not None:
            on_round(tries, ranking, guess)

        pattern = classify(guess, target)
        state = advance(state, guess, pattern)
        logger.debug("try %d: %s -> %s, %d left", tries, guess, pattern,
                     len(state.possible_answers))

    if state.status is GameStatus.SOLVED and not (state.history and is_solved(state.history[-1][1])):
        # Identified by elimination: the last remaining word is the final try.
        last = state.possible_answers[0]
        tries += 1
        state = advance(state, last, classify(last, target))

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "answer": target,
        "status": state.status.value,
        "solution": state.solution,
        "tries": tries,
        "success": state.status is GameStatus.SOLVED and tries <= WORDLE_MAX_TURNS,
        "time_ms": dt,
        "history": list(state.history),
        "strategy": strategy.describe(),
        "rounds": rounds,
    }


def run_batch(
        targets: Sequence[str],
        *,
        vocabulary: Sequence[str],
        answers: Sequence[str],
        strategy,
        workers: int = 1,
        margin: float = DEFAULT_MARGIN,
        sample: Optional[int] = None,
        progress: bool = True,
) -> List[Dict]:
    """
    Play every target back-to-back (optionally only the first `sample`).
    """
    pool = list(targets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for target in tqdm(pool, ncols=80, desc="Playing", unit="game", disable=not progress):
        out.append(play_word(target, vocabulary=vocabulary, answers=answers,
                             strategy=strategy, workers=workers, margin=margin))

    solved = sum(1 for r in out if r["status"] == GameStatus.SOLVED.value)
    logger.info("batch done: %d/%d solved with %s", solved, len(out), strategy.describe())
    return out
