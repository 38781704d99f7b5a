# apps/cli/run.py
"""
CLI entry point for the Wordle assistant.

Two modes:
  - interactive (default): after every real guess type '<word> <pattern>'
    where pattern uses '-' absent, '+' present elsewhere, anything else exact.
  - --word TARGET: replay a whole game against a known target.

Each round prints the number of candidates and the top suggestions
(whole dictionary) and guesses (still-possible answers), then the word to try.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from packages.engine import ConfigError, FeedbackError, Ranking, format_feedback, is_solved
from packages.harness import DEFAULT_MARGIN, GameStatus, InteractiveSession, play_word
from packages.harness.config import RunConfig, SHOWN_GUESSES, load_dictionaries
from packages.strategies import get_strategy_ids

logger = logging.getLogger(__name__)


def _fmt(scored) -> str:
    return "[" + ", ".join(f"({w!r}, {s:.4f})" for w, s in scored) + "]"


def print_ranking(ranking: Ranking, shown: int, out: Optional[TextIO] = None) -> None:
    out = out if out is not None else sys.stdout
    print(f"Suggestions: {len(ranking.suggestions)} {_fmt(ranking.top_suggestions(shown))}", file=out)
    print(f"Guesses: {ranking.remaining} {_fmt(ranking.top_guesses(shown))}", file=out)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description=f"Wordle assistant (strategies: {', '.join(get_strategy_ids())})")
    ap.add_argument("-d", "--dict", default="words.txt",
                    help="path to the word dictionary to use")
    ap.add_argument("--guesses",
                    help="path to a reduced dictionary of possible answers")
    ap.add_argument("-g", "--gambling", type=float, metavar="FACTOR",
                    help="use the gambling strategy with this factor in [0, 1]")
    ap.add_argument("-p", "--pessimistic", action="store_true",
                    help="use the worst-case strategy (good against Absurdle)")
    ap.add_argument("-w", "--word",
                    help="disable interactive mode and replay a game to guess this word")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--workers", type=int, default=0,
                    help="ranking worker processes (0 = one per CPU, 1 = no pool)")
    ap.add_argument("--shown", type=int, default=SHOWN_GUESSES,
                    help="how many ranked words to print per list")
    ap.add_argument("--margin", type=float, default=DEFAULT_MARGIN,
                    help="bits an information-only guess must win by to be chosen")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def interactive(cfg: RunConfig, vocabulary: List[str], answers: List[str],
                lines: Optional[TextIO] = None, out: Optional[TextIO] = None) -> GameStatus:
    lines = lines if lines is not None else sys.stdin
    out = out if out is not None else sys.stdout
    session = InteractiveSession(vocabulary, answers, cfg.strategy, N=cfg.N,
                                 workers=cfg.workers, margin=cfg.margin)
    print_ranking(session.suggest(), cfg.shown, out)

    for line in lines:
        if not line.strip():
            continue
        try:
            state = session.apply_line(line)
        except FeedbackError as e:
            print(f"Could not read that: {e}", file=out)
            continue

        guess, pattern = state.history[-1]
        print(f"Got word {guess} and marks: {format_feedback(pattern)}", file=out)

        if state.status is GameStatus.STUCK:
            print("Stumped, no word in the dictionary matches that feedback", file=out)
            return state.status
        if state.status is GameStatus.SOLVED:
            if is_solved(pattern):
                print(f"Got it on try {len(state.history)}! The answer is: {state.solution!r}", file=out)
            else:
                # Only one word left: typing it is the final try.
                print(f"Got it on try {len(state.history) + 1}! The answer is: {state.solution!r}", file=out)
            return state.status

        ranking = session.suggest()
        print_ranking(ranking, cfg.shown, out)
        print(f"Suggest you try {session.recommend(ranking)!r}", file=out)

    return session.status


def replay(cfg: RunConfig, vocabulary: List[str], answers: List[str],
           out: Optional[TextIO] = None) -> GameStatus:
    out = out if out is not None else sys.stdout

    def on_round(tries: int, ranking: Ranking, guess: str) -> None:
        print_ranking(ranking, cfg.shown, out)
        print(f"Try {tries}, word {guess!r}", file=out)

    r = play_word(cfg.word, vocabulary=vocabulary, answers=answers, strategy=cfg.strategy,
                  workers=cfg.workers, margin=cfg.margin, shown=cfg.shown,
                  on_round=on_round)

    if r["status"] == GameStatus.SOLVED.value:
        print(f"Got it on try {r['tries']}! The answer is: {r['solution']!r}", file=out)
    else:
        print("Stumped, cannot figure it out", file=out)
    return GameStatus(r["status"])


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        cfg = RunConfig.from_args(args)
        vocabulary, answers = load_dictionaries(cfg)
    except ConfigError as e:
        ap.error(str(e))
    except FileNotFoundError as e:
        ap.error(f"dictionary not found: {e}")

    logger.info("strategy=%s mode=%s", cfg.strategy.describe(),
                "interactive" if cfg.interactive else "replay")
    status = interactive(cfg, vocabulary, answers) if cfg.interactive \
        else replay(cfg, vocabulary, answers)
    return 0 if status is not GameStatus.STUCK else 1


if __name__ == "__main__":
    sys.exit(main())
