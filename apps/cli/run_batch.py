# apps/cli/run_batch.py
"""
Evaluate a strategy over many target words.

This script:
  1) Validates the dictionary (and optional answer list) and prints a summary.
  2) Plays every answer (or a seeded sample) as a hidden target.
  3) Writes:
       - CSV:  one row per game with the guess/pattern history
       - JSON: manifest with config, dictionary report, git commit and totals
"""

from __future__ import annotations

import argparse
import logging
import random
import statistics
import sys
from pathlib import Path
from typing import Optional, Sequence

from packages.datasets import load_words, pretty_summary, validate_wordlists
from packages.engine import ConfigError
from packages.engine.ranking import resolve_workers
from packages.harness import DEFAULT_MARGIN, WORDLE_MAX_TURNS, run_batch
from packages.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from packages.strategies import strategy_from_options

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Wordle assistant - batch evaluation")
    ap.add_argument("-d", "--dict", default="words.txt", help="path to the word dictionary")
    ap.add_argument("--guesses", help="path to the possible-answer list (defaults to --dict)")
    ap.add_argument("-g", "--gambling", type=float, metavar="FACTOR")
    ap.add_argument("-p", "--pessimistic", action="store_true")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--sample", type=int, help="play only this many targets (seeded shuffle)")
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--workers", type=int, default=0,
                    help="ranking worker processes (0 = one per CPU, 1 = no pool)")
    ap.add_argument("--margin", type=float, default=DEFAULT_MARGIN,
                    help="bits an information-only guess must win by to be chosen")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        strategy = strategy_from_options(pessimistic=args.pessimistic,
                                         gambling_factor=args.gambling)
        if args.margin < 0:
            raise ConfigError(f"--margin must be non-negative, got {args.margin}")
    except ConfigError as e:
        ap.error(str(e))

    # 1) Dictionary report
    rep = validate_wordlists(args.N, args.dict, args.guesses)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for msg in rep["issues"]:
            logger.error(msg)
        return 2

    vocabulary = load_words(args.dict, args.N)
    answers = load_words(args.guesses, args.N) if args.guesses else list(vocabulary)

    # 2) Targets (deterministic sample by seed)
    targets = list(answers)
    if args.sample and args.sample < len(targets):
        random.Random(args.seed).shuffle(targets)
        targets = targets[: args.sample]

    results = run_batch(targets, vocabulary=vocabulary, answers=answers, strategy=strategy,
                        workers=resolve_workers(args.workers), margin=args.margin,
                        progress=not args.no_progress)

    # 3) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS)
    solved = [r["tries"] for r in results if r["status"] == "solved"]
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "strategy": strategy.describe(),
        "wordlists": rep,
        "num_cases": len(results),
        "num_solved": len(solved),
        "num_success": sum(1 for r in results if r["success"]),
        "mean_tries": statistics.fmean(solved) if solved else None,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
