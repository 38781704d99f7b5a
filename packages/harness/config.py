"""
Run configuration shared by the CLIs.

RunConfig is built once from parsed arguments; a bad combination of options
raises ConfigError before any dictionary is read or game state exists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from packages.datasets import load_words
from packages.engine import ConfigError, is_word
from packages.engine.ranking import resolve_workers
from packages.strategies import BaseStrategy, strategy_from_options
from .core import DEFAULT_MARGIN

logger = logging.getLogger(__name__)

SHOWN_GUESSES = 10


@dataclass
class RunConfig:
    dictionary: str = "words.txt"
    guesses: Optional[str] = None
    strategy: Optional[BaseStrategy] = None
    word: Optional[str] = None
    N: int = 5
    workers: int = 1
    shown: int = SHOWN_GUESSES
    margin: float = DEFAULT_MARGIN
    log_level: str = "WARNING"

    @property
    def interactive(self) -> bool:
        return self.word is None

    @classmethod
    def from_args(cls, args) -> "RunConfig":
        """Build from an argparse namespace (see apps/cli/run.py)."""
        strategy = strategy_from_options(pessimistic=args.pessimistic,
                                         gambling_factor=args.gambling)
        if args.N < 1:
            raise ConfigError(f"word length must be positive, got {args.N}")
        word = args.word.strip().lower() if args.word else None
        if word is not None and not is_word(word, args.N):
            raise ConfigError(f"--word {args.word!r} must be {args.N} letters")
        if args.shown < 1:
            raise ConfigError("--shown must be at least 1")
        if args.margin < 0:
            raise ConfigError(f"--margin must be non-negative, got {args.margin}")
        return cls(
            dictionary=args.dict,
            guesses=args.guesses,
            strategy=strategy,
            word=word,
            N=args.N,
            workers=resolve_workers(args.workers),
            shown=args.shown,
            margin=args.margin,
            log_level=args.log_level,
        )


def load_dictionaries(cfg: RunConfig) -> Tuple[List[str], List[str]]:
    """
    Load (vocabulary, answers). Without a guesses file the answer set is a
    copy of the vocabulary.
    """
    vocabulary = load_words(cfg.dictionary, cfg.N)
    if not vocabulary:
        raise ConfigError(f"dictionary {cfg.dictionary} has no {cfg.N}-letter words")
    if cfg.guesses is None:
        answers = list(vocabulary)
    else:
        answers = load_words(cfg.guesses, cfg.N)
        if not answers:
            raise ConfigError(f"guesses file {cfg.guesses} has no {cfg.N}-letter words")
    logger.info("vocabulary=%d answers=%d strategy=%s", len(vocabulary), len(answers),
                cfg.strategy.describe() if cfg.strategy else "-")
    return vocabulary, answers
