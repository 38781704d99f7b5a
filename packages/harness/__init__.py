from .core import (WORDLE_MAX_TURNS, DEFAULT_MARGIN, GameStatus, RoundState,
                   start, advance, play_word, run_batch)
from .session import InteractiveSession
from .io import write_csv, write_manifest

__all__ = ["WORDLE_MAX_TURNS", "DEFAULT_MARGIN", "GameStatus", "RoundState", "start",
           "advance", "play_word", "run_batch", "InteractiveSession",
           "write_csv", "write_manifest"]
