from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def keep_word(line: str, N: int) -> bool:
    """A dictionary line survives iff it is exactly N lowercase letters."""
    return len(line) == N and line.isalpha() and line.islower()


def clean_words(lines: Iterable[str], N: int) -> List[str]:
    """Filter raw lines down to usable words, preserving file order."""
    return [ln for ln in (raw.strip() for raw in lines) if keep_word(ln, N)]


def load_words(p: Path | str, N: int = 5) -> List[str]:
    """
    Load a dictionary file: one word per line, anything that is not an
    N-letter lowercase word is dropped silently.
    """
    lines = read_lines(p)
    words = clean_words(lines, N)
    logger.debug("loaded %d/%d words from %s", len(words), len(lines), p)
    return words
