"""
Wordle feedback for a single (guess, target) pair.

Conventions (one character per position):
  - 'G' : Mark.EXACT    = correct letter in the correct position
  - 'Y' : Mark.PRESENT  = letter occurs elsewhere in the target
  - '-' : Mark.ABSENT   = letter not present (or present fewer times than guessed)

A feedback pattern is the plain string of those characters, so it hashes and
compares by value and can be used directly as a bucket key.

Duplicate letters follow the official two-pass rule:
  1) Exact matches are marked first and consume their target letter.
  2) Remaining guess letters, left to right, consume one unmatched occurrence
     of the same letter in the target each; once the supply runs out the
     rest of that letter's occurrences stay ABSENT.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import List, Tuple

from .errors import FeedbackError
from .validation import validate_guess


class Mark(str, Enum):
    ABSENT = "-"
    PRESENT = "Y"
    EXACT = "G"


# Interactive notation: '-' absent, '+' present elsewhere, anything else exact.
_INPUT_MARKS = {"-": Mark.ABSENT, "+": Mark.PRESENT}
_DISPLAY_MARKS = {Mark.ABSENT: "-", Mark.PRESENT: "+", Mark.EXACT: "="}


def classify(guess: str, target: str) -> str:
    """
    Compute the feedback pattern for `guess` against `target`.

    Preconditions:
      - len(guess) == len(target); both already lowercase (dictionary words)

    Examples:
      classify("belle", "level") -> "-GYYY"
      classify("speed", "abide") -> "--Y-Y"
    """
    n = len(guess)
    if n != len(target):
        raise ValueError(
            f"guess and target must be the same length: {guess!r} vs {target!r}")

    pattern = ["-"] * n

    # Pass 1: exact matches; count what is left over in the target.
    remaining: Counter = Counter()
    for i in range(n):
        if guess[i] == target[i]:
            pattern[i] = "G"
        else:
            remaining[target[i]] += 1

    # Pass 2: misplaced letters, capped by the leftover multiplicity.
    for i in range(n):
        if pattern[i] == "G":
            continue
        g = guess[i]
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)


def is_solved(pattern: str) -> bool:
    return bool(pattern) and all(ch == Mark.EXACT.value for ch in pattern)


def marks(pattern: str) -> List[Mark]:
    """Per-position access to a pattern as Mark values."""
    return [Mark(ch) for ch in pattern]


def parse_feedback(text: str, N: int) -> str:
    """
    Convert interactive notation into a pattern.

    '-' -> ABSENT, '+' -> PRESENT, any other character -> EXACT.
    """
    if len(text) != N:
        raise FeedbackError(f"pattern {text!r} must have exactly {N} characters")
    return "".join(_INPUT_MARKS.get(ch, Mark.EXACT).value for ch in text)


def parse_feedback_line(line: str, N: int) -> Tuple[str, str]:
    """
    Parse '<word> <pattern>' as typed during an interactive game.

    Returns:
      (guess, pattern) with the guess lowercased and the pattern in G/Y/- form.
    """
    parts = line.split()
    if len(parts) != 2:
        raise FeedbackError(f"expected '<word> <pattern>', got {line.strip()!r}")
    word, raw = parts
    return validate_guess(word, N), parse_feedback(raw, N)


def format_feedback(pattern: str) -> str:
    """Render a pattern in the same notation the interactive loop accepts."""
    return "".join(_DISPLAY_MARKS[m] for m in marks(pattern))
