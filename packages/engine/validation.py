"""
Guess validation at the driver boundary.

A typed guess is acceptable iff it is an N-letter alphabetic word.
"""

from .errors import FeedbackError


def is_word(word: str, N: int) -> bool:
    return isinstance(word, str) and len(word) == N and word.isalpha() and word.islower()


def validate_guess(word: str, N: int) -> str:
    """
    Normalize and check a guess; return it lowercased.

    Raises FeedbackError when the word has the wrong shape.
    """
    if not isinstance(word, str):
        raise FeedbackError(f"guess must be a string, got {type(word).__name__}")
    w = word.strip().lower()
    if not is_word(w, N):
        raise FeedbackError(f"guess {word!r} must be {N} letters a-z")
    return w
