from .errors import ConfigError, FeedbackError
from .feedback import Mark, classify, is_solved, marks, parse_feedback, parse_feedback_line, format_feedback
from .partition import partition, bucket_sizes
from .constraints import reduce_candidates
from .ranking import Ranking, rank, choose_guess, compute_scores
from .validation import validate_guess, is_word

__all__ = [
    "ConfigError", "FeedbackError",
    "Mark", "classify", "is_solved", "marks", "parse_feedback", "parse_feedback_line",
    "format_feedback",
    "partition", "bucket_sizes",
    "reduce_candidates",
    "Ranking", "rank", "choose_guess", "compute_scores",
    "validate_guess", "is_word",
]
