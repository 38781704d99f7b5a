"""
Error types raised at the engine/driver boundary.

- FeedbackError: a user-supplied feedback line (or word) is malformed.
  Recoverable: the interactive loop reports it and keeps going.
- ConfigError:   options that cannot describe a single run (conflicting
  strategy flags, bad gambling factor, empty dictionary).
"""


class FeedbackError(ValueError):
    """Malformed `<word> <pattern>` input or a word of the wrong shape."""


class ConfigError(ValueError):
    """Run configuration is inconsistent; raised before any game starts."""
