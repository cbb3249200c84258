"""Exceptions raised by wordmatch.

Absent keys are never errors: lookups return ``None`` or ``False`` and
removals are no-ops. Everything here signals a programming or setup mistake.
"""


class WordMatchError(Exception):
    """Base class for wordmatch errors."""


class InvariantViolation(WordMatchError, AssertionError):
    """A table or engine operation was called in a state it cannot accept.

    Raised for a missing table or key, a non-positive capacity, a resize that
    does not grow the table, or a negative suggestion count. Not meant to be
    caught.
    """


class ConfigError(WordMatchError, ValueError):
    """A setting from the environment or the command line is invalid."""


class DictionaryNotFound(WordMatchError, FileNotFoundError):
    """The dictionary file does not exist."""
