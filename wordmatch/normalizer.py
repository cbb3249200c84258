"""
Word tokenizing and query validation.

Dictionary words and user queries must agree on case before they reach the
hash map and the edit distance, neither of which folds case itself.

Functions:
    next_word(stream) -> Optional[str]: Next word of a text stream
    iter_words(stream) -> Iterator[str]: All words of a text stream
    validate_input(text) -> Optional[str]: Lowercased query or None
"""

import re
from typing import Iterator, Optional, TextIO

MAX_INPUT_LENGTH = 256

# Digits, ASCII letters and apostrophes make up a dictionary word
_WORD_CHARS = frozenset("0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ'")
_WORD_RE = re.compile(r"[0-9A-Za-z']+")
_QUERY_RE = re.compile(r"[A-Za-z]+")


def next_word(stream: TextIO) -> Optional[str]:
    """
    Read the next word from ``stream``.

    Skips any separator characters, then collects word characters until the
    next separator or the end of the stream.

    Args:
        stream: Text stream positioned anywhere

    Returns:
        Lowercased word, or None once the stream is exhausted

    Examples:
        >>> import io
        >>> s = io.StringIO("  Don't panic!")
        >>> next_word(s), next_word(s), next_word(s)
        ("don't", 'panic', None)
    """
    chars = []
    while True:
        c = stream.read(1)
        if c and c in _WORD_CHARS:
            chars.append(c.lower())
        elif chars or not c:
            break
    if not chars:
        return None
    return "".join(chars)


def iter_words(stream: TextIO) -> Iterator[str]:
    """
    Yield every word of ``stream`` in order.

    Produces the same words as calling next_word() until it returns None,
    reading a line at a time.
    """
    for line in stream:
        for word in _WORD_RE.findall(line):
            yield word.lower()


def validate_input(text: Optional[str]) -> Optional[str]:
    """
    Check a user-entered query and lowercase it.

    Args:
        text: Raw input

    Returns:
        Lowercased word if ``text`` is 1 to MAX_INPUT_LENGTH ASCII letters,
        otherwise None

    Examples:
        >>> validate_input("Hello")
        'hello'

        >>> validate_input("hello!") is None
        True
    """
    if not text or len(text) > MAX_INPUT_LENGTH:
        return None
    if not _QUERY_RE.fullmatch(text):
        return None
    return text.lower()
