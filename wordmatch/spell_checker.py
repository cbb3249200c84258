"""
Spell checking on top of the dictionary table.

A word found by direct lookup is reported correct and never ranked. Any
other word is ranked against the whole dictionary for suggestions.

Usage:
    checker = SpellChecker(table, SuggestionEngine(num_suggestions=5))
    result = checker.check("helo")

    if not result.correct:
        print("Did you mean:", [s.word for s in result.suggestions])
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import InvariantViolation
from .hash_map import HashMap
from .suggestion_engine import Suggestion, SuggestionEngine


@dataclass
class CheckResult:
    """Result of checking one word."""
    word: str
    correct: bool
    suggestions: List[Suggestion] = field(default_factory=list)  # Empty when correct
    latency_ms: float = 0.0


class SpellChecker:
    """Exact lookup with edit-distance suggestions as fallback."""

    def __init__(self, table: HashMap, engine: Optional[SuggestionEngine] = None):
        if table is None:
            raise InvariantViolation("SpellChecker needs a table")
        self.table = table
        self.engine = engine if engine is not None else SuggestionEngine()

    def check(self, word: str) -> CheckResult:
        """
        Check one normalized word.

        Args:
            word: Lowercased alphabetic word (see normalizer.validate_input)

        Returns:
            CheckResult; suggestions are only filled for misspelled words
        """
        start = time.time()

        if self.table.contains_key(word):
            return CheckResult(word=word, correct=True, latency_ms=(time.time() - start) * 1000)

        suggestions = self.engine.rank(self.table, word)
        return CheckResult(
            word=word,
            correct=False,
            suggestions=suggestions,
            latency_ms=(time.time() - start) * 1000,
        )
