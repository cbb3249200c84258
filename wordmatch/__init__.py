"""
wordmatch

Spell checking over a hand-built chained hash map.

Main Components:
    - hash_map: Separate-chaining HashMap with doubling growth
    - edit_distance: Levenshtein distance with a single rolling column
    - suggestion_engine: Bounded top-K nearest-word selection
    - normalizer: Dictionary tokenizing and query validation
    - dictionary: Loading a word list into a HashMap
    - spell_checker: Exact lookup with ranked suggestions as fallback

Quick Start:
    from wordmatch import SpellChecker, SuggestionEngine, build_dictionary

    table = build_dictionary("dictionary.txt")
    checker = SpellChecker(table, SuggestionEngine(num_suggestions=5))

    result = checker.check("helo")
"""

__version__ = "0.1.0"

from .errors import WordMatchError, InvariantViolation, ConfigError, DictionaryNotFound
from .hash_map import (
    TABLE_MAX_LOAD,
    UNSCORED,
    HashLink,
    HashMap,
    hash_function_1,
    hash_function_2,
    resolve_hash_function,
)
from .edit_distance import levenshtein_distance
from .suggestion_engine import NUM_SUGGESTIONS, Suggestion, SuggestionEngine
from .normalizer import next_word, iter_words, validate_input
from .dictionary import load_dictionary, build_dictionary
from .spell_checker import CheckResult, SpellChecker

__all__ = [
    "WordMatchError",
    "InvariantViolation",
    "ConfigError",
    "DictionaryNotFound",
    "TABLE_MAX_LOAD",
    "UNSCORED",
    "HashLink",
    "HashMap",
    "hash_function_1",
    "hash_function_2",
    "resolve_hash_function",
    "levenshtein_distance",
    "NUM_SUGGESTIONS",
    "Suggestion",
    "SuggestionEngine",
    "next_word",
    "iter_words",
    "validate_input",
    "load_dictionary",
    "build_dictionary",
    "CheckResult",
    "SpellChecker",
]
