"""
Interactive spell checker.

Loads the dictionary once, then either checks the words given on the command
line or reads words from stdin until "quit".

Usage:
  wordmatch
  wordmatch --dictionary words.txt --suggestions 3 helo wrld
  python -m wordmatch --hash-function 2 --stats
"""

from __future__ import annotations
import argparse
import logging
import sys
import time
from typing import List, Optional, TextIO

from .config import Settings, load_settings
from .dictionary import build_dictionary
from .errors import ConfigError, DictionaryNotFound
from .hash_map import HASH_FUNCTIONS, HashMap, resolve_hash_function
from .normalizer import validate_input
from .spell_checker import CheckResult, SpellChecker
from .suggestion_engine import SuggestionEngine

logger = logging.getLogger(__name__)

PROMPT = 'Enter a word or "quit" to quit:'
INVALID_ENTRY = (
    "I'm sorry, that's an invalid entry. Please enter a single word, "
    "containing only uppercase or lowercase letters:"
)
QUIT = "quit"


def format_result(result: CheckResult) -> str:
    """Render a CheckResult as the lines shown to the user."""
    if result.correct:
        return f'The inputted word "{result.word}" is spelled correctly.'

    lines = [f'The inputted word "{result.word}" is spelled incorrectly.']
    if result.suggestions:
        lines.append("Did you mean...?")
        lines.extend(s.word for s in result.suggestions)
    return "\n".join(lines)


def format_stats(table: HashMap) -> str:
    """Render size, capacity, empty buckets and load of a table."""
    return "\n".join([
        f"Size:          {table.size}",
        f"Capacity:      {table.capacity}",
        f"Empty buckets: {table.empty_buckets()}",
        f"Table load:    {table.table_load():.6f}",
    ])


def _read_entry(stdin: TextIO) -> Optional[str]:
    line = stdin.readline()
    if not line:
        return None
    return line.strip()


def run_repl(checker: SpellChecker, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """
    Prompt for words until "quit" or end of input.

    Args:
        checker: SpellChecker over the loaded dictionary
        stdin: Input stream (default: sys.stdin)
        stdout: Output stream (default: sys.stdout)
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    while True:
        print(PROMPT, file=stdout)
        entry = _read_entry(stdin)
        if entry is None or entry == QUIT:
            return

        word = validate_input(entry)
        while word is None:
            print(INVALID_ENTRY, file=stdout)
            entry = _read_entry(stdin)
            if entry is None or entry == QUIT:
                return
            word = validate_input(entry)

        print("Checking for a match...", file=stdout)
        print(format_result(checker.check(word)), file=stdout)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordmatch", description="Check spelling against a dictionary file.")
    ap.add_argument("words", nargs="*", help="Words to check (omit for interactive mode)")
    ap.add_argument("--dictionary", help="Path to the dictionary file")
    ap.add_argument("--capacity", type=int, help="Initial number of hash table buckets")
    ap.add_argument("--suggestions", type=int, help="Suggestions shown for a misspelled word")
    ap.add_argument("--hash-function", choices=sorted(HASH_FUNCTIONS), help="Hash function for the table")
    ap.add_argument("--persist-distances", action="store_true", default=None,
                    help="Store computed distances as the table values")
    ap.add_argument("--progress", action="store_true", help="Show a progress bar while loading")
    ap.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    ap.add_argument("--stats", action="store_true", help="Print hash table statistics after loading")
    ap.add_argument("--dump", action="store_true", help="Print every bucket after loading")
    return ap


def _merge(args: argparse.Namespace, settings: Settings) -> Settings:
    # Command line flags win over the environment
    return Settings(
        dictionary=args.dictionary or settings.dictionary,
        capacity=args.capacity if args.capacity is not None else settings.capacity,
        suggestions=args.suggestions if args.suggestions is not None else settings.suggestions,
        hash_function=args.hash_function or settings.hash_function,
        persist_distances=args.persist_distances if args.persist_distances is not None else settings.persist_distances,
        log_level=(args.log_level or settings.log_level).upper(),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the spell checker; returns the process exit status."""
    ap = build_parser()
    args = ap.parse_args(argv)
    try:
        settings = _merge(args, load_settings())
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if not isinstance(logging.getLevelName(settings.log_level), int):
        ap.error(f"unknown log level {settings.log_level!r}")
    logging.basicConfig(level=settings.log_level, format='%(levelname)s: %(message)s')

    if settings.capacity <= 0:
        ap.error("--capacity must be positive")
    if settings.suggestions < 0:
        ap.error("--suggestions must not be negative")

    start = time.time()
    try:
        table = build_dictionary(
            settings.dictionary,
            capacity=settings.capacity,
            hash_function=resolve_hash_function(settings.hash_function),
            progress=args.progress,
        )
    except DictionaryNotFound as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    elapsed = time.time() - start

    if args.stats:
        print(format_stats(table))
    if args.dump:
        print(table.dump())

    engine = SuggestionEngine(settings.suggestions, persist_distances=settings.persist_distances)
    checker = SpellChecker(table, engine)

    if not args.words:
        if args.stats or args.dump:
            return 0
        print(f"Dictionary loaded in {elapsed:f} seconds")
        run_repl(checker)
        return 0

    status = 0
    for raw in args.words:
        word = validate_input(raw)
        if word is None:
            print(f"Invalid entry: {raw!r} (letters only)", file=sys.stderr)
            status = 1
            continue
        print(format_result(checker.check(word)))
    return status


if __name__ == "__main__":
    sys.exit(main())
