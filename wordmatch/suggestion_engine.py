"""
Nearest-match ranking for misspelled words.

The engine scans every word of a HashMap once, scores it against the query
with the Levenshtein distance and keeps the K closest words seen so far in a
small fixed set of slots.

Architecture:
    For each link (bucket order, then chain order):
        1. d = levenshtein_distance(query, link.key)
        2. Remember d for this query (scratch map, or the link's value when
           persist_distances is on)
        3. Offer (key, d) to the slots:
             - an empty slot takes it
             - otherwise it replaces the worst slot only if d is strictly
               smaller, so the first word seen wins a tie

Usage:
    engine = SuggestionEngine(num_suggestions=5)
    for suggestion in engine.rank(table, "helo"):
        print(suggestion.word, suggestion.distance)
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

from .edit_distance import levenshtein_distance
from .errors import InvariantViolation
from .hash_map import HashMap

logger = logging.getLogger(__name__)

NUM_SUGGESTIONS = 5


@dataclass
class Suggestion:
    """Single ranked suggestion."""
    word: str
    distance: int


@dataclass
class _Slot:
    word: str
    distance: int
    order: int  # position in the scan, used for tie-breaking


class SuggestionSlots:
    """
    Fixed-size set of the K best (smallest-distance) candidates.

    The index of the worst filled slot is cached and recomputed only when a
    slot changes, so a rejected candidate costs a single comparison.
    """

    def __init__(self, size: int):
        if size is None or size < 0:
            raise InvariantViolation(f"number of suggestions must be >= 0, got {size!r}")
        self._slots: List[Optional[_Slot]] = [None] * size
        self._filled = 0
        self._seen = 0
        self._worst = -1

    def offer(self, word: str, distance: int) -> bool:
        """
        Consider one candidate.

        Args:
            word: Dictionary word
            distance: Its distance to the query

        Returns:
            True if the candidate was accepted into a slot
        """
        order = self._seen
        self._seen += 1

        if self._filled < len(self._slots):
            self._slots[self._filled] = _Slot(word, distance, order)
            self._filled += 1
            if self._filled == len(self._slots):
                self._worst = self._find_worst()
            return True

        if self._worst < 0 or distance >= self._slots[self._worst].distance:
            return False

        self._slots[self._worst] = _Slot(word, distance, order)
        self._worst = self._find_worst()
        return True

    def _find_worst(self) -> int:
        # Largest distance; among equals the latest accepted, so earlier
        # words outlive later ones with the same distance
        worst = -1
        for i, slot in enumerate(self._slots):
            if slot is None:
                continue
            if worst < 0:
                worst = i
                continue
            current = self._slots[worst]
            if (slot.distance, slot.order) > (current.distance, current.order):
                worst = i
        return worst

    def ranked(self) -> List[Suggestion]:
        """Filled slots sorted by distance, ties in scan order."""
        filled = [slot for slot in self._slots if slot is not None]
        filled.sort(key=lambda slot: (slot.distance, slot.order))
        return [Suggestion(slot.word, slot.distance) for slot in filled]

    def __len__(self) -> int:
        return self._filled


class SuggestionEngine:
    """Ranks dictionary words by edit distance to a query."""

    def __init__(self, num_suggestions: int = NUM_SUGGESTIONS, persist_distances: bool = False):
        """
        Initialize the engine.

        Args:
            num_suggestions: Default K for rank()
            persist_distances: Write each computed distance back into the
                table's value for that word. The UNSCORED sentinel is lost for
                every scanned word, so a table ranked this way should be
                reloaded before it is used for anything else.
        """
        if num_suggestions is None or num_suggestions < 0:
            raise InvariantViolation(
                f"number of suggestions must be >= 0, got {num_suggestions!r}"
            )
        self.num_suggestions = num_suggestions
        self.persist_distances = persist_distances
        self._last_scores: Dict[str, int] = {}
        self._last_timings: Dict[str, float] = {}

    def rank(self, table: HashMap, query: str, k: Optional[int] = None) -> List[Suggestion]:
        """
        Return up to ``k`` words of ``table`` closest to ``query``.

        Args:
            table: Dictionary to scan (borrowed for this call only)
            query: Normalized query word
            k: Number of suggestions (defaults to num_suggestions)

        Returns:
            Suggestions sorted ascending by distance, ties in scan order.
            Fewer than k only when the table holds fewer than k words.
        """
        if table is None:
            raise InvariantViolation("rank() needs a table")
        if query is None:
            raise InvariantViolation("rank() needs a query")
        if k is None:
            k = self.num_suggestions

        start = time.time()
        slots = SuggestionSlots(k)
        scores: Dict[str, int] = {}

        for link in table.entries():
            distance = levenshtein_distance(query, link.key)
            if self.persist_distances:
                link.value = distance
            scores[link.key] = distance
            slots.offer(link.key, distance)

        result = slots.ranked()
        elapsed = time.time() - start

        self._last_scores = scores
        self._last_timings = {'scan': elapsed, 'scored': float(len(scores))}
        logger.debug("Ranked %d words against %r in %.3fs", len(scores), query, elapsed)

        return result

    def last_scores(self) -> Dict[str, int]:
        """Distances computed by the latest rank() call (a copy)."""
        return dict(self._last_scores)

    def last_timings(self) -> Dict[str, float]:
        """
        Timing of the latest rank() call.

        Returns:
            Dictionary with:
                - scan: Seconds spent scoring and selecting
                - scored: Number of words scored
        """
        return dict(self._last_timings)
