import pytest

from wordmatch.dictionary import build_dictionary
from wordmatch.errors import InvariantViolation
from wordmatch.hash_map import UNSCORED, HashMap
from wordmatch.spell_checker import SpellChecker
from wordmatch.suggestion_engine import SuggestionEngine


class _CountingEngine(SuggestionEngine):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls = 0

    def rank(self, table, query, k=None):
        self.calls += 1
        return super().rank(table, query, k)


def test_exact_match_skips_ranking(dictionary_path):
    engine = _CountingEngine()
    checker = SpellChecker(build_dictionary(dictionary_path), engine)

    result = checker.check("spell")

    assert result.correct
    assert result.suggestions == []
    assert engine.calls == 0
    assert result.latency_ms >= 0


def test_misspelled_word_gets_suggestions(dictionary_path):
    engine = _CountingEngine(num_suggestions=3)
    checker = SpellChecker(build_dictionary(dictionary_path), engine)

    result = checker.check("helo")

    assert not result.correct
    assert engine.calls == 1
    assert len(result.suggestions) == 3
    assert {s.word for s in result.suggestions[:2]} == {"hello", "help"}
    assert result.suggestions[0].distance == 1
    assert result.suggestions[1].distance == 1


def test_rhyme_scenario_through_checker():
    t = HashMap(16)
    for word in ["cat", "bat", "hat", "rat", "mat", "sat"]:
        t.put(word, UNSCORED)

    result = SpellChecker(t).check("zat")

    assert not result.correct
    assert len(result.suggestions) == 5
    assert {s.distance for s in result.suggestions} == {1}


def test_default_table_values_survive_checks(dictionary_path):
    t = build_dictionary(dictionary_path)
    checker = SpellChecker(t)
    checker.check("wrld")
    checker.check("chekcer")
    assert all(link.value == UNSCORED for link in t.entries())


def test_none_table_is_rejected():
    with pytest.raises(InvariantViolation):
        SpellChecker(None)
