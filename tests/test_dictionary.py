import io
import logging

import pytest

from wordmatch.dictionary import build_dictionary, load_dictionary
from wordmatch.errors import DictionaryNotFound
from wordmatch.hash_map import UNSCORED, HashMap, hash_function_2


def test_load_dictionary_stores_sentinel():
    t = HashMap(4)
    count = load_dictionary(io.StringIO("Apple banana\napple CHERRY"), t)

    assert count == 4
    assert t.size == 3
    assert sorted(t) == ["apple", "banana", "cherry"]
    assert all(link.value == UNSCORED for link in t.entries())


def test_load_dictionary_custom_sentinel():
    t = HashMap(4)
    load_dictionary(io.StringIO("one two"), t, sentinel=0)
    assert t.get("one") == 0


def test_load_dictionary_logs_elapsed_time(caplog):
    with caplog.at_level(logging.INFO, logger="wordmatch.dictionary"):
        load_dictionary(io.StringIO("one two two"), HashMap(4))
    assert "Dictionary loaded in" in caplog.text


def test_build_dictionary(dictionary_path):
    t = build_dictionary(dictionary_path, capacity=2, hash_function=hash_function_2)

    assert t.hash_function is hash_function_2
    assert t.size == 17
    assert t.capacity > 2
    assert t.table_load() <= 0.75
    assert t.contains_key("spelling")
    assert not t.contains_key("spellign")


def test_build_dictionary_with_progress_bar(dictionary_path):
    t = build_dictionary(dictionary_path, progress=True)
    assert t.size == 17
    assert t.capacity == 1000


def test_missing_dictionary(tmp_path):
    with pytest.raises(DictionaryNotFound):
        build_dictionary(str(tmp_path / "nope.txt"))
    # also a FileNotFoundError for callers that only know the builtin
    with pytest.raises(FileNotFoundError):
        build_dictionary(str(tmp_path / "nope.txt"))


def test_build_dictionary_skips_undecodable_bytes(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"cat caf\xe9 dog\nna\xefve\n")

    t = build_dictionary(str(path))

    assert sorted(t) == ["caf", "cat", "dog", "na", "ve"]
    assert t.size == 5
