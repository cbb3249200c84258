import io

import pytest

from wordmatch.normalizer import MAX_INPUT_LENGTH, iter_words, next_word, validate_input

TEXT = "The quick-brown Fox's\n\n  42 jumps...over\tTHE lazy dog's tail!"
WORDS = ["the", "quick", "brown", "fox's", "42", "jumps", "over", "the", "lazy", "dog's", "tail"]


def test_next_word():
    stream = io.StringIO(TEXT)
    words = []
    word = next_word(stream)
    while word is not None:
        words.append(word)
        word = next_word(stream)
    assert words == WORDS
    assert next_word(stream) is None


def test_next_word_empty_stream():
    assert next_word(io.StringIO("")) is None
    assert next_word(io.StringIO(" ,.;\n")) is None


def test_iter_words_matches_next_word():
    assert list(iter_words(io.StringIO(TEXT))) == WORDS
    assert list(iter_words(io.StringIO(""))) == []


@pytest.mark.parametrize("raw, expected", [
    ("hello", "hello"),
    ("HeLLo", "hello"),
    ("a", "a"),
    ("", None),
    ("don't", None),
    ("hello world", None),
    ("abc123", None),
    ("naïve", None),
    (None, None),
])
def test_validate_input(raw, expected):
    assert validate_input(raw) == expected


def test_validate_input_length_limit():
    assert validate_input("a" * MAX_INPUT_LENGTH) == "a" * MAX_INPUT_LENGTH
    assert validate_input("a" * (MAX_INPUT_LENGTH + 1)) is None
