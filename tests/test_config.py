import pytest

from wordmatch.config import DEFAULT_CAPACITY, Settings, load_settings
from wordmatch.errors import ConfigError


def test_defaults():
    assert load_settings({}) == Settings()
    assert load_settings({}).capacity == DEFAULT_CAPACITY


def test_values_from_mapping():
    s = load_settings({
        "WORDMATCH_DICTIONARY": "words.txt",
        "WORDMATCH_CAPACITY": "64",
        "WORDMATCH_SUGGESTIONS": "3",
        "WORDMATCH_HASH_FUNCTION": "Weighted",
        "WORDMATCH_PERSIST_DISTANCES": "yes",
        "WORDMATCH_LOG_LEVEL": "debug",
    })
    assert s == Settings("words.txt", 64, 3, "weighted", True, "DEBUG")


def test_environment_and_dotenv(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("WORDMATCH_CAPACITY=32\nWORDMATCH_SUGGESTIONS=2\n")
    monkeypatch.setenv("WORDMATCH_SUGGESTIONS", "7")

    s = load_settings()

    assert s.capacity == 32
    # real environment variables win over .env
    assert s.suggestions == 7


@pytest.mark.parametrize("env", [
    {"WORDMATCH_CAPACITY": "zero"},
    {"WORDMATCH_CAPACITY": "0"},
    {"WORDMATCH_SUGGESTIONS": "-1"},
    {"WORDMATCH_HASH_FUNCTION": "md5"},
    {"WORDMATCH_PERSIST_DISTANCES": "maybe"},
    {"WORDMATCH_LOG_LEVEL": "LOUD"},
])
def test_invalid_values(env):
    with pytest.raises(ConfigError):
        load_settings(env)
    with pytest.raises(ValueError):
        load_settings(env)
