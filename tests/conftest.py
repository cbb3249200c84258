import pytest

DICTIONARY_TEXT = """\
cat bat hat rat
mat sat
hello help world word
spell spelling checker
the quick brown fox
"""


@pytest.fixture
def dictionary_path(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text(DICTIONARY_TEXT, encoding="utf-8")
    return str(path)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    # keep a developer's .env and WORDMATCH_* variables out of the tests; setting
    # first makes monkeypatch restore anything a loaded .env put into os.environ
    for name in ["WORDMATCH_DICTIONARY", "WORDMATCH_CAPACITY", "WORDMATCH_SUGGESTIONS",
                 "WORDMATCH_HASH_FUNCTION", "WORDMATCH_PERSIST_DISTANCES", "WORDMATCH_LOG_LEVEL"]:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
