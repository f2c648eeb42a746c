import pytest

import word_sources
from word_sources import is_pure_alpha, load_wordfreq_words, load_wordnet_words, read_word_file


def test_read_word_file_normalizes_lines(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"Cat\r\n\r\n   dog  \n\n  \nCAT\nbird")
    assert read_word_file(str(path)) == ["cat", "dog", "cat", "bird"]


def test_read_word_file_missing(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(RuntimeError, match="could not open word file"):
        read_word_file(str(missing))


def test_read_word_file_ignores_undecodable_bytes(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"caf\xff\nok\n")
    assert read_word_file(str(path)) == ["caf", "ok"]


@pytest.mark.parametrize(
    "word, expected",
    [("cat", True), ("Cat", False), ("ice_cream", False), ("naïve", False), ("", False)],
)
def test_is_pure_alpha(word, expected):
    assert is_pure_alpha(word) is expected


def test_load_wordfreq_words_filters_and_keeps_order(monkeypatch):
    calls = []

    def fake_top_n_list(lang, n):
        calls.append((lang, n))
        return ["the", "The", "don't", "of", "2020", "cat"]

    monkeypatch.setattr(word_sources, "top_n_list", fake_top_n_list)
    assert load_wordfreq_words(6) == ["the", "of", "cat"]
    assert calls == [("en", 6)]


def test_load_wordfreq_words_empty(monkeypatch):
    monkeypatch.setattr(word_sources, "top_n_list", lambda lang, n: [])
    with pytest.raises(RuntimeError, match="no words retrieved"):
        load_wordfreq_words(10, lang="xx")


class _FakeSynset:
    def __init__(self, *names):
        self._names = names

    def lemma_names(self):
        return list(self._names)


class _FakeWordNet:
    def __init__(self, synsets):
        self._synsets = synsets

    def ensure_loaded(self):
        pass

    def all_synsets(self):
        return iter(self._synsets)


def test_load_wordnet_words(monkeypatch):
    fake = _FakeWordNet([
        _FakeSynset("dog", "domestic_dog", "Canis"),
        _FakeSynset("cat", "dog"),
    ])
    monkeypatch.setattr(word_sources, "wn", fake)
    assert load_wordnet_words() == ["dog", "canis", "cat"]


def test_load_wordnet_words_download_failure(monkeypatch):
    class Missing(_FakeWordNet):
        def ensure_loaded(self):
            raise LookupError("wordnet")

    def failing_download(*args, **kwargs):
        raise OSError("offline")

    monkeypatch.setattr(word_sources, "wn", Missing([]))
    monkeypatch.setattr(word_sources.nltk, "download", failing_download)
    with pytest.raises(RuntimeError, match="WordNet download error"):
        load_wordnet_words()
