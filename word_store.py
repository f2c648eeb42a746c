"""
word_store.py

Holds the normalized word list in two shapes:

  * a WordStore, an exact-match membership set (optionally backed by a trie for
    prefix walks), and
  * a LengthIndex, mapping each word length to the words of that length in the
    order they were first inserted.

Both are filled once by build_word_index() and only read afterwards.
"""

from collections import defaultdict

from trie import TrieNode


class DuplicateWordError(RuntimeError):
    """Raised in strict mode when the same normalized word is ingested twice."""


def normalize_word(line: str) -> str:
    """Strip line terminators and surrounding whitespace, then lower-case."""
    return line.rstrip("\r\n").strip().lower()


class WordStore:
    def __init__(self):
        self._words = set()

    def add(self, word: str) -> bool:
        """
        Add `word` to the store.  Returns False (and changes nothing) if it is
        already present.
        """
        if word in self._words:
            return False
        self._words.add(word)
        return True

    def __contains__(self, word) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def prefix_lengths(self, word: str, start: int = 0):
        """
        Yield every length p, longest first, for which word[start:start + p] is a
        stored word.  The segment word[start:] itself is never yielded, so every
        piece is strictly shorter than what it was cut from.

        Greedy: start one character short of the whole segment and shrink.
        """
        for p in range(len(word) - start - 1, 0, -1):
            if word[start:start + p] in self._words:
                yield p


class TrieWordStore(WordStore):
    """
    WordStore that also keeps a trie, so the stored prefixes of a segment are
    found in a single walk instead of one lookup per candidate length.
    """

    def __init__(self):
        super().__init__()
        self.trie = TrieNode()

    def add(self, word: str) -> bool:
        if not super().add(word):
            return False
        self.trie.insert(word)
        return True

    def prefix_lengths(self, word: str, start: int = 0):
        limit = len(word) - start
        for p in reversed(self.trie.word_end_lengths(word, start)):
            if p < limit:
                yield p


class LengthIndex:
    def __init__(self):
        self._buckets = defaultdict(list)

    def add(self, word: str):
        self._buckets[len(word)].append(word)

    def lengths(self):
        """Distinct word lengths, longest first."""
        return sorted(self._buckets, reverse=True)

    def bucket(self, length: int):
        return self._buckets.get(length, [])

    def sort_buckets(self):
        for words in self._buckets.values():
            words.sort()

    def __len__(self) -> int:
        return sum(len(words) for words in self._buckets.values())


def build_word_index(words, strict: bool = False, presort: bool = False,
                     use_trie: bool = False, extra_words=()):
    """
    Normalize `words`, skip empties, and fill a fresh WordStore and LengthIndex.

    Duplicates are dropped silently unless `strict` is set, in which case the
    first duplicate raises DuplicateWordError.  With `presort` each length bucket
    is sorted, which gives the same scan order as sorting the input up front.

    `extra_words` are added after `words` and never count as duplicates, even
    in strict mode: a word already present is skipped.

    Returns (store, index).
    """
    store = TrieWordStore() if use_trie else WordStore()
    index = LengthIndex()

    for raw in words:
        word = normalize_word(raw)
        if not word:
            continue
        if store.add(word):
            index.add(word)
        elif strict:
            raise DuplicateWordError(f"word list contains duplicate word '{word}'")

    for raw in extra_words:
        word = normalize_word(raw)
        if word and store.add(word):
            index.add(word)

    if presort:
        index.sort_buckets()
    return store, index
