"""
word_sources.py

Loaders that turn a word source into a list of normalized words, in source
order:

  * read_word_file()      a text file, one word per line
  * load_wordfreq_words() the top N entries of wordfreq's frequency list
  * load_wordnet_words()  WordNet lemma names (via NLTK)

Every loader raises RuntimeError when its source cannot be read.
"""

import os
import re

import nltk
from nltk.corpus import wordnet as wn
from wordfreq import top_n_list

from word_store import normalize_word


def is_pure_alpha(word):
    """Return True if `word` consists of only lowercase a–z."""
    return bool(re.fullmatch(r"[a-z]+", word))


def read_word_file(path):
    """
    Read each line of `path`, normalize it (line ending and surrounding
    whitespace stripped, lower-cased), and return the non-empty results in file
    order.  Duplicates are kept; the word index decides what to do with them.
    """
    if not os.path.isfile(path):
        raise RuntimeError(f"could not open word file at '{path}'")

    words = []
    try:
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            for line in f:
                w = normalize_word(line)
                if w:
                    words.append(w)
    except OSError as e:
        raise RuntimeError(f"could not read word file at '{path}': {e}")
    return words


def load_wordfreq_words(n, lang="en"):
    """
    Return the `n` most frequent words of wordfreq's `lang` list, filtered to
    a–z, most frequent first.
    """
    words = []
    seen = set()
    try:
        for w in top_n_list(lang, n):
            w_lower = w.lower()
            if is_pure_alpha(w_lower) and w_lower not in seen:
                seen.add(w_lower)
                words.append(w_lower)
    except Exception as e:
        raise RuntimeError(f"wordfreq loader error: {e}")

    if not words:
        raise RuntimeError(f"wordfreq loader error: no words retrieved for '{lang}'")
    return words


def load_wordnet_words():
    """
    Collect all WordNet lemma names that are purely a–z, in first-seen order.
    Downloads the corpus through NLTK when it is not installed yet.
    """
    try:
        wn.ensure_loaded()
    except LookupError:
        try:
            nltk.download("wordnet", quiet=True)
            wn.ensure_loaded()
        except Exception as e:
            raise RuntimeError(f"WordNet download error: {e}")

    lemmas = []
    seen = set()
    try:
        for synset in wn.all_synsets():
            for lemma in synset.lemma_names():
                w = lemma.lower()
                if is_pure_alpha(w) and w not in seen:
                    seen.add(w)
                    lemmas.append(w)
    except Exception as e:
        raise RuntimeError(f"WordNet iteration error: {e}")

    if not lemmas:
        raise RuntimeError("WordNet loader error: no lemmas found")
    return lemmas
