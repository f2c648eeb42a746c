#!/usr/bin/env python3
"""
find_compound_words.py

Reads a word list (one word per line), finds every word that is made of two or
more other words of the same list, and prints the first two such words met when
scanning longest words first, plus the total number of such words.

Lines are stripped of line endings and surrounding whitespace and lower-cased;
blank lines are ignored.  Within one word length, words are scanned in file
order (or alphabetical order with --sort).

Usage:
    python find_compound_words.py [-d] [-s] [-t] [--strict] \
        [--wordfreq N [--wordfreq-lang LANG]] [--wordnet] [--show-pieces] \
        /path/to/words.txt

Options:
  -h, --help            Show this help message and exit
  -d, --debug           Print algorithm tracing to stderr (prefix "DEBUG:")
  -s, --sort            Sort words within each length before searching
  -t, --trie            Find candidate prefixes by walking a trie
  --strict              Abort if the word file contains a duplicate word
  --wordfreq N          Also add the top N words of wordfreq's list
  --wordfreq-lang LANG  Language for --wordfreq (default: en)
  --wordnet             Also add WordNet lemma names (via NLTK)
  --show-pieces         Also print how the first and second words split up

Short options can be combined (-ds) and may appear before or after the file.
"""

import argparse
import os
import sys

from compound_words import debug, find_decomposition, find_top_composites
from word_sources import load_wordfreq_words, load_wordnet_words, read_word_file
from word_store import build_word_index


def build_parser():
    parser = argparse.ArgumentParser(
        description="Find the longest words in a word list that are made of other words from the same list."
    )
    parser.add_argument(
        "word_file",
        help="Path to the input word list (one word per line)."
    )
    parser.add_argument(
        "--debug", "-d", action="store_true",
        help="Enable printing of algorithm info for debug and analysis (to stderr)."
    )
    parser.add_argument(
        "--sort", "-s", action="store_true",
        help="Sort words before processing."
    )
    parser.add_argument(
        "--trie", "-t", action="store_true",
        help="Find candidate prefixes with a trie walk instead of one lookup per length."
    )
    parser.add_argument(
        "--strict", action="store_true",
        help="Treat a duplicate word in the word file as a fatal error."
    )
    parser.add_argument(
        "--wordfreq", type=int, default=None, metavar="N",
        help="(Optional) Also add the N most frequent words from wordfreq."
    )
    parser.add_argument(
        "--wordfreq-lang", default="en", metavar="LANG",
        help="Language of the wordfreq list (default: en)."
    )
    parser.add_argument(
        "--wordnet", action="store_true",
        help="(Optional) Also add all a–z WordNet lemma names."
    )
    parser.add_argument(
        "--show-pieces", action="store_true",
        help="Also print the words the first and second results are made of."
    )
    return parser


def collect_words(args):
    """
    Read the word file and any extra sources.  Returns (file_words, extra_words);
    only the file's words are held to --strict.
    """
    word_path = os.path.abspath(os.path.expanduser(args.word_file))
    if args.debug:
        debug(f"collect_words: Reading word file '{word_path}'")
    words = read_word_file(word_path)
    if args.debug:
        debug(f"collect_words: {len(words)} non-empty lines read")

    extra_words = []
    if args.wordfreq:
        extra = load_wordfreq_words(args.wordfreq, lang=args.wordfreq_lang)
        if args.debug:
            debug(f"collect_words: {len(extra)} words added from wordfreq ({args.wordfreq_lang})")
        extra_words.extend(extra)

    if args.wordnet:
        extra = load_wordnet_words()
        if args.debug:
            debug(f"collect_words: {len(extra)} words added from WordNet")
        extra_words.extend(extra)

    return words, extra_words


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.word_file == "-":
        parser.error("a word file path is required, not '-'")
    if args.wordfreq is not None and args.wordfreq < 1:
        parser.error("--wordfreq must be a positive number")

    try:
        words, extra_words = collect_words(args)
        store, index = build_word_index(
            words, strict=args.strict, presort=args.sort, use_trie=args.trie,
            extra_words=extra_words,
        )
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.debug:
        debug(f"main: {len(index)} distinct words in {len(index.lengths())} length buckets")

    result = find_top_composites(store, index, verbose=args.debug)
    print(result.summary())

    if args.show_pieces:
        for word in (result.first_word, result.second_word):
            if word:
                print(f"{word} = {' + '.join(find_decomposition(word, store))}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
