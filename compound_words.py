"""
compound_words.py

Finds words that are a concatenation of two or more other words of the same
word list.

Decomposition is greedy: for each segment the longest stored prefix is tried
first, and when the rest of the segment does not work out, the next shorter
stored prefix is tried.  The search keeps its own stack of segments instead of
recursing, so very long words cannot hit the interpreter's recursion limit.

The search driver walks the LengthIndex longest length first, remembers the
first two compound words it meets, and counts all of them.
"""

import sys
from dataclasses import dataclass


def debug(msg):
    """Print debug message to stderr with a DEBUG prefix."""
    print(f"DEBUG: {msg}", file=sys.stderr)


def find_decomposition(word: str, store, verbose: bool = False):
    """
    Return the first split of `word` into two or more stored words, as a list of
    pieces in order, or None if there is none.  The whole word never counts as
    its own piece.
    """
    if len(word) < 2:
        return None

    # frame: [segment start, stored prefix lengths left to try, prefix length in use]
    frames = [[0, store.prefix_lengths(word, 0), 0]]
    while frames:
        frame = frames[-1]
        start = frame[0]
        p = next(frame[1], None)
        if p is None:
            if verbose:
                debug(f"Word {word[start:]} is not made of other words in the set")
            frames.pop()
            continue

        frame[2] = p
        end = start + p
        rest = word[end:]
        if verbose:
            debug(f"Match found with partial word {word[start:end]}, start {start}, length {p}")
        if rest in store:
            if verbose:
                debug(f"Match found with remaining string {rest}")
            pieces = [word[f[0]:f[0] + f[2]] for f in frames]
            pieces.append(rest)
            return pieces

        if verbose:
            debug(f"Trying remaining string {rest}")
        frames.append([end, store.prefix_lengths(word, end), 0])

    return None


def is_composite(word: str, store, verbose: bool = False) -> bool:
    return find_decomposition(word, store, verbose=verbose) is not None


@dataclass(frozen=True)
class SearchResult:
    first_word: str = ""
    second_word: str = ""
    count: int = 0

    def summary(self) -> str:
        return (f"First word found is {self.first_word}, second word found is "
                f"{self.second_word}, total count found is {self.count}.")


def find_top_composites(store, index, verbose: bool = False) -> SearchResult:
    """
    Scan every word of `index`, longest length first and in bucket order within
    a length, and check it against `store`.

    The first and second compound words met are kept; the count covers the whole
    list.  With no compound words, both words are "" and the count is 0.
    """
    first_word = ""
    second_word = ""
    count = 0

    for length in index.lengths():
        for word in index.bucket(length):
            if verbose:
                debug(f"Trying word {word}")
            if not is_composite(word, store, verbose=verbose):
                continue
            if verbose:
                debug(f"Word {word} is made of other words.")
            count += 1
            if not first_word:
                first_word = word
            elif not second_word:
                second_word = word

    return SearchResult(first_word=first_word, second_word=second_word, count=count)
