class TrieNode:
    def __init__(self):
        # children: dict mapping single char -> TrieNode
        self.children = {}
        # is_word: True if the path from root down to here spells a stored word
        self.is_word = False

    def insert(self, word: str):
        """
        Insert `word` into this trie.  Assumes `word` is already normalized.
        """
        node = self
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        node.is_word = True

    def word_end_lengths(self, word: str, start: int = 0):
        """
        Walk down the trie along word[start:] and return every length p for which
        word[start:start + p] is a stored word, shortest first.  The walk stops at
        the first character with no matching child.
        """
        lengths = []
        node = self
        for offset, ch in enumerate(word[start:], start=1):
            node = node.children.get(ch)
            if node is None:
                break
            if node.is_word:
                lengths.append(offset)
        return lengths
