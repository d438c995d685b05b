from __future__ import annotations

import logging
from typing import Iterable

logger = logging.getLogger("wordhunt")


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False

    def child(self, ch: str) -> TrieNode | None:
        return self.children.get(ch)


class Trie:
    """Prefix tree of lowercased words; lookups are case-insensitive."""

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str):
        node = self.root
        for ch in word.lower():
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def contains(self, word: str) -> bool:
        node = self.root
        for ch in word.lower():
            node = node.children.get(ch)
            if node is None:
                return False
        return node.is_word

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return self._size


def build_trie(words: Iterable[str]) -> Trie:
    trie = Trie()
    for word in words:
        trie.insert(word)
    return trie


def load_trie(path: str, min_length: int = 3) -> Trie:
    """Build a trie from a word list file, one word per line.

    Words are lowercased; blank, non-alphabetic and too-short lines are skipped.
    """
    trie = Trie()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().lower()
            if len(word) >= min_length and word.isalpha():
                trie.insert(word)
    logger.info("Loaded %d words from %s", len(trie), path)
    return trie
