# trie.py
# Prefix store (character trie) behind the chatbot's autocompletion.
# Keeps an accumulated frequency per word for ranking and grows as the
# user queries new words.

from __future__ import annotations
import threading
from collections import defaultdict
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple


class Suggestion(NamedTuple):
    """A ranked completion: (word, frequency)."""

    word: str
    frequency: int


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode (created lazily on insert)
    is_word: True if the path from the root spells a stored word
    freq: accumulated weight of the word (only meaningful when is_word)
    word: the lowercase word this node terminates, so traversal from a
          prefix node never has to rebuild the path
    """

    __slots__ = ("children", "is_word", "freq", "word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = defaultdict(TrieNode)
        self.is_word = False
        self.freq = 0
        self.word = ""


class PrefixStore:
    """
    Trie of lowercase words with frequency-ranked prefix lookup.

    The store only grows: nodes are never deleted. Two running counters are
    kept for statistics displays:
     - unique_word_count: number of terminal nodes
     - total_insert_weight: sum of every frequency ever applied

    Every public operation holds a single lock so a store can be shared with
    a threaded host.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._unique = 0
        self._weight = 0
        self._lock = threading.Lock()

    @classmethod
    def with_defaults(
        cls, words: Optional[Iterable[Tuple[str, int]]] = None
    ) -> "PrefixStore":
        """Build a store seeded with the default vocabulary (or `words`)."""
        from .seed_words import bootstrap

        store = cls()
        if words is None:
            bootstrap(store)
        else:
            bootstrap(store, words)
        return store

    # counters ------------------------------------------------------------
    @property
    def unique_word_count(self) -> int:
        return self._unique

    @property
    def total_insert_weight(self) -> int:
        return self._weight

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {
                "unique_words": self._unique,
                "total_insert_weight": self._weight,
            }

    # insertion -----------------------------------------------------------
    def insert(self, word: str, frequency: int = 1) -> None:
        """
        Insert `word` with weight `frequency`.
        Re-inserting a stored word adds to its frequency instead of
        replacing it. Empty words are ignored so the root never becomes
        terminal.
        """
        if frequency < 1:
            raise ValueError(f"frequency must be >= 1, got {frequency!r}")
        word = word.lower()
        if not word:
            return

        with self._lock:
            node = self._root
            for ch in word:
                node = node.children[ch]
            if node.is_word:
                node.freq += frequency
            else:
                node.is_word = True
                node.freq = frequency
                node.word = word
                self._unique += 1
            self._weight += frequency

    # lookup --------------------------------------------------------------
    def _walk(self, text: str) -> Optional[TrieNode]:
        """Follow `text` from the root without creating nodes."""
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        """True only if `word` itself was stored (not merely a prefix)."""
        with self._lock:
            node = self._walk(word.lower())
            return node is not None and node.is_word

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return self._unique

    def query(self, prefix: str, limit: int = 5) -> List[Suggestion]:
        """
        Return up to `limit` stored words starting with `prefix`, sorted by
         - higher frequency first
         - lexicographically second
        The empty prefix matches every stored word.
        """
        if limit <= 0:
            return []

        with self._lock:
            node = self._walk(prefix.lower())
            if node is None:
                return []
            found = self._collect(node)

        found.sort(key=lambda s: (-s.frequency, s.word))
        return found[:limit]

    # internal collector --------------------------------------------------
    @staticmethod
    def _collect(start: TrieNode) -> List[Suggestion]:
        """Gather every terminal node under `start` (iterative DFS)."""
        out: List[Suggestion] = []
        stack = [start]
        while stack:
            node = stack.pop()
            if node.is_word:
                out.append(Suggestion(node.word, node.freq))
            stack.extend(node.children.values())
        return out
