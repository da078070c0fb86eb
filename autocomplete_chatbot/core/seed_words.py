# seed_words.py
# Default vocabulary the chatbot starts with, plus loading an alternative
# vocabulary from a JSON file of [word, frequency] pairs.

from __future__ import annotations
import json
from pathlib import Path
from typing import Iterable, List, Tuple, Union

SeedPair = Tuple[str, int]

DEFAULT_WORDS: List[SeedPair] = [
    ("hello", 10), ("help", 8), ("how", 7), ("house", 5), ("happy", 6),
    ("computer", 9), ("code", 12), ("coding", 8), ("cool", 4), ("cat", 3),
    ("chatbot", 15), ("chat", 10), ("change", 6), ("challenge", 7),
    ("programming", 11), ("program", 9), ("project", 8), ("practice", 5),
    ("python", 7), ("java", 6), ("javascript", 8), ("algorithm", 9),
    ("data", 10), ("structure", 8), ("database", 6), ("design", 7),
    ("development", 9), ("developer", 8), ("debug", 5), ("deploy", 4),
    ("machine", 6), ("learning", 8), ("artificial", 5), ("intelligence", 7),
    ("network", 6), ("security", 8), ("software", 10), ("system", 9),
    ("technology", 7), ("technical", 6), ("tutorial", 8), ("training", 5),
    ("dbms", 4),
]


def bootstrap(store, words: Iterable[SeedPair] = DEFAULT_WORDS) -> None:
    """Seed `store` by inserting every (word, frequency) pair in order."""
    for word, freq in words:
        store.insert(word, freq)


def load_seed_file(path: Union[str, Path]) -> List[SeedPair]:
    """
    Read a seed vocabulary from JSON: [["hello", 10], ["help", 8], ...].
    Raises FileNotFoundError if missing and ValueError on malformed content.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Seed file not found: {p}")

    with open(p, "r", encoding="utf8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Seed file {p} is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise ValueError(f"Seed file {p} must contain a list of [word, frequency] pairs")

    pairs: List[SeedPair] = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError(f"entry {i}: expected [word, frequency], got {entry!r}")
        word, freq = entry
        if not isinstance(word, str) or not word.strip():
            raise ValueError(f"entry {i}: word must be a non-empty string")
        # bool is an int subclass; reject it explicitly
        if isinstance(freq, bool) or not isinstance(freq, int) or freq < 1:
            raise ValueError(f"entry {i}: frequency must be an integer >= 1")
        pairs.append((word, freq))
    return pairs
