"""
autocomplete_chatbot.core

The prefix store and the chat logic built on it:
 - PrefixStore / TrieNode / Suggestion: frequency-ranked trie
 - DEFAULT_WORDS / bootstrap / load_seed_file: seed vocabulary
 - ChatSession / Reply: one chat turn at a time, front-end agnostic
"""

from .trie import PrefixStore, TrieNode, Suggestion
from .seed_words import DEFAULT_WORDS, bootstrap, load_seed_file
from .chatbot import ChatSession, Reply

__all__ = [
    "PrefixStore",
    "TrieNode",
    "Suggestion",
    "DEFAULT_WORDS",
    "bootstrap",
    "load_seed_file",
    "ChatSession",
    "Reply",
]
