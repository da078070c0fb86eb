"""Autocomplete chatbot: a self-learning, frequency-ranked trie with console and terminal front ends."""

from autocomplete_chatbot.core import ChatSession, PrefixStore, Suggestion

__all__ = ["ChatSession", "PrefixStore", "Suggestion"]

__version__ = "0.1.0"
