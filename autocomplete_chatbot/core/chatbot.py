# chatbot.py
"""
ChatSession - the chatbot's turn logic, independent of any front end.

Each call to process() takes one line of user text and returns a Reply:
 - transcript lines plus a style hint ("normal", "highlight", "warning")
 - the ranked suggestions to show (if the input was a query)
 - flags for ending the session or opening the stats view

Ordinary input is treated as a word/prefix: suggestions are looked up
first, then the word is learnt (new words are added, known words get their
frequency bumped). Both paths insert with frequency 1; only the message
differs.
"""

from __future__ import annotations
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from autocomplete_chatbot.context.normalizer import normalize_text
from autocomplete_chatbot.core.trie import PrefixStore, Suggestion
from autocomplete_chatbot.utils.logger_utils import Log
from autocomplete_chatbot.utils.metrics_tracker import Metrics

QUIT_COMMANDS = ("quit", "exit")
STATS_COMMAND = "stats"
HELP_COMMAND = "help"

BANNER = "AUTOCOMPLETE CHATBOT WITH TRIE & PQ"
RULE = "=" * 46


@dataclass
class Reply:
    """Result of one chat turn, rendered by the CLI or the TUI."""

    lines: List[str]
    style: str = "normal"
    suggestions: List[Suggestion] = field(default_factory=list)
    ended: bool = False
    show_stats: bool = False
    # the normalized text when the turn was a word/prefix query
    query: Optional[str] = None


class ChatSession:
    """
    Owns one PrefixStore and answers user turns against it.
    Public API:
      - process(text) -> Reply
      - welcome() -> Reply
      - help() -> Reply
      - stats() -> dict
    """

    def __init__(
        self,
        store: Optional[PrefixStore] = None,
        *,
        limit: int = 5,
        log: Optional[Log] = None,
        metrics: Optional[Metrics] = None,
    ):
        self.log = log or Log()
        self.metrics = metrics or Metrics()
        self.limit = limit
        if store is None:
            with self.log.time_block("bootstrap"):
                store = PrefixStore.with_defaults()
            self.log.info(
                f"seeded store with {store.unique_word_count} words "
                f"(weight {store.total_insert_weight})"
            )
        self.store = store

    @property
    def queries(self) -> int:
        """Word/prefix turns answered so far."""
        return self.metrics.count("query_time")

    # turns -------------------------------------------------------------------
    def process(self, text: str) -> Reply:
        query = normalize_text(text)
        if not query:
            return Reply(["Please enter a valid input."], style="warning")

        command = query.lower()
        if command in QUIT_COMMANDS:
            self.log.info("session ended by user")
            return self.goodbye()
        if command == STATS_COMMAND:
            return self.stats_reply()
        if command == HELP_COMMAND:
            return self.help()

        return self._answer(query)

    def _answer(self, query: str) -> Reply:
        lines = [f'--- Processing: "{query}" ---']

        t0 = time.perf_counter()
        suggestions = self.store.query(query, self.limit)
        self.metrics.record("query_time", time.perf_counter() - t0)

        if suggestions:
            lines.append("Autocomplete suggestions:")
            for rank, s in enumerate(suggestions, 1):
                lines.append(f"{rank}. {s.word}  (freq: {s.frequency})")
        else:
            lines.append(f'No suggestions found for "{query}"')

        if self.store.contains(query):
            lines.append(f'Word "{query}" exists in our database.')
            self.store.insert(query, 1)
            lines.append(f'Increased frequency of "{query}"')
            self.log.info(f"bumped '{query.lower()}' ({len(suggestions)} suggestions)")
        else:
            lines.append(f'Word "{query}" not found in database.')
            lines.append(f'Adding "{query}" to the database with frequency 1.')
            self.store.insert(query, 1)
            self.log.info(f"learnt new word '{query.lower()}' ({len(suggestions)} suggestions)")

        return Reply(lines, suggestions=suggestions, query=query)

    # canned replies ----------------------------------------------------------
    def welcome(self) -> Reply:
        return Reply(
            [
                RULE,
                f"    {BANNER}",
                RULE,
                "Enter words or prefixes to get suggestions.",
                "Type 'quit' or 'exit' to end the session.",
                "Type 'stats' to see statistics.",
                "Type 'help' to see available commands.",
                RULE,
                "",
            ],
            style="highlight",
        )

    def help(self) -> Reply:
        return Reply(
            [
                "",
                "=== Available Commands ===",
                "- Type any word or prefix to get suggestions",
                "- 'stats' - Display chatbot statistics",
                "- 'help' - Show this help menu",
                "- 'quit' or 'exit' - End the session",
                "",
            ],
            style="highlight",
        )

    def goodbye(self) -> Reply:
        return Reply(
            ["", "Thank you for using the Autocomplete Chatbot!"],
            style="highlight",
            ended=True,
        )

    def stats_reply(self) -> Reply:
        s = self.stats()
        return Reply(
            [
                "",
                "=== Chatbot Statistics ===",
                "Database contains words starting with common prefixes.",
                "Words are ranked by frequency and alphabetical order.",
                "New words are automatically added when not found.",
                f"Total unique words: {s['unique_words']}",
                f"Total insert operations: {s['total_insert_weight']}",
            ],
            style="highlight",
            show_stats=True,
        )

    def stats(self) -> Dict[str, Any]:
        out: Dict[str, Any] = dict(self.store.stats())
        out["queries"] = self.queries
        out["avg_query_ms"] = self.metrics.avg("query_time") * 1000.0
        return out
