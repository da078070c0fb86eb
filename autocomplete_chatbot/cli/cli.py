"""
cli.py - command line front end for the autocomplete chatbot
Features:
- Ranked suggestions for every word/prefix typed, shown as a Rich table
- Pick a suggestion number to refill the next prompt
- Self-learning: unknown words are added, known words gain frequency
- stats / help / quit commands
- Optional textual TUI (--tui)
"""

import argparse
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.prompt import Prompt
from rich import box
from rich.markup import escape

from autocomplete_chatbot.core.chatbot import ChatSession, Reply
from autocomplete_chatbot.core.seed_words import load_seed_file
from autocomplete_chatbot.core.trie import PrefixStore, Suggestion
from autocomplete_chatbot.utils.config_manager import Config
from autocomplete_chatbot.utils.logger_utils import Log

STYLES = {
    "normal": "",
    "highlight": "bold cyan",
    "warning": "yellow",
}


class CLI:
    """Console loop around a ChatSession."""

    def __init__(self, session: ChatSession, console: Optional[Console] = None):
        self.session = session
        self.console = console or Console()
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - Prompts the user for input (prefilled with a picked suggestion, if any)
        - Hands it to the session and renders the reply
        - Stops on quit/exit, EOF or Ctrl-C
        """
        self._render(self.session.welcome())

        prefill = ""
        while self.running:
            try:
                text = Prompt.ask(
                    "[green]You[/green]",
                    default=prefill,
                    show_default=bool(prefill),
                    console=self.console,
                )
                prefill = ""
                reply = self.session.process(text)
                self._render(reply)

                if reply.ended:
                    self.running = False
                    break
                if reply.show_stats:
                    self._show_stats()
                if reply.suggestions:
                    self._display_suggestions(reply.suggestions)
                    prefill = self._pick(reply.suggestions)
            except (EOFError, KeyboardInterrupt):
                self._render(self.session.goodbye())
                self.running = False
                break

    # DISPLAY -------------------------------------------------------------------------------
    def _render(self, reply: Reply):
        style = STYLES.get(reply.style, "")
        for line in reply.lines:
            # Text keeps user input from being parsed as Rich markup
            self.console.print(Text(line, style=style))

    def _display_suggestions(self, suggestions: List[Suggestion]):
        """Ranked suggestions with their frequency."""
        table = Table(title="Suggestions", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column("Frequency", justify="right", style="magenta")

        for i, s in enumerate(suggestions, 1):
            table.add_row(f"#{i}", Text(s.word), str(s.frequency))
        self.console.print(table)

    def _show_stats(self):
        s = self.session.stats()
        t = Table(title="Statistics", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        t.add_row("Total unique words", str(s["unique_words"]))
        t.add_row("Total insert operations", str(s["total_insert_weight"]))
        t.add_row("Queries this session", str(s["queries"]))
        t.add_row("Avg query time", f"{s['avg_query_ms']:.3f} ms")
        self.console.print(t)

    def _pick(self, suggestions: List[Suggestion]) -> str:
        """Ask for a suggestion number; the chosen word becomes the next prompt's default."""
        chosen = Prompt.ask(
            "Pick # to refill / Enter to skip",
            default="",
            show_default=False,
            console=self.console,
        ).strip().lstrip("#")
        if not chosen:
            return ""
        if chosen.isdigit() and 1 <= int(chosen) <= len(suggestions):
            word = suggestions[int(chosen) - 1].word
            self.console.print(f"[green]Selected:[/green] {escape(word)}", highlight=False)
            return word
        self.console.print(f"[red]Not a suggestion number:[/red] {escape(chosen)}", highlight=False)
        return ""


# ENTRY POINT ---------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autocomplete-chatbot",
        description="Self-learning autocomplete chatbot backed by a frequency-ranked trie.",
    )
    parser.add_argument("--config", default="config.json", help="path to JSON config")
    parser.add_argument("--limit", type=int, default=None, help="suggestions per query")
    parser.add_argument("--seed", default=None, help="JSON file of [word, frequency] pairs")
    parser.add_argument("--tui", action="store_true", help="run the textual UI instead of the console")
    return parser


def build_session(args, console: Console) -> Optional[ChatSession]:
    """Config -> Log -> seeded store -> session. Returns None on a fatal setup error."""
    cfg = Config(args.config)
    try:
        log = Log(
            path=cfg.get("log_path"),
            echo=cfg.get("echo_log"),
            level=cfg.get("log_level"),
        )
    except ValueError as e:
        console.print(f"[red]Bad config:[/red] {escape(str(e))}")
        return None

    if cfg.load_error:
        log.warning(cfg.load_error)
        console.print(f"[yellow]Config ignored:[/yellow] {escape(cfg.load_error)}")

    seed_path = args.seed or cfg.get("seed_path")
    words = None
    if seed_path:
        try:
            words = load_seed_file(seed_path)
        except (FileNotFoundError, ValueError) as e:
            log.error(f"seed load failed: {e}")
            console.print(f"[red]Seed load failed:[/red] {escape(str(e))}")
            return None

    with log.time_block("bootstrap"):
        store = PrefixStore.with_defaults(words)
    log.info(f"seeded store with {store.unique_word_count} words")

    limit = args.limit if args.limit is not None else cfg.get("max_suggestions")
    return ChatSession(store, limit=limit, log=log)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()
    session = build_session(args, console)
    if session is None:
        return 1

    if args.tui:
        from autocomplete_chatbot.tui_app import ChatbotApp

        ChatbotApp(session).run()
    else:
        CLI(session, console).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
