# tui_app.py — Autocomplete Chatbot TUI Application
# -------------------------------------------------------
# Terminal UI around a ChatSession, laid out like the browser chatbot:
#  - input box with Process / Help / Stats / Clear buttons
#  - console pane with the chat transcript
#  - ranked suggestion list (select one to refill the input)
#  - toggleable statistics panel
# -------------------------------------------------------

from __future__ import annotations
from typing import List

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Input, OptionList, RichLog, Static
from textual.widgets.option_list import Option

from autocomplete_chatbot.core.chatbot import ChatSession, Reply
from autocomplete_chatbot.core.trie import Suggestion

EMPTY_STATE = "No suggestions yet. Type a word or prefix above."

LINE_STYLES = {
    "normal": "",
    "highlight": "bold cyan",
    "warning": "yellow",
}


def format_suggestion(rank: int, s: Suggestion) -> Text:
    """`#1  chatbot   Frequency: 15` with the word emphasised."""
    t = Text()
    t.append(f"#{rank}  ", style="cyan")
    t.append(s.word, style="bold")
    t.append(f"   Frequency: {s.frequency}", style="dim")
    return t


class StatsPanel(Static):
    """Unique word count and total insert weight of the store."""

    def show_stats(self, stats: dict) -> None:
        self.update(
            "Words are ranked by frequency and alphabetical order.\n"
            f"[b]Total unique words:[/b] {stats['unique_words']}\n"
            f"[b]Total insert operations:[/b] {stats['total_insert_weight']}"
        )


# Main Application -----------------------------------------------------------------
class ChatbotApp(App):
    """
    Textual front end. UI events go to the session, replies come back as
    transcript lines + suggestions. The app never touches the trie itself.
    """

    CSS = """
    #left { width: 2fr; }
    #right { width: 1fr; }
    #buttons { height: auto; }
    #console-output { height: 1fr; border: round $primary; }
    #suggestions-list { height: auto; max-height: 12; }
    #stats-panel { border: round $secondary; padding: 0 1; }
    """

    # keyboard shortcuts for user
    BINDINGS = [
        ("ctrl+l", "clear", "Clear"),
        ("ctrl+o", "show_commands", "Commands"),
        ("ctrl+t", "toggle_stats", "Stats"),
    ]

    def __init__(self, session: ChatSession):
        super().__init__()
        self.session = session
        self.suggestions: List[Suggestion] = []

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Vertical(id="left"):
                yield Input(placeholder="Type a word or prefix…", id="user-input")
                with Horizontal(id="buttons"):
                    yield Button("Process", id="process-btn", variant="primary")
                    yield Button("Help", id="help-btn")
                    yield Button("Stats", id="stats-btn")
                    yield Button("Clear", id="clear-btn")
                yield RichLog(id="console-output", wrap=True)
            with Vertical(id="right"):
                yield Static("[b]Suggestions[/b]")
                yield OptionList(id="suggestions-list")
                yield StatsPanel(id="stats-panel")
        yield Footer()

    def on_mount(self) -> None:
        self.write_reply(self.session.welcome())
        self.render_suggestions([])
        panel = self.query_one(StatsPanel)
        panel.show_stats(self.session.stats())
        panel.display = False
        self.query_one("#user-input", Input).focus()

    # Rendering ----------------------------------------------------------------
    def write_reply(self, reply: Reply) -> None:
        console = self.query_one("#console-output", RichLog)
        style = LINE_STYLES.get(reply.style, "")
        for line in reply.lines:
            console.write(Text(line, style=style))

    def render_suggestions(self, suggestions: List[Suggestion]) -> None:
        self.suggestions = list(suggestions)
        options = self.query_one("#suggestions-list", OptionList)
        options.clear_options()
        if not suggestions:
            options.add_option(Option(Text(EMPTY_STATE, style="dim italic"), disabled=True))
            return
        options.add_options(
            [format_suggestion(i, s) for i, s in enumerate(suggestions, 1)]
        )

    # Input handling ---------------------------------------------------------------
    def submit(self, text: str) -> None:
        reply = self.session.process(text)
        self.write_reply(reply)
        if reply.query is not None:
            self.render_suggestions(reply.suggestions)
            self.query_one(StatsPanel).show_stats(self.session.stats())
        if reply.show_stats:
            self.query_one(StatsPanel).display = True
        if reply.ended:
            self.exit()

    def pick_suggestion(self, index: int) -> None:
        """Refill the input with the chosen suggestion."""
        if not 0 <= index < len(self.suggestions):
            return
        box = self.query_one("#user-input", Input)
        box.value = self.suggestions[index].word
        box.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.submit(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        bid = event.button.id
        if bid == "process-btn":
            self.submit(self.query_one("#user-input", Input).value)
        elif bid == "help-btn":
            self.action_show_commands()
        elif bid == "stats-btn":
            self.action_toggle_stats()
        elif bid == "clear-btn":
            self.action_clear()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.pick_suggestion(event.option_index)

    # Actions ----------------------------------------------------------------------
    def action_show_commands(self) -> None:
        self.write_reply(self.session.help())

    def action_toggle_stats(self) -> None:
        panel = self.query_one(StatsPanel)
        if not panel.display:
            self.write_reply(self.session.stats_reply())
            panel.show_stats(self.session.stats())
        panel.display = not panel.display

    def action_clear(self) -> None:
        self.query_one("#console-output", RichLog).clear()
        self.render_suggestions([])


if __name__ == "__main__":
    ChatbotApp(ChatSession()).run()
