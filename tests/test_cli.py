# tests/test_cli.py - console loop driven by patched prompts
import io
import json
import os
import tempfile
import unittest
from unittest.mock import patch

from rich.console import Console

from autocomplete_chatbot.cli.cli import CLI, build_parser, build_session, main
from autocomplete_chatbot.core.chatbot import ChatSession
from autocomplete_chatbot.utils.logger_utils import Log


def make_console():
    return Console(file=io.StringIO(), force_terminal=False, width=120, color_system=None)


class CLILoopTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        log = Log(path=os.path.join(self.tmp.name, "cli.log"))
        self.session = ChatSession(log=log)
        self.console = make_console()
        self.cli = CLI(self.session, console=self.console)

    def output(self):
        return self.console.file.getvalue()

    @patch("autocomplete_chatbot.cli.cli.Prompt.ask")
    def test_query_then_quit(self, ask):
        # query, skip the pick prompt, quit
        ask.side_effect = ["cha", "", "quit"]
        self.cli.run()
        out = self.output()
        self.assertIn("AUTOCOMPLETE CHATBOT", out)
        self.assertIn('--- Processing: "cha" ---', out)
        self.assertIn("chatbot", out)
        self.assertIn("Thank you for using the Autocomplete Chatbot!", out)
        self.assertFalse(self.cli.running)
        self.assertTrue(self.session.store.contains("cha"))

    @patch("autocomplete_chatbot.cli.cli.Prompt.ask")
    def test_pick_refills_next_prompt(self, ask):
        ask.side_effect = ["cha", "2", "chat", "", "exit"]
        self.cli.run()
        # third prompt was offered the picked word as its default
        third = ask.call_args_list[2]
        self.assertEqual(third.kwargs["default"], "chat")
        self.assertIn("Selected:", self.output())
        self.assertIn(("chat", 11), self.session.store.query("chat", 5))

    @patch("autocomplete_chatbot.cli.cli.Prompt.ask")
    def test_bad_pick_is_reported(self, ask):
        ask.side_effect = ["cha", "9", "quit"]
        self.cli.run()
        self.assertIn("Not a suggestion number", self.output())
        self.assertEqual(ask.call_args_list[2].kwargs["default"], "")

    @patch("autocomplete_chatbot.cli.cli.Prompt.ask")
    def test_blank_input_warns(self, ask):
        ask.side_effect = ["", "quit"]
        self.cli.run()
        self.assertIn("Please enter a valid input.", self.output())

    @patch("autocomplete_chatbot.cli.cli.Prompt.ask")
    def test_stats_renders_table(self, ask):
        ask.side_effect = ["stats", "quit"]
        self.cli.run()
        out = self.output()
        self.assertIn("Total unique words", out)
        self.assertIn("43", out)
        self.assertIn("319", out)

    @patch("autocomplete_chatbot.cli.cli.Prompt.ask")
    def test_eof_ends_loop(self, ask):
        ask.side_effect = EOFError
        self.cli.run()
        self.assertFalse(self.cli.running)
        self.assertIn("Thank you", self.output())

    @patch("autocomplete_chatbot.cli.cli.Prompt.ask")
    def test_markup_in_input_is_not_interpreted(self, ask):
        ask.side_effect = ["[bold]x", "quit"]
        self.cli.run()
        self.assertIn('"[bold]x"', self.output())


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.config == "config.json"
    assert args.limit is None and args.seed is None and not args.tui


def test_build_session_uses_config_and_seed(tmp_path):
    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps([["alpha", 3], ["alps", 1]]), encoding="utf8")
    cfg = tmp_path / "config.json"
    cfg.write_text(
        json.dumps({"max_suggestions": 1, "log_path": str(tmp_path / "a.log"), "seed_path": str(seed)}),
        encoding="utf8",
    )
    args = build_parser().parse_args(["--config", str(cfg)])
    session = build_session(args, make_console())
    assert session.limit == 1
    assert session.store.unique_word_count == 2
    assert session.process("al").suggestions == [("alpha", 3)]
    assert (tmp_path / "a.log").exists()


def test_limit_flag_overrides_config(tmp_path):
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps({"log_path": str(tmp_path / "a.log")}), encoding="utf8")
    args = build_parser().parse_args(["--config", str(cfg), "--limit", "3"])
    session = build_session(args, make_console())
    assert session.limit == 3
    assert session.store.unique_word_count == 43


def test_broken_config_falls_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.json").write_text("{oops", encoding="utf8")
    console = make_console()
    session = build_session(build_parser().parse_args([]), console)
    assert session is not None
    assert session.limit == 5
    assert "Config ignored" in console.file.getvalue()
    assert "could not read" in (tmp_path / "logs" / "autocomplete_chatbot.log").read_text(encoding="utf8")


def test_main_fails_on_missing_seed(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--seed", str(tmp_path / "missing.json")]) == 1


def test_main_runs_console_loop(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    answers = iter(["hello", "", "quit"])
    monkeypatch.setattr("autocomplete_chatbot.cli.cli.Prompt.ask", lambda *a, **k: next(answers))
    assert main([]) == 0


def test_config_string_false_keeps_echo_off(tmp_path):
    cfg = tmp_path / "config.json"
    cfg.write_text(
        json.dumps({"echo_log": "false", "log_path": str(tmp_path / "a.log")}),
        encoding="utf8",
    )
    session = build_session(build_parser().parse_args(["--config", str(cfg)]), make_console())
    assert session.log.echo is False


def test_bad_config_value_warns_and_uses_default(tmp_path):
    cfg = tmp_path / "config.json"
    log_path = tmp_path / "a.log"
    cfg.write_text(
        json.dumps({"max_suggestions": "five", "log_path": str(log_path)}),
        encoding="utf8",
    )
    console = make_console()
    session = build_session(build_parser().parse_args(["--config", str(cfg)]), console)
    assert session is not None
    assert session.limit == 5
    assert "Config ignored" in console.file.getvalue()
    assert "max_suggestions" in log_path.read_text(encoding="utf8")
