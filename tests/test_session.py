"""Tests for interactive command parsing."""

import pytest

from daybook.session import Command, CommandKind, parse_command


class TestParseCommand:
    @pytest.mark.parametrize(
        "raw, kind",
        [
            ("/exit", CommandKind.EXIT),
            ("/help", CommandKind.HELP),
            ("/?", CommandKind.HELP),
            ("?", CommandKind.HELP),
            ("help me", CommandKind.HELP),
            ("", CommandKind.NOOP),
            ("   ", CommandKind.NOOP),
            ("-", CommandKind.NOOP),
            (" - ", CommandKind.NOOP),
            ("/switch", CommandKind.SWITCH),
            ("/set", CommandKind.SWITCH),
            ("/new", CommandKind.NEW),
            ("/prev", CommandKind.PREV),
            ("/last 3", CommandKind.PREV),
            ("/time", CommandKind.TIME),
            ("/times", CommandKind.TIME),
            ("/gtime", CommandKind.GRANULAR_TIME),
            ("/find", CommandKind.FIND),
            ("/open", CommandKind.OPEN),
            ("/unknown", CommandKind.NOOP),
            ("/newer", CommandKind.NOOP),
        ],
    )
    def test_kinds(self, raw, kind):
        assert parse_command(raw).kind is kind

    def test_text_keeps_leading_dash(self):
        assert parse_command("-new block\n") == Command(CommandKind.TEXT, text="-new block")

    def test_text_keeps_leading_whitespace(self):
        assert parse_command("  indented  ") == Command(CommandKind.TEXT, text="  indented")

    def test_toggle_is_text(self):
        assert parse_command("~") == Command(CommandKind.TEXT, text="~")

    def test_exit_must_be_exact(self):
        assert parse_command("/exit now").kind is CommandKind.NOOP

    def test_question_mark_only_alone_means_help(self):
        assert parse_command(" ? ").kind is CommandKind.HELP
        assert parse_command("? ask Sam about the report") == Command(
            CommandKind.TEXT, text="? ask Sam about the report"
        )
