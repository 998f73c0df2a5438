"""
Unit тесты для разбора команд.
"""

import pytest

from registry_bot.application.commands import parse_command


class TestParseCommand:

    def test_token_and_args(self):
        command = parse_command("/inn 7707083893 7736050003")

        assert command.token == "/inn"
        assert command.args == ("7707083893", "7736050003")

    def test_whitespace_runs_collapse(self):
        command = parse_command("/inn \t 7707083893\n\n7736050003")

        assert command.args == ("7707083893", "7736050003")

    def test_command_without_args(self):
        command = parse_command("/help")

        assert command.token == "/help"
        assert command.args == ()

    def test_empty_text(self):
        command = parse_command("")

        assert command.token == ""
        assert command.args == ()

    def test_trailing_whitespace_gives_empty_arg(self):
        assert parse_command("/okved  ").args == ("",)

    @pytest.mark.parametrize(
        "text",
        ["/inn 1 2 3", "/egrul  a\tb", "/last", "hello world"],
    )
    def test_reparse_of_normalized_text_is_stable(self, text):
        command = parse_command(text)
        normalized = " ".join((command.token,) + command.args)

        assert parse_command(normalized) == command

    def test_leading_whitespace_gives_empty_token(self):
        command = parse_command(" /inn 7707083893")

        assert command.token == ""
        assert command.args == ("/inn", "7707083893")
