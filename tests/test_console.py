"""Tests for console helpers and the console-backed sink (cli/console.py)."""

from __future__ import annotations

import sys

import pytest

from cmdargs.cli.console import ConsoleSink, console, get_rich_console
from cmdargs.config.settings import ParserSettings
from cmdargs.core.help_format import format_parameter
from cmdargs.core.models import Parameter
from cmdargs.exceptions import EnvironmentError
from cmdargs.parser import CmdArgParser


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


class TestConsole:
    def test_rich_console_targets_stderr(self) -> None:
        rich_console = get_rich_console()
        assert rich_console.stderr is True

    def test_missing_rich_raises_environment_error(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _hide_rich(monkeypatch)
        with pytest.raises(EnvironmentError, match="rich is not installed"):
            get_rich_console()

    def test_proxy_falls_back_to_print(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        console.print("plain text")
        assert "plain text" in capsys.readouterr().err


class TestConsoleSink:
    def test_emit_writes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        ConsoleSink().emit("Unknown argument: word")
        captured = capsys.readouterr()
        assert "Unknown argument: word" in captured.err
        assert captured.out == ""

    def test_brackets_are_not_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        ConsoleSink().emit("  -o, --option : Path [bold]here[/bold]")
        assert "[bold]here[/bold]" in capsys.readouterr().err

    def test_emit_without_rich(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        ConsoleSink().emit("Options:\nFlags:")
        assert "Options:\nFlags:" in capsys.readouterr().err

    def test_long_lines_are_not_wrapped(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        description = ("Write the generated report to this path; " * 4).strip()
        line = format_parameter(Parameter("o", "output", False, description))
        assert len(line) > 80
        ConsoleSink().emit(line)
        assert line in capsys.readouterr().err

    def test_emoji_codes_are_kept(self, capsys: pytest.CaptureFixture[str]) -> None:
        ConsoleSink().emit("Unknown argument: :smile:")
        assert "Unknown argument: :smile:" in capsys.readouterr().err


class TestDefaultSinkHelp:
    def test_help_keeps_one_line_per_parameter(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        long_description = ("Write the generated report to this path; " * 4).strip()
        parser = CmdArgParser(
            ["prog", "-h"], "Report tool", settings=ParserSettings(),
        )
        parser.declare_option("o", "output", False, long_description)
        parser.declare_flag("s", "smile", False, "Add :smile: to output")
        assert parser.parse_args() is True
        lines = capsys.readouterr().err.splitlines()
        assert f"  -o, --output : {long_description}" in lines
        assert "  -s, --smile : Add :smile: to output" in lines
