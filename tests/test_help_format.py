"""Tests for help and diagnostic text builders (core/help_format.py)."""

from __future__ import annotations

import pytest

from cmdargs.core.help_format import (
    format_conflict,
    format_declared,
    format_error,
    format_help,
    format_parameter,
    join_parts,
)
from cmdargs.core.models import Parameter, ParameterKind
from cmdargs.core.registry import HELP_PARAMETER, DeclarationRegistry
from cmdargs.exceptions import DeclarationConflictError, MissingValueError


@pytest.fixture
def registry() -> DeclarationRegistry:
    reg = DeclarationRegistry()
    reg.add(HELP_PARAMETER, ParameterKind.FLAG)
    reg.declare_flag("f", "flag", False, "Desc")
    reg.declare_option("o", "option", False, "")
    return reg


class TestJoinParts:
    def test_concatenates_in_order(self) -> None:
        assert join_parts("Option: ", "o", " needs ", 1, " value") == "Option: o needs 1 value"

    def test_empty(self) -> None:
        assert join_parts() == ""


class TestFormatParameter:
    def test_with_description(self) -> None:
        line = format_parameter(Parameter("f", "flag", False, "Desc"))
        assert line == "  -f, --flag : Desc"

    def test_without_description(self) -> None:
        assert format_parameter(Parameter("o", "option")) == "  -o, --option"


class TestFormatDeclared:
    def test_options_then_flags(self, registry: DeclarationRegistry) -> None:
        text = format_declared(registry)
        assert text.splitlines() == [
            "Options:",
            "  -o, --option",
            "Flags:",
            "  -h, --help : Display this help message",
            "  -f, --flag : Desc",
        ]

    def test_empty_sections_keep_headers(self) -> None:
        assert format_declared(DeclarationRegistry()) == "Options:\nFlags:"


class TestFormatHelp:
    def test_description_blank_line_listing(self, registry: DeclarationRegistry) -> None:
        lines = format_help("My program", registry).splitlines()
        assert lines[0] == "My program"
        assert lines[1] == ""
        assert lines[2] == "Options:"
        assert "Flags:" in lines


class TestFormatConflict:
    def test_includes_message_and_listing(self, registry: DeclarationRegistry) -> None:
        err = DeclarationConflictError("f", "again", "flags")
        text = format_conflict(err, registry)
        assert text.startswith("Unable to declare: -f, --again. Already declared in flags.")
        assert "Declared parameters:" in text
        assert "  -f, --flag : Desc" in text
        assert "  -o, --option" in text


class TestFormatError:
    def test_message_only(self) -> None:
        assert format_error(MissingValueError("Option: -o requires a value")) == (
            "Option: -o requires a value"
        )

    def test_hint_on_second_line(self) -> None:
        err = MissingValueError("boom", hint="try this")
        assert format_error(err) == "boom\ntry this"
