"""Smoke tests — verify package wiring.

These tests prove that:
* The public API is importable from the package root.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

import cmdargs
from cmdargs import __version__
from cmdargs.cli import exit_codes
from cmdargs.exceptions import (
    CmdArgsError,
    ConfigurationError,
    DeclarationConflictError,
    DuplicateUseError,
    EnvironmentError,
    InvalidBundleError,
    MalformedTokenError,
    MissingRequiredError,
    MissingValueError,
    ParseError,
    UndeclaredParameterError,
)


# ---------------------------------------------------------------------------
# Version and exports
# ---------------------------------------------------------------------------

class TestPackage:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)

    @pytest.mark.parametrize(
        "name", ["CmdArgParser", "Parameter", "ParameterKind", "ParseResult"],
    )
    def test_public_names(self, name: str) -> None:
        assert name in cmdargs.__all__
        assert hasattr(cmdargs, name)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UndeclaredParameterError,
            InvalidBundleError,
            MissingValueError,
            DuplicateUseError,
            MalformedTokenError,
            MissingRequiredError,
        ],
    )
    def test_parse_errors_inherit_from_parse_error(
        self, exc_class: type[CmdArgsError],
    ) -> None:
        assert issubclass(exc_class, ParseError)

    @pytest.mark.parametrize(
        "exc_class",
        [DeclarationConflictError, ConfigurationError, ParseError, EnvironmentError],
    )
    def test_all_inherit_from_base(self, exc_class: type[CmdArgsError]) -> None:
        assert issubclass(exc_class, CmdArgsError)

    def test_declaration_conflict_is_not_a_parse_error(self) -> None:
        assert not issubclass(DeclarationConflictError, ParseError)

    def test_hint_is_stored(self) -> None:
        err = CmdArgsError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_parse_error_defaults(self) -> None:
        err = MalformedTokenError("Unknown argument: x", token="x")
        assert err.token == "x"
        assert err.state is None
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2

    def test_usage_error_is_64(self) -> None:
        assert exit_codes.USAGE_ERROR == 64

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130
