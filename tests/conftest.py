"""Shared pytest fixtures and configuration for the cmdargs test suite.

Guidelines
----------
* Core tests must be pure — no console output, no environment.
* Facade tests use a :class:`CollectingSink` instead of the console.
* ``CMDARGS_*`` environment variables are cleared for every test.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence

import pytest

from cmdargs.config.settings import ParserSettings
from cmdargs.core.protocols import CollectingSink
from cmdargs.parser import CmdArgParser


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("CMDARGS_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sink() -> CollectingSink:
    return CollectingSink()


@pytest.fixture
def make_parser(sink: CollectingSink) -> Callable[..., CmdArgParser]:
    """Factory: ``make_parser("-f -o x")`` → parser over ``prog -f -o x``."""

    def _make(
        args: str | Sequence[str] = "",
        *,
        description: str = "Test program",
        enforce_required: bool = False,
    ) -> CmdArgParser:
        tokens = args.split() if isinstance(args, str) else list(args)
        return CmdArgParser(
            ["prog", *tokens],
            description,
            sink=sink,
            settings=ParserSettings(enforce_required=enforce_required),
        )

    return _make
