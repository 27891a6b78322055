"""Domain models for cmdargs.

:class:`Parameter` and :class:`ParseResult` are **frozen** dataclasses.
:class:`ParseState` is the one mutable model: it is filled token by
token during a pass and then only read.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cmdargs.exceptions import CmdArgsError


class ParameterKind(enum.Enum):
    """Which registry collection a parameter belongs to."""

    FLAG = "flag"
    OPTION = "option"


# ---------------------------------------------------------------------------
# Declared parameter
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Parameter:
    """A declared flag or option.

    Identity is the ``(short_name, long_name)`` pair: two parameters
    with the same names compare and hash equal regardless of their
    ``required`` flag or description.
    """

    short_name: str
    """Single character used after one dash (``-f``)."""

    long_name: str
    """Multi-character name used after two dashes (``--flag``)."""

    required: bool = field(default=False, compare=False)
    """Declared required-ness.  Only checked when enforcement is enabled."""

    description: str = field(default="", compare=False)
    """Human-readable text shown in the help listing."""

    def __post_init__(self) -> None:
        if len(self.short_name) != 1 or self.short_name == "-":
            raise ValueError(
                f"short name must be a single non-dash character, got {self.short_name!r}"
            )
        if len(self.long_name) < 2 or self.long_name.startswith("-"):
            raise ValueError(
                "long name must have at least two characters and no leading "
                f"dash, got {self.long_name!r}"
            )

    @property
    def key(self) -> tuple[str, str]:
        return (self.short_name, self.long_name)


# ---------------------------------------------------------------------------
# Per-pass mutable state
# ---------------------------------------------------------------------------

class ParseState:
    """Matched flags and option values for a single parse pass.

    Flags are kept in an insertion-ordered dict used as a set.  Both
    collections are write-once per parameter; the engine enforces that
    before calling :meth:`add_flag` / :meth:`set_option`.
    """

    __slots__ = ("_flags", "_options", "help_requested")

    def __init__(self) -> None:
        self._flags: dict[Parameter, None] = {}
        self._options: dict[Parameter, str] = {}
        self.help_requested: bool = False

    def add_flag(self, param: Parameter) -> None:
        self._flags[param] = None

    def set_option(self, param: Parameter, value: str) -> None:
        self._options[param] = value

    def has_flag(self, param: Parameter) -> bool:
        return param in self._flags

    def has_option(self, param: Parameter) -> bool:
        return param in self._options

    def get_option(self, param: Parameter) -> str | None:
        return self._options.get(param)

    @property
    def flags(self) -> tuple[Parameter, ...]:
        return tuple(self._flags)

    @property
    def options(self) -> Mapping[Parameter, str]:
        return MappingProxyType(self._options)

    def __repr__(self) -> str:
        return (
            f"ParseState(flags={list(self._flags)!r}, "
            f"options={self._options!r}, help_requested={self.help_requested})"
        )


# ---------------------------------------------------------------------------
# Pass outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseResult:
    """Structured outcome of one parse pass.

    Truthiness mirrors :attr:`ok`, so ``if parser.parse(): ...`` reads
    the same as the boolean ``parse_args`` API.
    """

    ok: bool
    error: CmdArgsError | None = None
    help_requested: bool = False

    def __bool__(self) -> bool:
        return self.ok
