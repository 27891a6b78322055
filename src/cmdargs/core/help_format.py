"""Pure help and diagnostic text builders.

Every function returns a string; emitting it is the caller's job.

Layout produced by :func:`format_help`::

    <program description>

    Options:
      -o, --option : Description
    Flags:
      -h, --help : Display this help message
"""

from __future__ import annotations

from collections.abc import Iterable

from cmdargs.core.models import Parameter
from cmdargs.core.registry import DeclarationRegistry
from cmdargs.exceptions import CmdArgsError


def join_parts(*parts: object) -> str:
    """Concatenate stringified *parts*, in order, into one message."""
    return "".join(str(part) for part in parts)


def format_parameter(param: Parameter) -> str:
    """Render ``"  -s, --long"`` with ``" : description"`` when present."""
    line = join_parts("  -", param.short_name, ", --", param.long_name)
    if param.description:
        line = join_parts(line, " : ", param.description)
    return line


def _section(title: str, params: Iterable[Parameter]) -> list[str]:
    return [f"{title}:", *(format_parameter(p) for p in params)]


def format_declared(registry: DeclarationRegistry) -> str:
    """List every declared option, then every declared flag."""
    lines = _section("Options", registry.options) + _section("Flags", registry.flags)
    return "\n".join(lines)


def format_help(description: str, registry: DeclarationRegistry) -> str:
    """Program description, a blank line, then the declared listing."""
    return join_parts(description, "\n\n", format_declared(registry))


def format_conflict(error: CmdArgsError, registry: DeclarationRegistry) -> str:
    """Conflict message followed by the parameters already declared."""
    return join_parts(error, "\n", "Declared parameters:\n", format_declared(registry))


def format_error(error: CmdArgsError) -> str:
    """Error message plus its hint on a second line, if any."""
    if error.hint:
        return join_parts(error, "\n", error.hint)
    return str(error)
