"""Demo program entry point for cmdargs.

Declares ``-f/--flag`` and ``-o/--option``, parses the process argv and
prints what matched.  It exists to show the library end to end and is
the only place that turns a parse outcome into a process exit code.

Architecture notes
------------------
* Parsing, validation and diagnostics all live in the library; this
  module only declares, calls :meth:`CmdArgParser.parse_args` and renders.
* :func:`cli` is the process-level error boundary.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from cmdargs.cli import exit_codes
from cmdargs.cli.console import console
from cmdargs.config.logging_config import configure_logging
from cmdargs.config.settings import ParserSettings, load_settings
from cmdargs.core.models import Parameter
from cmdargs.exceptions import CmdArgsError
from cmdargs.parser import CmdArgParser

PROG = "cmdargs-demo"
DESCRIPTION = "CmdArgParser Example Program"


# ---------------------------------------------------------------------------
# Parser construction
# ---------------------------------------------------------------------------

def build_parser(
    argv: Sequence[str],
    settings: ParserSettings | None = None,
) -> CmdArgParser:
    """Construct the demo parser over a full argv (program name first)."""
    parser = CmdArgParser(argv, DESCRIPTION, settings=settings)
    parser.declare_flag("f", "flag", False, "Desc")
    parser.declare_option("o", "option", False, "Desc")
    return parser


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _summary_rows(parser: CmdArgParser) -> list[tuple[str, str, str]]:
    """Return (kind, name, value) for every matched flag and option."""
    rows: list[tuple[str, str, str]] = []
    for flag in parser.flags:
        rows.append(("flag", _display_name(flag), "set"))
    for option, value in parser.options.items():
        rows.append(("option", _display_name(option), value))
    return rows


def _display_name(param: Parameter) -> str:
    return f"-{param.short_name}, --{param.long_name}"


def _print_plain_summary(rows: list[tuple[str, str, str]]) -> None:
    """Render the summary without Rich."""
    print(f"{'Kind':<8} {'Name':<24} {'Value'}", file=sys.stderr)
    print("-" * 48, file=sys.stderr)
    for kind, name, value in rows:
        print(f"{kind:<8} {name:<24} {value}", file=sys.stderr)


def _render_summary(parser: CmdArgParser) -> None:
    rows = _summary_rows(parser)
    if not rows:
        console.print("No flags or options given.", verbatim=True)
        return

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_summary(rows)
        return

    table = Table(
        title="Parsed arguments",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Kind", style="bold", min_width=6)
    table.add_column("Name", min_width=16)
    table.add_column("Value")
    for kind, name, value in rows:
        table.add_row(kind, name, value)
    console.print(table)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo program.

    Parameters
    ----------
    argv:
        Arguments *without* the program name.  When ``None`` (default),
        ``sys.argv[1:]`` is used.

    Returns
    -------
    int
        OS process exit code.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    settings = load_settings()
    configure_logging(settings)

    parser = build_parser([PROG, *args], settings=settings)
    if not parser.parse_args():
        return exit_codes.USAGE_ERROR
    if parser.help_requested:
        return exit_codes.SUCCESS

    _render_summary(parser)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except CmdArgsError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
