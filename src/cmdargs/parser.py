"""Public parser facade — declarations, parsing, and queries on one object.

:class:`CmdArgParser` owns a :class:`~cmdargs.core.registry.DeclarationRegistry`
and the :class:`~cmdargs.core.models.ParseState` of the most recent pass.
It is the **error boundary** of the library: core errors are caught here,
rendered to the diagnostic sink, and reported as ``False``.

Typical use::

    parser = CmdArgParser(sys.argv, "My program")
    parser.declare_flag("v", "verbose", description="Chatty output")
    parser.declare_option("o", "output", required=True)
    if not parser.parse_args():
        return 64
    out = parser.get_option_value("o", "output")

Not thread-safe: declare, parse and query from one thread, or guard the
instance externally.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from cmdargs.config.settings import ParserSettings, load_settings
from cmdargs.core.engine import ParseEngine
from cmdargs.core.help_format import format_conflict, format_error, format_help
from cmdargs.core.models import Parameter, ParameterKind, ParseResult, ParseState
from cmdargs.core.protocols import DiagnosticSink
from cmdargs.core.registry import HELP_PARAMETER, DeclarationRegistry
from cmdargs.exceptions import CmdArgsError, DeclarationConflictError, ParseError

logger = logging.getLogger(__name__)


def _default_sink() -> DiagnosticSink:
    from cmdargs.cli.console import ConsoleSink

    return ConsoleSink()


class CmdArgParser:
    """Declare flags and options, then parse a captured argv against them.

    Parameters
    ----------
    argv:
        Full argument vector.  ``argv[0]`` (the program name) is always
        skipped.
    description:
        Program description shown at the top of the help text.
    sink:
        Where help and diagnostics go.  Defaults to the console (stderr).
    settings:
        Behaviour knobs.  Defaults to :class:`ParserSettings` loaded from
        ``CMDARGS_*`` variables and any ``.env`` in the working directory.

    Raises
    ------
    ConfigurationError
        If *settings* is omitted and the environment holds an invalid
        ``CMDARGS_*`` value.
    """

    def __init__(
        self,
        argv: Sequence[str],
        description: str = "",
        *,
        sink: DiagnosticSink | None = None,
        settings: ParserSettings | None = None,
    ) -> None:
        self._args: tuple[str, ...] = tuple(argv[1:])
        self._description: str = description
        self._sink: DiagnosticSink = sink if sink is not None else _default_sink()
        self._settings: ParserSettings = (
            settings if settings is not None else load_settings()
        )
        self._registry: DeclarationRegistry = DeclarationRegistry()
        self._state: ParseState = ParseState()
        self._last_error: CmdArgsError | None = None

        self._registry.add(HELP_PARAMETER, ParameterKind.FLAG)

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def declare_flag(
        self,
        short_name: str,
        long_name: str,
        required: bool = False,
        description: str = "",
    ) -> bool:
        """Declare a boolean flag.  ``False`` (with a diagnostic) on conflict."""
        try:
            self._registry.declare_flag(short_name, long_name, required, description)
        except DeclarationConflictError as exc:
            self._report_conflict(exc)
            return False
        return True

    def declare_option(
        self,
        short_name: str,
        long_name: str,
        required: bool = False,
        description: str = "",
    ) -> bool:
        """Declare a value-bearing option.  ``False`` (with a diagnostic) on conflict."""
        try:
            self._registry.declare_option(short_name, long_name, required, description)
        except DeclarationConflictError as exc:
            self._report_conflict(exc)
            return False
        return True

    def _report_conflict(self, exc: DeclarationConflictError) -> None:
        logger.debug("declaration rejected: %s", exc)
        self._last_error = exc
        self._sink.emit(format_conflict(exc, self._registry))

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse_args(self) -> bool:
        """Parse the captured argv.  ``True`` on success or when help was shown."""
        return self.parse().ok

    def parse(self, tokens: Sequence[str] | None = None) -> ParseResult:
        """Run one pass and return its structured outcome.

        *tokens* replaces the captured argv for this pass; it must not
        include a program name.
        """
        args = self._args if tokens is None else tuple(tokens)
        engine = ParseEngine(
            self._registry,
            enforce_required=self._settings.enforce_required,
        )
        self._last_error = None
        try:
            self._state = engine.parse(args)
        except ParseError as exc:
            self._state = exc.state if exc.state is not None else ParseState()
            self._last_error = exc
            self._sink.emit(format_error(exc))
            return ParseResult(ok=False, error=exc)

        if self._state.help_requested:
            self._sink.emit(self.help_text())
            return ParseResult(ok=True, help_requested=True)
        return ParseResult(ok=True)

    def help_text(self) -> str:
        return format_help(self._description, self._registry)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_flag(self, short_name: str, long_name: str) -> bool:
        key = _identity(short_name, long_name)
        return key is not None and self._state.has_flag(key)

    def has_option(self, short_name: str, long_name: str) -> bool:
        key = _identity(short_name, long_name)
        return key is not None and self._state.has_option(key)

    def get_option_value(self, short_name: str, long_name: str) -> str | None:
        """Value exactly as typed on the command line, or ``None``."""
        key = _identity(short_name, long_name)
        if key is None:
            return None
        return self._state.get_option(key)

    @property
    def help_requested(self) -> bool:
        return self._state.help_requested

    @property
    def last_error(self) -> CmdArgsError | None:
        """Error from the most recent declaration or parse, if it failed."""
        return self._last_error

    @property
    def flags(self) -> tuple[Parameter, ...]:
        """Flags matched in the most recent pass."""
        return self._state.flags

    @property
    def options(self) -> Mapping[Parameter, str]:
        """Option values matched in the most recent pass."""
        return self._state.options

    @property
    def registry(self) -> DeclarationRegistry:
        return self._registry

    @property
    def args(self) -> tuple[str, ...]:
        """Captured argv without the program name."""
        return self._args


def _identity(short_name: str, long_name: str) -> Parameter | None:
    """Build the ``(short, long)`` lookup key; ``None`` if it cannot exist."""
    try:
        return Parameter(short_name, long_name)
    except ValueError:
        return None
