"""Core layer — declarations, token matching, and text formatting.

Rules
-----
* No ``print()`` calls.
* No filesystem, network or environment access.
* No imports from ``cli`` or ``config``.
* Failures are raised as :class:`~cmdargs.exceptions.CmdArgsError`
  subclasses; turning them into booleans is the facade's job.
"""

from cmdargs.core.engine import ParseEngine
from cmdargs.core.models import Parameter, ParameterKind, ParseResult, ParseState
from cmdargs.core.protocols import CollectingSink, DiagnosticSink
from cmdargs.core.registry import HELP_PARAMETER, DeclarationRegistry
from cmdargs.core.tokens import TokenKind, classify_token

__all__: list[str] = [
    "HELP_PARAMETER",
    "CollectingSink",
    "DeclarationRegistry",
    "DiagnosticSink",
    "Parameter",
    "ParameterKind",
    "ParseEngine",
    "ParseResult",
    "ParseState",
    "TokenKind",
    "classify_token",
]
