"""cmdargs — declare short/long flags and options, then parse argv.

A small declaration registry plus a strict, single-pass parse engine.
"""

from cmdargs.core.models import Parameter, ParameterKind, ParseResult
from cmdargs.parser import CmdArgParser
from cmdargs.version import __version__

__all__: list[str] = [
    "CmdArgParser",
    "Parameter",
    "ParameterKind",
    "ParseResult",
    "__version__",
]
