"""Custom exception hierarchy for cmdargs.

The core layer raises these; :class:`~cmdargs.parser.CmdArgParser` is
the error boundary that turns them into a boolean outcome plus a
diagnostic message.  Nothing outside this hierarchy should escape the
core.

Hierarchy
---------
CmdArgsError
├── DeclarationConflictError
├── ConfigurationError
├── ParseError
│   ├── UndeclaredParameterError
│   ├── InvalidBundleError
│   ├── MissingValueError
│   ├── DuplicateUseError
│   ├── MalformedTokenError
│   └── MissingRequiredError
└── EnvironmentError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cmdargs.core.models import Parameter, ParseState


class CmdArgsError(Exception):
    """Base exception for all cmdargs errors.

    Every failure reported to a diagnostic sink maps to a subclass of
    this exception, so callers that prefer exceptions over booleans can
    catch a single type.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Declaration -----------------------------------------------------------

class DeclarationConflictError(CmdArgsError):
    """Raised when a short or long name is already declared."""

    def __init__(
        self,
        short_name: str,
        long_name: str,
        collection: str,
    ) -> None:
        super().__init__(
            f"Unable to declare: -{short_name}, --{long_name}. "
            f"Already declared in {collection}."
        )
        self.short_name: str = short_name
        self.long_name: str = long_name
        self.collection: str = collection
        """Either ``"flags"`` or ``"options"``."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(CmdArgsError):
    """Raised when settings loaded from the environment are invalid."""


# --- Parsing ---------------------------------------------------------------

class ParseError(CmdArgsError):
    """Base for every failure that aborts a parse pass.

    ``token`` is the offending argv entry.  ``state`` is filled in by the
    engine just before the error leaves it, so that whatever was matched
    before the failure stays queryable.
    """

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.token: str | None = token
        self.state: ParseState | None = None


class UndeclaredParameterError(ParseError):
    """Raised when a token names a flag or option that was never declared."""


class InvalidBundleError(ParseError):
    """Raised when an option's short name appears inside a flag bundle."""


class MissingValueError(ParseError):
    """Raised when an option is last or followed by a dash-leading token."""


class DuplicateUseError(ParseError):
    """Raised when a flag or option is matched twice in one pass."""


class MalformedTokenError(ParseError):
    """Raised for a bare word, lone ``-`` or lone ``--``."""


class MissingRequiredError(ParseError):
    """Raised when required-parameter enforcement is on and some are absent."""

    def __init__(self, missing: tuple[Parameter, ...]) -> None:
        names = ", ".join(f"-{p.short_name}/--{p.long_name}" for p in missing)
        super().__init__(f"Missing required parameters: {names}")
        self.missing: tuple[Parameter, ...] = missing


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CmdArgsError):
    """Raised when an optional runtime dependency is not available."""
