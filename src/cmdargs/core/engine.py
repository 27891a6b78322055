"""Core parse engine — matches argv tokens against a registry.

The engine reads the registry and never mutates it.  Every call to
:meth:`ParseEngine.parse` starts from a fresh :class:`ParseState`.

Guarantees
----------
* Single pass, left to right; the first failure ends the pass.
* Only :class:`~cmdargs.exceptions.ParseError` subclasses escape, each
  carrying the partially filled state on ``exc.state``.
* No rollback: anything matched before the failing token (or the
  failing character inside a bundle) stays matched.
* Option values are stored verbatim.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cmdargs.core.models import Parameter, ParseState
from cmdargs.core.registry import DeclarationRegistry
from cmdargs.core.tokens import TokenKind, classify_token, looks_like_parameter
from cmdargs.exceptions import (
    DuplicateUseError,
    InvalidBundleError,
    MalformedTokenError,
    MissingRequiredError,
    MissingValueError,
    ParseError,
    UndeclaredParameterError,
)

logger = logging.getLogger(__name__)


class ParseEngine:
    """Stateless matcher over a :class:`DeclarationRegistry`.

    Parameters
    ----------
    registry:
        Declarations to match against.  Consulted read-only.
    enforce_required:
        When ``True``, a pass that consumes every token without hitting
        ``--help`` fails if any required parameter was not supplied.
    """

    def __init__(
        self,
        registry: DeclarationRegistry,
        *,
        enforce_required: bool = False,
    ) -> None:
        self._registry: DeclarationRegistry = registry
        self._enforce_required: bool = enforce_required

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, tokens: Sequence[str]) -> ParseState:
        """Run one pass over *tokens* (argv without the program name).

        Raises
        ------
        ParseError
            On the first unrecoverable token, or for missing required
            parameters when enforcement is on.
        """
        state = ParseState()
        try:
            self._consume(tokens, state)
            if self._enforce_required and not state.help_requested:
                self._check_required(state)
        except ParseError as exc:
            exc.state = state
            logger.debug("parse failed: %s", exc)
            raise
        logger.debug("parse succeeded: %r", state)
        return state

    # ------------------------------------------------------------------
    # Token loop
    # ------------------------------------------------------------------

    def _consume(self, tokens: Sequence[str], state: ParseState) -> None:
        i = 0
        while i < len(tokens):
            token = tokens[i]
            kind = classify_token(token)
            logger.debug("token %d %r -> %s", i, token, kind.value)

            if kind is TokenKind.HELP:
                state.help_requested = True
                return
            if kind is TokenKind.LONG:
                i += self._match_long(tokens, i, state)
            elif kind is TokenKind.SHORT_BUNDLE:
                self._match_bundle(token, state)
            elif kind is TokenKind.SHORT:
                i += self._match_short(tokens, i, state)
            else:
                raise MalformedTokenError(
                    f"Unknown argument: {token}", token=token,
                )
            i += 1

    def _match_long(
        self,
        tokens: Sequence[str],
        i: int,
        state: ParseState,
    ) -> int:
        """Handle ``--name``; return how many extra tokens were consumed."""
        token = tokens[i]
        long_name = token[2:]

        option = self._registry.option_by_long(long_name)
        if option is not None:
            self._set_option(option, tokens, i, state)
            return 1

        flag = self._registry.flag_by_long(long_name)
        if flag is not None:
            self._add_flag(flag, token, state)
            return 0

        raise UndeclaredParameterError(
            f"Unknown parameter: --{long_name}", token=token,
        )

    def _match_short(
        self,
        tokens: Sequence[str],
        i: int,
        state: ParseState,
    ) -> int:
        """Handle ``-x``; return how many extra tokens were consumed."""
        token = tokens[i]
        short_name = token[1]

        option = self._registry.option_by_short(short_name)
        if option is not None:
            self._set_option(option, tokens, i, state)
            return 1

        flag = self._registry.flag_by_short(short_name)
        if flag is not None:
            self._add_flag(flag, token, state)
            return 0

        raise UndeclaredParameterError(
            f"Unknown parameter: -{short_name}", token=token,
        )

    def _match_bundle(self, token: str, state: ParseState) -> None:
        """Handle ``-abc``: every character must be an unmatched flag."""
        for short_name in token[1:]:
            if self._registry.is_option_short(short_name):
                raise InvalidBundleError(
                    "Cannot bundle options. Each option needs a separate "
                    f"usage. Option: {short_name} bundled in phrase: {token}",
                    token=token,
                )
            flag = self._registry.flag_by_short(short_name)
            if flag is None:
                raise UndeclaredParameterError(
                    f"Unknown flag: {short_name} in phrase: {token}",
                    token=token,
                )
            self._add_flag(flag, token, state)

    # ------------------------------------------------------------------
    # Write-once helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _add_flag(flag: Parameter, token: str, state: ParseState) -> None:
        if state.has_flag(flag):
            raise DuplicateUseError(
                f"Flag -{flag.short_name}/--{flag.long_name} used more than once",
                token=token,
            )
        state.add_flag(flag)

    @staticmethod
    def _set_option(
        option: Parameter,
        tokens: Sequence[str],
        i: int,
        state: ParseState,
    ) -> None:
        token = tokens[i]
        if i + 1 >= len(tokens) or looks_like_parameter(tokens[i + 1]):
            raise MissingValueError(
                f"Option: {token} requires a value",
                token=token,
                hint=f"Pass the value as the next argument: {token} <value>",
            )
        if state.has_option(option):
            raise DuplicateUseError(
                f"Option -{option.short_name}/--{option.long_name} "
                "used more than once",
                token=token,
            )
        state.set_option(option, tokens[i + 1])

    def _check_required(self, state: ParseState) -> None:
        missing = tuple(
            param
            for param in self._registry.required_parameters()
            if not (state.has_flag(param) or state.has_option(param))
        )
        if missing:
            raise MissingRequiredError(missing)
