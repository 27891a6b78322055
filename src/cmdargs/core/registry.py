"""Declaration registry — the set of recognised flags and options.

Flags and options live in two disjoint collections but share one name
space: a short or long name may be declared at most once across both.
Each parameter is indexed under its short and its long name so the
parse engine can resolve either form in constant time.

Listing order is declaration order.  That falls out of ``dict`` and is
not part of the contract; help output ordering is unspecified.
"""

from __future__ import annotations

import logging

from cmdargs.core.models import Parameter, ParameterKind
from cmdargs.exceptions import DeclarationConflictError

logger = logging.getLogger(__name__)

HELP_PARAMETER = Parameter("h", "help", False, "Display this help message")
"""Built-in flag registered by :class:`~cmdargs.parser.CmdArgParser`."""


class DeclarationRegistry:
    """Stores declared parameters and rejects conflicting names."""

    def __init__(self) -> None:
        self._flags_by_short: dict[str, Parameter] = {}
        self._flags_by_long: dict[str, Parameter] = {}
        self._options_by_short: dict[str, Parameter] = {}
        self._options_by_long: dict[str, Parameter] = {}

    # ------------------------------------------------------------------
    # Declaration
    # ------------------------------------------------------------------

    def declare_flag(
        self,
        short_name: str,
        long_name: str,
        required: bool = False,
        description: str = "",
    ) -> Parameter:
        """Register a flag.

        Raises
        ------
        DeclarationConflictError
            If either name is already used by a flag or an option.
        ValueError
            If either name is not a valid short/long name.
        """
        return self.add(
            Parameter(short_name, long_name, required, description),
            ParameterKind.FLAG,
        )

    def declare_option(
        self,
        short_name: str,
        long_name: str,
        required: bool = False,
        description: str = "",
    ) -> Parameter:
        """Register an option.  Same failure modes as :meth:`declare_flag`."""
        return self.add(
            Parameter(short_name, long_name, required, description),
            ParameterKind.OPTION,
        )

    def add(self, param: Parameter, kind: ParameterKind) -> Parameter:
        """Insert an already-built parameter into the *kind* collection."""
        self._check_available(param)
        if kind is ParameterKind.FLAG:
            self._flags_by_short[param.short_name] = param
            self._flags_by_long[param.long_name] = param
        else:
            self._options_by_short[param.short_name] = param
            self._options_by_long[param.long_name] = param
        logger.debug(
            "declared %s -%s/--%s", kind.value, param.short_name, param.long_name,
        )
        return param

    def _check_available(self, param: Parameter) -> None:
        if (
            param.short_name in self._flags_by_short
            or param.long_name in self._flags_by_long
        ):
            raise DeclarationConflictError(
                param.short_name, param.long_name, "flags",
            )
        if (
            param.short_name in self._options_by_short
            or param.long_name in self._options_by_long
        ):
            raise DeclarationConflictError(
                param.short_name, param.long_name, "options",
            )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def flag_by_short(self, short_name: str) -> Parameter | None:
        return self._flags_by_short.get(short_name)

    def flag_by_long(self, long_name: str) -> Parameter | None:
        return self._flags_by_long.get(long_name)

    def option_by_short(self, short_name: str) -> Parameter | None:
        return self._options_by_short.get(short_name)

    def option_by_long(self, long_name: str) -> Parameter | None:
        return self._options_by_long.get(long_name)

    def is_flag_short(self, short_name: str) -> bool:
        return short_name in self._flags_by_short

    def is_option_short(self, short_name: str) -> bool:
        return short_name in self._options_by_short

    @property
    def flags(self) -> tuple[Parameter, ...]:
        """Declared flags, in declaration order."""
        return tuple(self._flags_by_short.values())

    @property
    def options(self) -> tuple[Parameter, ...]:
        """Declared options, in declaration order."""
        return tuple(self._options_by_short.values())

    def required_parameters(self) -> tuple[Parameter, ...]:
        """Every declared parameter with ``required=True``, options first."""
        return tuple(p for p in (*self.options, *self.flags) if p.required)

    def __contains__(self, name: object) -> bool:
        return (
            name in self._flags_by_short
            or name in self._flags_by_long
            or name in self._options_by_short
            or name in self._options_by_long
        )

    def __len__(self) -> int:
        return len(self._flags_by_short) + len(self._options_by_short)
