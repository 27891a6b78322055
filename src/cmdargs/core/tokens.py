"""Pure token classification.

Each argv entry falls into exactly one :class:`TokenKind`, checked in
this priority order:

1. **HELP** — exactly ``-h`` or ``--help``.
2. **LONG** — ``--`` prefix with at least one character after it.
3. **SHORT_BUNDLE** — ``-`` prefix with two or more characters after it.
4. **SHORT** — ``-`` prefix with exactly one non-dash character after it.
5. **BARE** — everything else, including a lone ``-`` or ``--``.
"""

from __future__ import annotations

import enum

HELP_TOKENS: frozenset[str] = frozenset({"-h", "--help"})


class TokenKind(enum.Enum):
    HELP = "help"
    LONG = "long"
    SHORT_BUNDLE = "short_bundle"
    SHORT = "short"
    BARE = "bare"


def classify_token(token: str) -> TokenKind:
    """Return the :class:`TokenKind` for a single argv entry."""
    if token in HELP_TOKENS:
        return TokenKind.HELP
    if token.startswith("--") and len(token) > 2:
        return TokenKind.LONG
    if token.startswith("-") and len(token) > 2:
        return TokenKind.SHORT_BUNDLE
    if token.startswith("-") and len(token) == 2 and token != "--":
        return TokenKind.SHORT
    return TokenKind.BARE


def looks_like_parameter(token: str) -> bool:
    """Whether *token* would be read as a flag/option rather than a value."""
    return token.startswith("-")
