"""Exit-code constants used by the demo program.

The library itself never exits; these only exist for the CLI layer so
every exit path uses a well-known, tested value.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Arguments parsed (or help shown) without error."""

GENERAL_ERROR: int = 1
"""A known CmdArgsError escaped to the top-level boundary."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

USAGE_ERROR: int = 64
"""The argument vector was rejected.  Follows BSD ``EX_USAGE``."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
