"""Protocols (interfaces) consumed by the parser facade.

Core code depends only on these contracts.  The CLI layer supplies the
console-backed implementation; hosts may supply their own.
"""

from __future__ import annotations

from typing import Protocol


class DiagnosticSink(Protocol):
    """Destination for help text and failure diagnostics.

    Any object with a matching :meth:`emit` satisfies this protocol
    structurally (no explicit inheritance required).
    """

    def emit(self, message: str) -> None:
        """Deliver one complete, possibly multi-line, message."""
        ...  # pragma: no cover


class CollectingSink:
    """In-memory sink that keeps every emitted message, in order."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def emit(self, message: str) -> None:
        self.messages.append(message)

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def clear(self) -> None:
        self.messages.clear()
