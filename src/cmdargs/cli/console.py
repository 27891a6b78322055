"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so that the parser's
default diagnostic sink keeps working, as plain ``print`` to stderr,
when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from cmdargs.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object, verbatim: bool = False) -> None:
		"""Render with Rich when available, else plain stderr print.

		With *verbatim*, Rich prints the text unchanged: no markup, emoji
		codes or highlighting, and no hard wrapping at the console width.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		if verbatim:
			rich_console.print(
				*objects,
				markup=False,
				emoji=False,
				highlight=False,
				soft_wrap=True,
			)
			return
		rich_console.print(*objects, highlight=False)


console = _ConsoleProxy()


class ConsoleSink:
	"""Diagnostic sink that writes every message to :data:`console`.

	Messages are printed verbatim: parameter descriptions and offending
	tokens are user text and may contain square brackets or ``:emoji:``
	codes, and help lines must not be wrapped.
	"""

	def emit(self, message: str) -> None:
		console.print(message, verbatim=True)
