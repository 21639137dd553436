"""The stderr channel for zkcli diagnostics.

Node data and listings are written to stdout by :mod:`zkcli.cli.output`;
everything meant for the operator goes through :data:`console` instead:
the ``Error:``/``Hint:`` lines rendered by the ``cli()`` boundary, and
``--stack`` tracebacks via :meth:`_ConsoleProxy.print_plain` (markup off,
since tracebacks and node paths may contain ``[...]``).

Rich is resolved on each call rather than at import, so a node command
still reports its errors as plain stderr lines when Rich is missing.
"""

from __future__ import annotations

import sys
from typing import Any

from zkcli.exceptions import EnvironmentError


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

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def print_plain(self, text: str) -> None:
		"""Write *text* verbatim, without markup interpretation."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(text, file=sys.stderr)
			return
		rich_console.print(text, markup=False, highlight=False)


console = _ConsoleProxy()
