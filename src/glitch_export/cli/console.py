"""CLI console helpers with optional Rich support.

Two proxies are exported: :data:`console` writes to stdout and
:data:`err_console` to stderr.  Rich is imported lazily on every call so
bootstrap paths (``--help``, ``--version``) and usage output remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from glitch_export.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout or stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	def print(self, *objects: object, **options: Any) -> None:
		"""Render with Rich when available, else plain print.

		*options* are forwarded to ``rich.console.Console.print`` and
		ignored by the plain fallback.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(*objects, **options)

	def raw(self, text: str) -> None:
		"""Print *text* verbatim: no markup, emoji codes, highlighting or wrapping."""
		self.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)
