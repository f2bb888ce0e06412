"""CLI console helpers with optional Rich support.

Rich is imported lazily so that plain output (``--help``,
``--version``, error reports) keeps working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from cmdline_utils.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def load_rich_text_class() -> type[Any]:
	"""Return ``rich.text.Text`` class or raise ``EnvironmentError``."""
	try:
		from rich.text import Text
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Text


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback.

	Keyword options are forwarded to ``Console.print`` and ignored by
	the plain fallback.
	"""

	def __init__(self, *, stderr: bool = True) -> None:
		self.stderr: bool = stderr

	def print(self, *objects: object, **options: Any) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self.stderr)
		except EnvironmentError:
			print(*objects, file=sys.stderr if self.stderr else sys.stdout)
			return
		rich_console.print(*objects, **options)


console = ConsoleProxy()
