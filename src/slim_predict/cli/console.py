"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so
bootstrap paths (``-help``, ``-version``) remain functional even when
Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from slim_predict.exceptions import SlimPredictError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``SlimPredictError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise SlimPredictError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a non-wrapping Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, soft_wrap=True)


def escape_markup(text: str) -> str:
	"""Escape user-supplied text (paths, option values) for Rich markup."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except SlimPredictError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
