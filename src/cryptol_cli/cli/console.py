"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from cryptol_cli.exceptions import EnvironmentError


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
	return console_class(stderr=True, highlight=False)


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

	def error(self, message: str, hint: str | None = None) -> None:
		"""Render an error line and an optional hint line."""
		self._labelled("bold red", "Error:", message)
		if hint:
			self._labelled("yellow", "Hint:", hint)

	def warning(self, message: str) -> None:
		"""Render a non-fatal problem."""
		self._labelled("yellow", "Warning:", message)

	def _labelled(self, style: str, label: str, message: str) -> None:
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(f"{label} {message}", file=sys.stderr)
			return
		from rich.markup import escape

		rich_console.print(f"[{style}]{label}[/{style}] {escape(message)}")


console = _ConsoleProxy()
