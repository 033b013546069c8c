"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``--help``, ``--version`` and plain
searches keep working when it is not installed.  Everything rendered
here goes to stderr; search results are written to stdout by the app.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from minigrep.exceptions import EnvironmentError


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
	return console_class(stderr=True, soft_wrap=True)


def escape(text: str) -> str:
	"""Escape Rich markup in user-controlled *text*.

	Without Rich nothing is interpreted as markup, so the text is
	returned as is.
	"""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


def get_log_handler() -> logging.Handler:
	"""Return a stderr log handler, Rich-rendered when available."""
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(
			logging.Formatter("%(levelname)s %(name)s: %(message)s"),
		)
		return handler
	return RichHandler(console=get_rich_console(), show_path=False)


class _ConsoleProxy:
	"""Minimal stderr printer with Rich fallback."""

	def print_message(
		self,
		label: str,
		message: str = "",
		*,
		style: str = "bold red",
	) -> None:
		"""Print ``label message`` to stderr, styling only *label*.

		Both parts are treated as literal text, never as markup.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(" ".join(part for part in (label, message) if part), file=sys.stderr)
			return
		rendered = f"[{style}]{escape(label)}[/{style}]"
		if message:
			rendered = f"{rendered} {escape(message)}"
		rich_console.print(rendered)


console = _ConsoleProxy()
