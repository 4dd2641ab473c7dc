"""CLI console helpers with optional Rich support.

Reports go to stdout and diagnostics to stderr.  Rich is imported lazily
so bootstrap paths (``--help``, ``--version``) and JSON output keep
working when it is not installed; without Rich, style tags are stripped
and text is printed plainly.
"""

from __future__ import annotations

import re
import sys
from typing import Any, TextIO

from ibc_xfer.exceptions import EnvironmentError

_STYLE_TAG = re.compile(r"\[/?(?:bold|dim|red|green|yellow|cyan)(?: (?:bold|dim|red|green|yellow|cyan))*\]")


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
	return console_class(stderr=stderr, highlight=False)


def escape(text: str) -> str:
	"""Escape ``text`` so Rich does not read brackets in it as markup."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


def strip_markup(text: str) -> str:
	"""Remove the style tags this package emits."""
	return _STYLE_TAG.sub("", text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def _file(self) -> TextIO:
		return sys.stderr if self._stderr else sys.stdout

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			plain = [strip_markup(o) if isinstance(o, str) else o for o in objects]
			print(*plain, file=self._file())
			return
		rich_console.print(*objects, soft_wrap=True)

	def print_raw(self, text: str) -> None:
		"""Write ``text`` verbatim, bypassing Rich (used for JSON)."""
		print(text, file=self._file())


console = _ConsoleProxy(stderr=False)
"""Report channel (stdout)."""

err_console = _ConsoleProxy(stderr=True)
"""Diagnostics channel (stderr)."""
