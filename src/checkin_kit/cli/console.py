"""CLI console helpers with optional Rich support.

This module avoids module-level imports of optional UI dependencies so
bootstrap paths (``--help``, ``--version``, ``code``) keep working even
when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from checkin_kit.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` or raise ``MissingDependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance (stderr by default)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback.

    With *raw* set, Rich neither wraps lines at the console width nor
    interprets markup, so results survive being piped.
    """

    def __init__(self, *, stderr: bool, raw: bool = False) -> None:
        self._stderr = stderr
        self._raw = raw

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except MissingDependencyError:
            print(*objects, file=sys.stderr if self._stderr else sys.stdout)
            return
        if self._raw:
            rich_console.print(*objects, soft_wrap=True, markup=False, highlight=False)
        else:
            rich_console.print(*objects)


console = _ConsoleProxy(stderr=True)
"""Diagnostics, prompts and errors."""

out = _ConsoleProxy(stderr=False, raw=True)
"""Command results meant for piping (codes, hashes)."""
