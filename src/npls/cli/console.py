"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so
bootstrap paths (``--help``, ``--version``) and error reporting remain
functional even when Rich is not installed.

Only diagnostics go through here, and always to stderr.  The dependency
listing itself is written to stdout by :mod:`npls.cli.app`.
"""

from __future__ import annotations

import sys
from typing import Any

from npls.exceptions import DependencyMissingError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``DependencyMissingError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise DependencyMissingError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr.

    Lines are never wrapped at the terminal width, so a message always
    reaches stderr exactly as given.
    """
    console_class = _load_rich_console_class()
    return console_class(stderr=True, soft_wrap=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain stderr fallback."""

    def print(self, text: str = "", *, style: str | None = None) -> None:
        """Render *text* on stderr, styled when Rich is available.

        Markup is never interpreted: messages come from subprocess
        errors and may contain square brackets.
        """
        try:
            rich_console = get_rich_console()
        except DependencyMissingError:
            print(text, file=sys.stderr)
            return
        rich_console.print(
            text, style=style, markup=False, highlight=False, soft_wrap=True,
        )


console = _ConsoleProxy()
