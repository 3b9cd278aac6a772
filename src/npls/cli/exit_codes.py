"""Process exit statuses returned by :func:`npls.cli.app.main`.

argparse exits on its own for ``--help``/``--version`` (0) and for
unknown options (2); every other path returns one of these.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Listing printed.  ``--help`` and ``--version`` also end with 0."""

GENERAL_ERROR: int = 1
"""No packages given, or an NplsError was reported on stderr."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the error boundary."""
