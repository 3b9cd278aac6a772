"""Allow ``python -m npls`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m npls`` behaves identically to the ``npls`` console
script.
"""

from __future__ import annotations

from npls.cli.app import cli

if __name__ == "__main__":
    cli()
