"""Fixed policy values shared across layers.

None of these are configurable at runtime; they describe how the
scratch project is set up and how its listing is presented.
"""

from __future__ import annotations

PACKAGE_MANAGER: str = "npm"
"""Executable invoked for every subcommand."""

WORKSPACE_PREFIX: str = "npls-"
"""Directory name prefix; the process id is appended."""

PATH_PLACEHOLDER: str = "<tmpdir>"
"""Token shown in place of the scratch directory path."""

INIT_ARGS: tuple[str, ...] = ("-y",)
"""Accept every ``npm init`` default without prompting."""

INSTALL_ARGS: tuple[str, ...] = ("--silent", "--no-audit", "--no-package-lock")
"""Keep ``npm install`` quiet and free of side files."""
