"""Custom exception hierarchy for npls.

All exceptions that cross layer boundaries must inherit from
:class:`NplsError`.  Raw OS and subprocess exceptions must NEVER
propagate beyond the infrastructure layer — they must be caught and
re-raised as a typed subclass defined here.

Hierarchy
---------
NplsError
├── UsageError
├── DependencyMissingError
├── WorkspaceError
├── SpawnError
└── SubprocessFailure
"""

from __future__ import annotations


class NplsError(Exception):
    """Base exception for all npls errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation ------------------------------------------------------------

class UsageError(NplsError):
    """Raised when the tool is invoked without anything to install."""


# --- Runtime environment -------------------------------------------------

class DependencyMissingError(NplsError):
    """Raised when an optional runtime library is not installed."""


# --- Scratch directory -----------------------------------------------------

class WorkspaceError(NplsError):
    """Raised when the scratch project directory cannot be created."""


# --- Package manager -------------------------------------------------------

class SpawnError(NplsError):
    """Raised when the package manager executable cannot be started.

    The message is the untouched text of the underlying ``OSError``,
    which stays reachable as ``__cause__``.
    """


class SubprocessFailure(NplsError):
    """Raised when a package manager subcommand exits with a non-zero code."""

    def __init__(
        self,
        command: str,
        exit_code: int,
        *,
        program: str = "npm",
        hint: str | None = None,
    ) -> None:
        super().__init__(f"{program} {command} exited with code {exit_code}", hint=hint)
        self.command: str = command
        """Subcommand that failed (``init``, ``install`` or ``ls``)."""

        self.exit_code: int = exit_code
        """Exit code reported by the child process."""
