"""Domain models for npls.

All models are **frozen** dataclasses or enums — immutable value
objects with no behaviour beyond data access.  They carry zero I/O and
no dependency on the :mod:`subprocess` module; the infrastructure layer
maps them onto concrete stream handles.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Stream routing
# ---------------------------------------------------------------------------

class StreamMode(enum.Enum):
    """How one standard stream of a child process is wired."""

    IGNORE = "ignore"
    """Connected to the null device."""

    INHERIT = "inherit"
    """Shared with the parent process."""

    PIPE = "pipe"
    """Captured by the parent.  Only meaningful for stdout."""


@dataclass(frozen=True, slots=True)
class StreamRouting:
    """Per-invocation routing of stdin, stdout and stderr."""

    stdin: StreamMode = StreamMode.IGNORE
    stdout: StreamMode = StreamMode.IGNORE
    stderr: StreamMode = StreamMode.IGNORE


# ---------------------------------------------------------------------------
# Invocation result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InvocationResult:
    """Outcome of a subcommand that exited successfully."""

    command: str
    """Subcommand name (e.g. ``install``)."""

    exit_code: int
    """Always ``0`` for results that reach the caller."""

    stdout: str
    """Captured standard output, or ``""`` when stdout was not piped."""
