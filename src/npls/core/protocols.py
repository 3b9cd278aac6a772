"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from npls.core.models import InvocationResult, StreamRouting


class CommandRunner(Protocol):
    """Contract for package manager backends.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def run(
        self,
        command: str,
        args: Sequence[str] = (),
        routing: StreamRouting = StreamRouting(),
    ) -> InvocationResult:
        """Run one package manager subcommand to completion.

        Parameters
        ----------
        command:
            Subcommand name, e.g. ``"install"``.
        args:
            Arguments appended after the subcommand, in order.
        routing:
            Wiring of the child's standard streams.

        Raises
        ------
        SubprocessFailure
            When the child exits with a non-zero code.
        SpawnError
            When the executable cannot be started at all.
        """
        ...  # pragma: no cover
