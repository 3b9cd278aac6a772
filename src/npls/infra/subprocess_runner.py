"""Subprocess-backed implementation of :class:`~npls.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that starts child
processes.  OS-level spawn errors are caught here and re-raised as
:class:`~npls.exceptions.SpawnError`; non-zero exits become
:class:`~npls.exceptions.SubprocessFailure`.
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from loguru import logger

from npls.core.models import InvocationResult, StreamMode, StreamRouting
from npls.exceptions import SpawnError, SubprocessFailure
from npls.utils.constants import PACKAGE_MANAGER

_STREAM_TARGETS: dict[StreamMode, Any] = {
    StreamMode.IGNORE: subprocess.DEVNULL,
    StreamMode.INHERIT: None,
    StreamMode.PIPE: subprocess.PIPE,
}


def resolve_executable(name: str) -> str:
    """Locate *name* on PATH, falling back to the bare name.

    On Windows this finds ``npm.cmd``, which :mod:`subprocess` would not
    pick up from ``npm`` alone.  When nothing is found the bare name is
    returned so that the spawn fails with the OS error.
    """
    found = shutil.which(name)
    return found if found is not None else name


class SubprocessRunner:
    """Concrete :class:`CommandRunner` that blocks until each child exits.

    This class satisfies the :class:`~npls.core.protocols.CommandRunner`
    protocol structurally — no explicit inheritance required.

    Parameters
    ----------
    cwd:
        Working directory for every child process.
    executable:
        Package manager to invoke.  Resolved once via PATH.
    """

    def __init__(self, cwd: str | Path, executable: str = PACKAGE_MANAGER) -> None:
        self._cwd: Path = Path(cwd)
        self._program: str = Path(executable).stem or executable
        self._executable: str = resolve_executable(executable)

    def run(
        self,
        command: str,
        args: Sequence[str] = (),
        routing: StreamRouting = StreamRouting(),
    ) -> InvocationResult:
        """Run ``<executable> <command> <args...>`` to completion.

        Raises
        ------
        SubprocessFailure
            When the child exits with a non-zero code.
        SpawnError
            When the executable cannot be started.
        """
        argv = [self._executable, command, *args]
        logger.debug("Running {} in {}", argv, self._cwd)

        try:
            completed = subprocess.run(
                argv,
                cwd=self._cwd,
                stdin=_STREAM_TARGETS[routing.stdin],
                stdout=_STREAM_TARGETS[routing.stdout],
                stderr=_STREAM_TARGETS[routing.stderr],
                check=False,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            raise SpawnError(
                str(exc),
                hint=f"Make sure {self._program} is installed and on PATH.",
            ) from exc

        logger.debug("{} {} exited with code {}", self._program, command, completed.returncode)
        if completed.returncode != 0:
            raise SubprocessFailure(command, completed.returncode, program=self._program)

        stdout = completed.stdout if routing.stdout is StreamMode.PIPE else ""
        return InvocationResult(
            command=command,
            exit_code=completed.returncode,
            stdout=stdout or "",
        )
