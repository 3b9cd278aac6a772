"""Infrastructure: the scratch project directory.

One :class:`Workspace` exists per process.  Its path is derived from the
system temp root and the process id, so concurrent invocations never
share a directory.  Callers acquire it with ``with`` so that removal
happens on every exit path::

    with Workspace.create() as workspace:
        ...

Rules
-----
* A leftover directory at the same path (e.g. from a crashed run whose
  pid was reused) is removed before creation without asking.
* Removal is ``rm -rf``: recursive, errors ignored, idempotent.
* A hard kill of the process leaves the directory behind.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType

from loguru import logger

from npls.exceptions import WorkspaceError
from npls.utils.constants import WORKSPACE_PREFIX


def workspace_path_for(pid: int, root: str | Path | None = None) -> Path:
    """Return the unresolved workspace path for *pid* under *root*."""
    base = Path(root) if root is not None else Path(tempfile.gettempdir())
    return base / f"{WORKSPACE_PREFIX}{pid}"


@dataclass(frozen=True, slots=True)
class Workspace:
    """A created scratch directory.

    Attributes
    ----------
    path : Path
        Absolute, symlink-resolved location of the directory.
    """

    path: Path

    @classmethod
    def create(cls, root: str | Path | None = None) -> Workspace:
        """Create a fresh workspace for the current process.

        Parameters
        ----------
        root:
            Parent directory.  Defaults to :func:`tempfile.gettempdir`.

        Raises
        ------
        WorkspaceError
            When the directory cannot be created.
        """
        candidate = workspace_path_for(os.getpid(), root)

        if candidate.exists():
            logger.debug("Removing stale workspace {}", candidate)
            shutil.rmtree(candidate, ignore_errors=True)

        try:
            candidate.mkdir(parents=True)
        except OSError as exc:
            raise WorkspaceError(
                f"Could not create scratch directory {candidate}: {exc}",
                hint="Check that the temporary directory is writable.",
            ) from exc

        resolved = candidate.resolve()
        logger.debug("Created workspace {}", resolved)
        return cls(path=resolved)

    def destroy(self) -> None:
        """Remove the directory and everything in it (idempotent)."""
        shutil.rmtree(self.path, ignore_errors=True)
        logger.debug("Removed workspace {}", self.path)

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> Workspace:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.destroy()
