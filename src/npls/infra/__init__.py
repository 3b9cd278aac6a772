"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system: the scratch
directory and the package manager processes.  Every raw ``OSError``
must be caught here and re-raised as a
:class:`~npls.exceptions.NplsError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from npls.infra.subprocess_runner import SubprocessRunner, resolve_executable
from npls.infra.workspace import Workspace, workspace_path_for

__all__: list[str] = [
    "SubprocessRunner",
    "Workspace",
    "resolve_executable",
    "workspace_path_for",
]
