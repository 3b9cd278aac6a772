"""Core listing service — orchestrates the init → install → ls pipeline.

This service delegates every subprocess call to a
:class:`~npls.core.protocols.CommandRunner` injected at construction
time.  It is responsible for:

* Issuing the three subcommands strictly in order.
* Choosing the stream routing of each subcommand.
* Formatting the captured listing.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
* The first failing subcommand aborts the pipeline; nothing is retried.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from npls.core.formatter import format_listing
from npls.core.models import StreamMode, StreamRouting
from npls.core.protocols import CommandRunner
from npls.exceptions import UsageError
from npls.utils.constants import INIT_ARGS, INSTALL_ARGS

_INIT_ROUTING = StreamRouting()
_INSTALL_ROUTING = StreamRouting(stderr=StreamMode.INHERIT)
_LIST_ROUTING = StreamRouting(stdout=StreamMode.PIPE)


class ListingService:
    """Stateless service that produces a dependency listing.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`CommandRunner` protocol, bound
        to the scratch project directory.
    """

    def __init__(self, runner: CommandRunner) -> None:
        self._runner: CommandRunner = runner

    def list_dependencies(
        self,
        packages: Sequence[str],
        list_args: Sequence[str],
        workspace_path: str | Path,
    ) -> str:
        """Install *packages* and return the formatted ``ls`` output.

        Parameters
        ----------
        packages:
            Package references handed to ``install`` in order.
        list_args:
            Extra arguments forwarded verbatim to ``ls``.
        workspace_path:
            Directory the runner operates in; masked in the output.

        Raises
        ------
        UsageError
            When *packages* is empty.
        SubprocessFailure
            When any subcommand exits with a non-zero code.
        SpawnError
            When the package manager cannot be started.
        """
        if not packages:
            raise UsageError("At least one package is required.")

        logger.info("Initialising scratch project")
        self._runner.run("init", INIT_ARGS, _INIT_ROUTING)

        logger.info("Installing {}", " ".join(packages))
        self._runner.run("install", (*INSTALL_ARGS, *packages), _INSTALL_ROUTING)

        logger.info("Listing dependencies")
        result = self._runner.run("ls", tuple(list_args), _LIST_ROUTING)

        return format_listing(result.stdout, workspace_path)
