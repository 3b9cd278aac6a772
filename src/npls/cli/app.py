"""CLI application entry point for npls.

This module is the **sole error boundary** for the entire application.
It catches :class:`~npls.exceptions.NplsError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering a one-line message on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* The dependency listing is the only thing written to stdout.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from loguru import logger

from npls.cli import exit_codes
from npls.cli.console import console
from npls.exceptions import NplsError
from npls.utils.constants import PACKAGE_MANAGER, PATH_PLACEHOLDER
from npls.version import __version__

PASSTHROUGH_SEPARATOR: str = "--"

_LOG_FORMAT: str = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def split_passthrough(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split *argv* at the first ``--``.

    Returns the arguments before the separator and the arguments after
    it.  The second list is empty when there is no separator.
    """
    args = list(argv)
    if PASSTHROUGH_SEPARATOR not in args:
        return args, []
    index = args.index(PASSTHROUGH_SEPARATOR)
    return args[:index], args[index + 1:]


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Only the part of the command line before ``--`` is parsed here:
    * ``npls <package>... [-- <npm ls args>...]``
    * ``npls --version``
    """
    parser = argparse.ArgumentParser(
        prog="npls",
        usage="%(prog)s [-h] [-V] [-v] <package>... [-- <npm ls args>...]",
        description=(
            "Install packages into a throwaway project and print the "
            f"output of `{PACKAGE_MANAGER} ls`."
        ),
        epilog=(
            "Arguments after `--` are passed to "
            f"`{PACKAGE_MANAGER} ls` unchanged, e.g. `npls react -- --json`. "
            f"The scratch directory path is shown as {PATH_PLACEHOLDER}."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug).",
    )
    parser.add_argument(
        "packages",
        nargs="*",
        metavar="package",
        help="Package reference to install (name, name@version, @scope/name).",
    )
    return parser


def _configure_logging(verbose: int) -> None:
    """Route loguru records to stderr at a level chosen by *verbose*."""
    logger.remove()

    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:
        level = "DEBUG"

    logger.add(sys.stderr, level=level, format=_LOG_FORMAT)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_listing(packages: list[str], list_args: list[str]) -> int:
    """Produce and print the dependency listing.

    Flow:
    1. Create the scratch workspace (removed again on every exit path).
    2. Bind a subprocess runner to it.
    3. Run init, install and ls through the listing service.
    4. Print the formatted listing on stdout.
    """
    from npls.core.listing_service import ListingService
    from npls.infra.subprocess_runner import SubprocessRunner
    from npls.infra.workspace import Workspace

    with Workspace.create() as workspace:
        runner = SubprocessRunner(workspace.path, executable=PACKAGE_MANAGER)
        service = ListingService(runner)
        output = service.list_dependencies(packages, list_args, workspace.path)

    print(output)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the npls CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    head, list_args = split_passthrough(sys.argv[1:] if argv is None else argv)

    parser = _build_parser()
    args = parser.parse_intermixed_args(head)

    if not args.packages:
        parser.print_help(sys.stderr)
        return exit_codes.GENERAL_ERROR

    _configure_logging(args.verbose)
    return _handle_listing(args.packages, list_args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except NplsError as exc:
        console.print(f"Error: {exc}", style="bold red")
        if exc.hint:
            console.print(f"Hint: {exc.hint}", style="yellow")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
