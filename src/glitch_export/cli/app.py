"""CLI application entry point and command routing for glitch-project-export.

This module is the **sole error boundary** for the entire application.
It catches :class:`~glitch_export.exceptions.GlitchExportError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; all work is delegated to the command
  handlers, the core services and the infrastructure adapters.
* The :class:`~glitch_export.core.models.RunContext` is assembled here,
  once per invocation, and threaded into the handler.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from glitch_export.cli import exit_codes
from glitch_export.cli.console import err_console
from glitch_export.core.models import RunContext
from glitch_export.exceptions import GlitchExportError
from glitch_export.utils.constants import resolve_api_host
from glitch_export.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The command is a free-form positional so that an unknown command
    falls through to the usage text instead of an argparse error.
    """
    parser = argparse.ArgumentParser(
        prog="glitch-project-export",
        description="List, clone and update all Glitch projects of a user.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help="One of 'list', 'export' or 'update'.",
    )
    parser.add_argument(
        "-u",
        dest="username",
        metavar="username",
        nargs="?",
        default=None,
        const=None,
        help="Use the provided username to fetch the project list. "
        "A bare -u falls back to the prompt.",
    )
    return parser


# ---------------------------------------------------------------------------
# Context construction
# ---------------------------------------------------------------------------

def build_context(username: str | None, workdir: Path | None = None) -> RunContext:
    """Wire the concrete adapters into a :class:`RunContext`.

    Loads ``cache.json`` from *workdir* (default: the current directory).

    Raises
    ------
    CacheParseError
        If an existing cache file cannot be parsed.
    """
    from glitch_export.cli.console import console
    from glitch_export.cli.prompt import ask
    from glitch_export.core.project_service import ProjectService
    from glitch_export.infra.cache_store import CacheStore
    from glitch_export.infra.glitch_api import GlitchApiClient
    from glitch_export.infra.process_runner import ProcessRunner

    root = workdir if workdir is not None else Path.cwd()
    api_host = resolve_api_host()
    cache_store = CacheStore.for_directory(root)

    return RunContext(
        username=username or None,
        workdir=root,
        api_host=api_host,
        cache_store=cache_store,
        project_service=ProjectService(GlitchApiClient(api_host)),
        runner=ProcessRunner(console.raw, err_console.raw),
        prompt=ask,
        cache=cache_store.load(),
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _commands() -> dict[str, Callable[[RunContext], Any]]:
    from glitch_export.cli.commands import handle_export, handle_list, handle_update

    return {
        "list": handle_list,
        "export": handle_export,
        "update": handle_update,
    }


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the glitch-project-export CLI.

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
    parser = _build_parser()
    args = parser.parse_args(argv)

    handler = _commands().get(args.command) if args.command else None
    if handler is None:
        from glitch_export.cli.commands import print_usage

        print_usage()
        return exit_codes.SUCCESS

    ctx = build_context(args.username)
    handler(ctx)
    return exit_codes.SUCCESS


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
    except GlitchExportError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
