"""CLI for loosegit."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from .constants import FATAL_EXIT_CODE, LOOSEGIT_VERSION
from .context import RepoContext
from .errors import LooseGitError
from .ops import get_status
from .status_display import display_status


app = typer.Typer(help="""\
Read-only working tree status for flat git repositories. Reads loose
objects, the index and the working directory; never writes anything.""")

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr at the requested level."""
    level = logging.DEBUG
    if not verbose:
        level = logging.getLevelName(os.environ.get("LOOSEGIT_LOG_LEVEL", "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _fatal(error: Exception) -> None:
    err_console.print(f"[red]fatal:[/red] {escape(str(error))}", soft_wrap=True)
    raise typer.Exit(FATAL_EXIT_CODE)


def require_repo_context(path: Optional[Path] = None) -> RepoContext:
    """Find the repository containing path (or the current directory).

    Raises:
        typer.Exit: If not inside a git repository
    """
    try:
        return RepoContext(path)
    except LooseGitError as e:
        _fatal(e)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"loosegit {LOOSEGIT_VERSION}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """loosegit - git status from loose objects."""


@app.command()
def status(
    path: Optional[Path] = typer.Option(None, "--path", "-C", help="Run as if started in this directory"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log decoding steps to stderr"),
):
    """Show the working tree status.

    Compares the HEAD commit, the index and the working directory and lists
    staged changes, unstaged changes and untracked files.

    Examples:
        loosegit status                 # Status of the current repository
        loosegit status -C ../other     # Status of another repository
        loosegit status --no-color      # Plain output
    """
    _configure_logging(verbose)
    ctx = require_repo_context(path)

    try:
        config = ctx.config
        report = get_status(ctx)
    except LooseGitError as e:
        _fatal(e)

    color = False if no_color or not config.color else None
    display_status(report, show_branch=config.show_branch, color=color)


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
