"""Display logic for the status command."""

from typing import IO, List, Optional

import typer

from .constants import CLEAN_MESSAGE, STAGED_HEADER, UNSTAGED_HEADER, UNTRACKED_HEADER
from .core import StatusEntry, StatusReport, StatusResult


def _entry_lines(entries: List[StatusEntry]) -> List[str]:
    return [f"\t{entry.category.value}:\t{entry.path}" for entry in entries]


def _sections(result: StatusResult) -> List[tuple]:
    """Non-empty (header, lines, color) sections in display order."""
    sections = []
    if result.to_be_committed:
        sections.append((STAGED_HEADER, _entry_lines(result.to_be_committed), typer.colors.GREEN))
    if result.not_staged:
        sections.append((UNSTAGED_HEADER, _entry_lines(result.not_staged), typer.colors.RED))
    if result.untracked:
        sections.append((UNTRACKED_HEADER, [f"\t{path}" for path in result.untracked], typer.colors.RED))
    return sections


def render_result(result: StatusResult) -> str:
    """Render the status sections as plain text.

    Returns the clean-tree message when there is nothing to report;
    otherwise each non-empty section, separated by a blank line.
    """
    if result.is_clean:
        return CLEAN_MESSAGE
    blocks = ["\n".join([header] + lines) for header, lines, _ in _sections(result)]
    return "\n\n".join(blocks)


def render_report(report: StatusReport, show_branch: bool = True) -> str:
    """Render the full status output as plain text."""
    body = render_result(report.result)
    if show_branch:
        return f"{report.head.describe()}\n{body}"
    return body


def display_status(
    report: StatusReport,
    show_branch: bool = True,
    color: Optional[bool] = None,
    file: Optional[IO[str]] = None,
):
    """Print the status report with git's colors.

    Lines are written unchanged, so the tab separators reach the terminal
    as tab bytes.

    Args:
        report: Branch and classified paths
        show_branch: If True, print the "On branch" line first
        color: False strips styling; None styles only when writing to a terminal
        file: Output stream (stdout by default)
    """
    if show_branch:
        typer.echo(report.head.describe(), file=file, color=color)

    if report.result.is_clean:
        typer.echo(CLEAN_MESSAGE, file=file, color=color)
        return

    for i, (header, lines, fg) in enumerate(_sections(report.result)):
        if i:
            typer.echo("", file=file, color=color)
        typer.secho(header, bold=True, file=file, color=color)
        for line in lines:
            typer.secho(line, fg=fg, file=file, color=color)
