"""Stable API for loosegit.

A minimal surface for scripts and other tools that want the status of a
repository without going through the CLI or depending on the decoders
directly.
"""

from pathlib import Path
from typing import Optional, Union

from .context import RepoContext
from .core import StatusReport
from .ops import get_status
from .status_display import render_report


def status(path: Union[str, Path] = ".") -> StatusReport:
    """Compute the status of the repository containing path.

    Args:
        path: Any directory inside the repository (defaults to current dir)

    Returns:
        StatusReport with HEAD description and classified paths

    Raises:
        LooseGitError: If the repository cannot be read
    """
    return get_status(RepoContext(Path(path)))


def status_text(path: Union[str, Path] = ".", show_branch: Optional[bool] = None) -> str:
    """Get the status of a repository as plain git-style text.

    Args:
        path: Any directory inside the repository (defaults to current dir)
        show_branch: Override the configured ``show_branch`` setting

    Returns:
        The report text ``loosegit status`` prints
    """
    ctx = RepoContext(Path(path))
    if show_branch is None:
        show_branch = ctx.config.show_branch
    return render_report(get_status(ctx), show_branch=show_branch)
