"""loosegit - read-only git status for flat repositories."""

from .api import status, status_text
from .constants import LOOSEGIT_VERSION as __version__

__all__ = ["status", "status_text", "__version__"]
