"""Status configuration helpers."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import yaml

from .constants import CONFIG_FILE
from .errors import ConfigError


@dataclass
class StatusConfig:
    """Configuration controlling status reporting."""

    ignore: List[str] = field(default_factory=list)
    use_gitignore: bool = True
    color: bool = True
    show_branch: bool = True


def _ignore_patterns(value, cfg_path: Path) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(p, str) for p in value):
        return list(value)
    raise ConfigError(f"'ignore' in {cfg_path} must be a pattern or a list of patterns")


def _flag(status: dict, key: str, cfg_path: Path) -> bool:
    value = status.get(key, True)
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' in {cfg_path} must be true or false, got {value!r}")
    return value


def load_status_config(git_dir: Path) -> StatusConfig:
    """Load configuration from .git/loosegit.yaml if present.

    Raises:
        ConfigError: If the file is not valid YAML or a value has the wrong type
    """

    cfg_path = git_dir / CONFIG_FILE
    if not cfg_path.exists():
        return StatusConfig()

    try:
        data = yaml.safe_load(cfg_path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {cfg_path}: {e}") from e

    if data is None:
        return StatusConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{cfg_path} must contain a mapping, got {type(data).__name__}")

    status = data.get("status", data)
    if not isinstance(status, dict):
        raise ConfigError(f"'status' in {cfg_path} must be a mapping")
    return StatusConfig(
        ignore=_ignore_patterns(status.get("ignore"), cfg_path),
        use_gitignore=_flag(status, "use_gitignore", cfg_path),
        color=_flag(status, "color", cfg_path),
        show_branch=_flag(status, "show_branch", cfg_path),
    )
