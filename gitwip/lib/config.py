"""
Configuration loader for gitwip.

Reads optional per-repository settings from .gitwip.env in the working tree
root. A missing file means defaults.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from . import envparse
from . import validate

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".gitwip.env"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class RepoConfig:
    """Repository-level settings from .gitwip.env"""
    git_binary: str = "git"
    git_timeout: int = 30  # Seconds per git invocation
    log_level: str = "WARNING"
    detect_copies: bool = True  # Pass -C to diff-index


def config_from_env(env: dict[str, str], source: str | None = None) -> RepoConfig:
    """Validate a parsed env dict and build a RepoConfig from it."""
    validate.validate(env, "config", source=source)
    defaults = RepoConfig()
    return RepoConfig(
        git_binary=env.get("GIT_BINARY", defaults.git_binary),
        git_timeout=int(env.get("GIT_TIMEOUT", str(defaults.git_timeout))),
        log_level=env.get("LOG_LEVEL", defaults.log_level),
        detect_copies=env.get("DETECT_COPIES", "true") == "true",
    )


def load_repo_config(repo_path: Path) -> RepoConfig:
    """
    Load .gitwip.env from repo_path.

    Raises:
        ValueError: if the file has invalid syntax
        ValidationError: if a key or value is not allowed
    """
    config_path = Path(repo_path) / CONFIG_FILENAME
    if not config_path.exists():
        logger.debug(f"No {CONFIG_FILENAME} in {repo_path}, using defaults")
        return RepoConfig()

    env = envparse.load_env(config_path)
    return config_from_env(env, source=CONFIG_FILENAME)
