"""Git command runner with timeout handling."""

import logging
import os
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from gitwip.git.command import GitCommand

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30
DEFAULT_BINARY = "git"


@dataclass(frozen=True)
class GitResult:
    """Result of a git command."""
    returncode: int
    stdout: str
    stderr: str
    timed_out: bool = False

    @property
    def success(self) -> bool:
        return self.returncode == 0 and not self.timed_out

    @property
    def output(self) -> str:
        """Combined stdout and stderr, for display."""
        if self.stdout and self.stderr:
            return f"{self.stdout.rstrip()}\n{self.stderr}"
        return self.stdout or self.stderr

    @classmethod
    def ok(cls, message: str = "") -> "GitResult":
        """Synthesized success for steps that issued no command."""
        return cls(returncode=0, stdout=message, stderr="")

    @classmethod
    def failed(cls, message: str) -> "GitResult":
        return cls(returncode=-1, stdout="", stderr=message)


class CommandExecutor(Protocol):
    """Anything that can run a GitCommand against one repository."""

    def run(self, command: GitCommand) -> GitResult:
        ...


def run_git(
    args: list[str],
    cwd: Path,
    timeout: int = DEFAULT_TIMEOUT,
    binary: str = DEFAULT_BINARY,
) -> GitResult:
    """
    Run a git command with timeout handling.

    Args:
        args: Git command arguments (e.g., ["status", "--porcelain"])
        cwd: Working directory for the command
        timeout: Timeout in seconds
        binary: git executable to invoke

    Returns:
        GitResult with returncode, stdout, stderr, and timed_out flag
    """
    cmd = [binary, "-C", str(cwd)] + args
    started = time.monotonic()
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            env={**os.environ, "GIT_EDITOR": "true"},  # Never block on an editor
        )
    except subprocess.TimeoutExpired:
        logger.warning(f"git {' '.join(args[:1])} timed out after {timeout}s in {cwd}")
        return GitResult(
            returncode=-1,
            stdout="",
            stderr=f"Command timed out after {timeout}s",
            timed_out=True,
        )
    except OSError as e:
        # Missing binary or unusable cwd
        logger.error(f"Failed to run {binary}: {e}")
        return GitResult.failed(f"Failed to run {binary}: {e}")

    elapsed = time.monotonic() - started
    logger.debug(f"git {args} -> {result.returncode} ({elapsed:.3f}s)")
    if result.returncode != 0:
        logger.debug(f"git {args[:1]} failed: {result.stderr.strip()}")

    return GitResult(
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
    )


class GitExecutor:
    """Runs commands against a single repository working directory."""

    def __init__(
        self,
        repo_path: Path,
        timeout: int = DEFAULT_TIMEOUT,
        binary: str = DEFAULT_BINARY,
    ):
        self.repo_path = Path(repo_path)
        self.timeout = timeout
        self.binary = binary

    def run(self, command: GitCommand) -> GitResult:
        return run_git(command.argv(), self.repo_path, timeout=self.timeout, binary=self.binary)

    def __repr__(self) -> str:
        return f"GitExecutor({str(self.repo_path)!r}, timeout={self.timeout})"
