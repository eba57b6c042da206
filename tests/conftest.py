"""Shared fixtures: a recording fake executor and real-git repositories."""

import shutil
import subprocess
from pathlib import Path

import pytest

from gitwip.git.command import GitCommand
from gitwip.git.repo import Repository
from gitwip.git.runner import GitResult


class RecordingExecutor:
    """Records every command and answers from canned responses.

    Responses are matched on the longest argv prefix registered with
    ``respond``; unmatched commands succeed with empty output.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self._responses: list[tuple[list[str], GitResult]] = []

    def respond(self, prefix: list[str], result: GitResult) -> None:
        self._responses.append((prefix, result))

    def fail(self, prefix: list[str], stderr: str = "fatal: error") -> None:
        self.respond(prefix, GitResult(returncode=1, stdout="", stderr=stderr))

    def run(self, command: GitCommand) -> GitResult:
        argv = command.argv()
        self.calls.append(argv)
        best = None
        for prefix, result in self._responses:
            if argv[:len(prefix)] == prefix and (best is None or len(prefix) > len(best[0])):
                best = (prefix, result)
        if best:
            return best[1]
        return GitResult(returncode=0, stdout="", stderr="")

    @property
    def verbs(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def executor():
    return RecordingExecutor()


@pytest.fixture
def repo(tmp_path, executor):
    return Repository(tmp_path, executor=executor)


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", "-C", str(cwd), *args],
        capture_output=True, text=True, check=True,
    )
    return result.stdout


@pytest.fixture
def git_repo(tmp_path):
    """An empty real repository with a configured identity."""
    if not shutil.which("git"):
        pytest.skip("git not installed")
    path = tmp_path / "repo"
    path.mkdir()
    _git(path, "init", "-q")
    _git(path, "config", "user.name", "Test User")
    _git(path, "config", "user.email", "test@example.com")
    _git(path, "config", "commit.gpgsign", "false")
    return path


@pytest.fixture
def run_git_cmd():
    """Run a raw git command in a test repository and return stdout."""
    return _git
