"""Tests for gitwip.git runner and command builder."""

import subprocess
from pathlib import Path
from unittest.mock import patch, MagicMock

import pytest

from gitwip.git.command import GitCommand, git
from gitwip.git.runner import run_git, GitExecutor, GitResult


class TestGitResult:
    """Test GitResult dataclass."""

    def test_success_when_returncode_zero(self):
        result = GitResult(returncode=0, stdout="ok", stderr="")
        assert result.success is True

    def test_failure_when_returncode_nonzero(self):
        result = GitResult(returncode=1, stdout="", stderr="error")
        assert result.success is False

    def test_failure_when_timed_out(self):
        result = GitResult(returncode=0, stdout="ok", stderr="", timed_out=True)
        assert result.success is False

    def test_output_combines_streams(self):
        result = GitResult(returncode=1, stdout="partial\n", stderr="fatal: bad")
        assert result.output == "partial\nfatal: bad"

    def test_output_single_stream(self):
        assert GitResult(returncode=1, stdout="", stderr="fatal: bad").output == "fatal: bad"
        assert GitResult(returncode=0, stdout="done", stderr="").output == "done"

    def test_ok_is_synthesized_success(self):
        result = GitResult.ok("Indexes updated")
        assert result.success
        assert result.output == "Indexes updated"


class TestRunGit:
    """Test run_git function."""

    @patch("gitwip.git.runner.subprocess.run")
    def test_returns_result_on_success(self, mock_run):
        mock_run.return_value = MagicMock(
            returncode=0,
            stdout="output",
            stderr="",
        )
        result = run_git(["status"], Path("/tmp"))
        assert result.success
        assert result.stdout == "output"
        mock_run.assert_called_once()

    @patch("gitwip.git.runner.subprocess.run")
    def test_handles_timeout(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="git", timeout=30)
        result = run_git(["status"], Path("/tmp"))
        assert not result.success
        assert result.timed_out
        assert "timed out" in result.stderr

    @patch("gitwip.git.runner.subprocess.run")
    def test_handles_missing_binary(self, mock_run):
        mock_run.side_effect = FileNotFoundError("no such file: git")
        result = run_git(["status"], Path("/tmp"))
        assert not result.success
        assert not result.timed_out
        assert "Failed to run git" in result.stderr

    @patch("gitwip.git.runner.subprocess.run")
    def test_passes_cwd_with_C_flag(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        run_git(["status", "--porcelain"], Path("/my/repo"))
        call_args = mock_run.call_args[0][0]
        assert call_args == ["git", "-C", "/my/repo", "status", "--porcelain"]

    @patch("gitwip.git.runner.subprocess.run")
    def test_disables_editor(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        run_git(["cherry-pick", "--continue"], Path("/my/repo"))
        assert mock_run.call_args.kwargs["env"]["GIT_EDITOR"] == "true"

    @patch("gitwip.git.runner.subprocess.run")
    def test_custom_binary_and_timeout(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        run_git(["status"], Path("/r"), timeout=5, binary="/usr/local/bin/git")
        assert mock_run.call_args[0][0][0] == "/usr/local/bin/git"
        assert mock_run.call_args.kwargs["timeout"] == 5


class TestGitExecutor:

    @patch("gitwip.git.runner.subprocess.run")
    def test_runs_command_argv_in_repo(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        executor = GitExecutor(Path("/my/repo"), timeout=7)
        executor.run(git("add").path("a b.txt", "-rf"))
        assert mock_run.call_args[0][0] == [
            "git", "-C", "/my/repo", "add", "--", "a b.txt", "-rf",
        ]
        assert mock_run.call_args.kwargs["timeout"] == 7


class TestGitCommand:

    def test_verb_only(self):
        assert git("status").argv() == ["status"]

    def test_paths_follow_separator(self):
        cmd = git("rm").flag("--cached", "--ignore-unmatch").path("a.txt", "b.txt")
        assert cmd.argv() == ["rm", "--cached", "--ignore-unmatch", "--", "a.txt", "b.txt"]

    def test_option_value_is_one_argument(self):
        cmd = git("commit").option("-m", 'fix "quoted" $HOME; rm -rf /')
        assert cmd.argv() == ["commit", "-m", 'fix "quoted" $HOME; rm -rf /']

    def test_revisions_before_paths(self):
        cmd = git("reset").flag("--soft").revision("abc123")
        assert cmd.argv() == ["reset", "--soft", "abc123"]

    def test_odd_file_names_stay_single_arguments(self):
        names = ["--force", "with space.txt", "$x$ $y$", "semi;colon", "new\nline"]
        assert git("add").path(*names).argv() == ["add", "--", *names]

    @pytest.mark.parametrize("rev", ["", "-b", "--orphan"])
    def test_rejects_option_like_revision(self, rev):
        with pytest.raises(ValueError):
            git("checkout").revision(rev)

    def test_builder_is_immutable(self):
        base = git("add")
        base.path("a.txt")
        assert base.paths == ()
        assert isinstance(base, GitCommand)

    def test_str_is_shell_quoted(self):
        assert str(git("add").path("a b.txt")) == "git add -- 'a b.txt'"
