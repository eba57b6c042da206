"""Tests for gitwip.git.repo and gitwip.events."""

import pytest

from gitwip.events import EventBus, RepoEvent
from gitwip.git.repo import Repository
from gitwip.git.runner import GitExecutor, GitResult
from gitwip.lib.config import RepoConfig


class TestRepository:

    def test_builds_executor_from_config(self, tmp_path):
        repo = Repository(tmp_path, config=RepoConfig(git_binary="git2", git_timeout=9))
        assert isinstance(repo.executor, GitExecutor)
        assert repo.executor.binary == "git2"
        assert repo.executor.timeout == 9
        assert repo.executor.repo_path == tmp_path

    def test_git_dir_resolved_once(self, repo, executor, tmp_path):
        executor.respond(["rev-parse", "--absolute-git-dir"], GitResult(0, f"{tmp_path}/.git\n", ""))
        assert repo.git_dir == tmp_path / ".git"
        assert repo.git_dir == tmp_path / ".git"
        assert executor.calls == [["rev-parse", "--absolute-git-dir"]]

    def test_git_dir_fallback(self, repo, executor, tmp_path):
        executor.fail(["rev-parse"])
        assert repo.git_dir == tmp_path / ".git"

    def test_cherry_pick_marker(self, repo, executor, tmp_path):
        git_dir = tmp_path / ".git"
        git_dir.mkdir()
        executor.respond(["rev-parse", "--absolute-git-dir"], GitResult(0, str(git_dir), ""))

        assert repo.is_cherry_pick_in_progress() is False
        (git_dir / "CHERRY_PICK_HEAD").write_text("abc123\n")
        assert repo.is_cherry_pick_in_progress() is True
        (git_dir / "CHERRY_PICK_HEAD").unlink()
        assert repo.is_cherry_pick_in_progress() is False

    def test_merge_marker(self, repo, executor, tmp_path):
        git_dir = tmp_path / ".git"
        git_dir.mkdir()
        executor.respond(["rev-parse", "--absolute-git-dir"], GitResult(0, str(git_dir), ""))
        (git_dir / "MERGE_HEAD").write_text("abc123\n")
        assert repo.is_merge_in_progress() is True

    def test_current_branch_detached(self, repo, executor):
        executor.respond(["branch", "--show-current"], GitResult(0, "\n", ""))
        assert repo.current_branch is None

    def test_current_branch_read_once(self, repo, executor):
        executor.respond(["branch", "--show-current"], GitResult(0, "main\n", ""))
        assert repo.current_branch == "main"
        assert repo.current_branch == "main"
        assert executor.verbs == ["branch"]

    def test_update_current_branch_emits(self, repo, executor):
        seen = []
        repo.events.subscribe(RepoEvent.BRANCH_CHANGED, seen.append)
        executor.respond(["branch", "--show-current"], GitResult(0, "dev\n", ""))

        assert repo.update_current_branch() == "dev"
        assert seen == [RepoEvent.BRANCH_CHANGED]

    def test_head_sha(self, repo, executor):
        executor.respond(["rev-parse", "--verify"], GitResult(0, "abc123\n", ""))
        assert repo.head_sha() == "abc123"

    def test_head_sha_unborn(self, repo, executor):
        executor.fail(["rev-parse", "--verify"])
        assert repo.head_sha() is None


class TestEventBus:

    def test_emit_in_subscription_order(self):
        bus = EventBus()
        calls = []
        bus.subscribe(RepoEvent.WORKING_STATE_CHANGED, lambda e: calls.append(("first", e)))
        bus.subscribe(RepoEvent.WORKING_STATE_CHANGED, lambda e: calls.append(("second", e)))

        bus.emit(RepoEvent.WORKING_STATE_CHANGED)

        assert calls == [
            ("first", RepoEvent.WORKING_STATE_CHANGED),
            ("second", RepoEvent.WORKING_STATE_CHANGED),
        ]

    def test_events_are_separate(self):
        bus = EventBus()
        calls = []
        bus.subscribe(RepoEvent.BRANCH_CHANGED, calls.append)
        bus.emit(RepoEvent.WORKING_STATE_CHANGED)
        assert calls == []

    def test_unsubscribe(self):
        bus = EventBus()
        calls = []
        bus.subscribe(RepoEvent.BRANCH_CHANGED, calls.append)
        bus.unsubscribe(RepoEvent.BRANCH_CHANGED, calls.append)
        bus.unsubscribe(RepoEvent.BRANCH_CHANGED, calls.append)
        bus.emit(RepoEvent.BRANCH_CHANGED)
        assert calls == []

    def test_listener_errors_propagate(self):
        bus = EventBus()

        def broken(event):
            raise RuntimeError("view gone")

        bus.subscribe(RepoEvent.BRANCH_CHANGED, broken)
        with pytest.raises(RuntimeError):
            bus.emit(RepoEvent.BRANCH_CHANGED)
