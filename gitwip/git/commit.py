"""Git commit operations.

Every operation issues its commands through the repository's executor and
reports the outcome as a GitResult (or a bool where noted). Multi-step
operations stop at the first failing step and return that step's result;
nothing is rolled back.
"""

import logging
from enum import Enum
from typing import Iterable

from gitwip.git.command import git, is_valid_revision
from gitwip.git.index import IndexReconciler
from gitwip.git.runner import GitResult
from gitwip.git.status import FileStatusTable
from gitwip.git.repo import Repository

logger = logging.getLogger(__name__)


class ResetKind(Enum):
    SOFT = "soft"
    MIXED = "mixed"
    HARD = "hard"


class CommitOperations:
    """Commit, reset, checkout and cherry-pick for one repository."""

    def __init__(self, repo: Repository):
        self.repo = repo
        self.reconciler = IndexReconciler(repo.executor)

    def _run(self, command) -> GitResult:
        logger.debug(f"Executing {command}")
        return self.repo.executor.run(command)

    # File-level operations

    def stage_file(self, path: str) -> GitResult:
        return self.stage_files([path])

    def _add(self, paths: list[str]) -> GitResult:
        if not paths:
            return GitResult.ok()
        result = self._run(git("add").path(*paths))
        if result.success:
            self.repo.notify_working_state_changed()
        return result

    def stage_files(self, paths: Iterable[str]) -> GitResult:
        return self._add(list(paths))

    def reset_file(self, path: str) -> GitResult:
        """Unstage one file. The working tree copy is left alone."""
        result = self._run(git("reset").path(path))
        if result.success:
            self.repo.notify_working_state_changed()
        return result

    unstage_file = reset_file

    def checkout_file(self, path: str) -> bool:
        """Discard working tree changes to one file."""
        if not path:
            logger.warning("Refusing to checkout an empty file name")
            return False
        return self._run(git("checkout").path(path)).success

    def mark_resolved(self, paths: str | Iterable[str]) -> GitResult:
        """Stage conflict resolutions during a merge or cherry-pick."""
        if isinstance(paths, str):
            paths = [paths]
        return self._add(list(paths))

    # Commits

    def commit(self, selection: Iterable[str], table: FileStatusTable, message: str) -> GitResult:
        """Commit exactly the selected files."""
        updated = self.reconciler.reconcile(table, selection)
        if not updated.success:
            return updated

        logger.debug("Committing files")
        return self._run(git("commit").option("-m", message))

    def amend(
        self,
        selection: Iterable[str],
        table: FileStatusTable,
        message: str,
        author: str | None = None,
    ) -> GitResult:
        """Amend HEAD with exactly the selected files."""
        updated = self.reconciler.reconcile(table, selection)
        if not updated.success:
            return updated

        command = git("commit").flag("--amend")
        if author:
            command = command.flag(f"--author={author}")
        logger.debug("Amending files")
        return self._run(command.option("-m", message))

    def _rejected_revision(self, operation: str, sha: str) -> GitResult | None:
        """Failed result for a revision git would misread, else None."""
        if is_valid_revision(sha):
            return None
        logger.warning(f"Refusing to {operation} invalid revision {sha!r}")
        return GitResult.failed(f"Invalid revision: {sha!r}")

    def reset_commit(self, sha: str, kind: ResetKind) -> bool:
        # Raises on an unknown kind
        mode = ResetKind(kind).value
        if self._rejected_revision("reset to", sha):
            return False
        result = self._run(git("reset").flag(f"--{mode}").revision(sha))
        if result.success:
            self.repo.notify_working_state_changed()
        return result.success

    def checkout_commit(self, sha: str) -> GitResult:
        """Switch to a branch or detach at a commit."""
        rejected = self._rejected_revision("checkout", sha)
        if rejected:
            return rejected
        result = self._run(git("checkout").revision(sha))
        if result.success:
            self.repo.update_current_branch()
        return result

    # Cherry-pick. Progress lives in the repository (CHERRY_PICK_HEAD), see
    # Repository.is_cherry_pick_in_progress.

    def cherry_pick(self, sha: str) -> GitResult:
        rejected = self._rejected_revision("cherry-pick", sha)
        if rejected:
            return rejected
        return self._run(git("cherry-pick").revision(sha))

    def cherry_pick_continue(self) -> GitResult:
        return self._run(git("cherry-pick").flag("--continue"))

    def cherry_pick_abort(self) -> GitResult:
        return self._run(git("cherry-pick").flag("--abort"))
