"""Work-in-progress snapshot: staged and unstaged changes vs. the parent."""

import logging
from dataclasses import dataclass, field

from gitwip.git.command import git
from gitwip.git.repo import Repository

logger = logging.getLogger(__name__)

# Hash of the empty tree. Diffing against it works before the first commit.
EMPTY_TREE_SHA = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"


@dataclass(frozen=True)
class WipSnapshot:
    parent_revision: str
    unstaged_diff: str
    staged_diff: str
    # Failures that were degraded to empty diffs
    diagnostics: tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def empty(cls, diagnostics: tuple[str, ...] = ()) -> "WipSnapshot":
        return cls(parent_revision="", unstaged_diff="", staged_diff="", diagnostics=diagnostics)

    @property
    def is_empty(self) -> bool:
        return not self.parent_revision

    @property
    def is_initial(self) -> bool:
        """True when there is no commit yet to compare against."""
        return self.parent_revision == EMPTY_TREE_SHA

    @property
    def has_changes(self) -> bool:
        return bool(self.unstaged_diff.strip() or self.staged_diff.strip())


class WipExtractor:
    """Reads the uncommitted state of a repository. Never mutates it."""

    def __init__(self, repo: Repository):
        self.repo = repo

    def _diff_command(self, parent: str, cached: bool):
        command = git("diff-index").flag("--no-color", "-r", "-m")
        if self.repo.config.detect_copies:
            command = command.flag("-C")
        if cached:
            command = command.flag("--cached")
        return command.revision(parent)

    def _diff(self, parent: str, cached: bool, diagnostics: list[str]) -> str:
        label = "staged" if cached else "unstaged"
        result = self.repo.executor.run(self._diff_command(parent, cached))
        if not result.success:
            logger.warning(f"Could not read {label} diff against {parent}: {result.output.strip()}")
            diagnostics.append(f"{label} diff failed: {result.output.strip()}")
            return ""
        return result.stdout

    def extract(self) -> WipSnapshot:
        """
        Snapshot unstaged and staged changes.

        Diff failures become empty bodies and are listed in diagnostics. Only
        a failed HEAD lookup yields WipSnapshot.empty().
        """
        # --revs-only prints nothing, rather than failing, on an unborn branch
        result = self.repo.executor.run(git("rev-parse").flag("--revs-only").revision("HEAD"))
        if not result.success:
            logger.warning(f"Could not resolve HEAD: {result.output.strip()}")
            return WipSnapshot.empty(diagnostics=(f"HEAD lookup failed: {result.output.strip()}",))

        parent = result.stdout.strip() or EMPTY_TREE_SHA
        diagnostics: list[str] = []
        unstaged = self._diff(parent, cached=False, diagnostics=diagnostics)
        staged = self._diff(parent, cached=True, diagnostics=diagnostics)

        return WipSnapshot(
            parent_revision=parent,
            unstaged_diff=unstaged,
            staged_diff=staged,
            diagnostics=tuple(diagnostics),
        )
