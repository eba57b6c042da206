"""
Repository handle.

Bundles everything the git operations need for one repository: its path,
the command executor, configuration and event bus. Components receive a
Repository at construction instead of looking anything up globally.
"""

import logging
from pathlib import Path

from gitwip.events import EventBus, RepoEvent
from gitwip.git.command import git
from gitwip.git.runner import CommandExecutor, GitExecutor
from gitwip.lib.config import RepoConfig

logger = logging.getLogger(__name__)

CHERRY_PICK_MARKER = "CHERRY_PICK_HEAD"
MERGE_MARKER = "MERGE_HEAD"


class Repository:
    def __init__(
        self,
        path: Path,
        executor: CommandExecutor | None = None,
        config: RepoConfig | None = None,
        events: EventBus | None = None,
    ):
        self.path = Path(path)
        self.config = config or RepoConfig()
        self.executor = executor or GitExecutor(
            self.path,
            timeout=self.config.git_timeout,
            binary=self.config.git_binary,
        )
        self.events = events or EventBus()
        self._git_dir: Path | None = None
        self._current_branch: str | None = None
        self._branch_loaded = False

    def __repr__(self) -> str:
        return f"Repository({str(self.path)!r})"

    @property
    def git_dir(self) -> Path:
        """Absolute path of the repository control directory."""
        if self._git_dir is None:
            result = self.executor.run(git("rev-parse").flag("--absolute-git-dir"))
            if result.success and result.stdout.strip():
                self._git_dir = Path(result.stdout.strip())
            else:
                # Not cached: a later call may succeed once the repo exists
                logger.debug(f"Could not resolve git dir for {self.path}, assuming .git")
                return self.path / ".git"
        return self._git_dir

    def head_sha(self) -> str | None:
        """SHA of HEAD, or None on an unborn branch."""
        result = self.executor.run(git("rev-parse").flag("--verify", "--quiet").revision("HEAD"))
        if result.success:
            return result.stdout.strip() or None
        return None

    def _read_current_branch(self) -> str | None:
        result = self.executor.run(git("branch").flag("--show-current"))
        if result.success:
            return result.stdout.strip() or None
        return None

    @property
    def current_branch(self) -> str | None:
        """Current branch name, or None if detached."""
        if not self._branch_loaded:
            self._current_branch = self._read_current_branch()
            self._branch_loaded = True
        return self._current_branch

    def update_current_branch(self) -> str | None:
        """Re-read the current branch and notify listeners."""
        self._current_branch = self._read_current_branch()
        self._branch_loaded = True
        logger.debug(f"Current branch is now {self._current_branch or '(detached)'}")
        self.events.emit(RepoEvent.BRANCH_CHANGED)
        return self._current_branch

    def notify_working_state_changed(self) -> None:
        self.events.emit(RepoEvent.WORKING_STATE_CHANGED)

    def is_cherry_pick_in_progress(self) -> bool:
        return (self.git_dir / CHERRY_PICK_MARKER).exists()

    def is_merge_in_progress(self) -> bool:
        return (self.git_dir / MERGE_MARKER).exists()
