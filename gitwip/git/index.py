"""Index reconciliation.

Brings the index in line with a user selection using the smallest set of
commands: unstage what is staged but not selected, remove selected deletions,
add everything else that was selected. Never stages the whole tree.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from gitwip.git.command import git
from gitwip.git.runner import CommandExecutor, GitResult
from gitwip.git.status import FileStatusTable

logger = logging.getLogger(__name__)

INDEX_UPDATED = "Indexes updated"


@dataclass(frozen=True)
class IndexPlan:
    """Paths each reconciliation step will touch, in execution order."""
    to_unstage: tuple[str, ...] = ()
    to_remove: tuple[str, ...] = ()
    to_add: tuple[str, ...] = ()

    @property
    def empty(self) -> bool:
        return not (self.to_unstage or self.to_remove or self.to_add)


def _unique(paths: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(paths))


class IndexReconciler:
    """Stages exactly a selection of files from a FileStatusTable."""

    def __init__(self, executor: CommandExecutor):
        self.executor = executor

    def plan(self, table: FileStatusTable, selection: Iterable[str]) -> IndexPlan:
        selected = _unique(selection)
        wanted = set(selected)

        to_unstage = []
        for record in table.indexed():
            if record.path in wanted:
                continue
            to_unstage.append(record.path)
            # A staged rename also stages the removal of its source
            if record.orig_path and record.orig_path not in wanted:
                to_unstage.append(record.orig_path)

        to_remove, to_add = [], []
        for path in selected:
            record = table.get(path)
            if record is None:
                logger.debug(f"Ignoring unknown path in selection: {path}")
                continue
            if record.deleted:
                to_remove.append(path)
            else:
                to_add.append(path)

        return IndexPlan(
            to_unstage=tuple(_unique(to_unstage)),
            to_remove=tuple(to_remove),
            to_add=tuple(to_add),
        )

    def unstage(self, paths: Iterable[str]) -> GitResult:
        """Drop paths from the index without touching the working tree."""
        paths = list(paths)
        if not paths:
            return GitResult.ok()
        logger.debug(f"Unstaging {len(paths)} file(s)")
        return self.executor.run(git("reset").path(*paths))

    def remove(self, paths: Iterable[str]) -> GitResult:
        """Stage deletions. Paths already gone from the index are not an error."""
        paths = list(paths)
        if not paths:
            return GitResult.ok()
        logger.debug(f"Removing {len(paths)} file(s) from index")
        return self.executor.run(
            git("rm").flag("--cached", "--ignore-unmatch").path(*paths)
        )

    def add(self, paths: Iterable[str]) -> GitResult:
        paths = list(paths)
        if not paths:
            return GitResult.ok()
        logger.debug(f"Adding {len(paths)} file(s) to index")
        return self.executor.run(git("add").path(*paths))

    def apply(self, plan: IndexPlan) -> GitResult:
        """Run a plan, stopping at the first failing step."""
        for step, paths in (
            (self.unstage, plan.to_unstage),
            (self.remove, plan.to_remove),
            (self.add, plan.to_add),
        ):
            result = step(paths)
            if not result.success:
                logger.info(f"Index update aborted at {step.__name__}: {result.output.strip()}")
                return result
        return GitResult.ok(INDEX_UPDATED)

    def reconcile(self, table: FileStatusTable, selection: Iterable[str]) -> GitResult:
        """
        Make the index hold exactly the selected files.

        Returns the result of the first failing command, or a synthesized
        success when every issued command succeeded.
        """
        return self.apply(self.plan(table, selection))
