"""Git operations for gitwip.

Return type conventions:
- Functions returning GitResult: Caller must check .success before using output.
  Examples: IndexReconciler.reconcile(), CommitOperations.commit()
- Functions returning bool: True on success/condition met, False otherwise.
  Examples: CommitOperations.reset_commit(), CommitOperations.checkout_file()
- Functions returning parsed values: Return empty on failure.
  Examples: scan_status() -> empty FileStatusTable, WipExtractor.extract()
"""

from gitwip.git.command import GitCommand, git
from gitwip.git.runner import (
    CommandExecutor,
    GitExecutor,
    GitResult,
    run_git,
)
from gitwip.git.status import (
    FileRecord,
    FileStatus,
    FileStatusTable,
    parse_porcelain,
    scan_status,
)
from gitwip.git.index import IndexPlan, IndexReconciler
from gitwip.git.repo import Repository
from gitwip.git.commit import CommitOperations, ResetKind
from gitwip.git.wip import EMPTY_TREE_SHA, WipExtractor, WipSnapshot

__all__ = [
    # command
    "GitCommand",
    "git",
    # runner
    "CommandExecutor",
    "GitExecutor",
    "GitResult",
    "run_git",
    # status
    "FileRecord",
    "FileStatus",
    "FileStatusTable",
    "parse_porcelain",
    "scan_status",
    # index
    "IndexPlan",
    "IndexReconciler",
    # repo
    "Repository",
    # commit
    "CommitOperations",
    "ResetKind",
    # wip
    "EMPTY_TREE_SHA",
    "WipExtractor",
    "WipSnapshot",
]
