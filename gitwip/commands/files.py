"""
gw stage / unstage / resolve / restore - Per-file index and tree operations.
"""

from gitwip.commands.common import report
from gitwip.git.commit import CommitOperations
from gitwip.git.repo import Repository


def cmd_stage(args, repo: Repository) -> int:
    result = CommitOperations(repo).stage_files(args.paths)
    return report(result, f"Staged {len(args.paths)} file(s).")


def cmd_unstage(args, repo: Repository) -> int:
    result = CommitOperations(repo).reset_file(args.path)
    return report(result, f"Unstaged {args.path}.")


def cmd_resolve(args, repo: Repository) -> int:
    if not (repo.is_merge_in_progress() or repo.is_cherry_pick_in_progress()):
        print("WARNING: No merge or cherry-pick in progress")
    result = CommitOperations(repo).mark_resolved(args.paths)
    return report(result, f"Marked {len(args.paths)} file(s) resolved.")


def cmd_restore(args, repo: Repository) -> int:
    """Discard working tree changes to a file."""
    if not args.path:
        print("ERROR: No file given")
        return 2
    if CommitOperations(repo).checkout_file(args.path):
        print(f"Restored {args.path}.")
        return 0
    print(f"ERROR: Could not restore {args.path}")
    return 1
