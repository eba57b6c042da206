"""
gw status / gw wip - Show the working tree and uncommitted changes.
"""

from gitwip.git.repo import Repository
from gitwip.git.status import FileStatus, scan_status
from gitwip.git.wip import WipExtractor

FLAG_LETTERS = (
    (FileStatus.IN_INDEX, "I"),
    (FileStatus.MODIFIED, "M"),
    (FileStatus.DELETED, "D"),
    (FileStatus.UNTRACKED, "?"),
    (FileStatus.CONFLICTED, "U"),
)


def format_flags(status: FileStatus) -> str:
    return "".join(letter if status & flag else "." for flag, letter in FLAG_LETTERS)


def cmd_status(args, repo: Repository) -> int:
    """List changed files with their status flags."""
    table = scan_status(repo.executor)

    branch = repo.current_branch or "(detached)"
    print(f"Branch: {branch}")
    if repo.is_cherry_pick_in_progress():
        print("Cherry-pick in progress (resolve, then 'gw cherry-pick --continue')")
    if repo.is_merge_in_progress():
        print("Merge in progress")

    if not len(table):
        print("Working tree clean.")
        return 0

    print()
    for record in table:
        line = f"  {format_flags(record.status)}  {record.path}"
        if record.orig_path:
            line += f" (from {record.orig_path})"
        print(line)
    return 0


def cmd_wip(args, repo: Repository) -> int:
    """Print the staged and unstaged diff against the parent revision."""
    snapshot = WipExtractor(repo).extract()

    if snapshot.is_empty:
        print("ERROR: No working tree information available")
        for line in snapshot.diagnostics:
            print(f"  {line}")
        return 1

    parent = "(initial commit)" if snapshot.is_initial else snapshot.parent_revision
    print(f"Parent: {parent}")

    if not args.staged_only:
        print()
        print("Unstaged:")
        print(snapshot.unstaged_diff.rstrip() or "  (none)")
    if not args.unstaged_only:
        print()
        print("Staged:")
        print(snapshot.staged_diff.rstrip() or "  (none)")

    for line in snapshot.diagnostics:
        print(f"WARNING: {line}")
    return 0
