"""
gw commit / gw amend - Commit exactly the listed files.

Files staged but not listed are unstaged first, so the commit contains the
selection and nothing else.
"""

from gitwip.commands.common import report
from gitwip.git.commit import CommitOperations
from gitwip.git.repo import Repository
from gitwip.git.status import scan_status


def _check_selection(paths: list[str], table) -> list[str]:
    """Return selected paths git does not report as changed."""
    return [p for p in paths if p not in table]


def cmd_commit(args, repo: Repository) -> int:
    table = scan_status(repo.executor)
    if not len(table):
        print("Nothing to commit.")
        return 0

    unknown = _check_selection(args.paths, table)
    for path in unknown:
        print(f"WARNING: '{path}' has no changes, skipping")
    if len(unknown) == len(args.paths):
        print("ERROR: None of the given files have changes")
        return 2

    result = CommitOperations(repo).commit(args.paths, table, args.message)
    return report(result, f"Committed {len(args.paths) - len(unknown)} file(s).")


def cmd_amend(args, repo: Repository) -> int:
    table = scan_status(repo.executor)
    for path in _check_selection(args.paths, table):
        print(f"WARNING: '{path}' has no changes, skipping")

    result = CommitOperations(repo).amend(args.paths, table, args.message, author=args.author)
    return report(result, "Amended HEAD.")
