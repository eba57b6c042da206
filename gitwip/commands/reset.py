"""
gw reset / gw checkout - Move HEAD.
"""

from gitwip.commands.common import report
from gitwip.git.commit import CommitOperations, ResetKind
from gitwip.git.repo import Repository


def cmd_reset(args, repo: Repository) -> int:
    """Reset the current branch to a commit."""
    kind = ResetKind(args.mode)
    if CommitOperations(repo).reset_commit(args.sha, kind):
        print(f"Reset ({kind.value}) to {args.sha}.")
        return 0
    print(f"ERROR: Reset ({kind.value}) to {args.sha} failed")
    return 1


def cmd_checkout(args, repo: Repository) -> int:
    """Switch branch or detach at a commit."""
    result = CommitOperations(repo).checkout_commit(args.sha)
    branch = repo.current_branch or f"detached at {args.sha}"
    return report(result, f"Now on {branch}.")
