"""
gw cherry-pick - Apply, continue or abort a cherry-pick.
"""

from gitwip.commands.common import report
from gitwip.git.commit import CommitOperations
from gitwip.git.repo import Repository


def cmd_cherry_pick(args, repo: Repository) -> int:
    ops = CommitOperations(repo)

    if args.abort or args.cont:
        if not repo.is_cherry_pick_in_progress():
            print("ERROR: No cherry-pick in progress")
            return 2
        if args.abort:
            return report(ops.cherry_pick_abort(), "Cherry-pick aborted.")
        return report(ops.cherry_pick_continue(), "Cherry-pick completed.")

    if not args.sha:
        print("ERROR: Give a commit to cherry-pick, or --continue/--abort")
        return 2

    result = ops.cherry_pick(args.sha)
    if not result.success and repo.is_cherry_pick_in_progress():
        print("Cherry-pick stopped on conflicts. Resolve them with 'gw resolve',")
        print("then run 'gw cherry-pick --continue' (or --abort).")
    return report(result, f"Cherry-picked {args.sha}.")
