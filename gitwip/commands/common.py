"""Helpers shared by gw subcommands."""

from gitwip.git.runner import GitResult


def report(result: GitResult, success_message: str) -> int:
    """Print the outcome of a git operation and return an exit code."""
    if result.success:
        print(success_message)
        return 0

    print("ERROR: git reported a failure")
    output = result.output.strip()
    if output:
        print(output)
    return 1
