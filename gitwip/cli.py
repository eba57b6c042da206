#!/usr/bin/env python3
"""gitwip CLI entrypoint."""

import sys
import argparse
import logging
from pathlib import Path

from gitwip.git.repo import Repository
from gitwip.lib.config import CONFIG_FILENAME, load_repo_config
from gitwip.lib.validate import ValidationError
from gitwip.commands import status as cmd_status_module
from gitwip.commands import commit as cmd_commit_module
from gitwip.commands import reset as cmd_reset_module
from gitwip.commands import files as cmd_files_module
from gitwip.commands import cherry_pick as cmd_cherry_pick_module


def get_repository(args) -> Repository:
    """Build the Repository for --repo, loading its config."""
    repo_path = Path(args.repo).resolve()
    if not repo_path.is_dir():
        print(f"ERROR: Not a directory: {repo_path}")
        sys.exit(2)

    try:
        config = load_repo_config(repo_path)
    except (ValueError, ValidationError) as e:
        print(f"ERROR: Invalid {CONFIG_FILENAME}: {e}")
        sys.exit(2)

    level = logging.DEBUG if args.verbose else getattr(logging, config.log_level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    return Repository(repo_path, config=config)


def cmd_status(args):
    return cmd_status_module.cmd_status(args, get_repository(args))


def cmd_wip(args):
    return cmd_status_module.cmd_wip(args, get_repository(args))


def cmd_commit(args):
    return cmd_commit_module.cmd_commit(args, get_repository(args))


def cmd_amend(args):
    return cmd_commit_module.cmd_amend(args, get_repository(args))


def cmd_reset(args):
    return cmd_reset_module.cmd_reset(args, get_repository(args))


def cmd_checkout(args):
    return cmd_reset_module.cmd_checkout(args, get_repository(args))


def cmd_stage(args):
    return cmd_files_module.cmd_stage(args, get_repository(args))


def cmd_unstage(args):
    return cmd_files_module.cmd_unstage(args, get_repository(args))


def cmd_resolve(args):
    return cmd_files_module.cmd_resolve(args, get_repository(args))


def cmd_restore(args):
    return cmd_files_module.cmd_restore(args, get_repository(args))


def cmd_cherry_pick(args):
    return cmd_cherry_pick_module.cmd_cherry_pick(args, get_repository(args))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='gw', description='Selective staging and commit tool')
    parser.add_argument('--repo', '-C', default='.', help='Repository working directory')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log every git command')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # gw status
    p_status = subparsers.add_parser('status', help='List changed files')
    p_status.set_defaults(func=cmd_status)

    # gw wip
    p_wip = subparsers.add_parser('wip', help='Show uncommitted changes against the parent')
    wip_filter = p_wip.add_mutually_exclusive_group()
    wip_filter.add_argument('--staged-only', action='store_true', help='Only show staged changes')
    wip_filter.add_argument('--unstaged-only', action='store_true', help='Only show unstaged changes')
    p_wip.set_defaults(func=cmd_wip)

    # gw commit
    p_commit = subparsers.add_parser('commit', help='Commit exactly the given files')
    p_commit.add_argument('paths', nargs='+', help='Files to include')
    p_commit.add_argument('--message', '-m', required=True, help='Commit message')
    p_commit.set_defaults(func=cmd_commit)

    # gw amend
    p_amend = subparsers.add_parser('amend', help='Amend HEAD with exactly the given files')
    p_amend.add_argument('paths', nargs='*', help='Files to include')
    p_amend.add_argument('--message', '-m', required=True, help='New commit message')
    p_amend.add_argument('--author', help='Override author ("Name <email>")')
    p_amend.set_defaults(func=cmd_amend)

    # gw reset
    p_reset = subparsers.add_parser('reset', help='Reset the current branch to a commit')
    p_reset.add_argument('sha', help='Target commit')
    mode = p_reset.add_mutually_exclusive_group()
    mode.add_argument('--soft', dest='mode', action='store_const', const='soft')
    mode.add_argument('--mixed', dest='mode', action='store_const', const='mixed')
    mode.add_argument('--hard', dest='mode', action='store_const', const='hard')
    p_reset.set_defaults(func=cmd_reset, mode='mixed')

    # gw checkout
    p_checkout = subparsers.add_parser('checkout', help='Switch branch or detach at a commit')
    p_checkout.add_argument('sha', help='Branch or commit')
    p_checkout.set_defaults(func=cmd_checkout)

    # gw stage
    p_stage = subparsers.add_parser('stage', help='Stage files')
    p_stage.add_argument('paths', nargs='+', help='Files to stage')
    p_stage.set_defaults(func=cmd_stage)

    # gw unstage
    p_unstage = subparsers.add_parser('unstage', help='Unstage a file, keeping its changes')
    p_unstage.add_argument('path', help='File to unstage')
    p_unstage.set_defaults(func=cmd_unstage)

    # gw resolve
    p_resolve = subparsers.add_parser('resolve', help='Mark conflicted files as resolved')
    p_resolve.add_argument('paths', nargs='+', help='Resolved files')
    p_resolve.set_defaults(func=cmd_resolve)

    # gw restore
    p_restore = subparsers.add_parser('restore', help='Discard working tree changes to a file')
    p_restore.add_argument('path', help='File to restore')
    p_restore.set_defaults(func=cmd_restore)

    # gw cherry-pick
    p_cherry = subparsers.add_parser('cherry-pick', help='Apply a commit onto HEAD')
    p_cherry.add_argument('sha', nargs='?', help='Commit to apply')
    cherry_action = p_cherry.add_mutually_exclusive_group()
    cherry_action.add_argument('--continue', dest='cont', action='store_true', help='Continue after resolving')
    cherry_action.add_argument('--abort', action='store_true', help='Abort and restore the previous state')
    p_cherry.set_defaults(func=cmd_cherry_pick)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
