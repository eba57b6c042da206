"""Structured git command lines.

A GitCommand is a verb plus flags, revisions and paths. It renders to an
argument list for subprocess, so nothing ever goes through a shell and no
file name needs quoting. Paths are always emitted after a ``--`` separator.
"""

import shlex
from dataclasses import dataclass, replace


def is_valid_revision(rev: str) -> bool:
    """False for values git would read as an option, or nothing at all."""
    return bool(rev) and not rev.startswith("-")


@dataclass(frozen=True)
class GitCommand:
    verb: str
    flags: tuple[str, ...] = ()
    revisions: tuple[str, ...] = ()
    paths: tuple[str, ...] = ()

    def flag(self, *flags: str) -> "GitCommand":
        """Add bare flags, e.g. ``--cached``."""
        return replace(self, flags=self.flags + tuple(flags))

    def option(self, name: str, value: str) -> "GitCommand":
        """Add an option and its value as two separate arguments."""
        return replace(self, flags=self.flags + (name, value))

    def revision(self, *revisions: str) -> "GitCommand":
        for rev in revisions:
            if not is_valid_revision(rev):
                raise ValueError(f"Invalid revision: {rev!r}")
        return replace(self, revisions=self.revisions + tuple(revisions))

    def path(self, *paths: str) -> "GitCommand":
        return replace(self, paths=self.paths + tuple(paths))

    def argv(self) -> list[str]:
        args = [self.verb, *self.flags, *self.revisions]
        if self.paths:
            args.append("--")
            args.extend(self.paths)
        return args

    def __str__(self) -> str:
        return shlex.join(["git", *self.argv()])


def git(verb: str) -> GitCommand:
    """Start a command: ``git("add").path("a.txt")``."""
    return GitCommand(verb)
