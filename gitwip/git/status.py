"""File status records and the working-tree scanner."""

import logging
from dataclasses import dataclass
from enum import Flag, auto
from typing import Iterable, Iterator

from gitwip.git.command import git
from gitwip.git.runner import CommandExecutor

logger = logging.getLogger(__name__)

# XY codes git uses for unmerged paths
UNMERGED_CODES = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})


class FileStatus(Flag):
    NONE = 0
    IN_INDEX = auto()
    DELETED = auto()
    MODIFIED = auto()
    UNTRACKED = auto()
    CONFLICTED = auto()


@dataclass(frozen=True)
class FileRecord:
    """One path from a status scan."""
    path: str
    status: FileStatus
    orig_path: str | None = None  # Source path for renames/copies

    def has(self, flag: FileStatus) -> bool:
        return bool(self.status & flag)

    @property
    def in_index(self) -> bool:
        return self.has(FileStatus.IN_INDEX)

    @property
    def deleted(self) -> bool:
        return self.has(FileStatus.DELETED)


class FileStatusTable:
    """Ordered, read-only collection of FileRecords with lookup by path."""

    def __init__(self, records: Iterable[FileRecord] = ()):
        self._records: tuple[FileRecord, ...] = tuple(records)
        self._by_path = {r.path: r for r in self._records}
        if len(self._by_path) != len(self._records):
            raise ValueError("FileStatusTable contains duplicate paths")

    def get(self, path: str) -> FileRecord | None:
        return self._by_path.get(path)

    def __contains__(self, path: object) -> bool:
        return path in self._by_path

    def __iter__(self) -> Iterator[FileRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"FileStatusTable({list(self._records)!r})"

    @property
    def paths(self) -> list[str]:
        return [r.path for r in self._records]

    def indexed(self) -> list[FileRecord]:
        """Records with staged changes."""
        return [r for r in self._records if r.in_index]


def status_from_code(xy: str) -> FileStatus:
    """Map a porcelain v1 XY code onto status flags."""
    if xy == "??":
        return FileStatus.UNTRACKED
    if xy in UNMERGED_CODES:
        return FileStatus.CONFLICTED

    x, y = xy[0], xy[1]
    status = FileStatus.NONE
    if x not in (" ", "?", "!"):
        status |= FileStatus.IN_INDEX
    if "D" in xy:
        status |= FileStatus.DELETED
    if any(c in "MARCT" for c in xy):
        status |= FileStatus.MODIFIED
    return status


def parse_porcelain(output: str) -> FileStatusTable:
    """
    Parse ``git status --porcelain -z`` output.

    Renames and copies are "XY new\\0old\\0": the following NUL field is the
    original path.
    """
    records = []
    entries = output.split("\0")
    i = 0
    while i < len(entries):
        entry = entries[i]
        i += 1
        if len(entry) < 4:
            continue

        xy = entry[:2]
        path = entry[3:]
        orig_path = None
        if xy[0] in ("R", "C") and i < len(entries):
            orig_path = entries[i]
            i += 1

        records.append(FileRecord(path=path, status=status_from_code(xy), orig_path=orig_path))

    return FileStatusTable(records)


def scan_status(executor: CommandExecutor) -> FileStatusTable:
    """Scan the working tree. Returns an empty table on git failure."""
    result = executor.run(
        git("status").flag("--porcelain", "-z", "--untracked-files=all")
    )
    if not result.success:
        logger.warning(f"git status failed: {result.output.strip()}")
        return FileStatusTable()
    return parse_porcelain(result.stdout)
