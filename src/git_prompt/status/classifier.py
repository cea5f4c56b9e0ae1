"""Fold raw per-file status entries into new/modified/deleted counters."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from git_prompt.gateway.git.types import FileStatus, StatusEntry


class ChangeCounters(NamedTuple):
    """Counts for one side (index or worktree) of the status."""

    new: int
    modified: int
    deleted: int

    @property
    def has_changes(self) -> bool:
        return self.new > 0 or self.modified > 0 or self.deleted > 0

    def describe(self) -> str:
        return f"+{self.new} ~{self.modified} -{self.deleted}"


# Checked in order, first match wins. Renames and type changes count as modified.
_INDEX_RULES: tuple[tuple[FileStatus, int], ...] = (
    (FileStatus.INDEX_NEW, 0),
    (FileStatus.INDEX_MODIFIED, 1),
    (FileStatus.INDEX_DELETED, 2),
    (FileStatus.INDEX_RENAMED, 1),
    (FileStatus.INDEX_TYPECHANGE, 1),
)

_WORKTREE_RULES: tuple[tuple[FileStatus, int], ...] = (
    (FileStatus.WT_NEW, 0),
    (FileStatus.WT_MODIFIED, 1),
    (FileStatus.WT_DELETED, 2),
    (FileStatus.WT_RENAMED, 1),
    (FileStatus.WT_TYPECHANGE, 1),
)


def _count(
    entries: Iterable[StatusEntry], rules: tuple[tuple[FileStatus, int], ...]
) -> ChangeCounters:
    counts = [0, 0, 0]
    for entry in entries:
        for flag, slot in rules:
            if entry.status & flag:
                counts[slot] += 1
                break
    return ChangeCounters(*counts)


def count_index_changes(entries: Iterable[StatusEntry]) -> ChangeCounters:
    """Count staged changes across every entry that is not CURRENT."""
    return _count((e for e in entries if e.status != FileStatus.CURRENT), _INDEX_RULES)


def count_worktree_changes(entries: Iterable[StatusEntry]) -> ChangeCounters:
    """Count unstaged changes.

    Entries without an index-to-workdir delta are skipped even if listed.
    """
    return _count(
        (e for e in entries if e.status != FileStatus.CURRENT and e.has_worktree_delta),
        _WORKTREE_RULES,
    )


def classify_statuses(
    entries: Iterable[StatusEntry],
) -> tuple[ChangeCounters, ChangeCounters]:
    """Classify status entries into (index, worktree) counters.

    Entries matching none of the tested flags (conflicted, ignored,
    unreadable) contribute to neither side.

    Args:
        entries: Every entry from a status walk

    Returns:
        Tuple of (index_counters, worktree_counters)
    """
    entries = list(entries)
    return count_index_changes(entries), count_worktree_changes(entries)
