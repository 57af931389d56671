"""File list: staged or unstaged changes, filtering and checked files."""

from __future__ import annotations

import enum
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path


class FileStatus(enum.Enum):
    MODIFIED = "modified"
    ADDED = "added"
    DELETED = "deleted"
    RENAMED = "renamed"
    UNTRACKED = "untracked"
    COPIED = "copied"
    IGNORED = "ignored"
    UNMODIFIED = "unmodified"

    def icon(self) -> str:
        """The icon shown next to a file with this status."""
        return _ICONS[self]


_ICONS = {
    FileStatus.MODIFIED: "📝",
    FileStatus.ADDED: "➕",
    FileStatus.DELETED: "🗑️",
    FileStatus.RENAMED: "↔️",
    FileStatus.UNTRACKED: "❓",
    FileStatus.COPIED: "📋",
    FileStatus.IGNORED: "👁️",
    FileStatus.UNMODIFIED: "📄",
}


@dataclass(frozen=True)
class FileChange:
    """A changed file and its status."""

    path: Path
    status: FileStatus

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))


class PendingActionKind(enum.Enum):
    STAGE_ALL = "stage_all"
    UNSTAGE_ALL = "unstage_all"
    STAGE_SELECTED = "stage_selected"
    UNSTAGE_SELECTED = "unstage_selected"


@dataclass(frozen=True)
class PendingAction:
    """A staging action requested by the file list, run on the next frame."""

    kind: PendingActionKind
    paths: tuple[Path, ...]


def file_label(change: FileChange) -> str:
    """Icon and file name; the whole path when it has no final component."""
    name = change.path.name or str(change.path)
    return f"{change.status.icon()} {name}"


class FileList:
    """State of a staged or unstaged file list panel."""

    def __init__(self, title: str, is_staged: bool) -> None:
        self.title = title
        self.is_staged = is_staged
        self.checked_files: set[Path] = set()
        self.filter = ""
        self.filter_visible = False

    def toggle_filter(self) -> bool:
        """Show or hide the filter input; hiding it clears the filter text."""
        self.filter_visible = not self.filter_visible
        if not self.filter_visible:
            self.filter = ""
        return self.filter_visible

    def clear_filter(self) -> None:
        self.filter = ""

    def heading(self, file_count: int) -> str:
        return f"{self.title} ({file_count})"

    def filter_files(self, files: Iterable[FileChange]) -> list[FileChange]:
        """Files whose path contains the filter text, ignoring case."""
        if not self.filter:
            return list(files)
        needle = self.filter.lower()
        return [f for f in files if needle in str(f.path).lower()]

    def set_checked(self, path: str | os.PathLike[str], checked: bool) -> None:
        if checked:
            self.checked_files.add(Path(path))
        else:
            self.checked_files.discard(Path(path))

    def is_checked(self, path: str | os.PathLike[str]) -> bool:
        return Path(path) in self.checked_files

    def clear_checked(self) -> None:
        self.checked_files.clear()

    def bulk_action(self, files: Iterable[FileChange]) -> PendingAction | None:
        """Stage-all or unstage-all for ``files``, or None when there are none."""
        paths = tuple(f.path for f in files)
        if not paths:
            return None
        kind = PendingActionKind.UNSTAGE_ALL if self.is_staged else PendingActionKind.STAGE_ALL
        return PendingAction(kind, paths)

    def selected_action(self) -> PendingAction | None:
        """Stage or unstage the checked files, or None when nothing is checked."""
        if not self.checked_files:
            return None
        kind = (
            PendingActionKind.UNSTAGE_SELECTED
            if self.is_staged
            else PendingActionKind.STAGE_SELECTED
        )
        return PendingAction(kind, tuple(sorted(self.checked_files)))