"""Branch list: filtering and labelling of repository branches."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_CURRENT_ICON = "🌿"
_REMOTE_ICON = "🌐"
_LOCAL_ICON = "🌱"


@dataclass(frozen=True)
class Branch:
    """A branch as shown in the branch list."""

    name: str
    is_current: bool = False
    is_remote: bool = False


def branch_label(branch: Branch) -> str:
    """The text shown for ``branch``: an icon for its kind, then its name."""
    if branch.is_current:
        icon = _CURRENT_ICON
    elif branch.is_remote:
        icon = _REMOTE_ICON
    else:
        icon = _LOCAL_ICON
    return f"{icon} {branch.name}"


def can_checkout(branch: Branch) -> bool:
    """Whether ``branch`` may be checked out; the current branch may not."""
    return not branch.is_current


class BranchList:
    """Filter state of the branch list panel."""

    def __init__(self) -> None:
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

    def filter_branches(self, branches: Iterable[Branch]) -> list[Branch]:
        """Branches whose names contain the filter text, ignoring case."""
        if not self.filter:
            return list(branches)
        needle = self.filter.lower()
        return [branch for branch in branches if needle in branch.name.lower()]