"""Commit panel: author overrides and the rules for committing."""

from __future__ import annotations

READY_TEXT = "✓ Ready to commit"
NOTHING_STAGED_TEXT = "No staged changes"
VALID_TEXT = "✓ Valid message"
INVALID_TEXT = "✗ Summary required"


def staged_status(staged_count: int) -> str:
    """The status shown next to the number of staged files."""
    return READY_TEXT if staged_count > 0 else NOTHING_STAGED_TEXT


def can_commit(staged_count: int, message_valid: bool) -> bool:
    """A commit needs staged changes and a valid message."""
    return staged_count > 0 and message_valid


def character_count(summary: str, description: str) -> int:
    """Length of summary plus description, counted in UTF-8 bytes."""
    return len(summary.encode("utf-8")) + len(description.encode("utf-8"))


def validity_label(valid: bool) -> str:
    return VALID_TEXT if valid else INVALID_TEXT


def commit_success_message(message: str) -> str:
    """The notice shown after a commit, naming the first line of its message."""
    lines = message.splitlines()
    first = lines[0] if lines else ""
    return f"Commit created: {first}"


class CommitPanel:
    """State of the commit panel's advanced options."""

    def __init__(self) -> None:
        self.show_advanced = False
        self.author_name = ""
        self.author_email = ""

    def clear_author_overrides(self) -> None:
        self.author_name = ""
        self.author_email = ""