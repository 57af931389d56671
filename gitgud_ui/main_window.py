"""Main window: repository opening, closing and the error dialog."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from .error_dialog import ErrorDialog
from .recent_repos import RecentRepos

log = logging.getLogger(__name__)

DEFAULT_OPEN_PATH = "."

Loader = Callable[[Path], Any]


class MainWindow:
    """Top-level window state: the loaded repository, dialogs and messages.

    ``loader`` opens the repository at a path and returns it, raising an
    exception when the path cannot be opened.
    """

    def __init__(
        self,
        loader: Loader,
        recent_repos: RecentRepos | None = None,
        initial_path: str | os.PathLike[str] | None = None,
    ) -> None:
        self._loader = loader
        self.recent_repos = recent_repos if recent_repos is not None else RecentRepos.load_default()
        self.error_dialog = ErrorDialog()
        self.show_open_dialog = True
        self.open_repo_path = DEFAULT_OPEN_PATH
        self.repository: Any = None
        self.repository_path: Path | None = None
        self.error_message: str | None = None
        self.info_message: str | None = None

        if initial_path is not None:
            path = Path(initial_path)
            if self._load(path):
                self.show_open_dialog = False
                self.open_repo_path = str(initial_path)
                self.recent_repos.add(path)

    def __enter__(self) -> MainWindow:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.save_recent_repos()

    def has_repository(self) -> bool:
        return self.repository_path is not None

    @property
    def shows_empty_state(self) -> bool:
        """Whether the "no repository loaded" screen is shown."""
        return not self.has_repository() and not self.show_open_dialog

    def set_error(self, message: str) -> None:
        self.error_message = message

    def clear_error(self) -> None:
        self.error_message = None

    def set_info(self, message: str) -> None:
        self.info_message = message

    def clear_info(self) -> None:
        self.info_message = None

    def select_recent(self, path: str | os.PathLike[str]) -> None:
        """Put a recent repository's path into the open dialog."""
        self.open_repo_path = str(path)

    def _load(self, path: Path) -> bool:
        try:
            repository = self._loader(path)
        except Exception as exc:  # the loader's failure is shown to the user
            log.error("Failed to load repository: %s", exc)
            self.set_error(f"Failed to open repository: {exc}")
            return False
        self.repository = repository
        self.repository_path = path
        return True

    def open_repository(self, path: str | os.PathLike[str] | None = None) -> bool:
        """Open ``path`` (or the dialog's path) and report whether it loaded."""
        target = Path(path if path is not None else self.open_repo_path)
        if not self._load(target):
            return False
        self.show_open_dialog = False
        self.clear_error()
        self.recent_repos.add(target)
        self.save_recent_repos()
        return True

    def request_open(self) -> None:
        self.show_open_dialog = True

    def cancel_open(self) -> None:
        self.show_open_dialog = False

    def close_repository(self) -> None:
        """Unload the repository and clear all messages."""
        self.repository = None
        self.repository_path = None
        self.clear_error()
        self.clear_info()

    def sync_error(self, error_message: str | None = None) -> bool:
        """Show the pending error in the dialog unless it is already open.

        Uses the window's own error when ``error_message`` is not given and
        returns whether the dialog is visible.
        """
        message = error_message if error_message is not None else self.error_message
        if message is not None and not self.error_dialog.is_visible():
            self.error_dialog.show_error(message)
        return self.error_dialog.is_visible()

    def repository_label(self) -> str | None:
        """The menu bar text naming the loaded repository, if any."""
        if self.repository_path is None:
            return None
        return f"Repository: {self.repository_path}"

    def save_recent_repos(self) -> bool:
        """Save the recent repository list, logging rather than raising on failure."""
        try:
            self.recent_repos.save_default()
        except OSError as exc:
            log.error("Failed to save recent repositories: %s", exc)
            return False
        return True