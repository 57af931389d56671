"""Recently opened repositories, most recent first."""

from __future__ import annotations

import os
from pathlib import Path

import platformdirs

DEFAULT_MAX_COUNT = 10
_APP_DIR = "git-gud"
_FILE_NAME = "recent_repos.txt"


class RecentRepos:
    """A bounded most-recently-used list of repository paths."""

    def __init__(self, max_count: int = DEFAULT_MAX_COUNT) -> None:
        self.max_count = max_count
        self._repos: list[Path] = []

    def add(self, path: str | os.PathLike[str]) -> None:
        """Move ``path`` to the front, dropping the oldest entry if over the limit."""
        path = Path(path)
        self._repos = [p for p in self._repos if p != path]
        self._repos.insert(0, path)
        if len(self._repos) > self.max_count:
            self._repos.pop()

    def get(self) -> list[Path]:
        """Return the recent paths, most recent first."""
        return list(self._repos)

    def contains(self, path: str | os.PathLike[str]) -> bool:
        return Path(path) in self._repos

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, os.PathLike)):
            return False
        return self.contains(path)

    def __iter__(self):
        return iter(self._repos)

    def clear(self) -> None:
        self._repos.clear()

    def __len__(self) -> int:
        return len(self._repos)

    def is_empty(self) -> bool:
        return not self._repos

    def save_to_file(self, path: str | os.PathLike[str]) -> None:
        """Write one path per line to ``path``."""
        content = "\n".join(str(p) for p in self._repos)
        Path(path).write_text(content, encoding="utf-8")

    @classmethod
    def load_from_file(cls, path: str | os.PathLike[str]) -> RecentRepos:
        """Read paths from a file written by :meth:`save_to_file`."""
        content = Path(path).read_text(encoding="utf-8")
        repos = cls(DEFAULT_MAX_COUNT)
        repos._repos = [Path(line.strip()) for line in content.splitlines() if line.strip()]
        return repos

    @staticmethod
    def default_path() -> Path:
        """The per-user file that holds the recent repository list."""
        base = Path(platformdirs.user_config_dir(roaming=True))
        return base / _APP_DIR / _FILE_NAME

    @classmethod
    def load_default(cls) -> RecentRepos:
        """Load from the default location, or start empty if that fails."""
        try:
            return cls.load_from_file(cls.default_path())
        except (OSError, UnicodeDecodeError):
            return cls()

    def save_default(self) -> None:
        """Save to the default location, creating its directory if needed."""
        path = self.default_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        self.save_to_file(path)