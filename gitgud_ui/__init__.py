"""Toolkit-independent view models for a Git client: recent repositories, error dialog, virtual scrolling, branch and file lists, commit panel and main window."""

__version__ = "0.1.0"

__all__ = [
    "branch_list",
    "commit_panel",
    "error_dialog",
    "file_list",
    "main_window",
    "recent_repos",
    "virtual_scroll",
]