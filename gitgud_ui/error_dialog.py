"""State of the modal error dialog."""

from __future__ import annotations

DETAILS_THRESHOLD = 100


class ErrorDialog:
    """Holds the message and visibility of the error dialog."""

    def __init__(self) -> None:
        self.visible = False
        self.error_message = ""
        self.show_details = False

    def show_error(self, error_message: str) -> None:
        """Make the dialog visible with ``error_message``."""
        self.visible = True
        self.error_message = error_message
        self.show_details = False

    def hide(self) -> None:
        self.visible = False
        self.error_message = ""
        self.show_details = False

    def is_visible(self) -> bool:
        return self.visible

    def has_details(self) -> bool:
        """Whether the message is long enough to offer a details view."""
        return len(self.error_message.encode("utf-8")) > DETAILS_THRESHOLD

    def toggle_details(self) -> bool:
        """Flip the details view for long messages and return its new state."""
        if self.has_details():
            self.show_details = not self.show_details
        return self.show_details