"""Status bar widget showing poll staleness and line counts."""

from textual.widgets import Static

from gpiolocator.models import BankSnapshot
from gpiolocator.ui_shared import format_staleness


class StatusBar(Static):
    """
    Status bar displaying the state of the line bank.

    Shows:
    - Time since the last completed poll
    - Readable / changed / blocked line counts
    """

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        padding: 0 1;
    }

    StatusBar.has_changes {
        background: $warning;
        color: $background;
    }
    """

    def __init__(self) -> None:
        """Initialize status bar."""
        super().__init__()
        self._elapsed = 0.0
        self._lines = 0
        self._available = 0
        self._changed = 0
        self._blocked = 0
        self._update_display()

    def update_state(self, snapshot: BankSnapshot) -> None:
        """
        Update all status information from a snapshot.

        Args:
            snapshot: Latest bank snapshot
        """
        self._elapsed = snapshot.elapsed
        self._lines = snapshot.line_count
        self._available = snapshot.available_count
        self._changed = snapshot.changed_count
        self._blocked = snapshot.blocked_count
        self._update_display()

    def _update_display(self) -> None:
        """Update the status bar display."""
        if self._changed:
            self.add_class("has_changes")
        else:
            self.remove_class("has_changes")

        parts = [
            format_staleness(self._elapsed),
            f"{self._available}/{self._lines} readable",
            f"{self._changed} changed",
        ]
        if self._blocked:
            parts.append(f"{self._blocked} blocked")

        self.update(" | ".join(parts))
