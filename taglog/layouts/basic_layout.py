"""
Plain-text layout

Formats entries as "{time} {level} [{tag}] - {message}"
"""

from taglog.core.log_entry import LogEntry
from taglog.layouts.base_layout import BaseLayout, format_time


class BasicLayout(BaseLayout):
    """
    Simple delimiter-based layout.

    Example output:
        2023-01-05 08:03:09 INFO [app] - hi
    """

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as a single plain-text line.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string
        """
        return f"{format_time(entry.time)} {entry.level.name} [{entry.tag}] - {entry.message}"

    def __repr__(self) -> str:
        """String representation."""
        return "BasicLayout()"
