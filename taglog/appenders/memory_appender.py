"""
In-memory appender

Keeps formatted lines in a bounded buffer, e.g. for display in a UI panel
or for inspection in tests.
"""

from collections import deque
from typing import Deque, List, Optional

from taglog.appenders.base_appender import BaseAppender
from taglog.core.log_entry import LogEntry
from taglog.layouts.base_layout import BaseLayout
from taglog.utils.html import escape_html


class MemoryAppender(BaseAppender):
    """Buffer formatted entries in memory."""

    def __init__(
        self,
        buffer_size: Optional[int] = None,
        escape_html: bool = False,
        layout: Optional[BaseLayout] = None,
    ):
        """
        Initialize memory appender.

        Args:
            buffer_size: Maximum number of lines kept; oldest are dropped
                         first. None keeps everything.
            escape_html: HTML-escape each formatted line before storing it
            layout: Initial layout
        """
        if buffer_size is not None and buffer_size <= 0:
            raise ValueError("buffer_size must be positive")

        super().__init__(layout)
        self.buffer_size = buffer_size
        self.escape_html = escape_html
        self._lines: Deque[str] = deque(maxlen=buffer_size)

    def append(self, entry: LogEntry) -> None:
        text = self._format(entry)
        if self.escape_html:
            text = escape_html(text)
        self._lines.append(text)

    def clear(self) -> None:
        self._lines.clear()

    def get_lines(self) -> List[str]:
        """Return buffered lines, oldest first."""
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        """String representation."""
        return f"MemoryAppender(buffer_size={self.buffer_size}, lines={len(self._lines)})"
