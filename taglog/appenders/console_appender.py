"""Console appender with level colors"""

import re
import sys
from typing import Optional, Protocol, TextIO

from taglog.appenders.base_appender import BaseAppender
from taglog.core.log_entry import LogEntry
from taglog.layouts.base_layout import BaseLayout

_COLOR_HINT_RE = re.compile(r"^\s*color\s*:\s*#([0-9a-fA-F]{6})\s*;?\s*$")

RESET_CODE = "\033[0m"
CLEAR_SCREEN = "\033[2J\033[H"


class Console(Protocol):
    """Console-like sink used by ConsoleAppender."""

    def log(self, text: str, style: str = "") -> None:
        ...

    def clear(self) -> None:
        ...


class StreamConsole:
    """
    Console backed by a text stream.

    Style hints of the form ``color:#rrggbb`` become 24-bit ANSI colors when
    coloring is on; any other hint is ignored.
    """

    def __init__(self, stream: Optional[TextIO] = None, colored: Optional[bool] = None):
        """
        Initialize stream console.

        Args:
            stream: Output stream (default: sys.stderr)
            colored: Use ANSI color codes (default: only if stream is a TTY)
        """
        self._stream = stream
        self._colored = colored

    @property
    def stream(self) -> TextIO:
        """Injected stream, or whatever sys.stderr is at call time."""
        return self._stream if self._stream is not None else sys.stderr

    @property
    def colored(self) -> bool:
        if self._colored is not None:
            return self._colored
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    @staticmethod
    def color_code(style: str) -> str:
        """
        Translate a style hint into an ANSI escape sequence.

        Returns:
            Escape sequence, or an empty string if the hint is not understood
        """
        match = _COLOR_HINT_RE.match(style or "")
        if not match:
            return ""
        rgb = match.group(1)
        red, green, blue = (int(rgb[i:i + 2], 16) for i in (0, 2, 4))
        return f"\033[38;2;{red};{green};{blue}m"

    def log(self, text: str, style: str = "") -> None:
        """Write one line, colored according to ``style`` when possible."""
        stream = self.stream
        code = self.color_code(style) if self.colored else ""
        if code:
            text = f"{code}{text}{RESET_CODE}"
        stream.write(text + "\n")
        stream.flush()

    def clear(self) -> None:
        """Clear the terminal; no-op when not coloring."""
        if self.colored:
            self.stream.write(CLEAR_SCREEN)
            self.stream.flush()


class ConsoleAppender(BaseAppender):
    """Write entries to a console, tinted by level."""

    def __init__(self, console: Optional[Console] = None, layout: Optional[BaseLayout] = None):
        """
        Initialize console appender.

        Args:
            console: Object with log(text, style) and clear() methods
                     (default: a StreamConsole on sys.stderr)
            layout: Initial layout
        """
        super().__init__(layout)
        self._console = console

    def _get_console(self) -> Console:
        if self._console is None:
            self._console = StreamConsole()
        return self._console

    def append(self, entry: LogEntry) -> None:
        """Write log entry to console."""
        text = self._format(entry)
        self._get_console().log(text, f"color:{entry.level.color}")

    def clear(self) -> None:
        """Clear the console."""
        self._get_console().clear()
