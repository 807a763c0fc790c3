"""
Tagged logger

Call sites log through a Logger; the owning LoggingContext decides whether
and where each entry goes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from taglog.core.log_entry import LogEntry
from taglog.core.log_level import LogLevel
from taglog.utils.stringify import stringify

if TYPE_CHECKING:
    from taglog.core.context import LoggingContext

DEFAULT_DEPTH = 1

_NO_DETAIL = object()


class Logger:
    """Logger identified by its tag."""

    def __init__(self, tag: str, context: "LoggingContext"):
        self._tag = tag
        self._context = context

    @property
    def tag(self) -> str:
        return self._tag

    def _do_log(
        self,
        level: LogLevel,
        message: str,
        detail: Any = _NO_DETAIL,
        depth: Optional[int] = None,
    ) -> None:
        """
        Filter, build and dispatch one entry.

        Appender errors propagate; appenders after the failing one are
        skipped.
        """
        config = self._context.get_config()
        if level < config.get_level() or not config.has_tag(self._tag):
            return

        if detail is not _NO_DETAIL:
            message = f"{message} {stringify(detail, depth or DEFAULT_DEPTH)}"

        entry = LogEntry(level=level, message=message, tag=self._tag)
        for appender in config.get_appenders():
            appender.append(entry)

    def log(self, message: str, detail: Any = _NO_DETAIL, depth: Optional[int] = None) -> None:
        """Log info message."""
        self._do_log(LogLevel.INFO, message, detail, depth)

    def trace(self, message: str, detail: Any = _NO_DETAIL, depth: Optional[int] = None) -> None:
        """Log trace message."""
        self._do_log(LogLevel.TRACE, message, detail, depth)

    def debug(self, message: str, detail: Any = _NO_DETAIL, depth: Optional[int] = None) -> None:
        """Log debug message."""
        self._do_log(LogLevel.DEBUG, message, detail, depth)

    def info(self, message: str, detail: Any = _NO_DETAIL, depth: Optional[int] = None) -> None:
        """Log info message."""
        self._do_log(LogLevel.INFO, message, detail, depth)

    def warn(self, message: str, detail: Any = _NO_DETAIL, depth: Optional[int] = None) -> None:
        """Log warning message."""
        self._do_log(LogLevel.WARN, message, detail, depth)

    def error(self, message: str, detail: Any = _NO_DETAIL, depth: Optional[int] = None) -> None:
        """Log error message."""
        self._do_log(LogLevel.ERROR, message, detail, depth)

    def fatal(self, message: str, detail: Any = _NO_DETAIL, depth: Optional[int] = None) -> None:
        """Log fatal message."""
        self._do_log(LogLevel.FATAL, message, detail, depth)

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(tag={self._tag!r})"
