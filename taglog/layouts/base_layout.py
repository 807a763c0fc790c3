"""
Base layout interface

A layout is a stateless strategy mapping a LogEntry to a string.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable

from taglog.core.log_entry import LogEntry

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_time(time: datetime) -> str:
    """Render ``time`` as ``YYYY-MM-DD HH:MM:SS`` (24-hour, zero-padded)."""
    return time.strftime(TIME_FORMAT)


class BaseLayout(ABC):
    """
    Abstract base class for layouts.

    Layouts are callable, so a layout object and a plain
    ``LogEntry -> str`` function can be used interchangeably.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Format a log entry into a string.

        Args:
            entry: The log entry to format

        Returns:
            Formatted string representation of the log entry
        """
        pass

    def __call__(self, entry: LogEntry) -> str:
        """Allow layouts to be callable."""
        return self.format(entry)


class FunctionLayout(BaseLayout):
    """Layout backed by a plain formatting function."""

    def __init__(self, func: Callable[[LogEntry], str]):
        """
        Initialize function layout.

        Args:
            func: Function that takes a LogEntry and returns the text to write

        Example:
            layout = FunctionLayout(lambda e: f"{e.level.name}: {e.message}")
        """
        if not callable(func):
            raise TypeError("func must be callable")

        self.func = func

    def format(self, entry: LogEntry) -> str:
        return self.func(entry)

    def __repr__(self) -> str:
        """String representation."""
        name = getattr(self.func, "__name__", repr(self.func))
        return f"FunctionLayout(func={name})"
