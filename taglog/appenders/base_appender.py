"""
Base appender interface

An appender owns one layout and writes formatted entries to its sink.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from taglog.core.errors import ConfigurationError
from taglog.core.log_entry import LogEntry
from taglog.layouts.base_layout import BaseLayout, FunctionLayout


class BaseAppender(ABC):
    """
    Abstract base class for appenders.

    The layout can be swapped at any time; the change is picked up by the
    next call to append().
    """

    def __init__(self, layout: Optional[BaseLayout] = None):
        self._layout = layout

    def set_layout(self, layout: Optional[BaseLayout]) -> None:
        """Use ``layout`` for subsequent entries."""
        self._layout = layout

    def set_layout_function(self, func: Callable[[LogEntry], str]) -> None:
        """Use a plain formatting function as the layout."""
        self._layout = FunctionLayout(func)

    def get_layout(self) -> Optional[BaseLayout]:
        return self._layout

    def _format(self, entry: LogEntry) -> str:
        """
        Format ``entry`` with the current layout.

        Raises:
            ConfigurationError: If no layout has been set
        """
        if self._layout is None:
            raise ConfigurationError(f"{type(self).__name__} has no layout set")
        return self._layout.format(entry)

    @abstractmethod
    def append(self, entry: LogEntry) -> None:
        """
        Write one formatted entry to the sink.

        Args:
            entry: The log entry to write
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear the sink's visible history."""
        pass
