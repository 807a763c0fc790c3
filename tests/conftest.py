"""Shared fixtures for taglog tests"""

from datetime import datetime
from typing import List

import pytest

from taglog import LogEntry, LoggerConfig, LoggingContext, LogLevel
from taglog.appenders import BaseAppender, MemoryAppender
from taglog.layouts import BasicLayout


class RecordingAppender(BaseAppender):
    """Appender that records raw entries into a shared journal."""

    def __init__(self, name: str, journal: List):
        super().__init__(BasicLayout())
        self.name = name
        self.journal = journal
        self.cleared = 0

    def append(self, entry: LogEntry) -> None:
        self._format(entry)
        self.journal.append((self.name, entry))

    def clear(self) -> None:
        self.cleared += 1


@pytest.fixture
def fixed_entry():
    return LogEntry(
        level=LogLevel.INFO,
        message="hi",
        tag="app",
        time=datetime(2023, 1, 5, 8, 3, 9),
    )


@pytest.fixture
def memory():
    return MemoryAppender(layout=BasicLayout())


@pytest.fixture
def context(memory):
    return LoggingContext(LoggerConfig(memory, level=LogLevel.ALL))


@pytest.fixture
def recording_appender():
    """Factory for appenders that record entries into a shared journal."""
    return RecordingAppender
