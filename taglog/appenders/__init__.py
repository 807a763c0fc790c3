"""Appenders module - Log output sinks"""

from taglog.appenders.base_appender import BaseAppender
from taglog.appenders.console_appender import ConsoleAppender, StreamConsole
from taglog.appenders.memory_appender import MemoryAppender

__all__ = ["BaseAppender", "ConsoleAppender", "StreamConsole", "MemoryAppender"]
