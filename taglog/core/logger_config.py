"""
Logger configuration management

Holds the threshold, the optional tag allow-list and the ordered appenders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Iterable, List, Optional, Union

from taglog.core.errors import ConfigurationError
from taglog.core.log_level import LogLevel

if TYPE_CHECKING:
    from taglog.appenders.base_appender import BaseAppender


@dataclass(init=False)
class LoggerConfig:
    """
    Logger configuration.

    Appenders are dispatched in the order they were added.
    """

    level: LogLevel = LogLevel.INFO
    tags: Optional[FrozenSet[str]] = None
    appenders: List["BaseAppender"] = field(default_factory=list)

    def __init__(
        self,
        appender: Optional["BaseAppender"] = None,
        level: Union[LogLevel, str] = LogLevel.INFO,
        tags: Optional[Iterable[str]] = None,
    ):
        """
        Initialize configuration.

        Args:
            appender: Optional first appender
            level: Minimum level (threshold), a LogLevel or its name
            tags: Tag allow-list; None or empty accepts every tag
        """
        self.level = self._coerce_level(level)
        self.tags = self._coerce_tags(tags)
        self.appenders = []
        if appender is not None:
            self.add_appender(appender)

    @staticmethod
    def _coerce_level(level: Union[LogLevel, str]) -> LogLevel:
        if isinstance(level, LogLevel):
            return level
        if isinstance(level, str):
            try:
                return LogLevel.from_string(level)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
        raise TypeError("level must be LogLevel enum or level name")

    @staticmethod
    def _coerce_tags(tags: Optional[Iterable[str]]) -> Optional[FrozenSet[str]]:
        if tags is None:
            return None
        if isinstance(tags, str):
            raise TypeError("tags must be an iterable of strings, not a string")
        return frozenset(tags)

    def add_appender(self, appender: "BaseAppender") -> None:
        """Add an appender after the ones already configured."""
        self.appenders.append(appender)

    def set_level(self, level: Union[LogLevel, str]) -> None:
        """Set minimum log level."""
        self.level = self._coerce_level(level)

    def get_level(self) -> LogLevel:
        return self.level

    def get_appenders(self) -> List["BaseAppender"]:
        """Return the appenders in dispatch order."""
        return list(self.appenders)

    def get_tags(self) -> Optional[FrozenSet[str]]:
        return self.tags

    def has_tag(self, tag: str) -> bool:
        """
        Check whether entries from ``tag`` pass the tag allow-list.

        Args:
            tag: Logger tag (matched exactly, case-sensitive)

        Returns:
            True if no allow-list is set or ``tag`` is in it
        """
        if not self.tags:
            return True
        return tag in self.tags

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration (INFO, no appenders, silent)."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        from taglog.appenders.console_appender import ConsoleAppender
        from taglog.layouts.basic_layout import BasicLayout

        appender = ConsoleAppender()
        appender.set_layout(BasicLayout())
        return cls(appender, level=LogLevel.DEBUG)

    @classmethod
    def from_dict(cls, descriptor: Dict[str, Any]) -> "LoggerConfig":
        """Build a configuration from a declarative descriptor."""
        from taglog.core.config_builder import LoggerConfigBuilder

        return LoggerConfigBuilder.from_dict(descriptor)

    @classmethod
    def from_json(cls, source: Union[str, Path]) -> "LoggerConfig":
        """Build a configuration from JSON text or a JSON file."""
        from taglog.core.config_builder import LoggerConfigBuilder

        return LoggerConfigBuilder.from_json(source)
