"""
LoggerConfig builder

Fluent API for code-first configuration plus the declarative builder that
turns a config document into a LoggerConfig.

Document shape:
    {
        "level": "ALL" | "TRACE" | "DEBUG" | "INFO" | "WARN" | "ERROR" | "FATAL" | "OFF",
        "tags": ["app", ...],
        "layouts": [
            {
                "type": "basic" | "html",
                "options": {"color_scheme": "LIGHT" | "DARK" | "SOLARIZED" | {...}},
                "appenders": [{"type": "console" | "memory" | "dom", "options": {...}}]
            }
        ]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from taglog.appenders.base_appender import BaseAppender
from taglog.appenders.console_appender import ConsoleAppender
from taglog.appenders.memory_appender import MemoryAppender
from taglog.core.errors import ConfigurationError
from taglog.core.log_level import LogLevel
from taglog.core.logger_config import LoggerConfig
from taglog.layouts.base_layout import BaseLayout
from taglog.layouts.basic_layout import BasicLayout
from taglog.layouts.html_layout import HTMLLayout

_log = logging.getLogger(__name__)


def _build_basic_layout(options: Mapping[str, Any]) -> BaseLayout:
    return BasicLayout()


def _build_html_layout(options: Mapping[str, Any]) -> BaseLayout:
    return HTMLLayout(options.get("color_scheme"))


def _build_console_appender(options: Mapping[str, Any]) -> BaseAppender:
    return ConsoleAppender()


def _build_memory_appender(options: Mapping[str, Any]) -> BaseAppender:
    return MemoryAppender(
        buffer_size=options.get("buffer_size"),
        escape_html=bool(options.get("escape_html", False)),
    )


LAYOUT_TYPES = {
    "basic": _build_basic_layout,
    "html": _build_html_layout,
}

# "dom" is reserved for a browser sink and has no builder here
APPENDER_TYPES = {
    "console": _build_console_appender,
    "memory": _build_memory_appender,
}


class LoggerConfigBuilder:
    """
    Builder pattern for LoggerConfig construction.

    Example:
        config = (LoggerConfigBuilder()
            .with_level(LogLevel.DEBUG)
            .with_tags("app", "db")
            .add_appender(ConsoleAppender(), BasicLayout())
            .build())
    """

    def __init__(self):
        self._level: LogLevel = LogLevel.INFO
        self._tags: Optional[List[str]] = None
        self._appenders: List[Tuple[Optional[BaseAppender], Optional[BaseLayout]]] = []

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerConfigBuilder":
        """
        Set minimum log level.

        Raises:
            ConfigurationError: If a level name is not recognized
        """
        if isinstance(level, str):
            try:
                level = LogLevel.from_string(level)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
        self._level = level
        return self

    def with_tags(self, *tags: str) -> "LoggerConfigBuilder":
        """Only dispatch entries from loggers with one of these tags."""
        self._tags = list(tags)
        return self

    def add_appender(
        self,
        appender: Optional[BaseAppender],
        layout: Optional[BaseLayout] = None,
    ) -> "LoggerConfigBuilder":
        """
        Add an appender, attaching ``layout`` to it when building.

        Args:
            appender: Appender instance; None marks an appender that could
                      not be constructed and fails the build
            layout: Layout to attach (None keeps the appender's own)

        Returns:
            Self for method chaining
        """
        self._appenders.append((appender, layout))
        return self

    def build(self) -> LoggerConfig:
        """
        Build and return the configuration.

        Raises:
            ConfigurationError: If an appender could not be constructed
        """
        config = LoggerConfig(level=self._level, tags=self._tags)
        for appender, layout in self._appenders:
            if appender is None:
                raise ConfigurationError("Cannot attach a layout to an unresolved appender")
            if layout is not None:
                appender.set_layout(layout)
            config.add_appender(appender)

        _log.debug(
            "Built config: level=%s, tags=%s, %d appender(s)",
            config.get_level(),
            sorted(config.get_tags()) if config.get_tags() else None,
            len(config.get_appenders()),
        )
        return config

    @classmethod
    def from_dict(cls, descriptor: Mapping[str, Any]) -> LoggerConfig:
        """
        Build a configuration from a declarative descriptor.

        Unknown layout types produce appenders without a layout, which
        fail on their first append. Unknown appender types (including
        "dom") cannot receive the enclosing layout and fail the build.

        Args:
            descriptor: Config document (see module docstring)

        Returns:
            New LoggerConfig

        Raises:
            ConfigurationError: On unknown level names, unresolved appenders
                                or malformed blocks
        """
        if not isinstance(descriptor, Mapping):
            raise ConfigurationError("Config descriptor must be a mapping")

        builder = cls().with_level(descriptor.get("level", "INFO"))
        tags = descriptor.get("tags")
        if tags is not None and not isinstance(tags, list):
            raise ConfigurationError("'tags' must be a list")
        if tags:
            builder.with_tags(*tags)

        for layout_block in cls._blocks(descriptor, "layouts"):
            layout_type = layout_block.get("type")
            layout_factory = LAYOUT_TYPES.get(layout_type)
            layout = None
            if layout_factory is not None:
                layout = layout_factory(layout_block.get("options") or {})
            else:
                _log.debug("Unknown layout type %r, appenders get no layout", layout_type)

            for appender_block in cls._blocks(layout_block, "appenders"):
                appender_type = appender_block.get("type")
                appender_factory = APPENDER_TYPES.get(appender_type)
                if appender_factory is None:
                    raise ConfigurationError(
                        f"Appender type {appender_type!r} could not be constructed; "
                        f"cannot attach {layout_type!r} layout"
                    )
                appender = appender_factory(appender_block.get("options") or {})
                builder.add_appender(appender, layout)

        return builder.build()

    @staticmethod
    def _blocks(parent: Mapping[str, Any], key: str) -> Iterable[Mapping[str, Any]]:
        blocks = parent.get(key) or []
        if not isinstance(blocks, list):
            raise ConfigurationError(f"'{key}' must be a list")
        for block in blocks:
            if not isinstance(block, Mapping):
                raise ConfigurationError(f"Entries of '{key}' must be mappings")
            yield block

    @classmethod
    def from_json(cls, source: Union[str, Path]) -> LoggerConfig:
        """
        Build a configuration from JSON text or a JSON file.

        Args:
            source: JSON document, or path to a file containing one

        Returns:
            New LoggerConfig
        """
        if isinstance(source, Path):
            return cls.from_dict(cls._parse_json(source.read_text(encoding="utf-8")))

        try:
            descriptor: Any = json.loads(source)
        except json.JSONDecodeError as e:
            try:
                text = Path(source).read_text(encoding="utf-8")
            except (OSError, ValueError):
                raise ConfigurationError(
                    f"Config source is neither JSON nor a readable file: {e}"
                ) from e
            descriptor = cls._parse_json(text)
        return cls.from_dict(descriptor)

    @staticmethod
    def _parse_json(text: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid config JSON: {e}") from e
