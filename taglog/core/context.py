"""
Logging context

Owns the active LoggerConfig and the tag -> Logger registry. Applications
create one context at their entry point and pass it to the code that logs.
"""

import logging
import threading
from typing import Dict, Optional

from taglog.core.logger import Logger
from taglog.core.logger_config import LoggerConfig

UNDEFINED_TAG = "undefined"

_log = logging.getLogger(__name__)


class LoggingContext:
    """
    Active configuration plus one memoized Logger per tag.

    Thread Safety:
        Registry insertion and config replacement are each guarded by a
        lock; a log call reads the config reference once.

    Example:
        context = LoggingContext(LoggerConfig.debug_config())
        log = context.get_logger("app")
        log.info("started", {"pid": 42})
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        """
        Initialize context.

        Args:
            config: Active configuration (default: INFO, no appenders)
        """
        self._config = config or LoggerConfig.default()
        self._loggers: Dict[str, Logger] = {}
        self._lock = threading.Lock()

    def get_logger(self, tag: Optional[str] = None) -> Logger:
        """
        Get the logger for ``tag``, creating it on first request.

        Args:
            tag: Logger tag; None or empty maps to "undefined"

        Returns:
            The cached Logger for the tag
        """
        tag = tag or UNDEFINED_TAG
        with self._lock:
            logger = self._loggers.get(tag)
            if logger is None:
                logger = self._loggers[tag] = Logger(tag, self)
                _log.debug("Created logger %r", tag)
            return logger

    def set_config(self, config: LoggerConfig) -> None:
        """Replace the active configuration."""
        if not isinstance(config, LoggerConfig):
            raise TypeError("config must be a LoggerConfig")
        with self._lock:
            self._config = config
        _log.debug(
            "Active config replaced: level=%s, %d appender(s)",
            config.get_level(),
            len(config.get_appenders()),
        )

    def get_config(self) -> LoggerConfig:
        return self._config

