"""
Core module for the logging facade

This module contains the fundamental classes:
- Logger: Tagged logger used by call sites
- LoggingContext: Active config plus the tag -> Logger registry
- LoggerConfig: Threshold, tag allow-list and appenders
- LoggerConfigBuilder: Fluent and declarative config construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
"""

from taglog.core.errors import ConfigurationError
from taglog.core.log_level import LogLevel
from taglog.core.log_entry import LogEntry
from taglog.core.logger_config import LoggerConfig
from taglog.core.logger import Logger
from taglog.core.context import LoggingContext
from taglog.core.config_builder import LoggerConfigBuilder

__all__ = [
    "ConfigurationError",
    "LogLevel",
    "LogEntry",
    "LoggerConfig",
    "Logger",
    "LoggingContext",
    "LoggerConfigBuilder",
]
