"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

taglog - A lightweight tagged logging facade with pluggable layouts
and appenders
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from taglog.core.errors import ConfigurationError
from taglog.core.log_level import LogLevel
from taglog.core.log_entry import LogEntry
from taglog.core.logger_config import LoggerConfig
from taglog.core.logger import Logger
from taglog.core.context import LoggingContext
from taglog.core.config_builder import LoggerConfigBuilder

# Import submodules (not all classes by default)
from taglog import appenders
from taglog import layouts
from taglog import utils

__all__ = [
    "ConfigurationError",
    "LogLevel",
    "LogEntry",
    "LoggerConfig",
    "Logger",
    "LoggingContext",
    "LoggerConfigBuilder",
    "appenders",
    "layouts",
    "utils",
]
