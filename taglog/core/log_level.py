"""
Log level enumeration

Levels are totally ordered; ALL and OFF only make sense as thresholds.
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    An entry is dispatched only if its level is >= the configured threshold.
    """

    ALL = 0     # Threshold sentinel: accept everything
    TRACE = 1   # Most verbose, detailed tracing
    DEBUG = 2   # Debug information
    INFO = 3    # Informational messages
    WARN = 4    # Warning messages
    ERROR = 5   # Error messages
    FATAL = 6   # Fatal errors
    OFF = 7     # Threshold sentinel: logging disabled

    def __str__(self) -> str:
        """String representation of log level."""
        return LEVEL_NAMES[self]

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        if not isinstance(level_str, str):
            raise ValueError(f"Invalid log level: {level_str!r}")
        try:
            return LEVEL_FROM_NAME[level_str.upper()]
        except KeyError:
            raise ValueError(f"Invalid log level: {level_str}") from None

    @property
    def is_sentinel(self) -> bool:
        """True for levels that are only valid as a threshold."""
        return self in (LogLevel.ALL, LogLevel.OFF)

    @property
    def color(self) -> str:
        """
        Get the display color for this level.

        Returns:
            Hex color string, or an empty string for sentinels
        """
        return LEVEL_COLORS.get(self, "")


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.ALL: "ALL",
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.FATAL: "FATAL",
    LogLevel.OFF: "OFF",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}

# Console colors, keyed per dispatchable level
LEVEL_COLORS: Dict[LogLevel, str] = {
    LogLevel.TRACE: "#2eb596",
    LogLevel.DEBUG: "#3f79e8",
    LogLevel.INFO: "#00ff00",
    LogLevel.WARN: "#bee22b",
    LogLevel.FATAL: "#ff56d9",
    LogLevel.ERROR: "#ff0000",
}


def _validate_tables() -> None:
    members = set(LogLevel)
    if set(LEVEL_NAMES) != members or len(LEVEL_FROM_NAME) != len(members):
        raise RuntimeError("LEVEL_NAMES must name every LogLevel exactly once")
    if set(LEVEL_COLORS) != {level for level in members if not level.is_sentinel}:
        raise RuntimeError("LEVEL_COLORS must cover every non-sentinel LogLevel")


_validate_tables()
