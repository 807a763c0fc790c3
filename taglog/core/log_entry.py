"""
Log entry data structure

Created by a Logger at dispatch time and never mutated afterwards.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from taglog.core.log_level import LogLevel


@dataclass(frozen=True)
class LogEntry:
    """
    A single log message on its way to the appenders.

    Contains the level, creation time, message text and the tag of the
    logger that produced it.
    """

    level: LogLevel
    message: str
    tag: str = "undefined"
    time: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if self.level.is_sentinel:
            raise ValueError(f"{self.level} cannot be attached to a log entry")
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "tag": self.tag,
            "time": self.time.isoformat(),
        }
