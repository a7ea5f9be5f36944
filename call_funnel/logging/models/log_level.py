from __future__ import annotations

from enum import Enum
from typing import Literal

LogLevelName = Literal[
    "trace",
    "debug",
    "info",
    "warn",
    "error",
    "critical",
    "fatal",
]


class LogLevel(Enum):
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    FATAL = "FATAL"

    @classmethod
    def to_level(cls, level_name: LogLevelName | str) -> LogLevel:
        try:
            return cls(level_name.upper())

        except ValueError:
            raise ValueError(
                f"Unknown log level {level_name!r}, expected one of {[level.value.lower() for level in cls]}"
            ) from None
