from .models import Entry, Log, LogLevel, LogLevelName
from .config import LoggingConfig, LogOutput, StreamType
from .streams import Logger, LoggerStream

__all__ = [
    "Entry",
    "Log",
    "LogLevel",
    "LogLevelName",
    "LogOutput",
    "Logger",
    "LoggerStream",
    "LoggingConfig",
    "StreamType",
]
