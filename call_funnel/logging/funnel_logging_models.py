from .models import Entry, LogLevel


class FunnelTrace(Entry, kw_only=True):
    funnel: str
    status: str
    queued: int
    level: LogLevel = LogLevel.TRACE


class FunnelDebug(Entry, kw_only=True):
    funnel: str
    status: str
    queued: int
    level: LogLevel = LogLevel.DEBUG


class FunnelDrainError(Entry, kw_only=True):
    funnel: str
    target: str
    error: str
    level: LogLevel = LogLevel.ERROR
