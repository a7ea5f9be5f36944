from .funnel import Funnel
from .funnel_status import FunnelStatus
from .future_factory import FutureFactory, FutureLike, default_future_factory
from .outcome import Deferred, Immediate, Outcome, classify_result, is_future_like
from .pending_call import PendingCall
from .settlement import (
    cancel_handle,
    reject_handle,
    resolve_handle,
    settle_pending_call,
)

__all__ = [
    "Deferred",
    "Funnel",
    "FunnelStatus",
    "FutureFactory",
    "FutureLike",
    "Immediate",
    "Outcome",
    "PendingCall",
    "cancel_handle",
    "classify_result",
    "default_future_factory",
    "is_future_like",
    "reject_handle",
    "resolve_handle",
    "settle_pending_call",
]
