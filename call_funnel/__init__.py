from .config import FunnelConfig, FunnelEnv, load_env
from .exceptions import EventLoopRequiredError, FunnelError, SettlementError
from .factory import create_funnel
from .funnel import (
    Funnel,
    FunnelStatus,
    FutureFactory,
    FutureLike,
    default_future_factory,
)

__all__ = [
    "EventLoopRequiredError",
    "Funnel",
    "FunnelConfig",
    "FunnelEnv",
    "FunnelError",
    "FunnelStatus",
    "FutureFactory",
    "FutureLike",
    "SettlementError",
    "create_funnel",
    "default_future_factory",
    "load_env",
]
