from .env import FunnelEnv
from .funnel_config import FunnelConfig, create_funnel_config_from_env
from .load_env import load_env

__all__ = [
    "FunnelConfig",
    "FunnelEnv",
    "create_funnel_config_from_env",
    "load_env",
]
