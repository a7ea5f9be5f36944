from dataclasses import dataclass

from call_funnel.funnel.future_factory import FutureFactory
from call_funnel.logging import LogLevelName, LogOutput

from .env import FunnelEnv


@dataclass(slots=True)
class FunnelConfig:
    """Configuration settings for a funnel and its logging."""

    name: str = "default"
    future_factory: FutureFactory | None = None
    log_level: LogLevelName | None = None
    log_output: LogOutput | None = None
    log_directory: str | None = None

    @classmethod
    def from_env(
        cls,
        env: FunnelEnv,
        future_factory: FutureFactory | None = None,
    ) -> "FunnelConfig":
        """Create a config instance from environment settings."""
        return cls(
            name=env.FUNNEL_NAME,
            future_factory=future_factory,
            log_level=env.FUNNEL_LOG_LEVEL,
            log_output=env.FUNNEL_LOG_OUTPUT,
            log_directory=env.FUNNEL_LOG_DIRECTORY,
        )


def create_funnel_config_from_env(
    env: FunnelEnv,
    future_factory: FutureFactory | None = None,
) -> FunnelConfig:
    """Create funnel config using Env values."""
    return FunnelConfig.from_env(env, future_factory=future_factory)
