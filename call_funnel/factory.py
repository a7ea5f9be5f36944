from call_funnel.config import FunnelConfig
from call_funnel.funnel import Funnel, FutureFactory
from call_funnel.logging import Logger, LoggingConfig


def create_funnel(
    config: FunnelConfig | None = None,
    future_factory: FutureFactory | None = None,
    logger: Logger | None = None,
) -> Funnel:
    """
    Build a funnel from an optional config.

    ``future_factory`` takes precedence over the config's own factory and
    only changes the type of handle returned for calls queued while held.
    Logging settings in the config are applied to the current logging
    context.
    """
    if config is None:
        config = FunnelConfig()

    LoggingConfig().update(
        log_directory=config.log_directory,
        log_level=config.log_level,
        log_output=config.log_output,
    )

    return Funnel(
        future_factory=future_factory or config.future_factory,
        name=config.name,
        logger=logger,
    )
