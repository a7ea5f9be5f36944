"""
Pytest configuration for call_funnel tests.

Async tests are marked with ``@pytest.mark.asyncio`` and run under
pytest-asyncio.
"""

from typing import Any, Callable, Generator, List

import pytest

from call_funnel import Funnel
from call_funnel.logging.config import logging_config


@pytest.fixture(autouse=True)
def restore_logging_config() -> Generator[None, None, None]:
    tokens = [
        logging_config._global_log_level.set(logging_config._global_log_level.get()),
        logging_config._global_log_output_type.set(
            logging_config._global_log_output_type.get()
        ),
        logging_config._global_logging_directory.set(
            logging_config._global_logging_directory.get()
        ),
        logging_config._global_disabled_loggers.set(
            logging_config._global_disabled_loggers.get()
        ),
    ]

    yield

    (
        log_level_token,
        log_output_token,
        log_directory_token,
        disabled_loggers_token,
    ) = tokens

    logging_config._global_log_level.reset(log_level_token)
    logging_config._global_log_output_type.reset(log_output_token)
    logging_config._global_logging_directory.reset(log_directory_token)
    logging_config._global_disabled_loggers.reset(disabled_loggers_token)


@pytest.fixture
def funnel() -> Funnel:
    return Funnel(name="test")


@pytest.fixture
def calls() -> List[Any]:
    return []


@pytest.fixture
def recorder(calls: List[Any]) -> Callable[[str], Callable[..., Any]]:
    """Build targets that record their name and arguments when invoked."""

    def create_target(name: str, result: Any = None) -> Callable[..., Any]:
        def target(*args: Any, **kwargs: Any) -> Any:
            calls.append((name, args, kwargs))
            return result

        target.__name__ = name
        target.__qualname__ = name
        return target

    return create_target
