from __future__ import annotations

import asyncio
import concurrent.futures
from typing import (
    Any,
    Callable,
    Protocol,
    TypeVar,
    runtime_checkable,
)

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class FutureLike(Protocol[T_contra]):
    def done(self) -> bool: ...

    def cancel(self) -> bool: ...

    def set_result(self, result: T_contra) -> None: ...

    def set_exception(self, exception: BaseException) -> None: ...


FutureFactory = Callable[[], FutureLike[Any]]


def default_future_factory() -> asyncio.Future | concurrent.futures.Future:
    """
    Create a deferred-result handle for a queued call.

    Inside a running event loop this is an ``asyncio.Future`` bound to
    that loop, so callers can simply ``await`` it. Outside of one it is a
    ``concurrent.futures.Future``, which callers can block on with
    ``result()`` or bridge with ``asyncio.wrap_future``.
    """
    try:
        loop = asyncio.get_running_loop()

    except RuntimeError:
        return concurrent.futures.Future()

    return loop.create_future()
