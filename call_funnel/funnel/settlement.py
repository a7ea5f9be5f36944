from __future__ import annotations

import asyncio
import concurrent.futures
import inspect
from typing import Any

from call_funnel.exceptions import EventLoopRequiredError, SettlementError

from .future_factory import FutureLike
from .outcome import Deferred, Immediate, Outcome
from .pending_call import PendingCall


def resolve_handle(handle: FutureLike[Any], result: Any) -> None:
    try:
        if handle.done():
            return

        handle.set_result(result)

    except AttributeError as err:
        raise SettlementError(
            f"Cannot resolve handle of type {type(handle).__name__}"
        ) from err


def reject_handle(handle: FutureLike[Any], error: BaseException) -> None:
    if isinstance(error, StopIteration):
        # Futures refuse StopIteration, coroutines convert it the same way.
        converted = RuntimeError(f"{type(error).__name__} raised by a queued call")
        converted.__cause__ = error
        error = converted

    try:
        if handle.done():
            return

        handle.set_exception(error)

    except AttributeError as err:
        raise SettlementError(
            f"Cannot reject handle of type {type(handle).__name__}"
        ) from err


def cancel_handle(handle: FutureLike[Any]) -> None:
    try:
        if handle.done():
            return

        handle.cancel()

    except AttributeError as err:
        raise SettlementError(
            f"Cannot cancel handle of type {type(handle).__name__}"
        ) from err


def settle_pending_call(call: PendingCall[Any], outcome: Outcome) -> None:
    """
    Route the outcome of a drained call into the handle its caller holds.

    Plain values settle the handle right away. Asynchronous results get a
    done-callback and settle the handle whenever they complete, so the
    drain never waits on them.
    """
    match outcome:
        case Immediate(value=value):
            resolve_handle(call.handle, value)

        case Deferred(source=source):
            source = _to_callback_source(source, call.handle)
            source.add_done_callback(
                lambda completed: _copy_outcome(completed, call.handle)
            )


def _to_callback_source(source: Any, handle: FutureLike[Any]):
    handle_loop: asyncio.AbstractEventLoop | None = None
    if isinstance(handle, asyncio.Future):
        handle_loop = handle.get_loop()

    if isinstance(source, concurrent.futures.Future):
        if handle_loop is None:
            return source

        # Done-callbacks of concurrent futures fire on the completing
        # thread, asyncio handles must only be touched from their loop.
        return asyncio.wrap_future(source, loop=handle_loop)

    if callable(getattr(source, "add_done_callback", None)):
        return source

    if handle_loop is None:
        try:
            handle_loop = asyncio.get_running_loop()

        except RuntimeError as err:
            if inspect.iscoroutine(source):
                source.close()

            raise EventLoopRequiredError(
                f"Awaitable result of type {type(source).__name__} needs a running event loop to settle"
            ) from err

    return asyncio.ensure_future(source, loop=handle_loop)


def _copy_outcome(source: Any, handle: FutureLike[Any]) -> None:
    cancelled = getattr(source, "cancelled", None)
    if cancelled is not None and cancelled():
        cancel_handle(handle)
        return

    error = source.exception()
    if error is not None:
        reject_handle(handle, error)

    else:
        resolve_handle(handle, source.result())
