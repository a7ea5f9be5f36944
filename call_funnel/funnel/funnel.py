from __future__ import annotations

import asyncio
import contextlib
import functools
from typing import (
    Any,
    Callable,
    Iterator,
    List,
    ParamSpec,
    TypeVar,
)

from call_funnel.exceptions import SettlementError
from call_funnel.logging import Logger
from call_funnel.logging.funnel_logging_models import (
    FunnelDebug,
    FunnelDrainError,
    FunnelTrace,
)

from .funnel_status import FunnelStatus
from .future_factory import FutureFactory, FutureLike, default_future_factory
from .outcome import classify_result
from .pending_call import PendingCall
from .settlement import cancel_handle, reject_handle, settle_pending_call

P = ParamSpec("P")
R = TypeVar("R")


class Funnel:
    """
    Gate that defers wrapped calls while held and runs them, in call
    order, on release.

    While open, a wrapped callable behaves exactly like its target. While
    held, it returns a future-like handle from ``future_factory`` that
    settles with the target's outcome once a later ``release()`` runs it.
    """

    def __init__(
        self,
        future_factory: FutureFactory | None = None,
        name: str | None = None,
        logger: Logger | None = None,
    ) -> None:
        if future_factory is None:
            future_factory = default_future_factory

        if name is None:
            name = "default"

        if logger is None:
            logger = Logger()

        self.name = name
        self._future_factory = future_factory
        self._logger = logger["call_funnel"]
        self._queue: List[PendingCall[Any]] = []
        self._status = FunnelStatus.OPEN

    @property
    def status(self) -> FunnelStatus:
        return self._status

    @property
    def held(self) -> bool:
        return self._status == FunnelStatus.HELD

    def wrap(self, target: Callable[P, R]) -> Callable[P, R | FutureLike[R]]:
        @functools.wraps(target)
        def wrapped(*args: P.args, **kwargs: P.kwargs) -> R | FutureLike[R]:
            if self._status == FunnelStatus.OPEN:
                return target(*args, **kwargs)

            return self._enqueue(target, args, kwargs)

        return wrapped

    def hold(self) -> None:
        self._status = FunnelStatus.HELD
        self._logger.log(
            FunnelDebug(
                message="Funnel held",
                funnel=self.name,
                status=self.status.value,
                queued=len(self._queue),
            )
        )

    def release(self) -> None:
        self._status = FunnelStatus.OPEN

        # Calls queued while draining belong to the next release.
        pending, self._queue = self._queue, []

        self._logger.log(
            FunnelDebug(
                message=f"Funnel released, draining {len(pending)} calls",
                funnel=self.name,
                status=self.status.value,
                queued=len(pending),
            )
        )

        first_error: BaseException | None = None

        for call in pending:
            try:
                settle_pending_call(call, classify_result(call.invoke()))

            except BaseException as err:
                # Interrupts such as KeyboardInterrupt or CancelledError win
                # over ordinary failures, but only after the snapshot is drained.
                if first_error is None or (
                    isinstance(first_error, Exception)
                    and not isinstance(err, Exception)
                ):
                    first_error = err

                self._log_drain_failure(call, err)
                self._fail_pending_call(call, err)

        if first_error is not None:
            raise first_error

    @contextlib.contextmanager
    def holding(self) -> Iterator[Funnel]:
        self.hold()
        try:
            yield self

        finally:
            self.release()

    cork = hold
    uncork = release

    def _enqueue(
        self,
        target: Callable[..., R],
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> FutureLike[R]:
        handle = self._future_factory()
        self._queue.append(
            PendingCall(
                target=target,
                args=args,
                kwargs=dict(kwargs),
                handle=handle,
            )
        )

        self._logger.log(
            FunnelTrace(
                message=f"Queued call to {_target_name(target)}",
                funnel=self.name,
                status=self.status.value,
                queued=len(self._queue),
            )
        )

        return handle

    def _fail_pending_call(self, call: PendingCall[Any], err: BaseException):
        if isinstance(err, SettlementError):
            return

        try:
            if isinstance(err, asyncio.CancelledError):
                cancel_handle(call.handle)

            else:
                reject_handle(call.handle, err)

        except Exception as settle_err:
            self._log_drain_failure(call, settle_err)

    def _log_drain_failure(self, call: PendingCall[Any], err: BaseException):
        self._logger.log(
            FunnelDrainError(
                message=f"Queued call to {_target_name(call.target)} failed during release",
                funnel=self.name,
                target=_target_name(call.target),
                error=repr(err),
            )
        )


def _target_name(target: Callable[..., Any]) -> str:
    return getattr(target, "__qualname__", None) or repr(target)
