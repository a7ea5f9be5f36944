import asyncio
import concurrent.futures

from call_funnel.funnel import (
    Deferred,
    Immediate,
    classify_result,
    is_future_like,
)


class CallbackOnly:
    def add_done_callback(self, callback):
        callback(self)


class CallbackAndException(CallbackOnly):
    def exception(self):
        return None


class TestClassifyResult:
    def test_plain_values_are_immediate(self):
        for value in (None, 0, "", "done!", [], {"key": "value"}):
            assert classify_result(value) == Immediate(value)

    def test_thread_future_is_deferred(self):
        future = concurrent.futures.Future()

        assert classify_result(future) == Deferred(future)

    def test_loop_future_is_deferred(self):
        loop = asyncio.new_event_loop()
        try:
            future = loop.create_future()

            assert classify_result(future) == Deferred(future)

        finally:
            loop.close()

    def test_coroutine_is_deferred(self):
        async def target():
            return None

        coroutine = target()
        try:
            assert classify_result(coroutine) == Deferred(coroutine)

        finally:
            coroutine.close()

    def test_success_channel_alone_is_not_future_like(self):
        value = CallbackOnly()

        assert is_future_like(value) is False
        assert classify_result(value) == Immediate(value)

    def test_success_and_failure_channels_are_future_like(self):
        value = CallbackAndException()

        assert is_future_like(value) is True
        assert classify_result(value) == Deferred(value)

    def test_future_classes_are_plain_values(self):
        assert is_future_like(concurrent.futures.Future) is False
        assert classify_result(asyncio.Future) == Immediate(asyncio.Future)
