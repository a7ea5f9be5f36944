import asyncio

import pytest

from call_funnel import Funnel, FunnelStatus


class TestOpenFunnelPassthrough:
    def test_funnel_starts_open(self, funnel: Funnel):
        assert funnel.status == FunnelStatus.OPEN
        assert funnel.held is False

    def test_wrapped_call_returns_target_value(self, funnel: Funnel):
        wrapped = funnel.wrap(lambda: "done!")

        assert wrapped() == "done!"

    def test_wrapped_call_passes_positional_and_keyword_arguments(
        self,
        funnel: Funnel,
        calls,
        recorder,
    ):
        wrapped = funnel.wrap(recorder("send", result=42))

        assert wrapped(1, 2, retries=3) == 42
        assert calls == [("send", (1, 2), {"retries": 3})]

    def test_wrapped_call_raises_target_error_unchanged(self, funnel: Funnel):
        error = ValueError("broken")

        def target():
            raise error

        wrapped = funnel.wrap(target)

        with pytest.raises(ValueError) as raised:
            wrapped()

        assert raised.value is error

    def test_wrapped_call_returns_coroutine_unmodified(self, funnel: Funnel):
        async def target():
            return "async done!"

        wrapped = funnel.wrap(target)
        result = wrapped()

        try:
            assert asyncio.iscoroutine(result)
            assert asyncio.run(result) == "async done!"

        finally:
            result.close()

    def test_wrapped_call_returns_future_unmodified(self, funnel: Funnel):
        loop = asyncio.new_event_loop()
        try:
            future = loop.create_future()
            wrapped = funnel.wrap(lambda: future)

            assert wrapped() is future

        finally:
            loop.close()

    def test_wrap_keeps_target_metadata(self, funnel: Funnel):
        def notify_subscribers(topic: str) -> str:
            """Notify everyone listening on a topic."""
            return topic

        wrapped = funnel.wrap(notify_subscribers)

        assert wrapped.__name__ == "notify_subscribers"
        assert wrapped.__doc__ == "Notify everyone listening on a topic."
        assert wrapped.__wrapped__ is notify_subscribers

    def test_wrap_works_as_decorator(self, funnel: Funnel):
        @funnel.wrap
        def add(left: int, right: int) -> int:
            return left + right

        assert add(2, 3) == 5

    def test_release_while_open_is_a_no_op(self, funnel: Funnel, calls, recorder):
        wrapped = funnel.wrap(recorder("send"))

        funnel.release()
        wrapped()
        funnel.release()

        assert calls == [("send", (), {})]
        assert funnel.status == FunnelStatus.OPEN
