"""Unit tests for AbortController / AbortSignal."""

from __future__ import annotations

import pytest

from datadog_util.kernel.cancellation import AbortController
from datadog_util.kernel.errors import AbortedError


class TestAbortSignal:
    def test_initially_not_aborted(self) -> None:
        signal = AbortController().signal
        assert signal.aborted is False
        assert signal.reason is None
        signal.throw_if_aborted()

    def test_abort_sets_state_and_reason(self) -> None:
        controller = AbortController()
        controller.abort("shutdown")
        assert controller.signal.aborted
        assert controller.signal.reason == "shutdown"

    def test_listeners_called_once(self) -> None:
        controller = AbortController()
        calls: list[int] = []
        controller.signal.add_listener(lambda: calls.append(1))
        controller.abort()
        controller.abort()
        assert calls == [1]

    def test_second_abort_keeps_first_reason(self) -> None:
        controller = AbortController()
        controller.abort("first")
        controller.abort("second")
        assert controller.signal.reason == "first"

    def test_unsubscribe(self) -> None:
        controller = AbortController()
        calls: list[int] = []
        remove = controller.signal.add_listener(lambda: calls.append(1))
        remove()
        remove()
        controller.abort()
        assert calls == []

    def test_listener_added_after_abort_not_called(self) -> None:
        controller = AbortController()
        controller.abort()
        calls: list[int] = []
        controller.signal.add_listener(lambda: calls.append(1))
        assert calls == []

    def test_failing_listener_does_not_block_others(self) -> None:
        controller = AbortController()
        calls: list[str] = []

        def bad() -> None:
            raise RuntimeError("listener broke")

        controller.signal.add_listener(bad)
        controller.signal.add_listener(lambda: calls.append("ok"))
        controller.abort()
        assert calls == ["ok"]

    def test_throw_if_aborted(self) -> None:
        controller = AbortController()
        controller.abort("bye")
        with pytest.raises(AbortedError) as exc_info:
            controller.signal.throw_if_aborted()
        assert exc_info.value.reason == "bye"
