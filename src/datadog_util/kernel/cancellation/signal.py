"""Kernel cancellation – AbortController / AbortSignal.

An :class:`AbortController` owns exactly one :class:`AbortSignal`.  Consumers
receive only the signal and may subscribe to it; they can never trigger it.

Usage::

    controller = AbortController()
    reporter = Reporter(metrics=m, url=url, abort_signal=controller.signal)
    ...
    controller.abort()
"""
from __future__ import annotations

import logging
from typing import Callable

from datadog_util.kernel.errors import AbortedError

logger = logging.getLogger(__name__)

AbortListener = Callable[[], None]


class AbortSignal:
    """Level-triggered, one-shot cancellation token."""

    def __init__(self) -> None:
        self._aborted = False
        self._reason: object = None
        self._listeners: list[AbortListener] = []

    @property
    def aborted(self) -> bool:
        return self._aborted

    @property
    def reason(self) -> object:
        return self._reason

    def add_listener(self, listener: AbortListener) -> Callable[[], None]:
        """Register *listener* to run once when the signal fires.

        Listeners added after the signal fired are never called; check
        :attr:`aborted` first.  Returns a callable that unsubscribes.
        """
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    def throw_if_aborted(self) -> None:
        if self._aborted:
            raise AbortedError(reason=self._reason)

    def _fire(self, reason: object) -> None:
        if self._aborted:
            return
        self._aborted = True
        self._reason = reason
        listeners, self._listeners = self._listeners, []
        for listener in listeners:
            try:
                listener()
            except Exception:  # noqa: BLE001
                logger.exception("abort_signal.listener_failed")


class AbortController:
    """Owner side of an :class:`AbortSignal`."""

    def __init__(self) -> None:
        self._signal = AbortSignal()

    @property
    def signal(self) -> AbortSignal:
        return self._signal

    def abort(self, reason: object = None) -> None:
        """Fire the signal.  Subsequent calls are no-ops."""
        self._signal._fire(reason)


__all__ = ["AbortController", "AbortListener", "AbortSignal"]
