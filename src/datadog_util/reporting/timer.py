"""Reporting – fixed-period interval timers."""
from __future__ import annotations

import asyncio
import math
from typing import Callable, Protocol, runtime_checkable

TimerCallback = Callable[[], None]


@runtime_checkable
class IntervalTimer(Protocol):
    """Port: call a function every *interval* seconds until cancelled."""

    def start(self, interval: float, callback: TimerCallback) -> None: ...
    def cancel(self) -> None: ...

    @property
    def active(self) -> bool: ...


class AsyncioIntervalTimer:
    """Interval timer on the asyncio event loop.

    Tick *n* fires at ``start + n * interval`` on the loop's monotonic clock,
    so time spent in callbacks or scheduling latency never accumulates into
    drift.  Ticks missed while the loop was blocked are skipped rather than
    fired in a burst.  The next tick is armed before the callback runs.

    Must be started from within a running event loop unless *loop* is given.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._interval = 0.0
        self._deadline = 0.0
        self._callback: TimerCallback | None = None

    @property
    def active(self) -> bool:
        return self._handle is not None

    @property
    def next_deadline(self) -> float | None:
        return self._deadline if self._handle is not None else None

    def start(self, interval: float, callback: TimerCallback) -> None:
        if self._handle is not None:
            return
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval!r}")
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        self._interval = interval
        self._callback = callback
        self._deadline = self._loop.time() + interval
        self._handle = self._loop.call_at(self._deadline, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._callback = None

    def _fire(self) -> None:
        assert self._loop is not None
        callback = self._callback
        self._deadline += self._interval
        now = self._loop.time()
        if self._deadline < now:
            # Skip to the first grid point that is not already past.
            self._deadline += math.ceil((now - self._deadline) / self._interval) * self._interval
        self._handle = self._loop.call_at(self._deadline, self._fire)
        if callback is not None:
            callback()


__all__ = ["AsyncioIntervalTimer", "IntervalTimer", "TimerCallback"]
