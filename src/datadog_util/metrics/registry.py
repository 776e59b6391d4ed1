"""Metrics – Metrics registry."""
from __future__ import annotations

from typing import Iterable

from datadog_util.kernel.time import Clock, SystemClock
from datadog_util.metrics.gauge import Gauge
from datadog_util.metrics.series import Series
from datadog_util.metrics.state import State


class Metrics:
    """Tracks the set of metrics in use and flushes them to Datadog series.

    Gauges and states live in separate namespaces; both are created on first
    access and the same instance is returned for the same name afterwards.

    Usage::

        metrics = Metrics(tags=["env:prod"])
        metrics.gauge("queue_depth").set(12)
        metrics.state("connection").set("open")
        series = metrics.flush()
    """

    def __init__(self, tags: Iterable[str] | None = None, clock: Clock | None = None) -> None:
        self._tags: tuple[str, ...] = tuple(tags or ())
        self._clock: Clock = clock or SystemClock()
        self._gauges: dict[str, Gauge] = {}
        self._states: dict[str, State] = {}

    @property
    def tags(self) -> tuple[str, ...]:
        return self._tags

    def gauge(self, name: str) -> Gauge:
        gauge = self._gauges.get(name)
        if gauge is None:
            gauge = Gauge(name, clock=self._clock)
            self._gauges[name] = gauge
        return gauge

    def state(self, name: str, clear_on_flush: bool = False) -> State:
        """Return the state named *name*.

        ``clear_on_flush`` only applies when the state is created; later calls
        keep the setting it was created with.
        """
        state = self._states.get(name)
        if state is None:
            state = State(name, clear_on_flush=clear_on_flush, clock=self._clock)
            self._states[name] = state
        return state

    def flush(self) -> list[Series]:
        """Flush every metric into one series each, gauges first then states.

        Unset states are skipped.  States created with ``clear_on_flush`` are
        cleared as a side effect.
        """
        all_series: list[Series] = []
        members: list[Gauge | State] = [*self._gauges.values(), *self._states.values()]
        for member in members:
            series = member.flush()
            if series is None:
                continue
            if self._tags:
                series.tags = list(self._tags)
            all_series.append(series)
        return all_series


__all__ = ["Metrics"]
