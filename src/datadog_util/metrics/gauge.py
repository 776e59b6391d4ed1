"""Metrics – Gauge."""
from __future__ import annotations

from datadog_util.kernel.time import Clock, SystemClock, epoch_seconds
from datadog_util.metrics.series import Point, Series


class Gauge:
    """Latest-value metric that can go up and down.

    Typically used for discrete values or counts: active users, open
    connections, cpu load.  A gauge retains its value when flushed.

    Gauges are a way to sample at the client.  The client notes the latest
    value and the reporter ships it every period; on the server the metric is
    rolled up over that same period, giving roughly one point per client per
    reporting window.  For that reason the point is stamped with the time of
    the flush, not the time of the ``set``.
    """

    def __init__(self, name: str, clock: Clock | None = None) -> None:
        self._name = name
        self._clock: Clock = clock or SystemClock()
        self._value: float | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> float | None:
        return self._value

    def set(self, value: float) -> None:
        self._value = value

    def flush(self) -> Series:
        # Fresh containers on every call; callers may mutate what they get.
        if self._value is None:
            return Series(metric=self._name, points=[])
        return Series(
            metric=self._name,
            points=[Point.single(epoch_seconds(self._clock), self._value)],
        )

    def __repr__(self) -> str:
        return f"Gauge(name={self._name!r}, value={self._value!r})"


__all__ = ["Gauge"]
