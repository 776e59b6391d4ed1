"""Metrics – State."""
from __future__ import annotations

from datadog_util.kernel.time import Clock, SystemClock
from datadog_util.metrics.gauge import Gauge
from datadog_util.metrics.series import Series


class State:
    """The currently active label out of an open set of labels.

    A state named ``connection`` set to ``"open"`` is reported as the gauge
    ``connection_open`` with value ``1``, so per-state counts fall out of a
    plain rollup on the server.  Nothing is reported while no label is set.

    With ``clear_on_flush`` the label is dropped right after it has been
    reported, which models one-shot transitions.
    """

    def __init__(
        self,
        prefix: str,
        clear_on_flush: bool = False,
        clock: Clock | None = None,
    ) -> None:
        self._prefix = prefix
        self._clear_on_flush = clear_on_flush
        self._clock: Clock = clock or SystemClock()
        self._label: str | None = None

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def label(self) -> str | None:
        return self._label

    @property
    def clear_on_flush(self) -> bool:
        return self._clear_on_flush

    def set(self, label: str) -> None:
        self._label = label

    def clear(self) -> None:
        self._label = None

    def flush(self) -> Series | None:
        if self._label is None:
            return None
        gauge = Gauge(f"{self._prefix}_{self._label}", clock=self._clock)
        gauge.set(1)
        series = gauge.flush()
        if self._clear_on_flush:
            self.clear()
        return series

    def __repr__(self) -> str:
        return f"State(prefix={self._prefix!r}, label={self._label!r})"


__all__ = ["State"]
