"""Reporting – Reporter."""
from __future__ import annotations

import asyncio
import functools
from typing import Any, Callable, Mapping

from datadog_util.kernel.cancellation import AbortSignal
from datadog_util.metrics import Metrics
from datadog_util.observability.logging import LogLevel, OptionalLogger, log_optional
from datadog_util.reporting.settings import DEFAULT_INTERVAL_SECONDS, ReporterSettings
from datadog_util.reporting.timer import AsyncioIntervalTimer, IntervalTimer
from datadog_util.reporting.transport import (
    DD_DISTRIBUTION_METRIC_URL,
    Transport,
    datadog_headers,
    report,
)


class Reporter:
    """Periodically flushes a :class:`Metrics` registry and ships the result.

    A typical pattern is for clients to report on a given interval and for
    the server to roll metrics up over that same interval; any drift in the
    client interval skews the counts seen by the server.  The reporter
    therefore runs on a fixed-period timer rather than re-arming a delay
    after each report.

    Each tick starts :meth:`report` as its own task and never waits for it,
    so a slow submission cannot delay the schedule and a failed one cannot
    stop it.  Reports are not serialized against each other.

    The timer starts on construction, which must happen inside a running
    event loop when the default timer is used.  It stops for good when
    *abort_signal* fires or :meth:`stop` is called.  A signal that has
    already fired at construction means the timer is never started.

    Without *optional_logger* the reporter is silent.

    Parameters
    ----------
    metrics:
        The registry to flush.
    url:
        Submission endpoint.
    headers:
        Extra request headers, typically the API key header.
    interval_seconds:
        Reporting period; falsy values fall back to two minutes.
    abort_signal:
        Externally owned signal; the reporter only subscribes to it.
    optional_logger:
        Sink exposing any of ``debug`` / ``error``.
    transport:
        Async callable ``(url, headers, series)``; defaults to :func:`report`.
    timer:
        Interval timer; defaults to :class:`AsyncioIntervalTimer`.
    """

    def __init__(
        self,
        metrics: Metrics,
        url: str = DD_DISTRIBUTION_METRIC_URL,
        headers: Mapping[str, str] | None = None,
        interval_seconds: float | None = None,
        abort_signal: AbortSignal | None = None,
        optional_logger: OptionalLogger | None = None,
        transport: Transport | None = None,
        timer: IntervalTimer | None = None,
    ) -> None:
        self._metrics = metrics
        self._url = url
        self._headers: dict[str, str] = dict(headers or {})
        self._interval = interval_seconds or DEFAULT_INTERVAL_SECONDS
        self._logger = optional_logger
        self._transport: Transport = transport or report
        self._timer: IntervalTimer = timer or AsyncioIntervalTimer()
        self._stopped = False
        self._in_flight: set[asyncio.Task[None]] = set()
        self._unsubscribe_abort: Callable[[], None] | None = None

        if abort_signal is not None:
            if abort_signal.aborted:
                self._stopped = True
                self._log("debug", "Metrics Reporter aborted")
                return
            self._unsubscribe_abort = abort_signal.add_listener(self._on_abort)

        self._start_interval()

    @classmethod
    def from_settings(
        cls,
        metrics: Metrics,
        settings: ReporterSettings,
        **kwargs: Any,
    ) -> "Reporter":
        """Build a reporter from :class:`ReporterSettings`.

        Extra keyword arguments are passed through to the constructor.
        """
        kwargs.setdefault(
            "transport", functools.partial(report, timeout=settings.timeout_seconds)
        )
        return cls(
            metrics=metrics,
            url=settings.url,
            headers=datadog_headers(settings.api_key),
            interval_seconds=settings.interval_seconds,
            **kwargs,
        )

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        return not self._stopped and self._timer.active

    @property
    def in_flight(self) -> int:
        """Number of reports started by the timer that have not finished."""
        return len(self._in_flight)

    def stop(self) -> None:
        """Stop the timer.  In-flight reports are left to finish."""
        if self._stopped:
            return
        self._stop_interval()
        self._log("debug", "Metrics Reporter stopped")

    async def drain(self) -> None:
        """Wait for reports started by the timer to finish."""
        if self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)

    async def report(self) -> None:
        """Flush the registry and submit the result.

        Never raises: submission failures are logged at error level.
        """
        all_series = self._metrics.flush()
        if not all_series:
            self._log("debug", "No metrics to report")
            return

        try:
            await self._transport(self._url, self._headers, all_series)
        except Exception as exc:  # noqa: BLE001
            self._log("error", f"Error reporting metrics: {exc}")

    def _start_interval(self) -> None:
        if self._timer.active:
            return
        self._timer.start(self._interval, self._tick)
        self._log("debug", "Metrics Reporter started")

    def _stop_interval(self) -> None:
        self._stopped = True
        self._timer.cancel()
        if self._unsubscribe_abort is not None:
            self._unsubscribe_abort()
            self._unsubscribe_abort = None

    def _on_abort(self) -> None:
        if self._stopped:
            return
        self._stop_interval()
        self._log("debug", "Metrics Reporter aborted")

    def _tick(self) -> None:
        task = asyncio.get_running_loop().create_task(self.report())
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    def _log(self, level: LogLevel, event: str) -> None:
        log_optional(self._logger, level, event)


__all__ = ["Reporter"]
