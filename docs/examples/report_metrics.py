"""Demo load generator: simulated clients reporting a latency gauge.

A basic script for checking how metrics are received and graphed on the
Datadog side.  Start it, then build a dashboard over the ``test_latency``
metric.  There is one data point per simulated client per sample interval.
To stack-graph the clients with latency <= 20 use the count aggregator with a
rollup equal to the sample period::

    count(v: v<=20):test_latency{*}.as_count().rollup(20)

(``advanced:percentiles`` may need enabling for the metric under
Metrics > Summary.)

Model: every client starts "never connected" and reports ``LATENCY_NEVER``.
The first ``NUM_CONNECT_NEVER`` clients never connect.  Each sample period one
of the remaining clients is picked at random to (re)connect: the next
``NUM_CONNECT_FAST`` clients with a latency below 20, the rest below 100.  At
steady state the total number of points per period stays close to
``NUM_CLIENTS``.

Run with::

    pip install -e .
    DATADOG_API_KEY=... python docs/examples/report_metrics.py

Optional: ``DATADOG_URL``, ``DATADOG_TIMEOUT_SECONDS``, ``DATADOG_TAGS``.
"""

from __future__ import annotations

import asyncio
import logging
import random

import httpx

from datadog_util.config import ConfigError, EnvSettingsLoader
from datadog_util.metrics import Gauge, Metrics, gauge_value
from datadog_util.observability.logging import JsonLoggerFactory, get_logger
from datadog_util.reporting import ReporterSettings, datadog_headers, report

LATENCY_NEVER = 600
NUM_CLIENTS = 20
NUM_CONNECT_NEVER = 5
NUM_CONNECT_FAST = 10
SAMPLE_INTERVAL_SECONDS = 20.0

log = get_logger("datadog_util.demo")


def _refresh(latencies: list[Gauge]) -> None:
    # Re-set each gauge to its current value; one point per client per period.
    for gauge in latencies:
        current = gauge_value(gauge.flush())
        if current is not None:
            gauge.set(current.value)


def _reconnect_random_client(latencies: list[Gauge]) -> None:
    i = random.randint(NUM_CONNECT_NEVER, len(latencies) - 1)
    if i < NUM_CONNECT_NEVER + NUM_CONNECT_FAST:
        latencies[i].set(random.randint(1, 20))
    else:
        latencies[i].set(random.randint(1, 100))


async def _submit(client: httpx.AsyncClient, settings: ReporterSettings, metrics: Metrics) -> None:
    response = await report(
        settings.url,
        datadog_headers(settings.api_key),
        metrics.flush(),
        client=client,
    )
    log.info("metrics.submitted", status=response.status_code, body=response.json())


async def main() -> None:
    JsonLoggerFactory.configure(logging.INFO)
    try:
        settings = EnvSettingsLoader().load(ReporterSettings)
    except ConfigError as exc:
        raise SystemExit(exc.message) from exc

    # Each simulated client gets its own registry and its own gauge.
    clients = [settings.new_metrics() for _ in range(NUM_CLIENTS)]
    latencies = [m.gauge("test_latency") for m in clients]
    for gauge in latencies:
        gauge.set(LATENCY_NEVER)

    async with httpx.AsyncClient(timeout=settings.timeout_seconds) as client:
        while True:
            _refresh(latencies)
            _reconnect_random_client(latencies)

            await asyncio.sleep(SAMPLE_INTERVAL_SECONDS)

            for m in clients:
                log.info(
                    "metrics.sample",
                    values=[f"{s.metric}:{gauge_value(s).value}" for s in m.flush()],  # type: ignore[union-attr]
                )
            results = await asyncio.gather(
                *(_submit(client, settings, m) for m in clients),
                return_exceptions=True,
            )
            for result in results:
                if isinstance(result, Exception):
                    log.error("metrics.submit_failed", error=str(result))


if __name__ == "__main__":
    asyncio.run(main())
