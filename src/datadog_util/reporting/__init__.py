"""Reporting – periodic flush-and-submit to Datadog."""
from datadog_util.reporting.transport import (
    DD_AUTH_HEADER_NAME,
    DD_DISTRIBUTION_METRIC_URL,
    DEFAULT_TIMEOUT_SECONDS,
    Transport,
    datadog_headers,
    encode_series,
    report,
)
from datadog_util.reporting.timer import AsyncioIntervalTimer, IntervalTimer
from datadog_util.reporting.settings import DEFAULT_INTERVAL_SECONDS, ReporterSettings
from datadog_util.reporting.reporter import Reporter

__all__ = [
    "DD_AUTH_HEADER_NAME",
    "DD_DISTRIBUTION_METRIC_URL",
    "DEFAULT_INTERVAL_SECONDS",
    "DEFAULT_TIMEOUT_SECONDS",
    "AsyncioIntervalTimer",
    "IntervalTimer",
    "Reporter",
    "ReporterSettings",
    "Transport",
    "datadog_headers",
    "encode_series",
    "report",
]
