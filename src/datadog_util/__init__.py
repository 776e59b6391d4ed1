"""
datadog_util – client-side Datadog metrics.

Import path convention::

    from datadog_util.metrics import Metrics
    from datadog_util.reporting import Reporter, report
    from datadog_util.kernel.cancellation import AbortController
"""

from datadog_util.metrics import Gauge, Metrics, Point, Series, State, gauge_value
from datadog_util.reporting import (
    DD_AUTH_HEADER_NAME,
    DD_DISTRIBUTION_METRIC_URL,
    Reporter,
    ReporterSettings,
    report,
)

__version__ = "0.6.0"
__all__ = [
    "DD_AUTH_HEADER_NAME",
    "DD_DISTRIBUTION_METRIC_URL",
    "Gauge",
    "Metrics",
    "Point",
    "Reporter",
    "ReporterSettings",
    "Series",
    "State",
    "__version__",
    "gauge_value",
    "report",
]
