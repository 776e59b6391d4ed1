"""Metrics – gauges, states and the registry that flushes them."""
from datadog_util.metrics.series import GaugeValue, Point, Series, gauge_value
from datadog_util.metrics.gauge import Gauge
from datadog_util.metrics.state import State
from datadog_util.metrics.registry import Metrics

__all__ = ["Gauge", "GaugeValue", "Metrics", "Point", "Series", "State", "gauge_value"]
