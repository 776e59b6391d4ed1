"""Metrics – Datadog wire model: Point, Series and helpers.

A point is a second-resolution timestamp plus the values recorded for that
second.  A series is the time series for a single metric.  On the wire::

    {"metric": "name", "points": [[1700000000, [3]]], "tags": ["env:prod"]}

``tags`` is omitted entirely when a series carries none.
"""
from __future__ import annotations

import dataclasses
import math
from typing import Any


@dataclasses.dataclass(frozen=True)
class Point:
    """One timestamped sample.  Only single-value points are produced here."""

    timestamp: int
    values: tuple[float, ...]

    @classmethod
    def single(cls, timestamp: int, value: float) -> "Point":
        return cls(timestamp, (value,))

    def to_wire(self) -> list[Any]:
        # JSON has no NaN or Infinity; such samples go out as null.
        return [self.timestamp, [v if math.isfinite(v) else None for v in self.values]]


@dataclasses.dataclass
class Series:
    """Time series for one metric: name, points and optional tags.

    A series with no points means "nothing to report for this window".
    """

    metric: str
    points: list[Point] = dataclasses.field(default_factory=list)
    tags: list[str] | None = None

    def to_wire(self) -> dict[str, Any]:
        wire: dict[str, Any] = {
            "metric": self.metric,
            "points": [p.to_wire() for p in self.points],
        }
        if self.tags is not None:
            wire["tags"] = list(self.tags)
        return wire


@dataclasses.dataclass(frozen=True)
class GaugeValue:
    ts_sec: int
    value: float


def gauge_value(series: Series) -> GaugeValue | None:
    """Return the first sample of *series*, or ``None`` when it is empty."""
    if not series.points:
        return None
    point = series.points[0]
    return GaugeValue(ts_sec=point.timestamp, value=point.values[0])


__all__ = ["GaugeValue", "Point", "Series", "gauge_value"]
