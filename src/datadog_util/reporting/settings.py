"""Reporting – ReporterSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from datadog_util.config.settings import Settings
from datadog_util.kernel.time import Clock
from datadog_util.metrics import Metrics
from datadog_util.reporting.transport import DD_DISTRIBUTION_METRIC_URL, DEFAULT_TIMEOUT_SECONDS

DEFAULT_INTERVAL_SECONDS = 2 * 60.0


@dataclasses.dataclass
class ReporterSettings(Settings):
    """Reporter configuration, read from ``DATADOG_*`` environment variables.

    ``tags`` belong to the registry, not the reporter: series carry the tags
    of the :class:`Metrics` they were flushed from.  Build the registry with
    :meth:`new_metrics` to apply them.
    """

    _prefix: ClassVar[str] = "DATADOG"
    _secret_fields: ClassVar[frozenset[str]] = frozenset({"api_key"})

    api_key: str
    url: str = DD_DISTRIBUTION_METRIC_URL
    interval_seconds: float = DEFAULT_INTERVAL_SECONDS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    tags: list[str] = dataclasses.field(default_factory=list)

    def new_metrics(self, clock: Clock | None = None) -> Metrics:
        """Return an empty registry tagged with :attr:`tags`."""
        return Metrics(tags=self.tags, clock=clock)

    def _validate(self) -> None:
        if not self.api_key:
            raise self._invalid("api_key", "must not be empty")
        self._require_positive("interval_seconds", "timeout_seconds")


__all__ = ["DEFAULT_INTERVAL_SECONDS", "ReporterSettings"]
