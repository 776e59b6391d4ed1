"""Observability – logging."""

from datadog_util.observability.logging import JsonLoggerFactory, OptionalLogger, get_logger, log_optional

__all__ = ["JsonLoggerFactory", "OptionalLogger", "get_logger", "log_optional"]
