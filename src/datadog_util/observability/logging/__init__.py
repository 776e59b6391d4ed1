"""Observability – logging sinks and structlog helpers."""
from datadog_util.observability.logging.protocol import LogLevel, OptionalLogger, log_optional
from datadog_util.observability.logging.factory import JsonLoggerFactory, mask_api_keys
from datadog_util.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "LogLevel", "OptionalLogger", "get_logger", "log_optional", "mask_api_keys"]
