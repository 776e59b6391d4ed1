"""Kernel time – Clock port + implementations."""
from datadog_util.kernel.time.clock import Clock, FrozenClock, SystemClock, epoch_seconds

__all__ = ["Clock", "FrozenClock", "SystemClock", "epoch_seconds"]
