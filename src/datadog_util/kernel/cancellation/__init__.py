"""Kernel cancellation – externally owned abort signals."""
from datadog_util.kernel.cancellation.signal import AbortController, AbortListener, AbortSignal

__all__ = ["AbortController", "AbortListener", "AbortSignal"]
