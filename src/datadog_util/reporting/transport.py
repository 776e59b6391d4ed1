"""Reporting – HTTP submission of series to Datadog.

All metrics are submitted as *distributions*.  Datadog keeps a single point
per second per metric for non-distribution types (it expects statsd-style
pre-aggregation), so two clients reporting the same metric within one second
would otherwise lose a point.
"""
from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, Mapping, Protocol, Sequence, TypeVar

import httpx

from datadog_util.kernel.cancellation import AbortSignal
from datadog_util.kernel.errors import AbortedError, ExternalServiceError, TimeoutError as AppTimeoutError
from datadog_util.metrics.series import Series

T = TypeVar("T")

DD_DISTRIBUTION_METRIC_URL = "https://api.datadoghq.com/api/v1/distribution_points"
DD_AUTH_HEADER_NAME = "DD-API-KEY"
DEFAULT_TIMEOUT_SECONDS = 10.0


class Transport(Protocol):
    """Port: deliver a batch of series to *url*.  Raises on failure."""

    def __call__(
        self, url: str, headers: Mapping[str, str], series: Sequence[Series]
    ) -> Awaitable[Any]: ...


def datadog_headers(api_key: str) -> dict[str, str]:
    return {DD_AUTH_HEADER_NAME: api_key}


def encode_series(series: Sequence[Series]) -> str:
    """JSON request body: ``{"series": [...]}`` in compact form.

    Non-finite samples are encoded as ``null``.
    """
    return json.dumps(
        {"series": [s.to_wire() for s in series]},
        separators=(",", ":"),
        allow_nan=False,
    )


async def report(
    url: str,
    headers: Mapping[str, str],
    series: Sequence[Series],
    *,
    abort_signal: AbortSignal | None = None,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> httpx.Response:
    """POST *series* to *url* and return the raw response.

    ``Content-Type: application/json`` is always sent; entries in *headers*
    are layered on top and may replace it.  A short-lived client is created
    unless *client* is given, in which case *timeout* is ignored.

    Raises
    ------
    ExternalServiceError
        Non-2xx response (message embeds status, reason and body) or a
        transport-level httpx failure.
    TimeoutError
        The request exceeded its timeout.
    AbortedError
        *abort_signal* fired before or during the request.
    """
    if abort_signal is not None:
        abort_signal.throw_if_aborted()

    request_headers = httpx.Headers({"Content-Type": "application/json"})
    request_headers.update(dict(headers))
    body = encode_series(series)

    if client is None:
        async with httpx.AsyncClient(timeout=timeout) as owned:
            return await _post(owned, url, request_headers, body, abort_signal)
    return await _post(client, url, request_headers, body, abort_signal)


async def _post(
    client: httpx.AsyncClient,
    url: str,
    headers: httpx.Headers,
    body: str,
    abort_signal: AbortSignal | None,
) -> httpx.Response:
    try:
        response = await _abortable(client.post(url, headers=headers, content=body), abort_signal)
    except httpx.TimeoutException as exc:
        raise AppTimeoutError(f"Metrics submission timed out: POST {url}") from exc
    except httpx.HTTPError as exc:
        raise ExternalServiceError(service=url, message=f"Metrics submission failed: {exc}") from exc

    if not response.is_success:
        raise ExternalServiceError(
            service=url,
            message=(
                f"unexpected response: {response.status_code} "
                f"{response.reason_phrase} body: {response.text}"
            ),
            status_code=response.status_code,
        )
    return response


async def _abortable(awaitable: Awaitable[T], abort_signal: AbortSignal | None) -> T:
    if abort_signal is None:
        return await awaitable
    task = asyncio.ensure_future(awaitable)
    unsubscribe = abort_signal.add_listener(task.cancel)
    try:
        return await task
    except asyncio.CancelledError:
        if abort_signal.aborted:
            raise AbortedError("Metrics submission aborted", reason=abort_signal.reason) from None
        raise
    finally:
        unsubscribe()


__all__ = [
    "DD_AUTH_HEADER_NAME",
    "DD_DISTRIBUTION_METRIC_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "Transport",
    "datadog_headers",
    "encode_series",
    "report",
]
