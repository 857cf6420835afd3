from __future__ import annotations

from typing import Any

import httpx

from quokka_step.domain.exceptions import UpstreamClientError, UpstreamNetworkError


async def request_json(
    method: str,
    url: str,
    *,
    timeout_seconds: float,
    transport: httpx.AsyncBaseTransport | None = None,
    params: dict[str, Any] | None = None,
    json: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Perform one HTTP call and return the decoded JSON object.

    Transport failures and 5xx responses raise UpstreamNetworkError. An invalid
    URL, any other non-2xx status or a body that is not a JSON object raises
    UpstreamClientError.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout_seconds, transport=transport) as client:
            response = await client.request(method, url, params=params, json=json, headers=headers)
    except httpx.InvalidURL as exc:
        raise UpstreamClientError(f"Invalid request URL {url!r}: {exc}") from exc
    except httpx.HTTPError as exc:
        raise UpstreamNetworkError(f"Request to {url} failed: {exc}") from exc

    if response.is_server_error:
        raise UpstreamNetworkError(
            f"Request failed with status {response.status_code}: {response.reason_phrase}",
            status_code=response.status_code,
        )
    if not response.is_success:
        raise UpstreamClientError(
            f"Request failed with status {response.status_code}: {response.reason_phrase}",
            status_code=response.status_code,
        )

    try:
        payload = response.json()
    except ValueError as exc:
        raise UpstreamClientError(
            "Response body is not valid JSON.",
            status_code=response.status_code,
        ) from exc
    if not isinstance(payload, dict):
        raise UpstreamClientError(
            "Response body must be a JSON object.",
            status_code=response.status_code,
        )
    return payload
