"""HTTP dispatch shared by the search and extract clients."""

from __future__ import annotations

import time
import uuid
from typing import Any, Mapping

import httpx
from pydantic import SecretStr

from tavilykit.errors import TavilyAPIError, error_message_from_body
from tavilykit.logging import get_logger, request_context

logger = get_logger(__name__)


def build_headers(api_key: SecretStr) -> dict[str, str]:
    """Return the auth and content-type headers for a Tavily request."""

    return {
        "Authorization": f"Bearer {api_key.get_secret_value()}",
        "Content-Type": "application/json",
    }


def _json_or_none(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return None


async def post_json(
    path: str,
    body: Mapping[str, Any],
    *,
    api_key: SecretStr,
    base_url: str,
    timeout_s: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """POST a JSON body and return the parsed JSON response.

    A fresh ``httpx.AsyncClient`` is opened per call and follows redirects. There are no retries; transport errors
    raised by httpx propagate to the caller unchanged.

    Args:
        path: Endpoint path, e.g. ``/search``.
        body: JSON-serializable request body, sent as-is.
        api_key: Resolved API key.
        base_url: API origin.
        timeout_s: Optional timeout; ``None`` keeps the httpx default.
        transport: Optional transport (tests use ``httpx.MockTransport``).

    Returns:
        The decoded JSON body of a 2xx response.

    Raises:
        TavilyAPIError: If the API returns a non-2xx status.
    """

    url = f"{base_url.rstrip('/')}{path}"
    client_kwargs: dict[str, Any] = {"transport": transport, "follow_redirects": True}
    if timeout_s is not None:
        client_kwargs["timeout"] = httpx.Timeout(timeout_s)

    with request_context(uuid.uuid4().hex[:12]):
        started = time.monotonic()
        logger.debug("Tavily request", extra={"endpoint": path, "fields": sorted(body)})

        async with httpx.AsyncClient(**client_kwargs) as client:
            resp = await client.post(url, headers=build_headers(api_key), json=dict(body))

        latency_ms = int((time.monotonic() - started) * 1000)
        if not resp.is_success:
            payload = _json_or_none(resp)
            message = error_message_from_body(payload)
            logger.warning(
                "Tavily request failed",
                extra={
                    "endpoint": path,
                    "status_code": resp.status_code,
                    "error": message,
                    "api_request_id": resp.headers.get("x-request-id"),
                    "latency_ms": latency_ms,
                },
            )
            raise TavilyAPIError(resp.status_code, message, body=payload)

        logger.debug(
            "Tavily request ok",
            extra={"endpoint": path, "status_code": resp.status_code, "latency_ms": latency_ms},
        )
        return resp.json()
