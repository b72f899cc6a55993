"""Exceptions raised by the Tavily clients.

Transport failures (DNS, refused connections, timeouts) are not wrapped: they surface as the
``httpx.TransportError`` raised by the underlying transport.
"""

from __future__ import annotations

from typing import Any

UNKNOWN_ERROR = "Unknown error"

MISSING_API_KEY_MESSAGE = (
    "Tavily API key not found. Please provide it as an argument or set the "
    "TAVILY_API_KEY environment variable."
)


class TavilyError(RuntimeError):
    pass


class MissingAPIKeyError(TavilyError, ValueError):
    """No API key could be resolved when constructing a client."""

    def __init__(self, message: str = MISSING_API_KEY_MESSAGE) -> None:
        super().__init__(message)


class TavilyAPIError(TavilyError):
    """The API answered with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by the API.
        message: Message taken from ``detail.error`` in the body, or ``"Unknown error"``.
        body: Parsed JSON body, or ``None`` when the body was empty or not JSON.
    """

    def __init__(self, status_code: int, message: str, *, body: Any = None) -> None:
        super().__init__(f"Error {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.body = body


def error_message_from_body(body: Any) -> str:
    """Extract ``detail.error`` from an error body, tolerating any missing piece."""

    if not isinstance(body, dict):
        return UNKNOWN_ERROR
    detail = body.get("detail")
    if not isinstance(detail, dict):
        return UNKNOWN_ERROR
    error = detail.get("error")
    if isinstance(error, str) and error:
        return error
    return UNKNOWN_ERROR
