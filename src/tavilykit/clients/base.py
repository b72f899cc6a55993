"""State shared by the Tavily API clients."""

from __future__ import annotations

from typing import Any, Mapping

import httpx
from pydantic import SecretStr

from tavilykit.config import Settings, load_settings
from tavilykit.credentials import resolve_api_key
from tavilykit.transport import post_json


class BaseTavilyClient:
    """Holds the resolved key and configuration for one endpoint.

    Nothing here changes after ``__init__``, so one instance can serve concurrent calls.
    """

    endpoint: str = ""

    def __init__(
        self,
        api_key: str | SecretStr | None = None,
        *,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Resolve the API key eagerly.

        Args:
            api_key: Explicit key. Falls back to ``TAVILY_API_KEY`` when omitted or empty.
            settings: Settings override; loaded from the environment if omitted.
            transport: Optional httpx transport, mainly for tests.

        Settings are loaded even when ``api_key`` is given, since they also carry the base URL
        and timeout. An invalid ``TAVILY_TIMEOUT_S`` therefore fails construction with a
        ``pydantic.ValidationError``; pass ``settings`` to bypass the environment.

        Raises:
            MissingAPIKeyError: If no key can be resolved.
            pydantic.ValidationError: If ``settings`` is omitted and the environment is invalid.
        """

        self._settings = settings or load_settings()
        self._api_key = resolve_api_key(api_key, settings=self._settings)
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    async def _post(self, body: Mapping[str, Any]) -> Any:
        return await post_json(
            self.endpoint,
            body,
            api_key=self._api_key,
            base_url=self._settings.base_url,
            timeout_s=self._settings.timeout_s,
            transport=self._transport,
        )
