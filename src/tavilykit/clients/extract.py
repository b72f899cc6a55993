"""Client for the Tavily extract endpoint."""

from __future__ import annotations

from typing import Any, Mapping

from tavilykit.clients.base import BaseTavilyClient
from tavilykit.logging import get_logger
from tavilykit.models.extract import ExtractParams, ExtractResponse

logger = get_logger(__name__)


class ExtractClient(BaseTavilyClient):
    """Async wrapper around ``POST /extract``."""

    endpoint = "/extract"

    async def extract(self, params: ExtractParams | Mapping[str, Any]) -> ExtractResponse:
        """Extract page content from one or more URLs.

        Per-URL failures do not raise: they come back in ``failed_results`` next to the
        successful ``results``.

        Args:
            params: Extract parameters, as a model or a plain mapping.

        Returns:
            Parsed response.

        Raises:
            pydantic.ValidationError: If the parameters are invalid (e.g. no URLs).
            TavilyAPIError: If the API answers with a non-2xx status.
            httpx.TransportError: If the request could not be completed.
        """

        if not isinstance(params, ExtractParams):
            params = ExtractParams.model_validate(params)

        url_count = 1 if isinstance(params.urls, str) else len(params.urls)
        logger.info(
            "Tavily extract",
            extra={"url_count": url_count, "extract_depth": params.extract_depth},
        )
        data = await self._post(params.to_payload())
        resp = ExtractResponse.model_validate(data)
        if resp.failed_results:
            logger.info(
                "Tavily extract partial failure",
                extra={"ok": len(resp.results or []), "failed": len(resp.failed_results)},
            )
        return resp
