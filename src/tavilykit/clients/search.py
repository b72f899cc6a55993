"""Client for the Tavily search endpoint."""

from __future__ import annotations

from typing import Any, Mapping

from tavilykit.clients.base import BaseTavilyClient
from tavilykit.logging import get_logger
from tavilykit.models.search import SearchParams, SearchResponse, search_response_model

logger = get_logger(__name__)


class SearchClient(BaseTavilyClient):
    """Async wrapper around ``POST /search``.

    Notes:
        - The API key is resolved when the client is built, from the ``api_key`` argument or
          ``TAVILY_API_KEY``.
        - Each call is a single attempt: no retries, no caching, no client-side defaults.
    """

    endpoint = "/search"

    async def search(self, params: SearchParams | Mapping[str, Any]) -> SearchResponse:
        """Run a search.

        Args:
            params: Search parameters, as a model or a plain mapping. Only the fields the caller
                set are sent.

        Returns:
            ``DescribedImagesSearchResponse`` when ``include_image_descriptions`` is true,
            otherwise ``SimpleImagesSearchResponse``. Check ``image_format`` to tell them apart.

        Raises:
            pydantic.ValidationError: If the parameters are invalid (e.g. empty query).
            TavilyAPIError: If the API answers with a non-2xx status.
            httpx.TransportError: If the request could not be completed.
        """

        if not isinstance(params, SearchParams):
            params = SearchParams.model_validate(params)

        body = params.to_payload()
        logger.info(
            "Tavily search",
            extra={
                "query_len": len(params.query),
                "search_depth": params.search_depth,
                "image_format": params.image_format,
            },
        )
        data = await self._post(body)
        return search_response_model(params).model_validate(data)
