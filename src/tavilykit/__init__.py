"""Typed async clients for the Tavily search and extract APIs."""

from __future__ import annotations

from tavilykit.clients import ExtractClient, SearchClient
from tavilykit.config import Settings, load_settings
from tavilykit.credentials import resolve_api_key
from tavilykit.errors import MissingAPIKeyError, TavilyAPIError, TavilyError
from tavilykit.models import (
    DescribedImagesSearchResponse,
    ExtractFailure,
    ExtractParams,
    ExtractResponse,
    ExtractResult,
    SearchImage,
    SearchParams,
    SearchResponse,
    SearchResult,
    SimpleImagesSearchResponse,
)

__all__ = [
    "ExtractClient",
    "SearchClient",
    "Settings",
    "load_settings",
    "resolve_api_key",
    "MissingAPIKeyError",
    "TavilyAPIError",
    "TavilyError",
    "DescribedImagesSearchResponse",
    "ExtractFailure",
    "ExtractParams",
    "ExtractResponse",
    "ExtractResult",
    "SearchImage",
    "SearchParams",
    "SearchResponse",
    "SearchResult",
    "SimpleImagesSearchResponse",
]
