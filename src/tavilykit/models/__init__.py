"""Pydantic models for Tavily API payloads."""

from __future__ import annotations

from tavilykit.models.base import OpenModel
from tavilykit.models.extract import ExtractFailure, ExtractParams, ExtractResponse, ExtractResult
from tavilykit.models.search import (
    DescribedImagesSearchResponse,
    SearchImage,
    SearchParams,
    SearchResponse,
    SearchResult,
    SimpleImagesSearchResponse,
    search_response_model,
)

__all__ = [
    "OpenModel",
    "ExtractFailure",
    "ExtractParams",
    "ExtractResponse",
    "ExtractResult",
    "DescribedImagesSearchResponse",
    "SearchImage",
    "SearchParams",
    "SearchResponse",
    "SearchResult",
    "SimpleImagesSearchResponse",
    "search_response_model",
]
