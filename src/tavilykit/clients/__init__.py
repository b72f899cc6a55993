"""Tavily API clients."""

from __future__ import annotations

from tavilykit.clients.base import BaseTavilyClient
from tavilykit.clients.extract import ExtractClient
from tavilykit.clients.search import SearchClient

__all__ = ["BaseTavilyClient", "ExtractClient", "SearchClient"]
