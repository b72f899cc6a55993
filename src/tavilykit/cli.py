"""CLI entrypoints for tavilykit."""

from __future__ import annotations

import asyncio
from typing import Any, NoReturn

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console

from tavilykit.clients import ExtractClient, SearchClient
from tavilykit.config import load_settings
from tavilykit.errors import TavilyError
from tavilykit.logging import configure_logging, get_logger
from tavilykit.models import OpenModel

app = typer.Typer(add_completion=False, help="Call the Tavily search and extract APIs")
logger = get_logger(__name__)
console = Console()


def _print(resp: OpenModel) -> None:
    console.print_json(data=resp.to_payload())


def _fail(exc: Exception) -> NoReturn:
    typer.echo(str(exc), err=True)
    raise typer.Exit(code=1)


@app.command()
def search(
    query: str = typer.Argument(..., help="Search query."),
    topic: str | None = typer.Option(None, "--topic", help="general, news or finance"),
    depth: str | None = typer.Option(None, "--depth", help="basic or advanced"),
    max_results: int | None = typer.Option(None, "--max-results"),
    time_range: str | None = typer.Option(None, "--time-range", help="day, week, month or year"),
    days: int | None = typer.Option(None, "--days", help="Days back (news topic only)"),
    answer: str | None = typer.Option(None, "--answer", help="basic or advanced"),
    raw_content: bool = typer.Option(False, "--raw-content"),
    images: bool = typer.Option(False, "--images"),
    image_descriptions: bool = typer.Option(False, "--image-descriptions"),
    include_domain: list[str] | None = typer.Option(None, "--include-domain"),
    exclude_domain: list[str] | None = typer.Option(None, "--exclude-domain"),
    api_key: str | None = typer.Option(None, "--api-key", help="Overrides TAVILY_API_KEY"),
) -> None:
    """Run a search and print the JSON response."""

    settings = load_settings()
    configure_logging(settings.log_level)

    # Only forward what was passed; the API applies its own defaults.
    params: dict[str, Any] = {"query": query}
    optional = {
        "topic": topic,
        "search_depth": depth,
        "max_results": max_results,
        "time_range": time_range,
        "days": days,
        "include_answer": answer,
        "include_domains": include_domain or None,
        "exclude_domains": exclude_domain or None,
    }
    params.update({k: v for k, v in optional.items() if v is not None})
    flags = {
        "include_raw_content": raw_content,
        "include_images": images,
        "include_image_descriptions": image_descriptions,
    }
    params.update({k: True for k, v in flags.items() if v})

    try:
        client = SearchClient(api_key, settings=settings)
        resp = asyncio.run(client.search(params))
    except (TavilyError, ValidationError, httpx.TransportError) as exc:
        _fail(exc)
    else:
        _print(resp)


@app.command()
def extract(
    urls: list[str] = typer.Argument(..., help="One or more URLs."),
    images: bool = typer.Option(False, "--images"),
    depth: str | None = typer.Option(None, "--depth", help="basic or advanced"),
    api_key: str | None = typer.Option(None, "--api-key", help="Overrides TAVILY_API_KEY"),
) -> None:
    """Extract content from URLs and print the JSON response."""

    settings = load_settings()
    configure_logging(settings.log_level)

    params: dict[str, Any] = {"urls": urls[0] if len(urls) == 1 else list(urls)}
    if images:
        params["include_images"] = True
    if depth is not None:
        params["extract_depth"] = depth

    try:
        client = ExtractClient(api_key, settings=settings)
        resp = asyncio.run(client.extract(params))
    except (TavilyError, ValidationError, httpx.TransportError) as exc:
        _fail(exc)
    else:
        _print(resp)


if __name__ == "__main__":
    app()
