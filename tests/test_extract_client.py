"""Tests for the extract client."""

from __future__ import annotations

import asyncio

import httpx
import pytest
from pydantic import ValidationError

from tavilykit import ExtractClient, ExtractParams, TavilyAPIError


def test_partial_failure_is_returned_in_band(settings, recorder, mock_transport) -> None:
    """One URL succeeding and one failing is still a successful call."""

    body = {
        "results": [
            {"url": "https://a.test", "raw_content": "Page A", "images": []},
        ],
        "failed_results": [
            {"url": "https://b.test", "error": "Failed to fetch url"},
        ],
        "response_time": 0.42,
    }
    client = ExtractClient(settings=settings, transport=mock_transport(json_body=body))

    resp = asyncio.run(client.extract({"urls": ["https://a.test", "https://b.test"]}))

    assert len(resp.results) == 1
    assert len(resp.failed_results) == 1
    assert resp.results[0].url == "https://a.test"
    assert resp.failed_results[0].url == "https://b.test"
    assert resp.failed_results[0].error == "Failed to fetch url"

    request = recorder.requests[-1]
    assert str(request.url) == "https://api.tavily.test/extract"
    assert request.headers["Authorization"] == "Bearer tvly-test"
    assert recorder.last_body == {"urls": ["https://a.test", "https://b.test"]}


def test_single_url_form_is_preserved(settings, recorder, mock_transport) -> None:
    body = {"results": [], "failed_results": [], "response_time": 0.1}
    client = ExtractClient(settings=settings, transport=mock_transport(json_body=body))

    asyncio.run(
        client.extract(ExtractParams(urls="https://a.test", include_images=True, extract_depth="advanced"))
    )

    assert recorder.last_body == {
        "urls": "https://a.test",
        "include_images": True,
        "extract_depth": "advanced",
    }


def test_split_is_not_cross_checked(settings, mock_transport) -> None:
    """URLs missing from both lists are passed through as the API reported them."""

    body = {
        "results": [{"url": "https://a.test", "raw_content": "A"}],
        "failed_results": [],
        "response_time": 0.2,
    }
    client = ExtractClient(settings=settings, transport=mock_transport(json_body=body))

    resp = asyncio.run(client.extract({"urls": ["https://a.test", "https://b.test", "https://c.test"]}))

    assert [r.url for r in resp.results] == ["https://a.test"]
    assert resp.results[0].images == []
    assert resp.failed_results == []


def test_result_images_and_extra_fields(settings, mock_transport) -> None:
    body = {
        "results": [
            {
                "url": "https://a.test",
                "raw_content": "A",
                "images": ["https://a.test/logo.png"],
                "favicon": "https://a.test/favicon.ico",
            }
        ],
        "failed_results": [],
        "response_time": 0.2,
        "request_id": "abc",
    }
    client = ExtractClient(settings=settings, transport=mock_transport(json_body=body))

    resp = asyncio.run(client.extract({"urls": "https://a.test", "include_images": True}))

    assert resp.results[0].images == ["https://a.test/logo.png"]
    assert resp.results[0].model_extra == {"favicon": "https://a.test/favicon.ico"}
    assert resp.to_payload() == body


def test_whole_request_failure_raises(settings, mock_transport) -> None:
    client = ExtractClient(
        settings=settings,
        transport=mock_transport(status_code=401, json_body={"detail": {"error": "Unauthorized: missing or invalid API key."}}),
    )

    with pytest.raises(TavilyAPIError) as exc_info:
        asyncio.run(client.extract({"urls": "https://a.test"}))

    assert exc_info.value.status_code == 401
    assert str(exc_info.value) == "Error 401: Unauthorized: missing or invalid API key."


def test_timeout_propagates(settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = ExtractClient(settings=settings, transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.TimeoutException):
        asyncio.run(client.extract({"urls": "https://a.test"}))


@pytest.mark.parametrize("urls", ["", [], ["https://a.test", ""]])
def test_invalid_urls_rejected(settings, recorder, mock_transport, urls) -> None:
    client = ExtractClient(settings=settings, transport=mock_transport(json_body={}))

    with pytest.raises(ValidationError):
        asyncio.run(client.extract({"urls": urls}))
    assert recorder.requests == []


def test_null_raw_content_returned_unchanged(settings, mock_transport) -> None:
    body = {
        "results": [{"url": "https://a.test", "raw_content": None, "images": []}],
        "failed_results": [],
        "response_time": 0.3,
    }
    client = ExtractClient(settings=settings, transport=mock_transport(json_body=body))

    resp = asyncio.run(client.extract({"urls": "https://a.test"}))

    assert resp.results[0].raw_content is None
    assert resp.to_payload() == body
