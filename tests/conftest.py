"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from tavilykit.config import Settings

_ENV_VARS = (
    "TAVILY_API_KEY",
    "TAVILY_BASE_URL",
    "TAVILY_TIMEOUT_S",
    "TAVILY_LOG_LEVEL",
    "TAVILY_ENV_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from the developer's environment and any local .env file."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="tvly-test", base_url="https://api.tavily.test")


class Recorder:
    """Collects requests seen by a mock transport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def mock_transport(recorder: Recorder) -> Callable[..., httpx.MockTransport]:
    """Build a transport answering every request with a fixed response."""

    def make(status_code: int = 200, json_body: object = None, **kwargs: object) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            recorder.requests.append(request)
            if json_body is not None:
                return httpx.Response(status_code, json=json_body, **kwargs)
            return httpx.Response(status_code, **kwargs)

        return httpx.MockTransport(handler)

    return make
