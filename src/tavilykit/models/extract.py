"""Extract endpoint models."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator

from tavilykit.models.base import Number, OpenModel

ExtractDepth = Literal["basic", "advanced"]


class ExtractParams(OpenModel):
    """Parameters for ``POST /extract``.

    ``urls`` may be a single URL or a list; whichever form the caller uses is sent as-is.
    """

    urls: str | list[str]
    include_images: bool | None = None
    extract_depth: ExtractDepth | None = None

    @field_validator("urls")
    @classmethod
    def validate_urls(cls, value: str | list[str]) -> str | list[str]:
        """Reject an empty URL or an empty list of URLs."""
        if isinstance(value, str):
            if not value:
                raise ValueError("urls must not be empty")
            return value
        if not value:
            raise ValueError("urls must contain at least one URL")
        if any(not url for url in value):
            raise ValueError("urls must not contain empty strings")
        return value


class ExtractResult(OpenModel):
    """Content extracted from one URL."""

    url: str | None = None
    raw_content: str | None = None
    # Empty unless include_images was requested.
    images: list[str] | None = Field(default_factory=list)


class ExtractFailure(OpenModel):
    """A URL the API could not extract."""

    url: str | None = None
    error: str | None = None


class ExtractResponse(OpenModel):
    """Response of ``POST /extract``.

    Successes and failures arrive in the same 2xx body. The split is taken as the API reports
    it; requested URLs are not cross-checked against the two lists. Fields the API leaves out
    or sends as null are kept that way.
    """

    results: list[ExtractResult] | None = Field(default_factory=list)
    failed_results: list[ExtractFailure] | None = Field(default_factory=list)
    response_time: Number = None
