"""Search endpoint models.

Every model accepts fields it does not declare and keeps them, so fields added server-side
survive a parse/dump round trip.
"""

from __future__ import annotations

from typing import ClassVar, Literal

from pydantic import Field

from tavilykit.models.base import Number, OpenModel

Topic = Literal["general", "news", "finance"]
SearchDepth = Literal["basic", "advanced"]
TimeRange = Literal["day", "week", "month", "year"]
AnswerMode = Literal["basic", "advanced"]
ImageFormat = Literal["url", "described"]


class SearchParams(OpenModel):
    """Parameters for ``POST /search``.

    Defaults are applied by the API, not here: unset fields are not sent.
    """

    query: str = Field(min_length=1)
    topic: Topic | None = None
    search_depth: SearchDepth | None = None
    # Only used by the API when search_depth is "advanced".
    chunks_per_source: int | None = None
    max_results: int | None = None
    time_range: TimeRange | None = None
    # Only used by the API when topic is "news".
    days: int | None = None
    include_answer: AnswerMode | bool | None = None
    include_raw_content: bool | None = None
    include_domains: list[str] | None = None
    exclude_domains: list[str] | None = None
    include_images: bool | None = None
    include_image_descriptions: bool | None = None

    @property
    def image_format(self) -> ImageFormat:
        """Shape the API will use for ``images`` in the response."""

        return "described" if self.include_image_descriptions is True else "url"


class SearchResult(OpenModel):
    """A single ranked search result."""

    title: str | None = None
    url: str | None = None
    content: str | None = None
    score: Number = None
    # Only populated when include_raw_content was requested.
    raw_content: str | None = None


class SearchImage(OpenModel):
    """An image returned when image descriptions were requested."""

    url: str | None = None
    description: str | None = None


class SearchResponse(OpenModel):
    """Common part of a ``POST /search`` response.

    Response models are lenient: the body is kept as the API sent it. Documented fields may be
    missing or null, and an image list in the other shape than requested is kept as-is.
    """

    image_format: ClassVar[ImageFormat]

    query: str | None = None
    answer: str | None = None
    results: list[SearchResult] | None = Field(default_factory=list)
    response_time: Number = None


class SimpleImagesSearchResponse(SearchResponse):
    """Search response whose images are bare URLs."""

    image_format: ClassVar[ImageFormat] = "url"

    images: list[str | SearchImage] | None = None


class DescribedImagesSearchResponse(SearchResponse):
    """Search response whose images carry a url and a description."""

    image_format: ClassVar[ImageFormat] = "described"

    images: list[SearchImage | str] | None = None


def search_response_model(params: SearchParams) -> type[SearchResponse]:
    """Pick the response variant implied by ``include_image_descriptions``."""

    if params.image_format == "described":
        return DescribedImagesSearchResponse
    return SimpleImagesSearchResponse
