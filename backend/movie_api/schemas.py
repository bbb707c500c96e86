"""Pydantic models exposed by the movie search API."""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    """Service health payload."""

    status: Literal["ok"] = Field(default="ok")
    version: str = Field(default="0.1.0", description="Semantic version of the API service.")
    catalog_loaded: bool = Field(
        default=False, description="Whether the catalog snapshot has been built yet."
    )


class MovieQuery(BaseModel):
    """JSON body accepted by ``POST /movie``."""

    name: Any = Field(default=None, description="Movie title to search for.")


class MovieMatchModel(BaseModel):
    """A single ranked catalog match."""

    title: str
    section: str
    index: int
    score: int = Field(ge=0, le=100)
    preferred_watch: str | None = Field(
        default=None, description="Watch link chosen by the provider priority policy."
    )
    watch_urls: list[str] = Field(
        default_factory=list, description="Explicit links found in the watch metadata."
    )
    download: str | None = None
    raw_meta: dict[str, str] = Field(
        default_factory=dict, description="All metadata lines recorded for the entry."
    )


class MovieSearchResponse(BaseModel):
    """Successful search with at least one match."""

    ok: Literal[True] = True
    query: str
    matches: list[MovieMatchModel]


class MovieNotFoundResponse(BaseModel):
    """Successful search that matched nothing."""

    ok: Literal[True] = True
    query: str
    results: list[MovieMatchModel] = Field(default_factory=list)
    message: str = "No matches found."


class ClientErrorResponse(BaseModel):
    """Returned when the request is missing required input."""

    ok: Literal[False] = False
    message: str


class ServerErrorResponse(BaseModel):
    """Returned when the search could not be completed."""

    ok: Literal[False] = False
    error: str


class CatalogMetricsModel(BaseModel):
    """Aggregate statistics for the loaded catalog."""

    total: int = Field(ge=0)
    section_counts: dict[str, int] = Field(
        default_factory=dict, description="Entry counts per section in catalog order."
    )
    with_preferred_watch: int = Field(ge=0)
    with_download: int = Field(ge=0)
