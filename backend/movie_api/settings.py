"""Runtime configuration for the movie search API."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MovieApiSettings(BaseSettings):
    """Environment-aware settings for the movie search service."""

    catalog_path: str = Field(
        default="movies_data.txt",
        description="Plain-text catalog file, relative paths resolve against the working directory.",
    )
    search_limit: int = Field(
        default=10, ge=1, description="Maximum number of matches returned per query."
    )
    provider_token_fallback: bool = Field(
        default=False,
        description="Build watch links from provider shorthand when no link is found.",
    )
    host: str = Field(default="0.0.0.0", description="Interface bound by the development server.")
    port: int = Field(default=8000, description="Port bound by the development server.")
    log_level: str = Field(default="INFO", description="Root logging level for the service.")

    model_config = SettingsConfigDict(
        env_prefix="MOVIE_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
