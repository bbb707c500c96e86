"""HTTP client helpers for the movie search CLI."""
from __future__ import annotations

import httpx

DEFAULT_HEADERS = {"Accept": "application/json", "User-Agent": "movie-search-cli/0.1.0"}


def create_client(
    base_url: str,
    *,
    timeout: float = 10.0,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Return an HTTPX client rooted at the movie search API ``base_url``."""

    return httpx.Client(
        base_url=base_url.rstrip("/"),
        headers=DEFAULT_HEADERS,
        timeout=timeout,
        transport=transport,
    )
