"""Search orchestration between the request boundary and the catalog store."""
from __future__ import annotations

from dataclasses import dataclass

from backend.catalog import DEFAULT_LIMIT, ScoredResult, search

from ..stores.catalog_store import CatalogStore


@dataclass(slots=True)
class SearchService:
    """Runs ranked title searches against the store's snapshot."""

    store: CatalogStore
    limit: int = DEFAULT_LIMIT

    def search(self, query: str | None, *, limit: int | None = None) -> list[ScoredResult]:
        """Return ranked matches; blank queries never touch the catalog."""

        if not query or not query.strip():
            return []
        return search(query, self.store.snapshot(), self.limit if limit is None else limit)
