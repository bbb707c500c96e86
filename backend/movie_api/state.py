"""Shared state container for the movie search API."""
from __future__ import annotations

from dataclasses import dataclass

from backend.catalog import default_registry

from .services.search_service import SearchService
from .settings import MovieApiSettings
from .stores.catalog_store import CatalogStore
from .utils.paths import resolve_catalog_path


@dataclass(slots=True)
class AppState:
    """Encapsulates the catalog store and services shared across routers."""

    settings: MovieApiSettings
    catalog_store: CatalogStore
    search_service: SearchService

    def __init__(
        self,
        settings: MovieApiSettings,
        catalog_store: CatalogStore | None = None,
    ) -> None:
        self.settings = settings
        self.catalog_store = catalog_store or CatalogStore(
            resolve_catalog_path(settings.catalog_path),
            providers=default_registry if settings.provider_token_fallback else None,
        )
        self.search_service = SearchService(self.catalog_store, limit=settings.search_limit)
