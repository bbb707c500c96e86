"""FastAPI dependencies for the movie search API."""
from fastapi import Depends, Request

from .services.search_service import SearchService
from .state import AppState
from .stores.catalog_store import CatalogStore


def get_app_state(request: Request) -> AppState:
    """Resolve the shared application state from the FastAPI request."""
    return request.app.state.app_state


def get_catalog_store(app_state: AppState = Depends(get_app_state)) -> CatalogStore:
    """Return the catalog store dependency."""
    return app_state.catalog_store


def get_search_service(app_state: AppState = Depends(get_app_state)) -> SearchService:
    """Return the search service dependency."""
    return app_state.search_service
