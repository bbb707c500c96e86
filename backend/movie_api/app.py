"""Application factory for the movie search API."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import catalog, health, movie
from .settings import MovieApiSettings
from .state import AppState
from .stores.catalog_store import CatalogStore


def create_app(
    settings: MovieApiSettings | None = None,
    *,
    catalog_store: CatalogStore | None = None,
) -> FastAPI:
    """Build and configure the FastAPI application."""

    resolved_settings = settings or MovieApiSettings()
    app_state = AppState(settings=resolved_settings, catalog_store=catalog_store)

    app = FastAPI(title="Movie Catalog Search API", version="0.1.0")
    app.state.app_state = app_state
    app.state.settings = app_state.settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    for router in (
        health.router,
        movie.router,
        catalog.router,
    ):
        app.include_router(router)

    return app
