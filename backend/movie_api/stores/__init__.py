"""Stores backing the movie search API."""
from .catalog_store import CatalogError, CatalogLoadError, CatalogNotFoundError, CatalogStore

__all__ = ["CatalogStore", "CatalogError", "CatalogLoadError", "CatalogNotFoundError"]
