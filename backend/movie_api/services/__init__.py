"""Service layer helpers for the movie search API."""

from .search_service import SearchService

__all__ = ["SearchService"]
