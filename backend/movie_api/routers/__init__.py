"""Router exports for the movie search API."""
from . import catalog, health, movie

__all__ = ["catalog", "health", "movie"]
