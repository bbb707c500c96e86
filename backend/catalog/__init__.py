"""
Catalog core for the movie search service.

Parses the plain-text movie catalog, enriches entries with watch links
and ranks entries against fuzzy title queries.
"""
from .enrich import enrich_entries, enrich_entry
from .models import CatalogEntry, EnrichedEntry, ScoredResult
from .normalize import normalize
from .parser import parse_catalog
from .providers import ProviderRegistry, default_registry
from .search import DEFAULT_LIMIT, search
from .urls import extract_urls, select_preferred_url

__all__ = [
    "CatalogEntry",
    "EnrichedEntry",
    "ScoredResult",
    "ProviderRegistry",
    "DEFAULT_LIMIT",
    "default_registry",
    "enrich_entries",
    "enrich_entry",
    "extract_urls",
    "normalize",
    "parse_catalog",
    "search",
    "select_preferred_url",
]
