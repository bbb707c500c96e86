"""Derive watch and download links for parsed catalog entries."""
from __future__ import annotations

from typing import Iterable

from .models import CatalogEntry, EnrichedEntry
from .providers import ProviderRegistry
from .urls import extract_urls, select_preferred_url

WATCH_KEYS = ("watch_sources", "watch")


def watch_source(metadata: dict[str, str]) -> str | None:
    """Return the first non-empty watch value among :data:`WATCH_KEYS`."""

    for key in WATCH_KEYS:
        value = metadata.get(key)
        if value:
            return value
    return None


def enrich_entry(
    entry: CatalogEntry,
    *,
    providers: ProviderRegistry | None = None,
) -> EnrichedEntry:
    """Attach extracted and preferred watch links to ``entry``.

    ``providers`` is only consulted when the link cascade finds nothing.
    """

    watch_raw = watch_source(entry.metadata)
    preferred = select_preferred_url(watch_raw)
    if preferred is None and providers is not None:
        preferred = providers.construct(watch_raw)

    return EnrichedEntry(
        index=entry.index,
        title=entry.title,
        normalized_title=entry.normalized_title,
        section=entry.section,
        metadata=dict(entry.metadata),
        watch_raw=watch_raw,
        watch_urls=tuple(extract_urls(watch_raw)),
        preferred_watch=preferred,
        download=entry.metadata.get("download") or None,
    )


def enrich_entries(
    entries: Iterable[CatalogEntry],
    *,
    providers: ProviderRegistry | None = None,
) -> tuple[EnrichedEntry, ...]:
    return tuple(enrich_entry(entry, providers=providers) for entry in entries)
