"""Immutable records produced by the catalog parser and ranker."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """A numbered listing and the metadata lines written beneath it."""

    index: int
    title: str
    normalized_title: str
    section: str
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class EnrichedEntry:
    """A catalog entry with its watch and download links resolved."""

    index: int
    title: str
    normalized_title: str
    section: str
    metadata: dict[str, str]
    watch_raw: str | None
    watch_urls: tuple[str, ...]
    preferred_watch: str | None
    download: str | None


@dataclass(frozen=True, slots=True)
class ScoredResult:
    """An enriched entry paired with its search score."""

    entry: EnrichedEntry
    score: int

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation used by the HTTP boundary."""

        entry = self.entry
        return {
            "title": entry.title,
            "section": entry.section,
            "index": entry.index,
            "score": self.score,
            "preferred_watch": entry.preferred_watch,
            "watch_urls": list(entry.watch_urls),
            "download": entry.download,
            "raw_meta": dict(entry.metadata),
        }
