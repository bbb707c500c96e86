"""Lazily built, process-wide snapshot of the parsed movie catalog."""
from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock
from typing import Callable

from backend.catalog import EnrichedEntry, ProviderRegistry, enrich_entries, parse_catalog

from ..schemas import CatalogMetricsModel

logger = logging.getLogger(__name__)

CatalogLoader = Callable[[Path], str]


class CatalogError(RuntimeError):
    """Raised when the catalog snapshot cannot be built."""


class CatalogNotFoundError(CatalogError):
    """Raised when the backing catalog file does not exist."""


class CatalogLoadError(CatalogError):
    """Raised when the backing catalog file cannot be read."""


def read_catalog_text(path: Path) -> str:
    """Read the catalog file as UTF-8 text."""

    if not path.exists():
        raise CatalogNotFoundError(f"{path.name} not found")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogLoadError(f"Unable to read {path.name}: {exc}") from exc


class CatalogStore:
    """Builds the enriched catalog on first access and serves it afterwards.

    The snapshot is never mutated once built; :meth:`invalidate` drops it so
    the next access rebuilds from the backing file. A failed build caches
    nothing.
    """

    def __init__(
        self,
        path: Path,
        *,
        loader: CatalogLoader | None = None,
        providers: ProviderRegistry | None = None,
    ) -> None:
        self._path = path
        self._loader = loader or read_catalog_text
        self._providers = providers
        self._snapshot: tuple[EnrichedEntry, ...] | None = None
        self._lock = Lock()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    def snapshot(self) -> tuple[EnrichedEntry, ...]:
        """Return the enriched catalog, building it if necessary."""

        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot
        with self._lock:
            if self._snapshot is None:
                self._snapshot = self._build()
            return self._snapshot

    def invalidate(self) -> None:
        """Forget the current snapshot."""

        with self._lock:
            self._snapshot = None

    def metrics(self) -> CatalogMetricsModel:
        """Return aggregate statistics for the catalog."""

        entries = self.snapshot()
        section_counts: dict[str, int] = {}
        for entry in entries:
            section_counts[entry.section] = section_counts.get(entry.section, 0) + 1

        return CatalogMetricsModel(
            total=len(entries),
            section_counts=section_counts,
            with_preferred_watch=sum(1 for entry in entries if entry.preferred_watch),
            with_download=sum(1 for entry in entries if entry.download),
        )

    def _build(self) -> tuple[EnrichedEntry, ...]:
        raw = self._loader(self._path)
        entries = enrich_entries(parse_catalog(raw), providers=self._providers)
        logger.info("Loaded %d catalog entries from %s", len(entries), self._path)
        return entries
