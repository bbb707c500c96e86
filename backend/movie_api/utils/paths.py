"""Filesystem helpers for catalog paths."""
from __future__ import annotations

from pathlib import Path


def resolve_catalog_path(path: str | Path, *, base_dir: Path | None = None) -> Path:
    """Expand ``~`` and anchor relative paths at ``base_dir`` (default: cwd)."""

    resolved = Path(path).expanduser()
    if not resolved.is_absolute():
        resolved = (base_dir or Path.cwd()) / resolved
    return resolved
