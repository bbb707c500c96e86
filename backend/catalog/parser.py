"""
Line-oriented parser for the plain-text movie catalog.

The format has no schema: an all-caps line names a section, ``12. Title``
opens an entry, ``- key: value`` adds metadata to it and any other text
continues the most recently added metadata key. Every line is first
classified on its own so the state machine in :func:`parse_catalog` only
deals with tagged line kinds.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Union

from .models import CatalogEntry
from .normalize import normalize

UNKNOWN_SECTION = "Unknown"
METADATA_SEPARATOR = " | "

_LINE_BREAK = re.compile(r"\r?\n")
_NON_LETTERS = re.compile(r"[^A-Za-z]")
_HEADING = re.compile(r"^\s*(\d+)\.\s+(.*\S)\s*$")
_METADATA = re.compile(r"^\s*-\s*(.+)$")
_KEY_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class SectionHeader:
    name: str


@dataclass(frozen=True, slots=True)
class TitleHeading:
    index: int
    title: str


@dataclass(frozen=True, slots=True)
class MetadataLine:
    key: str
    value: str


@dataclass(frozen=True, slots=True)
class ContinuationLine:
    text: str


@dataclass(frozen=True, slots=True)
class Blank:
    pass


LineKind = Union[SectionHeader, TitleHeading, MetadataLine, ContinuationLine, Blank]


def is_section_candidate(line: str) -> bool:
    """Return True when every letter on the line is upper-case."""

    stripped = line.strip()
    if not stripped:
        return False
    letters = _NON_LETTERS.sub("", stripped)
    return bool(letters) and letters == letters.upper()


def classify_line(line: str) -> LineKind:
    """Classify a single catalog line, tabs expanded to four spaces."""

    line = line.replace("\t", "    ")
    if is_section_candidate(line):
        return SectionHeader(line.strip())

    heading = _HEADING.match(line)
    if heading:
        return TitleHeading(int(heading.group(1)), heading.group(2).strip())

    metadata = _METADATA.match(line)
    if metadata:
        raw_key, _, value = metadata.group(1).partition(":")
        key = _KEY_WHITESPACE.sub("_", raw_key.strip().lower())
        if key:
            return MetadataLine(key, value.strip())

    text = line.strip()
    if not text:
        return Blank()
    return ContinuationLine(text)


@dataclass(slots=True)
class _EntryBuilder:
    index: int
    title: str
    section: str
    metadata: dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: str) -> None:
        # Keys that already hold an empty value are replaced, not joined.
        existing = self.metadata.get(key)
        if existing:
            self.metadata[key] = existing + METADATA_SEPARATOR + value
        else:
            self.metadata[key] = value

    def continue_last(self, text: str) -> None:
        # dict order is insertion order; re-assigning a key does not move it.
        if not self.metadata:
            return
        last_key = next(reversed(self.metadata))
        self.metadata[last_key] = self.metadata[last_key] + " " + text

    def build(self) -> CatalogEntry:
        return CatalogEntry(
            index=self.index,
            title=self.title,
            normalized_title=normalize(self.title),
            section=self.section,
            metadata=dict(self.metadata),
        )


def iter_lines(raw_text: str) -> list[str]:
    """Split on LF or CRLF line breaks."""

    return _LINE_BREAK.split(raw_text)


def parse_lines(lines: Iterable[str]) -> list[CatalogEntry]:
    """Run the catalog state machine over already-split lines."""

    entries: list[CatalogEntry] = []
    section: str | None = None
    current: _EntryBuilder | None = None

    for line in lines:
        kind = classify_line(line)

        if isinstance(kind, SectionHeader):
            section = kind.name
        elif isinstance(kind, TitleHeading):
            if current is not None:
                entries.append(current.build())
            current = _EntryBuilder(
                index=kind.index,
                title=kind.title,
                section=section or UNKNOWN_SECTION,
            )
        elif current is None:
            continue
        elif isinstance(kind, MetadataLine):
            current.add_metadata(kind.key, kind.value)
        elif isinstance(kind, ContinuationLine):
            current.continue_last(kind.text)

    if current is not None:
        entries.append(current.build())
    return entries


def parse_catalog(raw_text: str) -> list[CatalogEntry]:
    """Parse raw catalog text into entries in source order."""

    return parse_lines(iter_lines(raw_text))
