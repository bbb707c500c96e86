"""Fuzzy title ranking over an enriched catalog snapshot."""
from __future__ import annotations

from typing import Iterable

from .models import EnrichedEntry, ScoredResult
from .normalize import normalize

DEFAULT_LIMIT = 8

EXACT_SCORE = 100
SUBSTRING_SCORE = 90
TOKEN_WEIGHT = 50
FIRST_TOKEN_BONUS = 10


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; ties must go up (2.5 -> 3).
    return int(value + 0.5)


def score_title(normalized_title: str, normalized_query: str, query_tokens: list[str]) -> int:
    """Score a normalized title against a normalized query."""

    if normalized_title == normalized_query:
        return EXACT_SCORE
    if normalized_query in normalized_title:
        return SUBSTRING_SCORE

    title_tokens = normalized_title.split()
    matched = sum(1 for token in query_tokens if token in title_tokens)
    score = _round_half_up(matched / max(len(query_tokens), 1) * TOKEN_WEIGHT)
    if title_tokens and query_tokens and title_tokens[0] == query_tokens[0]:
        score += FIRST_TOKEN_BONUS
    return score


def search(
    query: str | None,
    entries: Iterable[EnrichedEntry],
    limit: int = DEFAULT_LIMIT,
) -> list[ScoredResult]:
    """Return up to ``limit`` entries matching ``query``, best first.

    Entries scoring zero are dropped. Equal scores keep catalog order.
    """

    if not query or not query.strip():
        return []

    normalized_query = normalize(query)
    if not normalized_query:
        # Pure punctuation would otherwise be a substring of every title.
        return []
    query_tokens = normalized_query.split()

    scored = []
    for entry in entries:
        score = score_title(entry.normalized_title, normalized_query, query_tokens)
        if score > 0:
            scored.append(ScoredResult(entry=entry, score=score))

    scored.sort(key=lambda result: result.score, reverse=True)
    return scored[:limit]
