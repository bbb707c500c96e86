"""Canonical text form used when matching titles against queries."""
from __future__ import annotations

import re

_CURLY_QUOTES = re.compile("[‘’“”]")
_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize(value: str | None) -> str:
    """Lower-case, unify quotes, blank out punctuation and collapse whitespace."""

    if not value:
        return ""
    text = value.lower()
    text = _CURLY_QUOTES.sub("'", text)
    text = _NON_ALNUM.sub(" ", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()
