"""
Link extraction and preferred-link selection for watch metadata.

Watch metadata is free text: explicit links, bare provider domains and
noise hosts all share one value. The selector walks a fixed cascade and
never invents a link without a domain mention to build it from.
"""
from __future__ import annotations

import re
from typing import Sequence

URL_PATTERN = re.compile(r"https?://[^\s,\)\]]+", re.IGNORECASE)
_TRAILING_PUNCTUATION = re.compile(r"[,\)\]]+$")

PRIORITY_DOMAINS: tuple[str, ...] = ("short.icu", "zoro.rpmplay.xyz", "dorex", "play.zep")
EXCLUDED_DOMAIN = "dailymotion"


def extract_urls(text: str | None) -> list[str]:
    """Return explicit http(s) links in order of appearance, duplicates kept."""

    if not text:
        return []
    return [_TRAILING_PUNCTUATION.sub("", match) for match in URL_PATTERN.findall(text)]


def find_domain_token(text: str | None, domains: Sequence[str]) -> str | None:
    """Return the first bare token starting with one of ``domains``."""

    if not text:
        return None
    for domain in domains:
        match = re.search(f"({re.escape(domain)}[^\\s,)]*)", text, re.IGNORECASE)
        if match:
            return match.group(1)
    return None


def select_preferred_url(
    text: str | None,
    *,
    priority_domains: Sequence[str] = PRIORITY_DOMAINS,
    excluded_domain: str = EXCLUDED_DOMAIN,
) -> str | None:
    """Pick the single watch link a client should open for ``text``."""

    explicit = extract_urls(text)

    for domain in priority_domains:
        for url in explicit:
            if domain in url.lower():
                return url

    for url in explicit:
        if excluded_domain not in url.lower():
            return url

    token = find_domain_token(text, priority_domains)
    if token:
        return token if token.startswith("http") else f"https://{token}"

    return None
