"""Tests for title normalization, link extraction and provider rules."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.catalog.normalize import normalize  # noqa: E402
from backend.catalog.providers import ProviderRegistry, default_registry  # noqa: E402
from backend.catalog.urls import (  # noqa: E402
    extract_urls,
    find_domain_token,
    select_preferred_url,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  The   Dark Knight ", "the dark knight"),
        ("Spider-Man: No Way Home", "spider man no way home"),
        ("Don’t Look Up", "don t look up"),
        ("Amélie", "am lie"),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_produces_canonical_form(raw: str | None, expected: str) -> None:
    assert normalize(raw) == expected


@pytest.mark.parametrize("raw", ["Don't Panic!!", "  “Quoted”\tTitle ", "WALL·E (2008)"])
def test_normalize_is_idempotent(raw: str) -> None:
    once = normalize(raw)

    assert normalize(once) == once


def test_normalize_unifies_case_and_quote_styles() -> None:
    assert normalize("Don't") == normalize("DON'T") == normalize("Don’t")


def test_extract_urls_keeps_order_and_duplicates() -> None:
    text = "see http://a.com/1, also http://a.com/1"

    assert extract_urls(text) == ["http://a.com/1", "http://a.com/1"]


def test_extract_urls_strips_trailing_punctuation() -> None:
    assert extract_urls("(mirror: http://x.com/id)") == ["http://x.com/id"]
    assert extract_urls("[HTTPS://Y.com/a]") == ["HTTPS://Y.com/a"]


def test_extract_urls_handles_empty_input() -> None:
    assert extract_urls("") == []
    assert extract_urls(None) == []


def test_preferred_url_favours_priority_domain_regardless_of_position() -> None:
    text = "backup https://example.org/watch then https://short.icu/abc"

    assert select_preferred_url(text) == "https://short.icu/abc"


def test_preferred_url_follows_priority_order_between_domains() -> None:
    text = "https://play.zep.example/1 https://zoro.rpmplay.xyz/2"

    assert select_preferred_url(text) == "https://zoro.rpmplay.xyz/2"


def test_preferred_url_skips_excluded_host() -> None:
    text = "https://www.dailymotion.com/video/x1, https://example.org/film"

    assert select_preferred_url(text) == "https://example.org/film"


def test_preferred_url_rebuilds_bare_priority_domain() -> None:
    assert select_preferred_url("G1 short.icu/xyz, other") == "https://short.icu/xyz"


def test_preferred_url_returns_none_without_evidence() -> None:
    assert select_preferred_url("only on dailymotion, ask around") is None
    assert select_preferred_url("https://dailymotion.com/video/x1") is None
    assert select_preferred_url(None) is None


def test_find_domain_token_is_case_insensitive() -> None:
    assert find_domain_token("Mirror: SHORT.ICU/Abc)", ["short.icu"]) == "SHORT.ICU/Abc"


def test_default_registry_builds_known_provider_links() -> None:
    assert default_registry.construct("G1 (4J9UvBsaBI)") == "https://short.icu/4J9UvBsaBI"
    assert default_registry.construct("x1 (skip), z1 ( abc-9 )") == "https://zoro.rpmplay.xyz/abc-9"
    assert default_registry.construct("Q7 (nothing)") is None
    assert default_registry.construct("") is None


def test_registry_accepts_new_providers_without_touching_defaults() -> None:
    registry = ProviderRegistry()

    @registry.register(r"D\d")
    def _dorex(token_id: str) -> str:
        return f"https://dorex.example/{token_id}"

    assert len(registry) == 1
    assert registry.construct("D2 (id42)") == "https://dorex.example/id42"
    assert default_registry.construct("D2 (id42)") is None
